"""Sample lawyers, news and law sections so a fresh instance is demoable."""
import logging
from datetime import datetime

from app.auth.utils import get_password_hash
from app.models import UserRole

logger = logging.getLogger(__name__)

DEMO_LAWYER_PASSWORD = "legalconnect-demo"

SAMPLE_NEWS = [
    {
        "title": "Supreme Court Issues Landmark Ruling on Digital Privacy Rights",
        "content": "The Supreme Court issued a 7-2 decision expanding Fourth Amendment protections to include digital communications and cloud storage.",
        "category": "Constitutional Law",
        "image_url": "https://images.unsplash.com/photo-1479142506502-19b3a3b7ff33?ixlib=rb-1.2.1&auto=format&fit=crop&w=600&q=80",
        "source_url": "https://example.com/news/1",
    },
    {
        "title": "New Legislation Introduces AI Regulations for Legal Sector",
        "content": "Parliament approves new regulations governing the use of artificial intelligence in legal proceedings and advisory services.",
        "category": "Legal Tech",
        "image_url": "https://images.unsplash.com/photo-1589578527966-fdac0f44566c?ixlib=rb-1.2.1&auto=format&fit=crop&w=600&q=80",
        "source_url": "https://example.com/news/2",
    },
    {
        "title": "Criminal Procedure Amendment Bill Passes Final Reading",
        "content": "Significant changes to criminal procedure including remote hearings and digital evidence standards will take effect next month.",
        "category": "Criminal Law",
        "image_url": "https://images.unsplash.com/photo-1593115057322-e94b77572f20?ixlib=rb-1.2.1&auto=format&fit=crop&w=600&q=80",
        "source_url": "https://example.com/news/3",
    },
]

SAMPLE_LAWS = [
    {
        "code": "IPC302",
        "section": "302",
        "category": "Criminal Law",
        "title": "Punishment for murder",
        "description": "Whoever commits murder shall be punished with death, or imprisonment for life, and shall also be liable to fine.",
        "punishment": "Death or imprisonment for life, and fine",
    },
    {
        "code": "IPC304",
        "section": "304",
        "category": "Criminal Law",
        "title": "Punishment for culpable homicide not amounting to murder",
        "description": "Whoever commits culpable homicide not amounting to murder shall be punished with imprisonment for life, or imprisonment for a term which may extend to 10 years, and shall also be liable to fine.",
        "punishment": "Imprisonment for life, or up to 10 years, and fine",
    },
]

SAMPLE_LAWYERS = [
    {
        "username": "davidwilson",
        "email": "david.wilson@example.com",
        "full_name": "David Wilson",
        "role": UserRole.LAWYER,
        "phone_number": "+1234567890",
        "specialization": "Criminal Law",
        "experience": 12,
        "rate_per_hour": 150,
        "profile_image": "https://images.unsplash.com/photo-1560250097-0b93528c311a?ixlib=rb-1.2.1&auto=format&fit=crop&w=200&q=80",
        "bio": "Specializing in criminal defense with 12+ years of experience handling complex cases. Former prosecutor with deep understanding of both sides of criminal proceedings.",
    },
    {
        "username": "sarahchen",
        "email": "sarah.chen@example.com",
        "full_name": "Sarah Chen",
        "role": UserRole.LAWYER,
        "phone_number": "+1987654321",
        "specialization": "Family Law",
        "experience": 15,
        "rate_per_hour": 180,
        "profile_image": "https://images.unsplash.com/photo-1573496359142-b8d87734a5a2?ixlib=rb-1.2.1&auto=format&fit=crop&w=200&q=80",
        "bio": "Compassionate family law attorney with 15+ years of experience. Specialized in divorce settlements and child custody arrangements with a focus on collaborative solutions.",
    },
]


def seed_sample_data(storage) -> bool:
    """Load the sample records once. Returns False if the store is already seeded."""
    if storage.get_user_by_username(SAMPLE_LAWYERS[0]["username"]):
        logger.info("Sample data already present, skipping seed")
        return False

    published = datetime.utcnow()
    for news in SAMPLE_NEWS:
        storage.create_legal_news({**news, "publish_date": published})

    for law in SAMPLE_LAWS:
        storage.create_law_data(law)

    password_hash = get_password_hash(DEMO_LAWYER_PASSWORD)
    for lawyer in SAMPLE_LAWYERS:
        storage.create_user({**lawyer, "password": password_hash})

    logger.info(
        f"Seeded {len(SAMPLE_LAWYERS)} lawyers, {len(SAMPLE_NEWS)} news items "
        f"and {len(SAMPLE_LAWS)} law sections"
    )
    return True
