from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, Enum
from datetime import datetime
from app.database import Base
import enum

# =====================================================
# ENUMS
# =====================================================

class UserRole(str, enum.Enum):
    CLIENT = "client"
    LAWYER = "lawyer"
    ADMIN = "admin"

class CaseStatus(str, enum.Enum):
    ACTIVE = "active"
    CLOSED = "closed"
    PENDING = "pending"

class CaseEventStatus(str, enum.Enum):
    COMPLETED = "completed"
    UPCOMING = "upcoming"
    CANCELLED = "cancelled"

class ConsultationStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    PENDING = "pending"
    PENDING_PAYMENT = "pending-payment"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

class MessageSender(str, enum.Enum):
    USER = "user"
    ASSISTANT = "assistant"

class PaymentStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


def _enum(enum_cls):
    # Store the enum value ("pending-payment"), not the member name
    return Enum(enum_cls, values_callable=lambda members: [m.value for m in members])


# =====================================================
# RECORDS
# =====================================================

class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    full_name = Column(String(255), nullable=False)
    role = Column(_enum(UserRole), nullable=False, default=UserRole.CLIENT)
    phone_number = Column(String(50))

    # Lawyer profile
    specialization = Column(String(255))
    experience = Column(Integer)  # years
    rate_per_hour = Column(Integer)
    profile_image = Column(String(500))
    bio = Column(Text)

    is_verified = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class Case(Base):
    __tablename__ = "cases"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    case_number = Column(String(100), unique=True, nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    status = Column(_enum(CaseStatus), nullable=False, default=CaseStatus.ACTIVE)
    case_type = Column(String(100), nullable=False)
    filed_date = Column(DateTime, nullable=False)
    client_id = Column(Integer, nullable=False)
    lawyer_id = Column(Integer)  # unassigned until a lawyer takes the case
    court = Column(String(255))
    judge = Column(String(255))
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class CaseEvent(Base):
    __tablename__ = "case_events"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    case_id = Column(Integer, nullable=False)
    event_date = Column(DateTime, nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    status = Column(_enum(CaseEventStatus), nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class Consultation(Base):
    __tablename__ = "consultations"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, nullable=False)
    lawyer_id = Column(Integer, nullable=False)
    schedule_date = Column(DateTime, nullable=False)
    duration = Column(Integer, nullable=False)  # minutes
    status = Column(_enum(ConsultationStatus), nullable=False, default=ConsultationStatus.PENDING)
    fee = Column(Integer, nullable=False)
    notes = Column(Text)
    meeting_link = Column(String(500))
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class LegalNews(Base):
    __tablename__ = "legal_news"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    category = Column(String(100), nullable=False)
    image_url = Column(String(500))
    source_url = Column(String(500))
    publish_date = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class ChatConversation(Base):
    __tablename__ = "chat_conversations"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False)
    title = Column(String(255), nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class ChatMessage(Base):
    __tablename__ = "chat_messages"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    conversation_id = Column(Integer, nullable=False)
    sender = Column(_enum(MessageSender), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class LawData(Base):
    __tablename__ = "law_data"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(50), unique=True, nullable=False)  # e.g. "IPC302"
    section = Column(String(50), nullable=False)  # e.g. "302"
    category = Column(String(100), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    punishment = Column(Text)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class Payment(Base):
    __tablename__ = "payments"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, nullable=False)
    lawyer_id = Column(Integer, nullable=False)
    consultation_id = Column(Integer)
    amount = Column(Integer, nullable=False)
    status = Column(_enum(PaymentStatus), nullable=False, default=PaymentStatus.PENDING)
    payment_method = Column(String(100))
    transaction_id = Column(String(255))
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
