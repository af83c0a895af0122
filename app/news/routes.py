from fastapi import APIRouter, Depends, status
from typing import List, Optional
from app.database import get_db
from app.auth.dependencies import require_admin
from app.news.schemas import LegalNewsCreate, LegalNewsResponse

router = APIRouter(prefix="/api/legal-news", tags=["Legal News"])


@router.get("", response_model=List[LegalNewsResponse])
def list_legal_news(category: Optional[str] = None, db=Depends(get_db)):
    """Latest legal news first, optionally limited to one category."""
    if category:
        return db.get_legal_news_by_category(category)
    return db.get_legal_news()


@router.post("", response_model=LegalNewsResponse, status_code=status.HTTP_201_CREATED)
def publish_legal_news(
    news_data: LegalNewsCreate,
    current_user=Depends(require_admin()),
    db=Depends(get_db)
):
    return db.create_legal_news(news_data.dict())
