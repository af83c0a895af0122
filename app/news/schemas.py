from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class LegalNewsCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)
    image_url: Optional[str] = None
    source_url: Optional[str] = None
    publish_date: datetime

class LegalNewsResponse(LegalNewsCreate):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
