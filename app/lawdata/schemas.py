from pydantic import BaseModel, Field, validator
from typing import Optional
from datetime import datetime

class LawDataCreate(BaseModel):
    code: str = Field(..., min_length=1, max_length=50, description="e.g. IPC302")
    section: str = Field(..., min_length=1, max_length=50)
    category: str = Field(..., min_length=1, max_length=100)
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    punishment: Optional[str] = None

    @validator("code")
    def code_not_blank(cls, v):
        if not v.strip():
            raise ValueError("Law code cannot be blank")
        return v

class LawDataResponse(LawDataCreate):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
