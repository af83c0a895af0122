from pydantic import BaseModel, EmailStr, Field, validator
from typing import Optional
from datetime import datetime
from app.models import UserRole

class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=6)
    email: EmailStr
    full_name: str = Field(..., min_length=1, max_length=255)
    role: UserRole = UserRole.CLIENT
    phone_number: Optional[str] = None
    specialization: Optional[str] = None  # For lawyers
    experience: Optional[int] = Field(None, ge=0)  # For lawyers (years)
    rate_per_hour: Optional[int] = Field(None, ge=0)  # For lawyers
    profile_image: Optional[str] = None
    bio: Optional[str] = None

    @validator("role")
    def no_self_service_admins(cls, v):
        if v == UserRole.ADMIN:
            raise ValueError("Admin accounts cannot be self-registered")
        return v

class UserUpdate(BaseModel):
    username: Optional[str] = Field(None, min_length=3, max_length=255)
    email: Optional[EmailStr] = None
    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    phone_number: Optional[str] = None
    specialization: Optional[str] = None
    experience: Optional[int] = Field(None, ge=0)
    rate_per_hour: Optional[int] = Field(None, ge=0)
    profile_image: Optional[str] = None
    bio: Optional[str] = None
    is_verified: Optional[bool] = None

class UserLogin(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class TokenData(BaseModel):
    username: Optional[str] = None
    role: Optional[UserRole] = None

class UserResponse(BaseModel):
    id: int
    username: str
    email: str
    full_name: str
    role: UserRole
    phone_number: Optional[str] = None
    specialization: Optional[str] = None
    experience: Optional[int] = None
    rate_per_hour: Optional[int] = None
    profile_image: Optional[str] = None
    bio: Optional[str] = None
    is_verified: bool
    created_at: datetime

    class Config:
        from_attributes = True

class UserSession(BaseModel):
    user_id: int
    username: str
    role: UserRole

class LoginResponse(BaseModel):
    user: UserResponse
    session: UserSession
    access_token: str
    token_type: str = "bearer"
