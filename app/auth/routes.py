import logging

from fastapi import APIRouter, Depends, HTTPException, status
from app.database import get_db
from app.models import User
from app.auth.schemas import UserCreate, UserLogin, UserResponse, UserSession, LoginResponse
from app.auth.utils import verify_password, get_password_hash, create_access_token
from app.auth.dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register_user(user_data: UserCreate, db=Depends(get_db)):
    # Check if user already exists
    if db.get_user_by_username(user_data.username):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already exists"
        )

    if db.get_user_by_email(user_data.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already exists"
        )

    # Create new user
    user_fields = user_data.dict()
    user_fields["password"] = get_password_hash(user_data.password)
    return db.create_user(user_fields)


@router.post("/login", response_model=LoginResponse)
def login_user(credentials: UserLogin, db=Depends(get_db)):
    user = db.get_user_by_username(credentials.username)

    if not user or not verify_password(credentials.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(
        data={"sub": user.username, "role": user.role.value}
    )
    logger.info(f"User {user.id} logged in")

    return {
        "user": user,
        "session": UserSession(user_id=user.id, username=user.username, role=user.role),
        "access_token": access_token,
        "token_type": "bearer"
    }


@router.post("/logout")
def logout_user():
    # Tokens are stateless; the client discards its copy
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserResponse)
def read_current_user(current_user: User = Depends(get_current_user)):
    return current_user
