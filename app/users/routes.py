from fastapi import APIRouter, Depends, HTTPException, status
from app.database import get_db
from app.auth.schemas import UserResponse, UserUpdate

router = APIRouter(prefix="/api/user", tags=["Users"])


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db=Depends(get_db)):
    user = db.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.patch("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, user_update: UserUpdate, db=Depends(get_db)):
    """Update profile fields; omitted fields keep their values."""
    update_data = user_update.dict(exclude_unset=True)
    user = db.update_user(user_id, update_data)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
