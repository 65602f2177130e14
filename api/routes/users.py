"""User management routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from api.dependencies import get_db, require_id
from domain.schemas.user_schemas import UserCreate, UserUpdate, UserResponse
from services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    """Return all users sorted by name."""
    users = UserService.list_users(db)
    return [UserResponse.model_validate(u) for u in users]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    """Create a new user from JSON body. The email must be unique."""
    new_user = UserService.create_user(db, user)
    return UserResponse.model_validate(new_user)


@router.put("", response_model=UserResponse)
def update_user(user: UserUpdate, db: Session = Depends(get_db)):
    """Update name and email of the user identified by ``id`` in the body."""
    updated = UserService.update_user(db, user)
    return UserResponse.model_validate(updated)


@router.delete("")
def delete_user(
    user_id: Optional[int] = Query(None, alias="id", description="User to delete"),
    db: Session = Depends(get_db),
):
    """Delete a user. Fails while the user still takes part in any debt."""
    UserService.delete_user(db, require_id(user_id, "User"))
    return {"success": True}
