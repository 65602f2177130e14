from pydantic import EmailStr, Field

from domain.schemas.base import CamelModel


class UserCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr


class UserUpdate(UserCreate):
    """PUT /users carries the target id in the body"""

    id: int = Field(..., gt=0)


class UserResponse(CamelModel):
    id: int
    name: str
    email: str
