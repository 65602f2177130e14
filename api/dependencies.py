"""
API dependencies for dependency injection
"""

from typing import Generator, Optional
from fastapi import Request
from sqlalchemy.orm import Session

from domain.models import Database
from app.exceptions import ServiceValidationError


def require_id(value: Optional[int], label: str) -> int:
    """Query-string ids (``?id=``) are optional in the signature but required by the operation"""
    if value is None:
        raise ServiceValidationError(f"{label} ID is required", code="MISSING_ID")
    return value


def get_database(request: Request) -> Database:
    """The storage handle opened by the application lifespan"""
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_database(request).session()
