"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import Base, Database
from domain.models.user import User
from domain.models.restaurant import Restaurant, MenuItem
from domain.models.debt import Debt

__all__ = [
    # Database
    "Base",
    "Database",
    # Entities
    "User",
    "Restaurant",
    "MenuItem",
    "Debt",
]
