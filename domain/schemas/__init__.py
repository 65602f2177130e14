"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.base import CamelModel, Money
from domain.schemas.user_schemas import UserCreate, UserUpdate, UserResponse
from domain.schemas.restaurant_schemas import (
    RestaurantCreate,
    RestaurantUpdate,
    RestaurantResponse,
    MenuItemCreate,
    MenuItemUpdate,
    MenuItemResponse,
    MenuItemListResponse,
)
from domain.schemas.debt_schemas import (
    DebtCreate,
    DebtResponse,
    DebtSummaryResponse,
    UserDebtStatsResponse,
    DebtStatsResponse,
    UserLedgerResponse,
)

__all__ = [
    "CamelModel",
    "Money",
    # User schemas
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    # Restaurant and menu schemas
    "RestaurantCreate",
    "RestaurantUpdate",
    "RestaurantResponse",
    "MenuItemCreate",
    "MenuItemUpdate",
    "MenuItemResponse",
    "MenuItemListResponse",
    # Debt schemas
    "DebtCreate",
    "DebtResponse",
    "DebtSummaryResponse",
    "UserDebtStatsResponse",
    "DebtStatsResponse",
    "UserLedgerResponse",
]
