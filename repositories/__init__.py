"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository, storage_guard
from repositories.user_repository import UserRepository
from repositories.restaurant_repository import RestaurantRepository, MenuItemRepository
from repositories.debt_repository import DebtRepository, PairTotal

__all__ = [
    "BaseRepository",
    "storage_guard",
    "UserRepository",
    "RestaurantRepository",
    "MenuItemRepository",
    "DebtRepository",
    "PairTotal",
]
