"""API routes package"""

from . import users, restaurants, menu_items, debts, health

__all__ = ["users", "restaurants", "menu_items", "debts", "health"]
