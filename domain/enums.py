"""
Domain enums for TabSplit application.
Contains all enumeration types used across the domain models.
"""

import enum


class MenuCategory(str, enum.Enum):
    """Menu item categories"""

    FOOD = "food"
    DRINK = "drink"
