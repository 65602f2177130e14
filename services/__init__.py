"""Services package - Business logic layer"""

from services.user_service import UserService
from services.restaurant_service import RestaurantService, MenuItemService
from services.debt_service import DebtService
from services.report_service import ReportService

# Note: aggregation contains pure functions, not a class

__all__ = [
    "UserService",
    "RestaurantService",
    "MenuItemService",
    "DebtService",
    "ReportService",
]
