from pydantic import Field
from typing import Optional, List
from decimal import Decimal

from domain.enums import MenuCategory
from domain.schemas.base import CamelModel, Money


class RestaurantCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)


class RestaurantUpdate(RestaurantCreate):
    id: int = Field(..., gt=0)


class RestaurantResponse(CamelModel):
    id: int
    name: str


class MenuItemCreate(CamelModel):
    """Schema for creating a menu item"""

    name: str = Field(..., min_length=1, max_length=200)
    # same precision as the menu_items.price column
    price: Decimal = Field(
        ..., gt=0, max_digits=10, decimal_places=2, description="Default unit price"
    )
    category: MenuCategory
    restaurant_id: int = Field(..., gt=0)


class MenuItemUpdate(MenuItemCreate):
    id: int = Field(..., gt=0)


class MenuItemResponse(CamelModel):
    id: int
    name: str
    price: Money
    category: MenuCategory
    restaurant_id: int
    restaurant: Optional[RestaurantResponse] = None


class MenuItemListResponse(CamelModel):
    """Menu items plus the restaurants needed to fill the menu item form"""

    menu_items: List[MenuItemResponse]
    restaurants: List[RestaurantResponse]
