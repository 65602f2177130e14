"""Menu item routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from api.dependencies import get_db, require_id
from domain.schemas.restaurant_schemas import (
    MenuItemCreate,
    MenuItemUpdate,
    MenuItemResponse,
    MenuItemListResponse,
    RestaurantResponse,
)
from services.restaurant_service import MenuItemService

router = APIRouter(prefix="/menu-items", tags=["Menu Items"])


@router.get("", response_model=MenuItemListResponse)
def list_menu_items(
    restaurant_id: Optional[int] = Query(
        None, alias="restaurantId", description="Only items of this restaurant"
    ),
    db: Session = Depends(get_db),
):
    """
    Get menu items sorted by name together with all restaurants.

    The restaurants list feeds the menu item form; ``restaurantId`` narrows
    the items when picking what a debt is for.
    """
    items, restaurants = MenuItemService.list_menu_items(db, restaurant_id)
    return MenuItemListResponse(
        menu_items=[MenuItemResponse.model_validate(i) for i in items],
        restaurants=[RestaurantResponse.model_validate(r) for r in restaurants],
    )


@router.post("", response_model=MenuItemResponse, status_code=status.HTTP_201_CREATED)
def create_menu_item(item: MenuItemCreate, db: Session = Depends(get_db)):
    created = MenuItemService.create_menu_item(db, item)
    return MenuItemResponse.model_validate(created)


@router.put("", response_model=MenuItemResponse)
def update_menu_item(item: MenuItemUpdate, db: Session = Depends(get_db)):
    """Update a menu item. Debts already recorded keep their price."""
    updated = MenuItemService.update_menu_item(db, item)
    return MenuItemResponse.model_validate(updated)


@router.delete("")
def delete_menu_item(
    menu_item_id: Optional[int] = Query(None, alias="id"),
    db: Session = Depends(get_db),
):
    MenuItemService.delete_menu_item(db, require_id(menu_item_id, "Menu item"))
    return {"success": True}
