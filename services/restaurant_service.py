from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
import logging

from domain.models import Restaurant, MenuItem
from domain.schemas.restaurant_schemas import (
    RestaurantCreate,
    RestaurantUpdate,
    MenuItemCreate,
    MenuItemUpdate,
)
from repositories import RestaurantRepository, MenuItemRepository
from app.exceptions import DependentRecordsError, NotFoundError, ServiceValidationError
from services.base import commit_or_raise

logger = logging.getLogger("tabsplit.restaurants")


def _restaurant_has_menu_items() -> DependentRecordsError:
    return DependentRecordsError(
        "Failed to delete restaurant. Make sure it has no menu items."
    )


def _menu_item_has_debts() -> DependentRecordsError:
    return DependentRecordsError(
        "Failed to delete menu item. Make sure it is not used by any debt."
    )


def _unknown_restaurant() -> ServiceValidationError:
    return ServiceValidationError("Restaurant does not exist", code="INVALID_RESTAURANT")


class RestaurantService:
    """Business logic for restaurants"""

    @staticmethod
    def list_restaurants(db: Session) -> List[Restaurant]:
        return RestaurantRepository(db).get_all()

    @staticmethod
    def get_restaurant(db: Session, restaurant_id: int) -> Restaurant:
        restaurant = RestaurantRepository(db).get_by_id(restaurant_id)
        if not restaurant:
            logger.warning(f"restaurant_not_found restaurant_id={restaurant_id}")
            raise NotFoundError("Restaurant not found")
        return restaurant

    @staticmethod
    def create_restaurant(db: Session, data: RestaurantCreate) -> Restaurant:
        restaurant = RestaurantRepository(db).add(Restaurant(name=data.name))
        db.commit()
        logger.info(f"restaurant_created restaurant_id={restaurant.id}")
        return restaurant

    @staticmethod
    def update_restaurant(db: Session, data: RestaurantUpdate) -> Restaurant:
        restaurant = RestaurantService.get_restaurant(db, data.id)
        restaurant.name = data.name
        db.commit()
        logger.info(f"restaurant_updated restaurant_id={restaurant.id}")
        return restaurant

    @staticmethod
    def delete_restaurant(db: Session, restaurant_id: int) -> None:
        """Delete a restaurant that owns no menu items"""
        restaurant_repo = RestaurantRepository(db)
        restaurant = RestaurantService.get_restaurant(db, restaurant_id)

        if restaurant_repo.has_menu_items(restaurant_id):
            logger.warning(
                f"restaurant_delete_rejected reason=has_menu_items restaurant_id={restaurant_id}"
            )
            raise _restaurant_has_menu_items()

        restaurant_repo.delete(restaurant)
        commit_or_raise(db, _restaurant_has_menu_items)
        logger.info(f"restaurant_deleted restaurant_id={restaurant_id}")


class MenuItemService:
    """Business logic for menu items"""

    @staticmethod
    def list_menu_items(
        db: Session, restaurant_id: Optional[int] = None
    ) -> Tuple[List[MenuItem], List[Restaurant]]:
        """Menu items by name, plus every restaurant for the menu item form"""
        items = MenuItemRepository(db).get_all(restaurant_id=restaurant_id)
        restaurants = RestaurantRepository(db).get_all()
        return items, restaurants

    @staticmethod
    def get_menu_item(db: Session, menu_item_id: int, with_lock: bool = False) -> MenuItem:
        item = MenuItemRepository(db).get_by_id(menu_item_id, with_lock=with_lock)
        if not item:
            logger.warning(f"menu_item_not_found menu_item_id={menu_item_id}")
            raise NotFoundError("Menu item not found")
        return item

    @staticmethod
    def create_menu_item(db: Session, data: MenuItemCreate) -> MenuItem:
        RestaurantService.get_restaurant(db, data.restaurant_id)

        item = MenuItemRepository(db).add(
            MenuItem(
                name=data.name,
                price=data.price,
                category=data.category,
                restaurant_id=data.restaurant_id,
            )
        )
        commit_or_raise(db, _unknown_restaurant)
        logger.info(
            f"menu_item_created menu_item_id={item.id} restaurant_id={item.restaurant_id} "
            f"price={item.price}"
        )
        return item

    @staticmethod
    def update_menu_item(db: Session, data: MenuItemUpdate) -> MenuItem:
        """
        Update a menu item in place.

        Existing debts keep the total price captured when they were created.
        """
        item = MenuItemService.get_menu_item(db, data.id)
        RestaurantService.get_restaurant(db, data.restaurant_id)

        item.name = data.name
        item.price = data.price
        item.category = data.category
        item.restaurant_id = data.restaurant_id
        commit_or_raise(db, _unknown_restaurant)
        # restaurant relationship may point at the previous restaurant
        db.refresh(item)

        logger.info(f"menu_item_updated menu_item_id={item.id} price={item.price}")
        return item

    @staticmethod
    def delete_menu_item(db: Session, menu_item_id: int) -> None:
        menu_repo = MenuItemRepository(db)
        item = MenuItemService.get_menu_item(db, menu_item_id)

        if menu_repo.has_debts(menu_item_id):
            logger.warning(
                f"menu_item_delete_rejected reason=has_debts menu_item_id={menu_item_id}"
            )
            raise _menu_item_has_debts()

        menu_repo.delete(item)
        commit_or_raise(db, _menu_item_has_debts)
        logger.info(f"menu_item_deleted menu_item_id={menu_item_id}")
