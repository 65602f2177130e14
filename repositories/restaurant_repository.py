"""
Restaurant Repository - Data access layer for restaurants and their menus
"""

from typing import List, Optional
from sqlalchemy.orm import Session, joinedload

from repositories.base import BaseRepository, storage_guard
from domain.models import Restaurant, MenuItem, Debt


class RestaurantRepository(BaseRepository[Restaurant]):
    """Repository for restaurant data access"""

    def __init__(self, db: Session):
        super().__init__(db, Restaurant)

    @storage_guard
    def has_menu_items(self, restaurant_id: int) -> bool:
        query = self.db.query(MenuItem.id).filter(
            MenuItem.restaurant_id == restaurant_id
        )
        return self.db.query(query.exists()).scalar()


class MenuItemRepository(BaseRepository[MenuItem]):
    """Repository for menu item data access"""

    def __init__(self, db: Session):
        super().__init__(db, MenuItem)

    @storage_guard
    def get_all(self, restaurant_id: Optional[int] = None) -> List[MenuItem]:
        """Get menu items ordered by name, optionally for a single restaurant"""
        query = self.db.query(MenuItem).options(joinedload(MenuItem.restaurant))
        if restaurant_id is not None:
            query = query.filter(MenuItem.restaurant_id == restaurant_id)
        return query.order_by(MenuItem.name, MenuItem.id).all()

    @storage_guard
    def has_debts(self, menu_item_id: int) -> bool:
        query = self.db.query(Debt.id).filter(Debt.menu_item_id == menu_item_id)
        return self.db.query(query.exists()).scalar()
