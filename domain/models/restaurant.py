"""
Restaurant and menu models.
"""

from sqlalchemy import (
    Column,
    Integer,
    Text,
    Numeric,
    ForeignKey,
    CheckConstraint,
    Enum as SQLEnum,
)
from sqlalchemy.orm import relationship

from domain.models.database import Base
from domain.enums import MenuCategory


class Restaurant(Base):
    """Place the group orders from"""

    __tablename__ = "restaurants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)

    menu_items = relationship(
        "MenuItem", back_populates="restaurant", passive_deletes="all"
    )


class MenuItem(Base):
    """Orderable item with its default unit price"""

    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(
        SQLEnum(
            MenuCategory,
            name="menu_category",
            values_callable=lambda enum_cls: [e.value for e in enum_cls],
        ),
        nullable=False,
    )
    restaurant_id = Column(
        Integer,
        ForeignKey("restaurants.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    restaurant = relationship("Restaurant", back_populates="menu_items")
    debts = relationship("Debt", back_populates="menu_item", passive_deletes="all")

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_menu_item_price_nonneg"),
    )
