"""
Debt model: one recorded purchase one user owes another for.
"""

from datetime import datetime

from sqlalchemy import (
    Column,
    Integer,
    Numeric,
    DateTime,
    ForeignKey,
    CheckConstraint,
    Index,
)
from sqlalchemy.orm import relationship

from domain.models.database import Base


class Debt(Base):
    """
    Debt of ``debtor`` towards ``creditor`` for ``quantity`` units of a menu item.

    ``total_price`` is resolved once at creation time and never recomputed,
    so later menu price changes do not touch existing debts.
    """

    __tablename__ = "debts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    debtor_id = Column(
        Integer, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    creditor_id = Column(
        Integer, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    menu_item_id = Column(
        Integer,
        ForeignKey("menu_items.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    quantity = Column(Integer, nullable=False)
    total_price = Column(Numeric(12, 2), nullable=False)
    # Server local time, the monthly total is computed against local time too
    date = Column(DateTime, nullable=False, default=datetime.now)

    debtor = relationship("User", foreign_keys=[debtor_id], back_populates="debts_owed")
    creditor = relationship(
        "User", foreign_keys=[creditor_id], back_populates="debts_to_collect"
    )
    menu_item = relationship("MenuItem", back_populates="debts")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_debt_quantity_positive"),
        Index("ix_debts_debtor_creditor", "debtor_id", "creditor_id"),
    )
