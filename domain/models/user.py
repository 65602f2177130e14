"""
User-related database models.
"""

from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship

from domain.models.database import Base


class User(Base):
    """Group member who can owe or be owed money"""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(Text, unique=True, nullable=False)

    # Relationships (no cascade: a user with debts cannot be deleted)
    debts_owed = relationship(
        "Debt",
        back_populates="debtor",
        foreign_keys="Debt.debtor_id",
        passive_deletes="all",
    )
    debts_to_collect = relationship(
        "Debt",
        back_populates="creditor",
        foreign_keys="Debt.creditor_id",
        passive_deletes="all",
    )
