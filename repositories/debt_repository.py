"""
Debt Repository - Data access layer for debts and their group-by summaries
"""

from typing import List, NamedTuple
from decimal import Decimal
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from repositories.base import BaseRepository, storage_guard
from domain.models import Debt, MenuItem


class PairTotal(NamedTuple):
    """One row of the (debtor, creditor) group-by"""

    debtor_id: int
    creditor_id: int
    total_debt: Decimal


class DebtRepository(BaseRepository[Debt]):
    """Repository for debt data access"""

    def __init__(self, db: Session):
        super().__init__(db, Debt)

    def _with_relations(self):
        return self.db.query(Debt).options(
            joinedload(Debt.debtor),
            joinedload(Debt.creditor),
            joinedload(Debt.menu_item).joinedload(MenuItem.restaurant),
        )

    @storage_guard
    def get_all(self) -> List[Debt]:
        """All debts newest first, with debtor, creditor and menu item loaded"""
        return self._with_relations().order_by(Debt.date.desc(), Debt.id.desc()).all()

    @storage_guard
    def get_for_user(self, user_id: int) -> List[Debt]:
        """Debts where the user is either debtor or creditor, newest first"""
        return (
            self._with_relations()
            .filter((Debt.debtor_id == user_id) | (Debt.creditor_id == user_id))
            .order_by(Debt.date.desc(), Debt.id.desc())
            .all()
        )

    @storage_guard
    def sum_by_pair(self) -> List[PairTotal]:
        """
        Sum total_price per ordered (debtor_id, creditor_id) pair.

        A->B and B->A are separate rows; nothing is netted.
        """
        rows = (
            self.db.query(
                Debt.debtor_id,
                Debt.creditor_id,
                func.sum(Debt.total_price).label("total_debt"),
            )
            .group_by(Debt.debtor_id, Debt.creditor_id)
            .order_by(Debt.debtor_id, Debt.creditor_id)
            .all()
        )
        return [
            PairTotal(r.debtor_id, r.creditor_id, Decimal(str(r.total_debt)))
            for r in rows
        ]
