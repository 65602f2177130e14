from typing import List, Optional
from datetime import datetime
from sqlalchemy.orm import Session
import logging

from repositories import DebtRepository, UserRepository
from services import aggregation
from services.aggregation import DashboardStats, DebtSummary, UserLedger
from services.user_service import UserService

logger = logging.getLogger("tabsplit.reports")


class ReportService:
    """Read-only reporting views over the debt collection"""

    @staticmethod
    def get_pair_summaries(db: Session) -> List[DebtSummary]:
        """
        One row per ordered (debtor, creditor) pair with the sum of its debts.

        The group-by runs in the database; user records are fetched in a
        single follow-up query.
        """
        pair_totals = DebtRepository(db).sum_by_pair()
        user_ids = {p.debtor_id for p in pair_totals} | {p.creditor_id for p in pair_totals}
        users = UserRepository(db).get_many(user_ids)

        summaries = aggregation.pair_summaries(pair_totals, users)
        logger.info(f"pair_summaries_built rows={len(summaries)}")
        return summaries

    @staticmethod
    def get_dashboard(db: Session, now: Optional[datetime] = None) -> DashboardStats:
        """Monthly total, group total, per-user balances, top debtor and creditor"""
        debts = DebtRepository(db).get_all()
        stats = aggregation.dashboard(debts, now)
        logger.info(
            f"dashboard_built debts={len(debts)} users={len(stats.user_stats)} "
            f"monthly_total={stats.monthly_total}"
        )
        return stats

    @staticmethod
    def get_user_ledger(db: Session, user_id: int) -> UserLedger:
        """What one user owes, what they are owed, and the net balance"""
        user = UserService.get_user(db, user_id)
        debts = DebtRepository(db).get_for_user(user_id)
        return aggregation.user_ledger(user, debts)
