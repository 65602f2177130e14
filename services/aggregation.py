"""
Debt aggregation: reporting figures derived from already-fetched debts.

Everything here is pure computation; nothing reads from or writes to storage.
Inputs only need the attributes used (``debtor_id``, ``total_price``, ``date``,
...), so ORM rows and plain objects both work.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Optional

ZERO = Decimal("0")


@dataclass
class DebtSummary:
    """Total of all debts for one ordered (debtor, creditor) pair"""

    debtor: Any
    creditor: Any
    total_debt: Decimal


@dataclass
class UserDebtStats:
    user_id: int
    user_name: str
    total_owed: Decimal = ZERO
    total_owing: Decimal = ZERO

    @property
    def net_balance(self) -> Decimal:
        """Positive when the group owes this user money"""
        return self.total_owed - self.total_owing


@dataclass
class UserLedger:
    user: Any
    debts_owed: List[Any]
    debts_to_collect: List[Any]
    total_owed: Decimal
    total_to_collect: Decimal

    @property
    def net_balance(self) -> Decimal:
        return self.total_to_collect - self.total_owed


def pair_summaries(pair_totals: Iterable[Any], users: Mapping[int, Any]) -> List[DebtSummary]:
    """
    Attach user records to (debtor_id, creditor_id, total_debt) group-by rows.

    Ordered pairs stay separate: A->B and B->A produce two rows.
    """
    return [
        DebtSummary(
            debtor=users.get(row.debtor_id),
            creditor=users.get(row.creditor_id),
            total_debt=row.total_debt,
        )
        for row in pair_totals
    ]


def summarize_pairs(debts: Iterable[Any]) -> List[DebtSummary]:
    """In-process equivalent of the database group-by, for debts with relations loaded"""
    totals: Dict[tuple, DebtSummary] = {}
    for debt in debts:
        key = (debt.debtor_id, debt.creditor_id)
        if key not in totals:
            totals[key] = DebtSummary(debt.debtor, debt.creditor, ZERO)
        totals[key].total_debt += debt.total_price
    return [totals[key] for key in sorted(totals)]


def user_stats(summaries: Iterable[DebtSummary]) -> List[UserDebtStats]:
    """
    Per-user owed/owing totals accumulated from pairwise summaries.

    Users appear in first-seen order; someone who is never a debtor keeps
    ``total_owing == 0`` and vice versa.
    """
    stats: Dict[int, UserDebtStats] = {}

    def _entry(user) -> UserDebtStats:
        if user.id not in stats:
            stats[user.id] = UserDebtStats(user_id=user.id, user_name=user.name)
        return stats[user.id]

    for summary in summaries:
        _entry(summary.debtor).total_owing += summary.total_debt
        _entry(summary.creditor).total_owed += summary.total_debt

    return list(stats.values())


def group_total(summaries: Iterable[DebtSummary]) -> Decimal:
    return sum((s.total_debt for s in summaries), ZERO)


def monthly_total(debts: Iterable[Any], now: Optional[datetime] = None) -> Decimal:
    """Sum of total_price over debts dated in the current calendar month and year"""
    now = now or datetime.now()
    return sum(
        (
            d.total_price
            for d in debts
            if d.date.year == now.year and d.date.month == now.month
        ),
        ZERO,
    )


def top_debtor(stats: List[UserDebtStats]) -> Optional[UserDebtStats]:
    """User owing the most, None when there are no stats. Ties keep the first seen."""
    if not stats:
        return None
    return max(stats, key=lambda s: s.total_owing)


def top_creditor(stats: List[UserDebtStats]) -> Optional[UserDebtStats]:
    """User owed the most, None when there are no stats. Ties keep the first seen."""
    if not stats:
        return None
    return max(stats, key=lambda s: s.total_owed)


@dataclass
class DashboardStats:
    monthly_total: Decimal
    group_total: Decimal
    user_stats: List[UserDebtStats]
    top_debtor: Optional[UserDebtStats]
    top_creditor: Optional[UserDebtStats]


def dashboard(debts: Iterable[Any], now: Optional[datetime] = None) -> DashboardStats:
    """All dashboard figures from a single pass over the raw debts"""
    debts = list(debts)
    summaries = summarize_pairs(debts)
    stats = user_stats(summaries)
    return DashboardStats(
        monthly_total=monthly_total(debts, now),
        group_total=group_total(summaries),
        user_stats=stats,
        top_debtor=top_debtor(stats),
        top_creditor=top_creditor(stats),
    )


def user_ledger(user: Any, debts: Iterable[Any]) -> UserLedger:
    """Split one user's debts into what they owe and what they are owed"""
    debts = list(debts)
    owed = [d for d in debts if d.debtor_id == user.id]
    to_collect = [d for d in debts if d.creditor_id == user.id]
    return UserLedger(
        user=user,
        debts_owed=owed,
        debts_to_collect=to_collect,
        total_owed=sum((d.total_price for d in owed), ZERO),
        total_to_collect=sum((d.total_price for d in to_collect), ZERO),
    )
