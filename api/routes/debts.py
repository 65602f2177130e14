"""Debt routes: recording debts and the reporting views derived from them"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from api.dependencies import get_db, require_id
from domain.schemas.debt_schemas import (
    DebtCreate,
    DebtResponse,
    DebtSummaryResponse,
    DebtStatsResponse,
    UserLedgerResponse,
)
from services.debt_service import DebtService
from services.report_service import ReportService

router = APIRouter(prefix="/debts", tags=["Debts"])


@router.get("", response_model=List[DebtResponse])
def list_debts(db: Session = Depends(get_db)):
    """All debts, newest first, with debtor, creditor and menu item inlined."""
    debts = DebtService.list_debts(db)
    return [DebtResponse.model_validate(d) for d in debts]


@router.post("", response_model=DebtResponse, status_code=status.HTTP_201_CREATED)
def create_debt(debt: DebtCreate, db: Session = Depends(get_db)):
    """
    Record a debt.

    ``totalPrice`` is ``customPrice`` (or the menu item's current price)
    times ``quantity`` and is frozen at creation.
    """
    created = DebtService.create_debt(db, debt)
    return DebtResponse.model_validate(created)


def _summaries(db: Session) -> List[DebtSummaryResponse]:
    return [
        DebtSummaryResponse.model_validate(s)
        for s in ReportService.get_pair_summaries(db)
    ]


@router.put("", response_model=List[DebtSummaryResponse])
def pair_summaries_legacy(db: Session = Depends(get_db)):
    """
    Pairwise totals per (debtor, creditor).

    Kept for existing clients that read the summary with PUT; this does not
    modify anything. New clients should use ``GET /debts/summary``.
    """
    return _summaries(db)


@router.get("/summary", response_model=List[DebtSummaryResponse])
def pair_summaries(db: Session = Depends(get_db)):
    """Pairwise totals per ordered (debtor, creditor) pair. A->B and B->A are not netted."""
    return _summaries(db)


@router.get("/stats", response_model=DebtStatsResponse)
def debt_stats(db: Session = Depends(get_db)):
    """Dashboard: this month's total, group total, per-user balances, top debtor and creditor."""
    return DebtStatsResponse.model_validate(ReportService.get_dashboard(db))


@router.get("/individual", response_model=UserLedgerResponse)
def user_ledger(
    user_id: Optional[int] = Query(None, alias="userId"),
    db: Session = Depends(get_db),
):
    """Debts one user owes and is owed, with both totals and the net balance."""
    ledger = ReportService.get_user_ledger(db, require_id(user_id, "User"))
    return UserLedgerResponse.model_validate(ledger)


@router.delete("")
def delete_debt(
    debt_id: Optional[int] = Query(None, alias="id"),
    db: Session = Depends(get_db),
):
    DebtService.delete_debt(db, require_id(debt_id, "Debt"))
    return {"success": True}
