from pydantic import Field
from typing import Optional, List
from datetime import datetime
from decimal import Decimal

from domain.schemas.base import CamelModel, Money
from domain.schemas.user_schemas import UserResponse
from domain.schemas.restaurant_schemas import MenuItemResponse

MAX_QUANTITY = 10_000


class DebtCreate(CamelModel):
    """Schema for recording a new debt"""

    debtor_id: int = Field(..., gt=0, description="User who owes")
    creditor_id: int = Field(..., gt=0, description="User who paid")
    menu_item_id: int = Field(..., gt=0)
    quantity: int = Field(..., gt=0, le=MAX_QUANTITY, strict=True)
    custom_price: Optional[Decimal] = Field(
        None,
        ge=0,
        max_digits=10,
        decimal_places=2,
        description="Overrides the menu item's unit price",
    )
    date: Optional[datetime] = Field(
        None, description="When the debt happened, defaults to now"
    )


class DebtResponse(CamelModel):
    id: int
    debtor_id: int
    creditor_id: int
    menu_item_id: int
    quantity: int
    total_price: Money
    date: datetime
    debtor: UserResponse
    creditor: UserResponse
    menu_item: MenuItemResponse


class DebtSummaryResponse(CamelModel):
    """Sum of all debts for one ordered (debtor, creditor) pair"""

    debtor: UserResponse
    creditor: UserResponse
    total_debt: Money


class UserDebtStatsResponse(CamelModel):
    user_id: int
    user_name: str
    total_owed: Money
    total_owing: Money
    net_balance: Money


class DebtStatsResponse(CamelModel):
    """Dashboard figures derived from all debts"""

    monthly_total: Money
    group_total: Money
    user_stats: List[UserDebtStatsResponse]
    top_debtor: Optional[UserDebtStatsResponse] = None
    top_creditor: Optional[UserDebtStatsResponse] = None


class UserLedgerResponse(CamelModel):
    """One user's debts in both directions"""

    user: UserResponse
    debts_owed: List[DebtResponse]
    debts_to_collect: List[DebtResponse]
    total_owed: Money
    total_to_collect: Money
    net_balance: Money
