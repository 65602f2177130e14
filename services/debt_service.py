from typing import List
from decimal import Decimal, ROUND_HALF_UP
from sqlalchemy.orm import Session
import logging

from domain.models import Debt
from domain.schemas.debt_schemas import DebtCreate
from repositories import DebtRepository, UserRepository
from app.exceptions import NotFoundError, ServiceValidationError
from services.base import commit_or_raise
from services.restaurant_service import MenuItemService

logger = logging.getLogger("tabsplit.debts")

CENT = Decimal("0.01")
# debts.total_price is Numeric(12, 2)
MAX_TOTAL_PRICE = Decimal("9999999999.99")


def resolve_total_price(unit_price: Decimal, quantity: int) -> Decimal:
    """totalPrice = unitPrice * quantity, rounded to cents"""
    return (Decimal(unit_price) * quantity).quantize(CENT, rounding=ROUND_HALF_UP)


class DebtService:
    """Business logic for recording and removing debts"""

    @staticmethod
    def list_debts(db: Session) -> List[Debt]:
        """All debts newest first with debtor, creditor and menu item inlined"""
        return DebtRepository(db).get_all()

    @staticmethod
    def create_debt(db: Session, data: DebtCreate) -> Debt:
        """
        Record a debt with its total price frozen at creation time.

        The unit price is ``custom_price`` when given, otherwise the menu
        item's current price. The menu item read and the debt insert share one
        transaction with the menu item row locked, so the item cannot be
        deleted in between.

        Raises:
            ServiceValidationError: debtor and creditor are the same user, or
                the total does not fit a debt amount
            NotFoundError: debtor, creditor or menu item does not exist
        """
        if data.debtor_id == data.creditor_id:
            logger.warning(
                f"debt_create_rejected reason=same_user user_id={data.debtor_id}"
            )
            raise ServiceValidationError(
                "Debtor and creditor can't be the same person",
                details={"field": "creditorId"},
            )

        users = UserRepository(db).get_many([data.debtor_id, data.creditor_id])
        if data.debtor_id not in users:
            raise NotFoundError("Debtor not found")
        if data.creditor_id not in users:
            raise NotFoundError("Creditor not found")

        menu_item = MenuItemService.get_menu_item(db, data.menu_item_id, with_lock=True)

        unit_price = (
            data.custom_price if data.custom_price is not None else menu_item.price
        )
        total_price = resolve_total_price(unit_price, data.quantity)
        if total_price > MAX_TOTAL_PRICE:
            logger.warning(
                f"debt_create_rejected reason=total_too_large total_price={total_price}"
            )
            raise ServiceValidationError(
                f"Total price can't exceed {MAX_TOTAL_PRICE}",
                details={"field": "quantity"},
            )

        debt = Debt(
            debtor_id=data.debtor_id,
            creditor_id=data.creditor_id,
            menu_item_id=menu_item.id,
            quantity=data.quantity,
            total_price=total_price,
        )
        if data.date is not None:
            # stored as server local time
            debt.date = (
                data.date.astimezone().replace(tzinfo=None)
                if data.date.tzinfo
                else data.date
            )

        DebtRepository(db).add(debt)
        commit_or_raise(
            db, lambda: NotFoundError("Referenced user or menu item no longer exists")
        )

        logger.info(
            f"debt_created debt_id={debt.id} debtor_id={debt.debtor_id} "
            f"creditor_id={debt.creditor_id} menu_item_id={debt.menu_item_id} "
            f"quantity={debt.quantity} unit_price={unit_price} total_price={total_price}"
        )
        return debt

    @staticmethod
    def delete_debt(db: Session, debt_id: int) -> None:
        debt_repo = DebtRepository(db)
        debt = debt_repo.get_by_id(debt_id)
        if not debt:
            logger.warning(f"debt_not_found debt_id={debt_id}")
            raise NotFoundError("Debt not found")

        debt_repo.delete(debt)
        db.commit()
        logger.info(f"debt_deleted debt_id={debt_id}")
