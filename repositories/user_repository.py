"""
User Repository - Data access layer for user-related operations
"""

from typing import Optional, Dict, Iterable
from sqlalchemy.orm import Session

from repositories.base import BaseRepository, storage_guard
from domain.models import User, Debt


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    @storage_guard
    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        return self.db.query(User).filter(User.email == email).first()

    @storage_guard
    def get_many(self, user_ids: Iterable[int]) -> Dict[int, User]:
        """Fetch several users in one query, keyed by id"""
        ids = sorted(set(user_ids))
        if not ids:
            return {}
        users = self.db.query(User).filter(User.id.in_(ids)).all()
        return {u.id: u for u in users}

    @storage_guard
    def has_debts(self, user_id: int) -> bool:
        """True if the user is debtor or creditor on any debt"""
        query = self.db.query(Debt.id).filter(
            (Debt.debtor_id == user_id) | (Debt.creditor_id == user_id)
        )
        return self.db.query(query.exists()).scalar()
