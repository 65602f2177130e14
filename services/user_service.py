from typing import List
from sqlalchemy.orm import Session
import logging

from domain.models import User
from domain.schemas.user_schemas import UserCreate, UserUpdate
from repositories import UserRepository
from app.exceptions import ConflictError, DependentRecordsError, NotFoundError
from services.base import commit_or_raise

logger = logging.getLogger("tabsplit.users")

EMAIL_EXISTS = "Email already exists"


def _email_conflict() -> ConflictError:
    return ConflictError(EMAIL_EXISTS, code="EMAIL_EXISTS")


class UserService:
    """Business logic for group members"""

    @staticmethod
    def list_users(db: Session) -> List[User]:
        """All users, alphabetical by name"""
        return UserRepository(db).get_all()

    @staticmethod
    def get_user(db: Session, user_id: int) -> User:
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            logger.warning(f"user_not_found user_id={user_id}")
            raise NotFoundError("User not found")
        return user

    @staticmethod
    def create_user(db: Session, data: UserCreate) -> User:
        """Create a new user; the email must not be taken"""
        user_repo = UserRepository(db)
        if user_repo.get_by_email(data.email):
            logger.warning(f"user_create_rejected reason=email_exists email={data.email}")
            raise _email_conflict()

        user = user_repo.add(User(name=data.name, email=data.email))
        # A concurrent insert of the same email is caught by the unique constraint
        commit_or_raise(db, _email_conflict)

        logger.info(f"user_created user_id={user.id} email={user.email}")
        return user

    @staticmethod
    def update_user(db: Session, data: UserUpdate) -> User:
        """Replace name and email of an existing user"""
        user_repo = UserRepository(db)
        user = UserService.get_user(db, data.id)

        holder = user_repo.get_by_email(data.email)
        if holder is not None and holder.id != user.id:
            logger.warning(f"user_update_rejected reason=email_exists user_id={user.id}")
            raise _email_conflict()

        user.name = data.name
        user.email = data.email
        commit_or_raise(db, _email_conflict)

        logger.info(f"user_updated user_id={user.id}")
        return user

    @staticmethod
    def delete_user(db: Session, user_id: int) -> None:
        """Delete a user who takes part in no debt"""
        user_repo = UserRepository(db)
        user = UserService.get_user(db, user_id)

        def blocked() -> DependentRecordsError:
            return DependentRecordsError(
                "Failed to delete user. Make sure they have no debts."
            )

        if user_repo.has_debts(user_id):
            logger.warning(f"user_delete_rejected reason=has_debts user_id={user_id}")
            raise blocked()

        user_repo.delete(user)
        commit_or_raise(db, blocked)
        logger.info(f"user_deleted user_id={user_id}")
