"""
Helpers shared by the record services.
"""

import logging
from typing import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import ServiceError

logger = logging.getLogger("tabsplit.services")


def commit_or_raise(db: Session, on_integrity_error: Callable[[], ServiceError]) -> None:
    """
    Commit the session, turning a constraint violation into a domain error.

    The session is rolled back first so it stays usable for the rest of the request.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        error = on_integrity_error()
        logger.warning(f"integrity_error code={error.code} detail={e.orig}")
        raise error from e
