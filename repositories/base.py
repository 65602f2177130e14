"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

import functools
import logging
from typing import Generic, TypeVar, Optional, List, Type
from sqlalchemy.orm import Session
from sqlalchemy.exc import OperationalError, InterfaceError, DisconnectionError
from abc import ABC

from app.exceptions import StorageUnavailableError

ModelType = TypeVar("ModelType")

logger = logging.getLogger("tabsplit.repositories")


def storage_guard(func):
    """Translate connection-level database failures into StorageUnavailableError.

    Constraint violations (IntegrityError) pass through untouched so services
    can map them to domain errors.
    """

    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            return func(self, *args, **kwargs)
        except (OperationalError, InterfaceError, DisconnectionError) as e:
            logger.error(
                f"storage_unavailable repository={self.__class__.__name__} "
                f"operation={func.__name__} error={e.__class__.__name__}"
            )
            raise StorageUnavailableError() from e

    return wrapper


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.

    Writes are only staged; the calling service owns the transaction and commits.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    @storage_guard
    def get_by_id(self, entity_id: int, with_lock: bool = False) -> Optional[ModelType]:
        """
        Get entity by ID.

        Args:
            entity_id: Integer primary key
            with_lock: Lock the row until the transaction ends (SELECT ... FOR UPDATE)

        Returns:
            Entity or None if not found
        """
        query = self.db.query(self.model).filter(self.model.id == entity_id)
        if with_lock and self.db.get_bind().dialect.name != "sqlite":
            query = query.with_for_update()
        return query.first()

    @storage_guard
    def get_all(self) -> List[ModelType]:
        """Get all entities ordered by name"""
        return self.db.query(self.model).order_by(self.model.name, self.model.id).all()

    def add(self, entity: ModelType) -> ModelType:
        """Stage a new entity, it receives its id when the service commits"""
        self.db.add(entity)
        return entity

    def delete(self, entity: ModelType) -> None:
        """Stage deletion of an entity"""
        self.db.delete(entity)
