"""Base repository pattern with common document-store operations.

Provides collection-scoped find-all, insert-one, delete-by-id and
update-by-id operations on top of a SQLModel session. Every operation is its
own unit of work: it commits on success, rolls back on failure, and surfaces
driver failures as ``TaskStoreError``.
"""

from abc import ABC, abstractmethod
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..errors import TaskStoreError


EntityT = TypeVar("EntityT")


class BaseRepository(Generic[EntityT], ABC):
    """Base repository with common operations.

    Subclasses name the entity class; the repository never caches entities
    between calls.
    """

    def __init__(self, session: Session):
        self.session = session

    @abstractmethod
    def get_entity_class(self) -> type[EntityT]:
        """Return the SQLModel entity class."""
        pass

    @contextmanager
    def store_operation(self, *, write: bool = False) -> Generator[None, None, None]:
        """Run one store operation, translating driver errors.

        Raises:
            TaskStoreError: If the underlying driver fails

        """
        try:
            yield
            if write:
                self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise TaskStoreError(str(e)) from e

    def find_all(self) -> list[EntityT]:
        """Get all entities in store-native order."""
        with self.store_operation():
            return list(self.session.exec(select(self.get_entity_class())).all())

    def insert_one(self, entity: EntityT) -> EntityT:
        """Insert a single entity."""
        with self.store_operation(write=True):
            self.session.add(entity)
        return entity

    def delete_by_id(self, entity_id: Any) -> int:
        """Delete the entity with the given ID.

        Returns:
            Number of records removed

        """
        entity_class = self.get_entity_class()
        statement = delete(entity_class).where(entity_class.id == entity_id)
        with self.store_operation(write=True):
            result = self.session.exec(statement)
        return result.rowcount

    def update_by_id(self, entity_id: Any, fields: dict[str, Any]) -> int:
        """Set fields on the entity with the given ID.

        Returns:
            Number of records matched

        """
        entity_class = self.get_entity_class()
        statement = (
            update(entity_class).where(entity_class.id == entity_id).values(**fields)
        )
        with self.store_operation(write=True):
            result = self.session.exec(statement)
        return result.rowcount

    def count(self) -> int:
        """Count total entities."""
        statement = select(func.count()).select_from(self.get_entity_class())
        with self.store_operation():
            return self.session.exec(statement).one()
