"""Repository interface and the shared SQLModel implementation.

Repositories speak domain entities on both sides; table rows never leave
this layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from sqlmodel import Session, select

from src.catalog.entities._base import Entity, EntityTable

E = TypeVar("E", bound=Entity)
R = TypeVar("R", bound=EntityTable)


class Repository(ABC, Generic[E]):
    """Lookup and mutation primitives over one entity type."""

    @abstractmethod
    def find_all(self) -> list[E]:
        """Return every stored entity in id-ascending order."""

    @abstractmethod
    def find_by_id(self, entity_id: int) -> E | None:
        """Return the entity with `entity_id`, or None."""

    @abstractmethod
    def save(self, entity: E) -> E:
        """Insert or update `entity`, assigning an id when it has none.

        Returns:
            The entity as stored
        """

    @abstractmethod
    def delete_by_id(self, entity_id: int) -> None:
        """Delete the entity with `entity_id`; a missing id is a no-op."""


class SqlRepository(Repository[E], Generic[E, R]):
    """Repository backed by a SQLModel session.

    The session is owned by the caller, which decides when to commit; writes
    are flushed so generated ids are visible immediately.
    """

    entity_type: type[E]
    table_type: type[R]

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_all(self) -> list[E]:
        statement = select(self.table_type).order_by(self.table_type.id)
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def find_by_id(self, entity_id: int) -> E | None:
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            return None
        return self._to_entity(row)

    def save(self, entity: E) -> E:
        row = None
        if entity.id is not None:
            row = self._session.get(self.table_type, entity.id)
        if row is None:
            row = self.table_type(id=entity.id)

        self._apply(entity, row)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete_by_id(self, entity_id: int) -> None:
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            return
        self._session.delete(row)
        self._session.flush()

    def _to_entity(self, row: R) -> E:
        return self.entity_type.model_validate(row, from_attributes=True)

    @abstractmethod
    def _apply(self, entity: E, row: R) -> None:
        """Copy the entity's business fields onto the table row."""
