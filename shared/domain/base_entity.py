"""
Base entity classes for DDD.
"""
from abc import ABC
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4


class BaseEntity(ABC):
    """Base entity class with identity."""

    def __init__(self, id: Optional[UUID] = None, created_at: Optional[datetime] = None):
        self._id = id or uuid4()
        self._created_at = created_at or datetime.now(timezone.utc)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id!r})"


class AggregateRoot(BaseEntity):
    """Aggregate root base class.

    Aggregates are consistency boundaries: every public operation must leave
    the instance in a state that satisfies its invariants.
    """
