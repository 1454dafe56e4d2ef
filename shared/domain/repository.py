"""
Generic repository contracts and the paginated search shapes they share.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Generic, List, Optional, TypeVar
from uuid import UUID

from .exceptions import ValidationError

if TYPE_CHECKING:
    from shared.application.cancellation import CancellationToken

T = TypeVar('T')
R = TypeVar('R')

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 15


class SearchOrder(str, Enum):
    """Sort direction for a search."""
    ASC = 'asc'
    DESC = 'desc'

    @classmethod
    def parse(cls, value) -> 'SearchOrder':
        """Read a direction, treating a missing one as ascending."""
        if isinstance(value, cls):
            return value
        if value is None or value == "":
            return cls.ASC
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValidationError(f"Invalid sort direction '{value}'.", field="dir")


@dataclass(frozen=True)
class SearchInput:
    """Pagination, filtering and sorting criteria for a search."""
    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE
    search: str = ""
    order_by: str = ""
    order: SearchOrder = SearchOrder.ASC

    def __post_init__(self):
        if self.page < 1:
            raise ValidationError("Page should be greater or equal 1.", field="page")
        if self.per_page < 1:
            raise ValidationError("Per page should be greater or equal 1.", field="per_page")

    @property
    def offset(self) -> int:
        """Number of matching rows skipped before the requested page."""
        return (self.page - 1) * self.per_page


@dataclass(frozen=True)
class SearchOutput(Generic[T]):
    """One page of search results plus its pagination metadata."""
    current_page: int
    per_page: int
    total: int
    items: List[T] = field(default_factory=list)

    def map(self, func: Callable[[T], R]) -> 'SearchOutput[R]':
        """Project every item, keeping the pagination metadata."""
        return SearchOutput(
            current_page=self.current_page,
            per_page=self.per_page,
            total=self.total,
            items=[func(item) for item in self.items],
        )


class GenericRepository(ABC, Generic[T]):
    """Abstract repository for a single aggregate type."""

    @abstractmethod
    def save(self, aggregate: T, cancellation_token: Optional['CancellationToken'] = None) -> T:
        """Insert or update an aggregate."""
        pass

    @abstractmethod
    def get(self, aggregate_id: UUID, cancellation_token: Optional['CancellationToken'] = None) -> T:
        """Get an aggregate by ID, raising EntityNotFoundError when absent."""
        pass

    @abstractmethod
    def delete(self, aggregate_id: UUID, cancellation_token: Optional['CancellationToken'] = None) -> None:
        """Delete an aggregate by ID."""
        pass


class SearchableRepository(ABC, Generic[T]):
    """Abstract repository able to answer paginated searches."""

    @abstractmethod
    def search(
        self,
        search_input: SearchInput,
        cancellation_token: Optional['CancellationToken'] = None,
    ) -> SearchOutput[T]:
        """Return the requested page of aggregates matching the criteria.

        Implementations must report ``total`` as the number of matches
        ignoring pagination, return an empty page (not an error) past the
        last page, and break sort ties by identifier.
        """
        pass
