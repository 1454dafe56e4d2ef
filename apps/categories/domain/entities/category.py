"""
Category entity (Aggregate Root).
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from shared.domain import AggregateRoot
from ..exceptions import InvalidCategoryError

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 10_000


class Category(AggregateRoot):
    """Catalog category.

    State is read-only from the outside; ``update``, ``activate`` and
    ``deactivate`` are the only ways to change it.
    """

    def __init__(
        self,
        name: str,
        description: str,
        is_active: bool = True,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
    ):
        self._check(name, description)
        super().__init__(id=id, created_at=created_at)
        self._name = name
        self._description = description
        self._is_active = is_active

    @classmethod
    def create(cls, name: str, description: str, is_active: bool = True) -> 'Category':
        """Factory method to create a new category."""
        return cls(name=name, description=description, is_active=is_active)

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def is_active(self) -> bool:
        return self._is_active

    def activate(self) -> None:
        """Activate the category."""
        self._is_active = True

    def deactivate(self) -> None:
        """Deactivate the category."""
        self._is_active = False

    def update(self, name: str, description: Optional[str] = None) -> None:
        """Rename the category and, when given, replace its description.

        The proposed state is validated as a whole before anything is
        assigned.
        """
        new_description = self._description if description is None else description
        self._check(name, new_description)
        self._name = name
        self._description = new_description

    @staticmethod
    def _check(name: Optional[str], description: Optional[str]) -> None:
        # Only the first violation is reported, so the order is significant.
        if name is None or not name.strip():
            raise InvalidCategoryError("Name should not be empty or null.", field="name")
        if len(name) < NAME_MIN_LENGTH:
            raise InvalidCategoryError(
                f"Name should be at least {NAME_MIN_LENGTH} characters long.", field="name"
            )
        if len(name) > NAME_MAX_LENGTH:
            raise InvalidCategoryError(
                f"Name should be less or equal {NAME_MAX_LENGTH} characters long.", field="name"
            )
        if description is None:
            raise InvalidCategoryError("Description should not be empty or null.", field="description")
        if len(description) > DESCRIPTION_MAX_LENGTH:
            raise InvalidCategoryError(
                "Description should be less or equal 10.000 characters long.", field="description"
            )
