# Shared domain module
from .base_entity import BaseEntity, AggregateRoot
from .exceptions import (
    DomainException,
    EntityNotFoundError,
    EntityValidationError,
    ValidationError,
)
from .repository import (
    GenericRepository,
    SearchableRepository,
    SearchInput,
    SearchOrder,
    SearchOutput,
)

__all__ = [
    'BaseEntity',
    'AggregateRoot',
    'DomainException',
    'EntityNotFoundError',
    'EntityValidationError',
    'ValidationError',
    'GenericRepository',
    'SearchableRepository',
    'SearchInput',
    'SearchOrder',
    'SearchOutput',
]
