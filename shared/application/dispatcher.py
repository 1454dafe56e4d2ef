"""
Explicit input-type to use-case routing.
"""
import logging
from typing import Any, Dict, Optional, Type

from .base_use_case import UseCase
from .cancellation import CancellationToken

logger = logging.getLogger(__name__)


class HandlerNotRegisteredError(LookupError):
    """Raised when no use case is registered for an input type."""

    def __init__(self, input_type: type):
        super().__init__(f"No handler registered for '{input_type.__name__}'")
        self.input_type = input_type


class UseCaseDispatcher:
    """Routes input DTOs to the use case registered for their exact type."""

    def __init__(self):
        self._handlers: Dict[type, UseCase] = {}

    def register(self, input_type: Type, use_case: UseCase) -> 'UseCaseDispatcher':
        if input_type in self._handlers:
            raise ValueError(f"Handler for '{input_type.__name__}' already registered")
        self._handlers[input_type] = use_case
        return self

    def dispatch(self, input_dto: Any, cancellation_token: Optional[CancellationToken] = None) -> Any:
        use_case = self._handlers.get(type(input_dto))
        if use_case is None:
            raise HandlerNotRegisteredError(type(input_dto))
        logger.debug("Dispatching %s to %s", type(input_dto).__name__, type(use_case).__name__)
        return use_case.execute(input_dto, cancellation_token)
