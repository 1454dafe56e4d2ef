# Shared application module
from .base_use_case import UseCase
from .cancellation import CancellationToken, OperationCancelledError, raise_if_cancelled
from .dispatcher import HandlerNotRegisteredError, UseCaseDispatcher

__all__ = [
    'UseCase',
    'CancellationToken',
    'OperationCancelledError',
    'raise_if_cancelled',
    'HandlerNotRegisteredError',
    'UseCaseDispatcher',
]
