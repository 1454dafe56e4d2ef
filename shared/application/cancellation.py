"""
Cooperative cancellation for use cases and repositories.
"""
import threading

from shared.domain.exceptions import DomainException


class OperationCancelledError(DomainException):
    """Raised when an operation is cancelled before it completes."""

    def __init__(self, message: str = "The operation was cancelled."):
        super().__init__(message=message, code="OPERATION_CANCELLED")


class CancellationToken:
    """Thread-safe cancellation flag checked between units of work."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise OperationCancelledError()


def raise_if_cancelled(token: 'CancellationToken' = None) -> None:
    """Raise OperationCancelledError when a token is given and has fired."""
    if token is not None:
        token.raise_if_cancelled()
