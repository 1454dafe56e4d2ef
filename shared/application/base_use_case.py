"""
Base use case classes.
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional

from .cancellation import CancellationToken

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """Base use case class.

    Use cases return their output DTO directly; failures surface as domain
    exceptions raised from the aggregate or the repository.
    """

    @abstractmethod
    def execute(
        self,
        input_dto: InputDTO,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> OutputDTO:
        """Execute the use case."""
        pass
