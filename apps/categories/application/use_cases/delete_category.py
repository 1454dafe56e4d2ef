"""
Delete category use case.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from shared.application import CancellationToken, UseCase, raise_if_cancelled
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import DeleteCategoryInput

logger = logging.getLogger(__name__)


@dataclass
class DeleteCategoryUseCase(UseCase[DeleteCategoryInput, None]):
    """Use case for deleting a category."""

    category_repository: CategoryRepository

    def execute(
        self,
        input_dto: DeleteCategoryInput,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        raise_if_cancelled(cancellation_token)
        # Raises CategoryNotFoundError for unknown ids
        category = self.category_repository.get(input_dto.id, cancellation_token)

        raise_if_cancelled(cancellation_token)
        self.category_repository.delete(category.id, cancellation_token)
        logger.info("Category deleted: %s", category.id)
