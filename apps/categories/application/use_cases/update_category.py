"""
Update category use case.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from shared.application import CancellationToken, UseCase, raise_if_cancelled
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryOutput, UpdateCategoryInput

logger = logging.getLogger(__name__)


@dataclass
class UpdateCategoryUseCase(UseCase[UpdateCategoryInput, CategoryOutput]):
    """Use case for renaming, describing and (de)activating a category."""

    category_repository: CategoryRepository

    def execute(
        self,
        input_dto: UpdateCategoryInput,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> CategoryOutput:
        raise_if_cancelled(cancellation_token)
        category = self.category_repository.get(input_dto.id, cancellation_token)

        category.update(input_dto.name, input_dto.description)

        if input_dto.is_active is not None and input_dto.is_active != category.is_active:
            if input_dto.is_active:
                category.activate()
            else:
                category.deactivate()

        raise_if_cancelled(cancellation_token)
        saved = self.category_repository.save(category, cancellation_token)
        logger.info("Category updated: %s", saved.id)

        return CategoryOutput.from_entity(saved)
