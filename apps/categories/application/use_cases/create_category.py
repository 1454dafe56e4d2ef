"""
Create category use case.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from shared.application import CancellationToken, UseCase, raise_if_cancelled
from ...domain.entities.category import Category
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryOutput, CreateCategoryInput

logger = logging.getLogger(__name__)


@dataclass
class CreateCategoryUseCase(UseCase[CreateCategoryInput, CategoryOutput]):
    """Use case for creating a new category."""

    category_repository: CategoryRepository

    def execute(
        self,
        input_dto: CreateCategoryInput,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> CategoryOutput:
        # Invariant violations raise here, before anything is persisted
        category = Category.create(
            name=input_dto.name,
            description=input_dto.description,
            is_active=input_dto.is_active,
        )

        raise_if_cancelled(cancellation_token)
        saved = self.category_repository.save(category, cancellation_token)
        logger.info("Category created: %s (%s)", saved.id, saved.name)

        return CategoryOutput.from_entity(saved)
