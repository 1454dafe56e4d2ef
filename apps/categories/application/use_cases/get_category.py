"""
Get category use case.
"""
from dataclasses import dataclass
from typing import Optional

from shared.application import CancellationToken, UseCase, raise_if_cancelled
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryOutput, GetCategoryInput


@dataclass
class GetCategoryUseCase(UseCase[GetCategoryInput, CategoryOutput]):
    """Use case for fetching a single category."""

    category_repository: CategoryRepository

    def execute(
        self,
        input_dto: GetCategoryInput,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> CategoryOutput:
        raise_if_cancelled(cancellation_token)
        category = self.category_repository.get(input_dto.id, cancellation_token)

        raise_if_cancelled(cancellation_token)
        return CategoryOutput.from_entity(category)
