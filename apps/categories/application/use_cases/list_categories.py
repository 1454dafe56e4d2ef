"""
List categories use case.
"""
from dataclasses import dataclass
from typing import Optional

from shared.application import CancellationToken, UseCase, raise_if_cancelled
from shared.domain import SearchInput, SearchOrder
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryOutput, ListCategoriesInput, ListCategoriesOutput


@dataclass
class ListCategoriesUseCase(UseCase[ListCategoriesInput, ListCategoriesOutput]):
    """Use case for searching categories page by page."""

    category_repository: CategoryRepository

    def execute(
        self,
        input_dto: ListCategoriesInput,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> ListCategoriesOutput:
        search_input = SearchInput(
            page=input_dto.page,
            per_page=input_dto.per_page,
            search=input_dto.search or "",
            order_by=input_dto.sort or "",
            order=SearchOrder.parse(input_dto.dir),
        )

        raise_if_cancelled(cancellation_token)
        search_output = self.category_repository.search(search_input, cancellation_token)

        raise_if_cancelled(cancellation_token)
        page = search_output.map(CategoryOutput.from_entity)
        return ListCategoriesOutput(
            current_page=page.current_page,
            per_page=page.per_page,
            total=page.total,
            items=page.items,
        )
