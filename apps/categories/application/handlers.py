"""
Category use case wiring.
"""
from shared.application import UseCaseDispatcher
from ..domain.repositories.category_repository import CategoryRepository
from .dtos.category_dto import (
    CreateCategoryInput,
    DeleteCategoryInput,
    GetCategoryInput,
    ListCategoriesInput,
    UpdateCategoryInput,
)
from .use_cases import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)


def build_dispatcher(category_repository: CategoryRepository) -> UseCaseDispatcher:
    """Register every category use case against its input DTO type."""
    return (
        UseCaseDispatcher()
        .register(GetCategoryInput, GetCategoryUseCase(category_repository))
        .register(ListCategoriesInput, ListCategoriesUseCase(category_repository))
        .register(CreateCategoryInput, CreateCategoryUseCase(category_repository))
        .register(UpdateCategoryInput, UpdateCategoryUseCase(category_repository))
        .register(DeleteCategoryInput, DeleteCategoryUseCase(category_repository))
    )
