# DTOs
from .category_dto import (
    CategoryOutput,
    CreateCategoryInput,
    DeleteCategoryInput,
    GetCategoryInput,
    ListCategoriesInput,
    ListCategoriesOutput,
    UpdateCategoryInput,
)

__all__ = [
    'CategoryOutput',
    'CreateCategoryInput',
    'DeleteCategoryInput',
    'GetCategoryInput',
    'ListCategoriesInput',
    'ListCategoriesOutput',
    'UpdateCategoryInput',
]
