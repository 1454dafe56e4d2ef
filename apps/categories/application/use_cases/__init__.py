# Use cases
from .create_category import CreateCategoryUseCase
from .delete_category import DeleteCategoryUseCase
from .get_category import GetCategoryUseCase
from .list_categories import ListCategoriesUseCase
from .update_category import UpdateCategoryUseCase

__all__ = [
    'CreateCategoryUseCase',
    'DeleteCategoryUseCase',
    'GetCategoryUseCase',
    'ListCategoriesUseCase',
    'UpdateCategoryUseCase',
]
