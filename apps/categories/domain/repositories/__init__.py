# Repositories
from .category_repository import CategoryRepository

__all__ = ['CategoryRepository']
