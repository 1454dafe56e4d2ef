# Serializers
from .category_serializer import (
    CategorySerializer,
    CategoryListSerializer,
    CategoryCreateSerializer,
    CategoryUpdateSerializer,
)

__all__ = [
    'CategorySerializer',
    'CategoryListSerializer',
    'CategoryCreateSerializer',
    'CategoryUpdateSerializer',
]
