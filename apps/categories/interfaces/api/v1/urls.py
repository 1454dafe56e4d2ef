"""
Categories API v1 URLs.
"""
from django.urls import path

from .views import (
    CategoryListCreateView,
    CategoryDetailView,
)

urlpatterns = [
    path('', CategoryListCreateView.as_view(), name='category-list-create'),
    path('<uuid:category_id>/', CategoryDetailView.as_view(), name='category-detail'),
]
