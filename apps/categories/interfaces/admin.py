"""
Categories admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.category_model import CategoryModel


@admin.register(CategoryModel)
class CategoryAdmin(admin.ModelAdmin):
    """Admin configuration for Category model.

    Browse and delete only. Creating or editing goes through the API so
    every write is checked by the Category aggregate.
    """
    list_display = ('name', 'is_active', 'created_at')
    list_filter = ('is_active', 'created_at')
    search_fields = ('name', 'description')
    ordering = ('name',)
    readonly_fields = ('id', 'name', 'description', 'is_active', 'created_at')

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
