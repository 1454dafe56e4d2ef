"""
Category Django ORM model.
"""
from django.db import models


class CategoryModel(models.Model):
    """Persistent representation of the Category aggregate."""

    # Identity and creation time are assigned by the aggregate, not the database
    id = models.UUIDField(primary_key=True, editable=False)
    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True)
    is_active = models.BooleanField(default=True, db_index=True)
    created_at = models.DateTimeField(editable=False)

    class Meta:
        app_label = 'categories'
        db_table = 'categories'
        ordering = ['name', 'id']
        verbose_name = 'Category'
        verbose_name_plural = 'Categories'

    def __str__(self):
        return self.name
