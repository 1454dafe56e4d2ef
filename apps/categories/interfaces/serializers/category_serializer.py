"""
Category serializers.
"""
from rest_framework import serializers


class CategorySerializer(serializers.Serializer):
    """Serializer for category output."""
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    is_active = serializers.BooleanField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class CategoryListSerializer(serializers.Serializer):
    """Serializer for a page of categories (schema only)."""
    current_page = serializers.IntegerField(read_only=True)
    per_page = serializers.IntegerField(read_only=True)
    total = serializers.IntegerField(read_only=True)
    items = CategorySerializer(many=True, read_only=True)


class CategoryCreateSerializer(serializers.Serializer):
    """Serializer for category creation.

    Only shapes the payload; name/description rules, lengths included, are
    enforced by the aggregate so the error messages stay the same on every
    path.
    """
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False, default="")
    is_active = serializers.BooleanField(required=False, default=True)


class CategoryUpdateSerializer(serializers.Serializer):
    """Serializer for category update."""
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    is_active = serializers.BooleanField(required=False, allow_null=True, default=None)
