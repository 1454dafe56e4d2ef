"""
Search query parsing and paginated response shaping.
"""
from django.conf import settings
from rest_framework import serializers

from shared.domain import SearchOrder
from shared.domain.repository import DEFAULT_PAGE, DEFAULT_PER_PAGE


def _default_per_page() -> int:
    return getattr(settings, 'SEARCH_DEFAULT_PER_PAGE', DEFAULT_PER_PAGE)


def _max_per_page() -> int:
    return getattr(settings, 'SEARCH_MAX_PER_PAGE', 100)


class SearchQuerySerializer(serializers.Serializer):
    """Validates ``page``, ``per_page``, ``search``, ``sort`` and ``dir`` query params."""
    page = serializers.IntegerField(min_value=1, default=DEFAULT_PAGE)
    per_page = serializers.IntegerField(min_value=1, required=False)
    search = serializers.CharField(required=False, allow_blank=True, default="")
    sort = serializers.CharField(required=False, allow_blank=True, default="")
    dir = serializers.ChoiceField(
        choices=[order.value for order in SearchOrder],
        default=SearchOrder.ASC.value,
    )

    def validate_per_page(self, value):
        max_per_page = _max_per_page()
        if value > max_per_page:
            raise serializers.ValidationError(f"Ensure this value is less than or equal to {max_per_page}.")
        return value

    def validate(self, attrs):
        attrs.setdefault('per_page', _default_per_page())
        attrs['dir'] = SearchOrder(attrs['dir'])
        return attrs


def paginated_payload(output, item_serializer_class) -> dict:
    """Build the response body for any page-shaped output DTO."""
    return {
        'current_page': output.current_page,
        'per_page': output.per_page,
        'total': output.total,
        'items': item_serializer_class(output.items, many=True).data,
    }
