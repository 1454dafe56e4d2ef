# Shared interfaces module
from .exception_handlers import custom_exception_handler
from .pagination import SearchQuerySerializer, paginated_payload

__all__ = ['custom_exception_handler', 'SearchQuerySerializer', 'paginated_payload']
