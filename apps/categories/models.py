# Django discovers models through this module
from .infrastructure.models import CategoryModel  # noqa: F401
