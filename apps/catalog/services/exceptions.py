"""Domain-specific exceptions for catalog services."""

from apps.common.exceptions import NotFoundError


class ProductNotFoundError(NotFoundError):
    """Raised when a canonical product does not exist."""
    default_detail = 'Product not found'
