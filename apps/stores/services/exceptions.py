"""Domain-specific exceptions for stores services."""

from apps.common.exceptions import NotFoundError


class StoreNotFoundError(NotFoundError):
    """Raised when a store does not exist."""
    default_detail = 'Store not found'
