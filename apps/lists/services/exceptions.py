"""Domain-specific exceptions for lists services."""

from apps.common.exceptions import NotFoundError, InvalidInputError


class ListNotFoundError(NotFoundError):
    """Raised when a list does not exist or belongs to another user."""
    default_detail = 'List not found'


class ItemNotFoundError(NotFoundError):
    """Raised when an item does not exist in the given list."""
    default_detail = 'Item not found'


class InvalidListItemError(InvalidInputError):
    """Raised when an item has neither a product nor a free-text label."""
    default_detail = 'Either canonical_product_id or free_text is required'
