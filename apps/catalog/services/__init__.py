"""Services for catalog business logic."""

from .exceptions import ProductNotFoundError
from .product_search import (
    search_products,
    get_product_by_id,
    clamp_limit,
    DEFAULT_SEARCH_LIMIT,
    MAX_SEARCH_LIMIT,
)

__all__ = [
    'ProductNotFoundError',
    'search_products',
    'get_product_by_id',
    'clamp_limit',
    'DEFAULT_SEARCH_LIMIT',
    'MAX_SEARCH_LIMIT',
]
