"""Services for stores business logic."""

from .exceptions import StoreNotFoundError
from .store_directory import (
    get_all_stores,
    existing_store_ids,
    seed_default_stores,
    DEFAULT_STORES,
)
from .favorites import (
    get_favorite_store_ids,
    add_favorite,
    remove_favorite,
)

__all__ = [
    # Exceptions
    'StoreNotFoundError',
    # Store Directory
    'get_all_stores',
    'existing_store_ids',
    'seed_default_stores',
    'DEFAULT_STORES',
    # Favorites
    'get_favorite_store_ids',
    'add_favorite',
    'remove_favorite',
]
