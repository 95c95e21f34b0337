"""Services for lists business logic."""

from .exceptions import (
    ListNotFoundError,
    ItemNotFoundError,
    InvalidListItemError,
)
from .list_management import (
    get_lists_for_user,
    get_list_for_user,
    create_list,
    update_list,
    delete_list,
)
from .list_stores import (
    get_list_store_ids,
    set_list_stores,
    MAX_LIST_STORES,
)
from .list_items import (
    add_list_item,
    update_list_item,
    delete_list_item,
)

__all__ = [
    # Exceptions
    'ListNotFoundError',
    'ItemNotFoundError',
    'InvalidListItemError',
    # List Management
    'get_lists_for_user',
    'get_list_for_user',
    'create_list',
    'update_list',
    'delete_list',
    # List Stores
    'get_list_store_ids',
    'set_list_stores',
    'MAX_LIST_STORES',
    # List Items
    'add_list_item',
    'update_list_item',
    'delete_list_item',
]
