"""
Python client for the CartScout API with an offline list cache.

    api = ApiClient('https://cartscout.example.com', FileTokenStore('~/.cartscout/tokens.json'))
    api.login('me@example.com', 'secret123')
    repo = ListRepository(api, OfflineCache('~/.cartscout/cache.json'))
    result = repo.fetch_lists()
"""

from .api import ApiClient
from .errors import (
    ClientError,
    ApiError,
    NetworkError,
    ListsUnavailableError,
    get_api_error_message,
)
from .offline import OfflineCache
from .repository import ListRepository, ListsResult, dedupe_by_id
from .tokens import TokenStore, MemoryTokenStore, FileTokenStore

__all__ = [
    'ApiClient',
    'ClientError',
    'ApiError',
    'NetworkError',
    'ListsUnavailableError',
    'get_api_error_message',
    'OfflineCache',
    'ListRepository',
    'ListsResult',
    'dedupe_by_id',
    'TokenStore',
    'MemoryTokenStore',
    'FileTokenStore',
]
