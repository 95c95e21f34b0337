"""
Offline-aware access to lists.

``ListRepository`` keeps an in-memory snapshot of the user's lists, mirrors
it into the ``OfflineCache`` and queues item mutations that could not reach
the server so ``sync()`` can replay them later.
"""

import logging
from dataclasses import dataclass, field

from .api import ApiClient
from .errors import ClientError, NetworkError, ListsUnavailableError
from .offline import OfflineCache

logger = logging.getLogger(__name__)

ADD_ITEM = 'add_item'
UPDATE_ITEM = 'update_item'
DELETE_ITEM = 'delete_item'

DEFAULT_LIST_NAME = 'New list'


@dataclass
class ListsResult:
    lists: list = field(default_factory=list)
    from_cache: bool = False


def dedupe_by_id(lists) -> list:
    """Keep the first occurrence of each list id; entries without an id are dropped."""
    seen = set()
    unique = []
    for entry in lists or []:
        list_id = entry.get('id') if isinstance(entry, dict) else None
        if not list_id or list_id in seen:
            continue
        seen.add(list_id)
        unique.append(entry)
    return unique


class ListRepository:

    def __init__(self, api: ApiClient, cache: OfflineCache):
        self.api = api
        self.cache = cache
        self.snapshot = ListsResult()

    def _save_snapshot(self, lists, from_cache: bool) -> None:
        self.snapshot = ListsResult(lists=lists, from_cache=from_cache)
        self.cache.set_cached_lists(lists)

    # -------------------------------------------------------------------------
    # Lists
    # -------------------------------------------------------------------------

    def fetch_lists(self, include_items: bool = False) -> ListsResult:
        """
        Load lists from the server, falling back to the cached snapshot.

        Raises:
            ListsUnavailableError: Offline with nothing cached
            ApiError: The server rejected the request
        """
        try:
            lists = dedupe_by_id(self.api.lists(include_items=include_items))
        except NetworkError:
            cached = dedupe_by_id(self.cache.get_cached_lists())
            if cached:
                self.snapshot = ListsResult(lists=cached, from_cache=True)
                return self.snapshot
            raise ListsUnavailableError('Failed to load lists')

        self._save_snapshot(lists, from_cache=False)
        return self.snapshot

    def create_list(self, name=None, **fields) -> dict:
        created = self.api.create_list(name=name or DEFAULT_LIST_NAME, **fields)
        if created:
            self._save_snapshot(dedupe_by_id([created, *self.snapshot.lists]), from_cache=False)
        return created

    def delete_list(self, list_id: str) -> None:
        self.api.delete_list(list_id)
        remaining = [entry for entry in self.snapshot.lists if entry.get('id') != list_id]
        self._save_snapshot(remaining, from_cache=self.snapshot.from_cache)

    # -------------------------------------------------------------------------
    # Items (queued while offline)
    # -------------------------------------------------------------------------

    def add_item(self, list_id: str, canonical_product_id=None, free_text=None, quantity=None):
        payload = {
            'list_id': list_id,
            'canonical_product_id': canonical_product_id,
            'free_text': free_text,
            'quantity': quantity,
        }
        return self._apply_or_queue(ADD_ITEM, payload)

    def update_item(self, list_id: str, item_id: str, quantity=None, checked=None):
        payload = {
            'list_id': list_id,
            'item_id': item_id,
            'quantity': quantity,
            'checked': checked,
        }
        return self._apply_or_queue(UPDATE_ITEM, payload)

    def delete_item(self, list_id: str, item_id: str):
        return self._apply_or_queue(DELETE_ITEM, {'list_id': list_id, 'item_id': item_id})

    def _apply_or_queue(self, mutation_type: str, payload: dict):
        """Send a mutation now; when offline, queue it and return None."""
        payload = {key: value for key, value in payload.items() if value is not None}
        try:
            return self._apply(mutation_type, payload)
        except NetworkError:
            self.cache.enqueue_mutation(mutation_type, payload)
            logger.info("Offline: queued %s for list %s", mutation_type, payload.get('list_id'))
            return None

    def _apply(self, mutation_type: str, payload: dict):
        args = dict(payload)
        list_id = args.pop('list_id')
        if mutation_type == ADD_ITEM:
            return self.api.add_list_item(list_id, **args)
        if mutation_type == UPDATE_ITEM:
            return self.api.update_list_item(list_id, args.pop('item_id'), **args)
        if mutation_type == DELETE_ITEM:
            return self.api.delete_list_item(list_id, args['item_id'])
        raise ValueError(f"Unknown mutation type: {mutation_type}")

    # -------------------------------------------------------------------------
    # Sync
    # -------------------------------------------------------------------------

    def sync(self) -> int:
        """
        Replay queued mutations in the order they were made.

        Stops at the first network failure and keeps that mutation and
        everything after it queued. A mutation the server rejects, or one
        that cannot be sent at all, is dropped.

        Returns:
            Number of mutations the server accepted
        """
        queue = self.cache.get_offline_queue()
        applied = 0

        for index, mutation in enumerate(queue):
            try:
                self._apply(mutation.get('type'), dict(mutation.get('payload') or {}))
            except NetworkError:
                self.cache.replace_offline_queue(queue[index:])
                logger.info("Sync paused with %d mutations pending", len(queue) - index)
                return applied
            except (ClientError, KeyError, ValueError) as exc:
                logger.warning("Dropping queued %s: %s", mutation.get('type'), exc)
                continue
            applied += 1

        self.cache.clear_offline_queue()
        return applied
