"""Store listing and default store seeding."""

import logging

from django.db import transaction
from django.db.models import QuerySet

from ..models import Store

logger = logging.getLogger(__name__)

# Chain-level stores available on a fresh install
DEFAULT_STORES = [
    {'id': 'store-kroger-1', 'external_id': 'kroger-1', 'name': 'Kroger', 'chain': 'Kroger', 'source': 'kroger'},
    {'id': 'store-walmart-1', 'external_id': 'walmart-1', 'name': 'Walmart', 'chain': 'Walmart', 'source': 'walmart'},
    {'id': 'store-target-1', 'external_id': 'target-1', 'name': 'Target', 'chain': 'Target', 'source': 'target'},
    {'id': 'store-wholefoods-1', 'external_id': 'wholefoods-1', 'name': 'Whole Foods', 'chain': 'Whole Foods', 'source': 'wholefoods'},
    {'id': 'store-publix-1', 'external_id': 'publix-1', 'name': 'Publix', 'chain': 'Publix', 'source': 'publix'},
]


def get_all_stores() -> QuerySet[Store]:
    """All stores, ordered by chain then name (for the settings picker)."""
    return Store.objects.order_by('chain', 'name')


def existing_store_ids(store_ids) -> set[str]:
    """Subset of ``store_ids`` that refer to real stores."""
    return set(
        Store.objects
        .filter(id__in=list(store_ids))
        .values_list('id', flat=True)
    )


@transaction.atomic
def seed_default_stores() -> int:
    """
    Insert the default chain stores that are missing.

    Returns:
        Number of stores created
    """
    created = 0
    for data in DEFAULT_STORES:
        values = {key: value for key, value in data.items() if key != 'id'}
        _, was_created = Store.objects.get_or_create(id=data['id'], defaults=values)
        if was_created:
            created += 1

    logger.info("Seeded %d default store(s)", created)
    return created
