"""
Service layer unit tests for lists app.

Tests cover:
- Owner scoping
- Item invariants (product or free text, positive quantity, sort order)
- Database constraints backing those invariants
"""

import pytest
from django.db import IntegrityError, transaction
from django.db.models import ProtectedError

from apps.catalog.services import ProductNotFoundError
from apps.lists.models import GroceryList, ListItem, ListStore
from apps.lists.services import (
    get_lists_for_user,
    get_list_for_user,
    create_list,
    update_list,
    delete_list,
    get_list_store_ids,
    set_list_stores,
    add_list_item,
    update_list_item,
    delete_list_item,
    ListNotFoundError,
    ItemNotFoundError,
    InvalidListItemError,
)


# =============================================================================
# List Management Service Tests
# =============================================================================

@pytest.mark.django_db
class TestListManagement:
    """Tests for list_management.py service functions."""

    def test_create_list_normalizes_input(self, user):
        grocery_list = create_list(user=user, name='  ', week_start='  ')

        assert grocery_list.name == 'New list'
        assert grocery_list.week_start is None
        assert grocery_list.list_type == 'custom'

    def test_create_list_strips_name(self, user):
        grocery_list = create_list(user=user, name='  Party  ')

        assert grocery_list.name == 'Party'

    def test_get_lists_for_user_scoped(self, user, grocery_list, other_list):
        assert list(get_lists_for_user(user=user)) == [grocery_list]

    def test_get_list_for_user_rejects_foreign_list(self, user, other_list):
        with pytest.raises(ListNotFoundError):
            get_list_for_user(user=user, list_id=other_list.id)

    def test_get_list_for_user_rejects_malformed_id(self, user):
        with pytest.raises(ListNotFoundError):
            get_list_for_user(user=user, list_id='123')

    def test_update_list_partial(self, user, grocery_list):
        updated = update_list(user=user, list_id=grocery_list.id, data={'week_start': '2026-01-05'})

        assert updated.week_start == '2026-01-05'
        assert updated.name == 'Weekly shop'

    def test_update_list_blank_name_falls_back_to_default(self, user, grocery_list):
        updated = update_list(user=user, list_id=grocery_list.id, data={'name': ''})

        assert updated.name == 'New list'

    def test_update_list_no_changes_keeps_timestamp(self, user, grocery_list):
        before = GroceryList.objects.get(id=grocery_list.id).updated_at

        update_list(user=user, list_id=grocery_list.id, data={})

        assert GroceryList.objects.get(id=grocery_list.id).updated_at == before

    def test_delete_list_foreign(self, user, other_list):
        with pytest.raises(ListNotFoundError):
            delete_list(user=user, list_id=other_list.id)

    def test_delete_list(self, user, grocery_list, free_text_item):
        delete_list(user=user, list_id=grocery_list.id)

        assert not GroceryList.objects.exists()
        assert not ListItem.objects.exists()


# =============================================================================
# List Store Service Tests
# =============================================================================

@pytest.mark.django_db
class TestListStores:

    def test_set_list_stores_preserves_order(self, user, grocery_list, stores):
        result = set_list_stores(
            user=user,
            list_id=grocery_list.id,
            store_ids=['store-target-1', 'store-kroger-1'],
        )

        assert result == ['store-target-1', 'store-kroger-1']
        assert get_list_store_ids(user=user, list_id=grocery_list.id) == result
        assert list(
            ListStore.objects.filter(grocery_list=grocery_list).values_list('position', flat=True)
        ) == [0, 1]

    def test_set_list_stores_only_unknown(self, user, grocery_list):
        assert set_list_stores(user=user, list_id=grocery_list.id, store_ids=['nope']) == []
        assert not ListStore.objects.exists()

    def test_list_stores_foreign_list(self, user, other_list):
        with pytest.raises(ListNotFoundError):
            get_list_store_ids(user=user, list_id=other_list.id)


# =============================================================================
# List Item Service Tests
# =============================================================================

@pytest.mark.django_db
class TestListItems:

    def test_first_item_gets_sort_order_one(self, user, grocery_list):
        item = add_list_item(user=user, list_id=grocery_list.id, free_text='Eggs')

        assert item.sort_order == 1
        assert item.quantity == 1.0

    def test_sort_order_follows_max(self, user, grocery_list):
        ListItem.objects.create(grocery_list=grocery_list, free_text='Gap', sort_order=7)

        item = add_list_item(user=user, list_id=grocery_list.id, free_text='Eggs')

        assert item.sort_order == 8

    def test_sort_order_is_per_list(self, user, grocery_list, other_list):
        ListItem.objects.create(grocery_list=other_list, free_text='Elsewhere', sort_order=10)

        item = add_list_item(user=user, list_id=grocery_list.id, free_text='Eggs')

        assert item.sort_order == 1

    def test_add_item_requires_product_or_text(self, user, grocery_list):
        with pytest.raises(InvalidListItemError):
            add_list_item(user=user, list_id=grocery_list.id, free_text='   ')

    def test_add_item_with_product_and_text_keeps_both(self, user, grocery_list, product):
        item = add_list_item(
            user=user,
            list_id=grocery_list.id,
            canonical_product_id=product.id,
            free_text='the organic one',
        )

        assert item.canonical_product == product
        assert item.free_text == 'the organic one'
        assert item.label == 'Whole Milk'

    def test_add_item_unknown_product(self, user, grocery_list):
        with pytest.raises(ProductNotFoundError):
            add_list_item(user=user, list_id=grocery_list.id, canonical_product_id='nope')

        assert not ListItem.objects.exists()

    def test_add_item_foreign_list(self, user, other_list):
        with pytest.raises(ListNotFoundError):
            add_list_item(user=user, list_id=other_list.id, free_text='Eggs')

    def test_update_item_without_fields_is_noop(self, user, grocery_list, free_text_item):
        item = update_list_item(user=user, list_id=grocery_list.id, item_id=free_text_item.id)

        assert item.quantity == 6.0
        assert item.checked is False

    def test_update_item_wrong_list(self, user, free_text_item):
        second = GroceryList.objects.create(user=user, name='Second')

        with pytest.raises(ItemNotFoundError):
            update_list_item(user=user, list_id=second.id, item_id=free_text_item.id, checked=True)

    def test_delete_item(self, user, grocery_list, free_text_item):
        delete_list_item(user=user, list_id=grocery_list.id, item_id=free_text_item.id)

        assert not ListItem.objects.exists()

    def test_delete_item_twice(self, user, grocery_list, free_text_item):
        delete_list_item(user=user, list_id=grocery_list.id, item_id=free_text_item.id)

        with pytest.raises(ItemNotFoundError):
            delete_list_item(user=user, list_id=grocery_list.id, item_id=free_text_item.id)


@pytest.mark.django_db
class TestItemConstraints:
    """Database-level guarantees, independent of the services."""

    def test_item_without_product_or_text_rejected(self, grocery_list):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                ListItem.objects.create(grocery_list=grocery_list, sort_order=1)

    def test_non_positive_quantity_rejected(self, grocery_list):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                ListItem.objects.create(
                    grocery_list=grocery_list, free_text='Eggs', quantity=0, sort_order=1
                )

    def test_referenced_product_cannot_be_deleted(self, product_item, product):
        with pytest.raises(ProtectedError):
            product.delete()

    def test_list_store_pair_is_unique(self, grocery_list, stores):
        ListStore.objects.create(grocery_list=grocery_list, store=stores[0])

        with pytest.raises(IntegrityError):
            with transaction.atomic():
                ListStore.objects.create(grocery_list=grocery_list, store=stores[0])
