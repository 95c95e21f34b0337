import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.catalog.models import CanonicalProduct
from apps.lists.models import GroceryList, ListItem, ListType
from apps.stores.models import Store


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(email='shopper@example.com', password='TestPass123!')


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(email='neighbor@example.com', password='TestPass123!')


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def grocery_list(user):
    """A list owned by the test user."""
    return GroceryList.objects.create(user=user, name='Weekly shop', list_type=ListType.CURRENT_WEEK)


@pytest.fixture
def other_list(other_user):
    """A list owned by somebody else."""
    return GroceryList.objects.create(user=other_user, name='Not yours')


@pytest.fixture
def product(db):
    return CanonicalProduct.objects.create(
        display_name='Whole Milk',
        brand='Horizon',
        size_description='1 gal',
        upc='074236526000',
    )


@pytest.fixture
def free_text_item(grocery_list):
    return ListItem.objects.create(
        grocery_list=grocery_list,
        free_text='Bananas',
        quantity=6.0,
        sort_order=1,
    )


@pytest.fixture
def product_item(grocery_list, product):
    return ListItem.objects.create(
        grocery_list=grocery_list,
        canonical_product=product,
        sort_order=2,
    )


@pytest.fixture
def stores(db):
    return [
        Store.objects.create(id='store-kroger-1', name='Kroger', chain='Kroger'),
        Store.objects.create(id='store-aldi-1', name='Aldi', chain='Aldi'),
        Store.objects.create(id='store-target-1', name='Target', chain='Target'),
    ]
