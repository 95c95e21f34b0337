import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.catalog.models import CanonicalProduct, SoldBy


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    return User.objects.create_user(email='shopper@example.com', password='TestPass123!')


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def products(db):
    """A small catalog: three milks from two brands plus bread."""
    return [
        CanonicalProduct.objects.create(
            display_name='Whole Milk', brand='Horizon', size_description='1 gal', upc='0001',
        ),
        CanonicalProduct.objects.create(
            display_name='Almond Milk', brand='Silk', size_description='64 oz',
        ),
        CanonicalProduct.objects.create(
            display_name='Oat Beverage', brand='Milkadamia',
        ),
        CanonicalProduct.objects.create(
            display_name='Sourdough Bread', brand='Acme', sold_by=SoldBy.UNIT,
        ),
    ]


@pytest.fixture
def many_products(db):
    return CanonicalProduct.objects.bulk_create([
        CanonicalProduct(display_name=f'Apple {i:02d}') for i in range(40)
    ])
