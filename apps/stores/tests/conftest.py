import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.stores.models import Store, UserFavoriteStore


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    return User.objects.create_user(email='shopper@example.com', password='TestPass123!')


@pytest.fixture
def other_user(db):
    return User.objects.create_user(email='neighbor@example.com', password='TestPass123!')


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def kroger(db):
    return Store.objects.create(id='store-kroger-1', name='Kroger', chain='Kroger', source='kroger')


@pytest.fixture
def aldi(db):
    return Store.objects.create(id='store-aldi-1', name='Aldi', chain='Aldi', source='aldi')


@pytest.fixture
def target(db):
    return Store.objects.create(id='store-target-1', name='Target', chain='Target', source='target')


@pytest.fixture
def other_user_favorite(other_user, aldi):
    return UserFavoriteStore.objects.create(user=other_user, store=aldi)
