import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/v1/auth/register"""

    def test_register_success(self, api_client):
        """Successfully register a new user and receive a session."""
        url = reverse('accounts:register')
        data = {'email': 'newuser@example.com', 'password': 'SecurePass123!'}
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        body = response.data['data']
        assert body['user']['email'] == 'newuser@example.com'
        assert body['accessToken']
        assert body['refreshToken']
        assert body['expiresIn'] == 15 * 60
        assert User.objects.filter(email='newuser@example.com').exists()

    def test_register_normalizes_email(self, api_client):
        """Email is trimmed and lower-cased before storing."""
        url = reverse('accounts:register')
        data = {'email': '  MixedCase@Example.COM ', 'password': 'SecurePass123!'}
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['data']['user']['email'] == 'mixedcase@example.com'

    def test_register_duplicate_email(self, api_client, user):
        """Cannot register with existing email, whatever its case."""
        url = reverse('accounts:register')
        data = {'email': user.email.upper(), 'password': 'SecurePass123!'}
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['error']['code'] == 'CONFLICT'
        assert response.data['error']['message'] == 'An account with this email already exists'

    def test_register_short_password(self, api_client):
        """Registration fails with a password under 8 characters."""
        url = reverse('accounts:register')
        data = {'email': 'weak@example.com', 'password': '1234567'}
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'VALIDATION_ERROR'
        assert response.data['error']['message'] == 'Password must be at least 8 characters'

    def test_register_invalid_email(self, api_client):
        url = reverse('accounts:register')
        response = api_client.post(url, {'email': ' ab ', 'password': 'SecurePass123!'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['message'] == 'Invalid email'

    def test_register_accepts_short_email_without_at_sign(self, api_client):
        """Only a minimum length is enforced on the email."""
        url = reverse('accounts:register')
        response = api_client.post(url, {'email': 'abc', 'password': 'SecurePass123!'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert User.objects.filter(email='abc').exists()

    def test_register_missing_fields(self, api_client):
        url = reverse('accounts:register')
        response = api_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['message'] == 'Email and password are required'


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/v1/auth/login"""

    def test_login_success(self, api_client, user):
        url = reverse('accounts:login')
        data = {'email': 'testuser@example.com', 'password': 'TestPass123!'}
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['user']['id'] == str(user.id)
        assert response.data['data']['accessToken']

        user.refresh_from_db()
        assert user.last_login is not None

    def test_login_email_case_insensitive(self, api_client, user):
        url = reverse('accounts:login')
        data = {'email': 'TestUser@Example.com', 'password': 'TestPass123!'}
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_200_OK

    def test_login_wrong_password(self, api_client, user):
        url = reverse('accounts:login')
        data = {'email': 'testuser@example.com', 'password': 'WrongPass123!'}
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error'] == {
            'code': 'UNAUTHORIZED',
            'message': 'Invalid email or password',
        }

    def test_login_unknown_email(self, api_client):
        """Unknown email is indistinguishable from a wrong password."""
        url = reverse('accounts:login')
        data = {'email': 'nobody@example.com', 'password': 'TestPass123!'}
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error']['message'] == 'Invalid email or password'

    def test_login_inactive_user(self, api_client, user_inactive):
        url = reverse('accounts:login')
        data = {'email': 'inactive@example.com', 'password': 'TestPass123!'}
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['error']['code'] == 'FORBIDDEN'


# =============================================================================
# Token Refresh Tests
# =============================================================================

@pytest.mark.django_db
class TestRefresh:
    """Tests for POST /api/v1/auth/refresh"""

    def test_refresh_returns_new_pair(self, api_client, user, refresh_token):
        url = reverse('accounts:refresh')
        response = api_client.post(url, {'refreshToken': refresh_token}, format='json')

        assert response.status_code == status.HTTP_200_OK
        body = response.data['data']
        assert body['user']['email'] == user.email
        assert body['refreshToken'] != refresh_token
        assert body['accessToken']

    def test_refresh_token_is_single_use(self, api_client, refresh_token):
        """A rotated refresh token cannot be exchanged again."""
        url = reverse('accounts:refresh')
        first = api_client.post(url, {'refreshToken': refresh_token}, format='json')
        second = api_client.post(url, {'refreshToken': refresh_token}, format='json')

        assert first.status_code == status.HTTP_200_OK
        assert second.status_code == status.HTTP_401_UNAUTHORIZED
        assert second.data['error']['message'] == 'Refresh token expired or invalid'

    def test_refresh_with_garbage_token(self, api_client):
        url = reverse('accounts:refresh')
        response = api_client.post(url, {'refreshToken': 'not-a-jwt'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error']['message'] == 'Refresh token expired or invalid'

    def test_refresh_rejects_access_token(self, api_client, user):
        from rest_framework_simplejwt.tokens import RefreshToken
        access = str(RefreshToken.for_user(user).access_token)

        url = reverse('accounts:refresh')
        response = api_client.post(url, {'refreshToken': access}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_refresh_missing_token(self, api_client):
        url = reverse('accounts:refresh')
        response = api_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['message'] == 'refreshToken is required'


# =============================================================================
# Current User Tests
# =============================================================================

@pytest.mark.django_db
class TestMe:
    """Tests for GET /api/v1/auth/me"""

    def test_me(self, authenticated_client, user):
        url = reverse('accounts:me')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['id'] == str(user.id)
        assert response.data['data']['email'] == user.email
        assert 'createdAt' in response.data['data']

    def test_me_requires_auth(self, api_client):
        url = reverse('accounts:me')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error'] == {
            'code': 'UNAUTHORIZED',
            'message': 'Missing or invalid authorization header',
        }

    def test_me_rejects_refresh_token_as_bearer(self, api_client, refresh_token):
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh_token}')
        response = api_client.get(reverse('accounts:me'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error']['message'] == 'Token expired or invalid'

    def test_me_with_malformed_token(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer garbage')
        response = api_client.get(reverse('accounts:me'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error']['code'] == 'UNAUTHORIZED'
