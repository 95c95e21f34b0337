import pytest
from django.urls import reverse
from rest_framework import status

from apps.push.models import PushToken
from apps.push.services import register_token, normalize_platform


@pytest.mark.django_db
class TestRegisterPushToken:
    """Tests for POST /api/v1/push/register"""

    def test_register_token(self, authenticated_client, user):
        url = reverse('push:register')
        response = authenticated_client.post(url, {'token': 'ExponentPushToken[abc]', 'platform': 'ios'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data == {'data': {'registered': True}}
        token = PushToken.objects.get(token='ExponentPushToken[abc]')
        assert token.user == user
        assert token.platform == 'ios'

    def test_unknown_platform_becomes_web(self, authenticated_client):
        url = reverse('push:register')
        authenticated_client.post(url, {'token': 'tok-1', 'platform': 'blackberry'}, format='json')

        assert PushToken.objects.get(token='tok-1').platform == 'web'

    def test_missing_platform_becomes_web(self, authenticated_client):
        url = reverse('push:register')
        authenticated_client.post(url, {'token': 'tok-2'}, format='json')

        assert PushToken.objects.get(token='tok-2').platform == 'web'

    def test_token_required(self, authenticated_client):
        url = reverse('push:register')
        response = authenticated_client.post(url, {'platform': 'ios'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == {'code': 'VALIDATION_ERROR', 'message': 'token is required'}

    def test_register_requires_auth(self, api_client):
        response = api_client.post(reverse('push:register'), {'token': 'tok'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestTokenRegistrationService:

    def test_reregistering_moves_token(self, user, other_user):
        register_token(user=user, token='shared-device', platform='android')
        register_token(user=other_user, token='shared-device', platform='ios')

        token = PushToken.objects.get(token='shared-device')
        assert PushToken.objects.count() == 1
        assert token.user == other_user
        assert token.platform == 'ios'

    @pytest.mark.parametrize('raw, expected', [
        ('ios', 'ios'),
        ('android', 'android'),
        ('web', 'web'),
        ('IOS', 'web'),
        ('', 'web'),
        (None, 'web'),
    ])
    def test_normalize_platform(self, raw, expected):
        assert normalize_platform(raw) == expected
