import pytest
import requests
from unittest.mock import Mock

from cartscout_client import ApiClient, MemoryTokenStore, OfflineCache


def make_response(status_code=200, body=None, reason='OK'):
    """Minimal stand-in for requests.Response."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = reason
    if body is None:
        response.json.side_effect = ValueError('No JSON')
    else:
        response.json.return_value = body
    return response


def error_response(status_code, code, message):
    return make_response(status_code, {'error': {'code': code, 'message': message}}, reason='Error')


def session_body(access='access-1', refresh='refresh-1'):
    return {
        'data': {
            'user': {'id': 'u-1', 'email': 'me@example.com'},
            'accessToken': access,
            'refreshToken': refresh,
            'expiresIn': 900,
        }
    }


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def token_store():
    store = MemoryTokenStore()
    store.set_tokens('access-0', 'refresh-0', 900)
    return store


@pytest.fixture
def api(session, token_store):
    return ApiClient('http://testserver/', token_store, session=session)


@pytest.fixture
def cache(tmp_path):
    return OfflineCache(tmp_path / 'cache.json')
