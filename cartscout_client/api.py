"""HTTP client for the CartScout REST API."""

import logging
from typing import Any, Optional

import requests

from .errors import ApiError, ClientError, NetworkError
from .tokens import TokenStore, MemoryTokenStore

logger = logging.getLogger(__name__)

API_PREFIX = '/api/v1'
DEFAULT_TIMEOUT = 10

# Failures worth retrying later; anything else will fail the same way again
TRANSIENT_ERRORS = (
    requests.exceptions.ConnectionError,
    requests.exceptions.Timeout,
    requests.exceptions.ChunkedEncodingError,
)


class ApiClient:
    """
    Thin wrapper over ``requests`` that speaks the response envelope.

    Every call returns the ``data`` member of the success body (``None`` for
    204). Errors raise ``ApiError`` with the server's code and message;
    connection problems and timeouts raise ``NetworkError``. Any other
    ``requests`` failure, such as a body that cannot be encoded, raises
    ``ClientError``.

    An authenticated call answered with 401 triggers a single refresh using
    the stored refresh token, then the call is retried once. A failed refresh
    clears the stored tokens.
    """

    def __init__(
        self,
        base_url: str,
        token_store: Optional[TokenStore] = None,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip('/')
        self.token_store = token_store or MemoryTokenStore()
        self.session = session or requests.Session()
        self.timeout = timeout

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return f"{self.base_url}{API_PREFIX}/{path.lstrip('/')}"

    def _send(self, method: str, path: str, *, json=None, params=None, auth=True) -> requests.Response:
        headers = {'Accept': 'application/json'}
        if auth:
            token = self.token_store.get_access_token()
            if token:
                headers['Authorization'] = f'Bearer {token}'

        try:
            return self.session.request(
                method,
                self._url(path),
                json=json,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )
        except TRANSIENT_ERRORS as exc:
            logger.info("%s %s failed: %s", method, path, exc)
            raise NetworkError(str(exc)) from exc
        except requests.exceptions.RequestException as exc:
            logger.warning("%s %s could not be sent: %s", method, path, exc)
            raise ClientError(str(exc)) from exc

    def _request(self, method: str, path: str, *, json=None, params=None, auth=True) -> Any:
        response = self._send(method, path, json=json, params=params, auth=auth)

        if response.status_code == 401 and auth and self._try_refresh():
            response = self._send(method, path, json=json, params=params, auth=auth)

        return self._unwrap(response)

    def _try_refresh(self) -> bool:
        refresh_token = self.token_store.get_refresh_token()
        if not refresh_token:
            return False
        try:
            self.refresh(refresh_token)
        except ApiError as exc:
            logger.info("Token refresh rejected (%s); signing out", exc.code)
            self.token_store.clear()
            return False
        return True

    @staticmethod
    def _unwrap(response: requests.Response) -> Any:
        if response.status_code == 204:
            return None

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if not response.ok:
            error = body.get('error') or {}
            raise ApiError(
                code=error.get('code') or 'UNKNOWN',
                message=error.get('message') or response.reason or 'Request failed',
                status=response.status_code,
            )
        return body.get('data')

    def _store_session(self, data: Optional[dict]) -> None:
        if data:
            self.token_store.set_tokens(
                data['accessToken'], data['refreshToken'], data.get('expiresIn')
            )

    # -------------------------------------------------------------------------
    # Auth
    # -------------------------------------------------------------------------

    def register(self, email: str, password: str) -> dict:
        data = self._request('POST', 'auth/register', json={'email': email, 'password': password}, auth=False)
        self._store_session(data)
        return data

    def login(self, email: str, password: str) -> dict:
        data = self._request('POST', 'auth/login', json={'email': email, 'password': password}, auth=False)
        self._store_session(data)
        return data

    def refresh(self, refresh_token: str) -> dict:
        data = self._request('POST', 'auth/refresh', json={'refreshToken': refresh_token}, auth=False)
        self._store_session(data)
        return data

    def me(self) -> dict:
        return self._request('GET', 'auth/me')

    def logout(self) -> None:
        """Forget the stored tokens. The server keeps no session to end."""
        self.token_store.clear()

    # -------------------------------------------------------------------------
    # Lists
    # -------------------------------------------------------------------------

    def lists(self, include_items: bool = False) -> list:
        params = {'include': 'items'} if include_items else None
        return self._request('GET', 'lists', params=params)

    def get_list(self, list_id: str, include_items: bool = False) -> dict:
        params = {'include': 'items'} if include_items else None
        return self._request('GET', f'lists/{list_id}', params=params)

    def create_list(self, name=None, list_type=None, week_start=None) -> dict:
        body = _compact(name=name, list_type=list_type, week_start=week_start)
        return self._request('POST', 'lists', json=body)

    def update_list(self, list_id: str, **fields) -> dict:
        return self._request('PATCH', f'lists/{list_id}', json=fields)

    def delete_list(self, list_id: str) -> None:
        return self._request('DELETE', f'lists/{list_id}')

    def add_list_item(self, list_id: str, canonical_product_id=None, free_text=None, quantity=None) -> dict:
        body = _compact(canonical_product_id=canonical_product_id, free_text=free_text, quantity=quantity)
        return self._request('POST', f'lists/{list_id}/items', json=body)

    def update_list_item(self, list_id: str, item_id: str, quantity=None, checked=None) -> dict:
        body = _compact(quantity=quantity, checked=checked)
        return self._request('PATCH', f'lists/{list_id}/items/{item_id}', json=body)

    def delete_list_item(self, list_id: str, item_id: str) -> None:
        return self._request('DELETE', f'lists/{list_id}/items/{item_id}')

    def list_stores(self, list_id: str) -> list:
        return self._request('GET', f'lists/{list_id}/stores')

    def set_list_stores(self, list_id: str, store_ids) -> list:
        return self._request('PUT', f'lists/{list_id}/stores', json={'store_ids': list(store_ids)})

    # -------------------------------------------------------------------------
    # Stores, products, push
    # -------------------------------------------------------------------------

    def stores(self) -> list:
        return self._request('GET', 'stores')

    def store_favorites(self) -> list:
        return self._request('GET', 'stores/favorites')

    def add_store_favorite(self, store_id: str) -> list:
        return self._request('POST', 'stores/favorites', json={'store_id': store_id})

    def remove_store_favorite(self, store_id: str) -> list:
        return self._request('DELETE', f'stores/favorites/{store_id}')

    def search_products(self, query: str, limit: int = 15) -> list:
        return self._request('GET', 'products/search', params={'q': query, 'limit': limit})

    def register_push_token(self, token: str, platform: Optional[str] = None) -> dict:
        return self._request('POST', 'push/register', json=_compact(token=token, platform=platform))


def _compact(**fields) -> dict:
    """Drop unset (None) fields from a request body."""
    return {key: value for key, value in fields.items() if value is not None}
