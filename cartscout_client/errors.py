"""Client-side errors and the mapping to user-facing messages."""

from typing import Optional

KNOWN_MESSAGES = {
    'List not found': 'This list was not found or was deleted.',
    'Item not found': 'This item was not found or was removed.',
    'Store not found': 'This store was not found.',
    'User not found': 'Your account could not be found.',
    'Invalid email or password': 'Invalid email or password. Please try again.',
    'Refresh token expired or invalid': 'Your session expired. Please sign in again.',
    'An account with this email already exists': (
        'An account with this email already exists. Sign in or use a different email.'
    ),
}

DEFAULT_MESSAGE = 'Something went wrong. Please try again.'


class ClientError(Exception):
    """Base exception for the CartScout client."""


class ApiError(ClientError):
    """The server answered with an error envelope."""

    def __init__(self, code: str, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status

    def __repr__(self):
        return f"ApiError(code={self.code!r}, message={self.message!r}, status={self.status!r})"


class NetworkError(ClientError):
    """The server could not be reached."""


class ListsUnavailableError(ClientError):
    """Lists could not be fetched and nothing usable is cached."""


def get_api_error_message(error) -> str:
    """
    User-facing text for an error raised by the client.

    Known server messages are rewritten; anything else is shown as is.
    """
    if isinstance(error, ApiError):
        message = error.message
    elif isinstance(error, Exception):
        message = str(error)
    elif isinstance(error, str):
        message = error
    else:
        message = None

    message = (message or '').strip()
    if not message:
        return DEFAULT_MESSAGE
    return KNOWN_MESSAGES.get(message, message)
