"""Domain-specific exceptions for accounts services."""

from apps.common.exceptions import ConflictError, ForbiddenError, NotFoundError, UnauthorizedError


class DuplicateEmailError(ConflictError):
    """Raised when registering an email that already has an account."""
    default_detail = 'An account with this email already exists'


class InvalidCredentialsError(UnauthorizedError):
    """Raised when authentication credentials are invalid."""
    default_detail = 'Invalid email or password'


class InactiveAccountError(ForbiddenError):
    """Raised when account is deactivated."""
    default_detail = 'Account is deactivated'


class InvalidRefreshTokenError(UnauthorizedError):
    """Raised when a refresh token is expired, malformed, reused or revoked."""
    default_detail = 'Refresh token expired or invalid'


class UserNotFoundError(NotFoundError):
    """Raised when user does not exist."""
    default_detail = 'User not found'
