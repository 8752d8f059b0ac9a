"""HTTP layer for the Halısaha REST backend."""

from .client import ApiClient, ApiResponse
from .errors import ApiError, ClientValidationError, ConflictError, TransportError, UnauthorizedError

__all__ = [
    'ApiClient',
    'ApiError',
    'ApiResponse',
    'ClientValidationError',
    'ConflictError',
    'TransportError',
    'UnauthorizedError',
]
