"""Exception taxonomy for calls made against the Halısaha REST backend."""

from __future__ import annotations

from typing import Any, Optional


class ApiError(RuntimeError):
    """Server-reported application failure (``success: false`` or non-2xx)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        data: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.data = data


class TransportError(ApiError):
    """No response was received (connection failure, timeout)."""


class UnauthorizedError(ApiError):
    """The backend answered 401; the session has already been cleared."""


class ConflictError(ApiError):
    """The backend rejected the request because of a conflicting resource."""


class ClientValidationError(ApiError):
    """A client-side precondition failed before any request was issued."""

    def __init__(self, message: str, *, key: Optional[str] = None) -> None:
        super().__init__(message, code=key)
        self.key = key


__all__ = [
    'ApiError',
    'ClientValidationError',
    'ConflictError',
    'TransportError',
    'UnauthorizedError',
]
