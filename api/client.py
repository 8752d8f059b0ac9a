"""Async HTTP client for the Halısaha REST backend.

Every call goes through :meth:`ApiClient.request`, which attaches the bearer
token of the Telegram user the call is made for, unwraps the
``{success, message, data, error}`` envelope and maps failures onto
:mod:`api.errors`. A 401 from any endpoint clears that user's stored session
and notifies the single unauthorized subscriber.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

import httpx

from api.errors import ApiError, ConflictError, TransportError, UnauthorizedError
from infrastructure.constants import OVERLAPPING_RESERVATION_CODE

UnauthorizedHandler = Callable[[int, Optional[str]], Union[Awaitable[None], None]]


@dataclass(frozen=True)
class ApiResponse:
    """Unwrapped response envelope."""

    success: bool
    message: Optional[str]
    data: Any
    error: Optional[str]
    status_code: int


class ApiClient:
    """Thin wrapper around one shared :class:`httpx.AsyncClient`."""

    def __init__(
        self,
        base_url: str,
        session_store,
        *,
        timeout: float = 10.0,
        on_unauthorized: Optional[UnauthorizedHandler] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.base_url = base_url.rstrip('/')
        self.session_store = session_store
        self.logger = logger or logging.getLogger('ApiClient')
        self._on_unauthorized = on_unauthorized
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={'Accept': 'application/json'},
        )

    def set_unauthorized_handler(self, handler: Optional[UnauthorizedHandler]) -> None:
        """Register the subscriber invoked after a 401 cleared a session."""
        self._on_unauthorized = handler

    async def aclose(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Request pipeline
    # ------------------------------------------------------------------
    async def request(
        self,
        method: str,
        path: str,
        *,
        user_id: Optional[int] = None,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        files: Optional[Mapping[str, Any]] = None,
    ) -> ApiResponse:
        """
        Perform a request and return the unwrapped envelope.

        Args:
            method: HTTP verb
            path: Path relative to the API base URL
            user_id: Telegram user the call is made for; selects the bearer token
            params: Query parameters; ``None`` and empty values are dropped
            json: JSON body
            files: Multipart files mapping, passed through to httpx

        Returns:
            ApiResponse for any successful envelope

        Raises:
            TransportError: no response was received
            UnauthorizedError: the backend answered 401
            ConflictError: 409 or an overlapping-reservation error code
            ApiError: any other failure reported by the backend
        """
        headers = self._build_headers(user_id)
        query = _clean_params(params)

        self.logger.debug("➡️ %s %s user=%s params=%s", method, path, user_id, query)
        try:
            response = await self._client.request(
                method,
                path,
                params=query,
                json=json,
                files=files,
                headers=headers,
            )
        except httpx.RequestError as exc:
            self.logger.error("❌ %s %s failed without a response: %s", method, path, exc)
            raise TransportError(str(exc) or type(exc).__name__) from exc

        envelope = self._parse_envelope(response)
        self.logger.debug("⬅️ %s %s -> %s", method, path, response.status_code)

        if response.status_code == 401:
            await self._handle_unauthorized(user_id, envelope.message)
            raise UnauthorizedError(
                envelope.message or 'Session expired',
                status_code=401,
                code=envelope.error,
            )

        if response.status_code == 409 or envelope.error == OVERLAPPING_RESERVATION_CODE:
            raise ConflictError(
                envelope.message or 'Conflicting request',
                status_code=response.status_code,
                code=envelope.error,
                data=envelope.data,
            )

        if not response.is_success or not envelope.success:
            self.logger.warning(
                "⚠️ %s %s rejected (%s): %s",
                method,
                path,
                response.status_code,
                envelope.message,
            )
            raise ApiError(
                envelope.message or f'Request failed with status {response.status_code}',
                status_code=response.status_code,
                code=envelope.error,
                data=envelope.data,
            )

        return envelope

    async def get(self, path: str, **kwargs: Any) -> ApiResponse:
        return await self.request('GET', path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> ApiResponse:
        return await self.request('POST', path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> ApiResponse:
        return await self.request('PUT', path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> ApiResponse:
        return await self.request('PATCH', path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> ApiResponse:
        return await self.request('DELETE', path, **kwargs)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _build_headers(self, user_id: Optional[int]) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if user_id is None:
            return headers

        token = self.session_store.get_token(user_id)
        if token:
            headers['Authorization'] = f'Bearer {token}'
        return headers

    def _parse_envelope(self, response: httpx.Response) -> ApiResponse:
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict) and 'success' in payload:
            return ApiResponse(
                success=bool(payload.get('success')),
                message=payload.get('message'),
                data=payload.get('data'),
                error=payload.get('error'),
                status_code=response.status_code,
            )

        message = payload.get('message') if isinstance(payload, dict) else None
        return ApiResponse(
            success=response.is_success,
            message=message,
            data=payload,
            error=None,
            status_code=response.status_code,
        )

    async def _handle_unauthorized(self, user_id: Optional[int], message: Optional[str]) -> None:
        if user_id is None:
            self.logger.warning("401 received for an anonymous request")
            return

        if not self.session_store.clear(user_id):
            # A concurrent request already expired this session and redirected the user
            self.logger.debug("401 for user %s after the session was already cleared", user_id)
            return
        self.logger.warning("🔐 401 for user %s, stored session cleared", user_id)

        if self._on_unauthorized is None:
            return

        result = self._on_unauthorized(user_id, message)
        if inspect.isawaitable(result):
            await result


def _clean_params(params: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    if not params:
        return None
    cleaned = {key: value for key, value in params.items() if value not in (None, '')}
    return cleaned or None


__all__ = ['ApiClient', 'ApiResponse', 'UnauthorizedHandler']
