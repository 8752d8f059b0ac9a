import asyncio
import json

import httpx
import pytest

from api.client import ApiClient
from api.errors import ApiError, ConflictError, TransportError, UnauthorizedError
from tests.helpers import DummyLogger
from users.session_store import SessionStore

BASE_URL = "http://backend.test/api/v1"
PROFILE = {"id": "u-1", "email": "ali@example.com", "userType": "player"}


def envelope(data=None, *, success=True, message=None, error=None):
    return {"success": success, "message": message, "data": data, "error": error}


def make_client(tmp_path, handler, **kwargs):
    store = SessionStore(str(tmp_path / "sessions.json"))
    client = ApiClient(
        BASE_URL,
        store,
        transport=httpx.MockTransport(handler),
        logger=DummyLogger(),
        **kwargs,
    )
    return client, store


@pytest.mark.asyncio
async def test_request_attaches_token_and_unwraps_envelope(tmp_path):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=envelope([{"id": "v1"}]))

    client, store = make_client(tmp_path, handler)
    store.save(1, "tok-1", PROFILE)

    response = await client.get("/venues", user_id=1, params={"city": "İzmir", "district": None, "search": ""})
    await client.aclose()

    assert response.data == [{"id": "v1"}]
    request = seen[0]
    assert request.url.path == "/api/v1/venues"
    assert request.headers["Authorization"] == "Bearer tok-1"
    assert dict(request.url.params) == {"city": "İzmir"}


@pytest.mark.asyncio
async def test_anonymous_request_has_no_authorization_header(tmp_path):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=envelope({"token": "t"}))

    client, _ = make_client(tmp_path, handler)
    await client.post("/auth/login", json={"email": "a@b.co", "password": "secret"})
    await client.aclose()

    assert "Authorization" not in seen[0].headers
    assert json.loads(seen[0].content) == {"email": "a@b.co", "password": "secret"}


@pytest.mark.asyncio
async def test_failed_envelope_raises_api_error(tmp_path):
    def handler(request):
        return httpx.Response(400, json=envelope(success=False, message="Invalid field", error="VALIDATION"))

    client, _ = make_client(tmp_path, handler)
    with pytest.raises(ApiError) as excinfo:
        await client.get("/venues")
    await client.aclose()

    assert excinfo.value.message == "Invalid field"
    assert excinfo.value.status_code == 400
    assert excinfo.value.code == "VALIDATION"


@pytest.mark.asyncio
async def test_success_false_with_200_is_still_an_error(tmp_path):
    def handler(request):
        return httpx.Response(200, json=envelope(success=False, message="Nope"))

    client, _ = make_client(tmp_path, handler)
    with pytest.raises(ApiError):
        await client.get("/venues")
    await client.aclose()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status, body",
    [
        (409, envelope(success=False, message="Taken")),
        (400, envelope(success=False, message="Taken", error="OVERLAPPING_RESERVATION")),
    ],
)
async def test_conflicts_map_to_conflict_error(tmp_path, status, body):
    def handler(request):
        return httpx.Response(status, json=body)

    client, _ = make_client(tmp_path, handler)
    with pytest.raises(ConflictError) as excinfo:
        await client.post("/reservations", json={})
    await client.aclose()

    assert excinfo.value.message == "Taken"


@pytest.mark.asyncio
async def test_transport_failure_raises_transport_error(tmp_path):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client, _ = make_client(tmp_path, handler)
    with pytest.raises(TransportError):
        await client.get("/venues")
    await client.aclose()


@pytest.mark.asyncio
async def test_unauthorized_clears_session_and_notifies_once(tmp_path):
    notified = []

    async def on_unauthorized(user_id, message):
        notified.append((user_id, message))

    def handler(request):
        return httpx.Response(401, json=envelope(success=False, message="Token expired"))

    client, store = make_client(tmp_path, handler, on_unauthorized=on_unauthorized)
    store.save(1, "tok-1", PROFILE)

    results = await asyncio.gather(
        client.get("/reservations", user_id=1),
        client.get("/teams/my-invitations", user_id=1),
        return_exceptions=True,
    )
    await client.aclose()

    assert all(isinstance(result, UnauthorizedError) for result in results)
    assert store.get(1) is None
    assert notified == [(1, "Token expired")]


@pytest.mark.asyncio
async def test_non_envelope_body_is_passed_through(tmp_path):
    def handler(request):
        return httpx.Response(200, json=[1, 2, 3])

    client, _ = make_client(tmp_path, handler)
    response = await client.get("/health")
    await client.aclose()

    assert response.success is True
    assert response.data == [1, 2, 3]
