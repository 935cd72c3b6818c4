"""Intercepting Client — verifies the adapt/send/evaluate cycle and the one-retry limit.

Tests:
    - No interceptor: plain pass-through
    - 401 -> one refresh -> one retry with the new token; caller sees the retried outcome
    - A retried call that 401s again is returned as-is (no second refresh)
    - A failed refresh raises its error after clearing tokens
"""

from collections import Counter

import httpx
import pytest

from travelnet.core.domain_types import HTTPMethod
from travelnet.core.errors import TransportError, TransportFailure
from travelnet.core.http_types import PreparedRequest
from travelnet.infrastructure.auth_interceptor import AuthInterceptor
from travelnet.infrastructure.network_client import InterceptingClient
from travelnet.infrastructure.payload_encoder import JSONPayloadEncoder
from travelnet.infrastructure.request_builder import HTTPRequestBuilder
from travelnet.infrastructure.url_builder import URLBuilder
from travelnet.services.auth_endpoints import AuthEndpoint

BASE = "https://api.example.com"
PROFILE = PreparedRequest(f"{BASE}/v1/auth/me", HTTPMethod.GET, {"Accept": "application/json"})


class FakeBackend:
    """Accepts only the current access token; refresh rotates it."""

    def __init__(self, valid_token="access-2", refresh_status=200):
        self.valid_token = valid_token
        self.refresh_status = refresh_status
        self.calls = Counter()
        self.authorizations = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls[request.url.path] += 1
        if request.url.path == "/v1/auth/refresh":
            if self.refresh_status != 200:
                return httpx.Response(self.refresh_status)
            return httpx.Response(200, json={"accessToken": "access-2", "refreshToken": "refresh-2"})
        self.authorizations.append(request.headers.get("Authorization"))
        if request.headers.get("Authorization") != f"Bearer {self.valid_token}":
            return httpx.Response(401, json={"message": "Unauthorized"})
        return httpx.Response(200, json={"data": {"user": {"id": "1", "email": "a@b.c"}}})


@pytest.fixture
def build_client(make_transport):
    def _build(store, backend):
        transport = make_transport(backend)
        endpoints = AuthEndpoint()
        interceptor = AuthInterceptor(
            token_store=store,
            transport=transport,
            request_builder=HTTPRequestBuilder(URLBuilder(BASE), JSONPayloadEncoder()),
            refresh_endpoint=endpoints.refresh(),
            auth_paths=endpoints.auth_paths,
        )
        return InterceptingClient(transport, interceptor)
    return _build


async def test_without_interceptor_passes_through(make_transport, signed_in_store):
    backend = FakeBackend()
    client = InterceptingClient(make_transport(backend))
    response = await client.send(PROFILE)
    assert response.status_code == 401
    assert backend.authorizations == [None]


async def test_401_refreshes_once_and_retries_with_new_token(build_client, signed_in_store):
    backend = FakeBackend()
    response = await build_client(signed_in_store, backend).send(PROFILE)

    assert response.status_code == 200
    assert backend.calls["/v1/auth/refresh"] == 1
    assert backend.authorizations == ["Bearer access-1", "Bearer access-2"]


async def test_valid_token_needs_no_refresh(build_client, signed_in_store):
    backend = FakeBackend(valid_token="access-1")
    response = await build_client(signed_in_store, backend).send(PROFILE)
    assert response.status_code == 200
    assert backend.calls["/v1/auth/refresh"] == 0


async def test_retried_401_is_returned_without_second_refresh(build_client, signed_in_store):
    backend = FakeBackend(valid_token="never-issued")
    response = await build_client(signed_in_store, backend).send(PROFILE)

    assert response.status_code == 401
    assert backend.calls["/v1/auth/refresh"] == 1
    assert backend.calls["/v1/auth/me"] == 2


async def test_failed_refresh_raises_and_clears_tokens(build_client, signed_in_store):
    backend = FakeBackend(refresh_status=403)
    with pytest.raises(TransportError) as exc:
        await build_client(signed_in_store, backend).send(PROFILE)

    assert exc.value == TransportError(TransportFailure.USER_AUTHENTICATION_REQUIRED)
    assert signed_in_store.get_access_token() is None
    assert signed_in_store.get_refresh_token() is None
    assert backend.calls["/v1/auth/me"] == 1


async def test_no_refresh_token_returns_original_401(build_client, token_store):
    backend = FakeBackend()
    response = await build_client(token_store, backend).send(PROFILE)
    assert response.status_code == 401
    assert backend.calls["/v1/auth/refresh"] == 0


async def test_original_request_is_never_mutated(build_client, signed_in_store):
    await build_client(signed_in_store, FakeBackend()).send(PROFILE)
    assert PROFILE.header("Authorization") is None
