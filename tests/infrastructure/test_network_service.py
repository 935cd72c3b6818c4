"""Network Service — verifies HTTP validation, decoding and error classification.

Tests:
    - 400 {"message"} -> ServerError(400, "Bad request"); 5xx default message
    - 200 text/html -> InvalidContentTypeError; missing Content-Type tolerated
    - 200 empty body -> EmptyResponseError; bad JSON -> DecodingFailedError
    - Snake_case response keys decode into camelCase-aliased models
    - httpx failures map to NoConnection / Timeout / TransportError / Unknown
    - URL and request-building errors propagate untouched
"""

import logging

import httpx
import pytest

from travelnet.core.domain_types import HTTPMethod
from travelnet.core.endpoints import Endpoint
from travelnet.core.errors import (
    DecodingFailedError,
    EmptyResponseError,
    InvalidContentTypeError,
    InvalidURLError,
    NoConnectionError,
    RequestBuildingFailedError,
    RequestTimeoutError,
    ServerError,
    TransportError,
    TransportFailure,
    UnknownNetworkingError,
)
from travelnet.infrastructure.network_client import InterceptingClient
from travelnet.infrastructure.network_service import HTTPNetworkService
from travelnet.infrastructure.payload_encoder import JSONPayloadEncoder
from travelnet.infrastructure.request_builder import HTTPRequestBuilder
from travelnet.infrastructure.url_builder import URLBuilder
from travelnet.schemas.auth import UserProfileResponse

PROFILE = Endpoint(HTTPMethod.GET, "/v1/auth/me", name="auth.me")
PROFILE_BODY = {"data": {"user": {"id": 1, "email": "ana@example.com", "first_name": "Ana"}}}


@pytest.fixture
def make_service(make_transport):
    def _make(handler, encoder=True):
        builder = HTTPRequestBuilder(
            URLBuilder("https://api.example.com"), JSONPayloadEncoder() if encoder else None,
        )
        return HTTPNetworkService(InterceptingClient(make_transport(handler)), builder)
    return _make


def _respond(*args, **kwargs):
    return lambda request: httpx.Response(*args, **kwargs)


def _raise(exc_type):
    def handler(request):
        raise exc_type("boom", request=request)
    return handler


# ─── Success path ──────────────────────────────────────────────

async def test_decodes_snake_case_payload(make_service):
    service = make_service(_respond(200, json=PROFILE_BODY))
    response = await service.execute(PROFILE, UserProfileResponse)
    assert response.data.user.id == "1"
    assert response.data.user.first_name == "Ana"


async def test_missing_content_type_is_tolerated(make_service, caplog):
    service = make_service(_respond(200, content=b'{"data": {"user": {"id": "1", "email": "a@b.c"}}}'))
    with caplog.at_level(logging.WARNING):
        response = await service.execute(PROFILE, UserProfileResponse)
    assert response.data.user.email == "a@b.c"
    assert "no Content-Type" in caplog.text


async def test_json_variant_content_type_is_accepted(make_service):
    service = make_service(_respond(
        200, headers={"Content-Type": "application/vnd.api+json"},
        content=b'{"data": {"user": {"id": "1", "email": "a@b.c"}}}',
    ))
    assert (await service.execute(PROFILE, UserProfileResponse)).data.user.id == "1"


# ─── Response validation ───────────────────────────────────────

async def test_client_error_uses_server_message(make_service):
    service = make_service(_respond(400, json={"message": "Bad request"}))
    with pytest.raises(ServerError) as exc:
        await service.execute(PROFILE, UserProfileResponse)
    assert exc.value == ServerError(400)
    assert exc.value.server_message == "Bad request"
    assert exc.value.context.status_code == 400


async def test_error_list_body_uses_first_detail(make_service):
    service = make_service(_respond(
        400, json={"errors": [{"status": 400, "code": 477, "title": "INVALID FORMAT", "detail": "bad lat"}]},
    ))
    with pytest.raises(ServerError) as exc:
        await service.execute(PROFILE, UserProfileResponse)
    assert exc.value.server_message == "bad lat"


@pytest.mark.parametrize("status,default", [(404, "Client error"), (503, "Server error")])
async def test_unstructured_error_body_uses_bracket_default(make_service, status, default):
    service = make_service(_respond(status, content=b"<html>oops</html>"))
    with pytest.raises(ServerError) as exc:
        await service.execute(PROFILE, UserProfileResponse)
    assert exc.value.status_code == status
    assert exc.value.server_message == default


async def test_non_json_content_type_fails(make_service):
    service = make_service(_respond(200, headers={"Content-Type": "text/html"}, content=b"<html/>"))
    with pytest.raises(InvalidContentTypeError) as exc:
        await service.execute(PROFILE, UserProfileResponse)
    assert exc.value.content_type == "text/html"


async def test_empty_body_fails(make_service):
    service = make_service(_respond(200, headers={"Content-Type": "application/json"}))
    with pytest.raises(EmptyResponseError):
        await service.execute(PROFILE, UserProfileResponse)


async def test_no_content_status_is_empty_response(make_service):
    service = make_service(_respond(204))
    with pytest.raises(EmptyResponseError):
        await service.execute(PROFILE, UserProfileResponse)


@pytest.mark.parametrize("status", [101, 304])
async def test_status_outside_known_brackets_is_bad_server_response(make_service, status):
    service = make_service(_respond(status))
    with pytest.raises(TransportError) as exc:
        await service.execute(PROFILE, UserProfileResponse)
    assert exc.value.reason is TransportFailure.BAD_SERVER_RESPONSE


async def test_missing_response_object_is_bad_server_response():
    class NoResponseClient:
        async def send(self, request):
            return None

    service = HTTPNetworkService(
        NoResponseClient(), HTTPRequestBuilder(URLBuilder("https://api.example.com")),
    )
    with pytest.raises(TransportError) as exc:
        await service.execute(PROFILE, UserProfileResponse)
    assert exc.value == TransportError(TransportFailure.BAD_SERVER_RESPONSE)


# ─── Decoding ──────────────────────────────────────────────────

async def test_invalid_json_fails_decoding(make_service):
    service = make_service(_respond(200, headers={"Content-Type": "application/json"}, content=b"{"))
    with pytest.raises(DecodingFailedError):
        await service.execute(PROFILE, UserProfileResponse)


async def test_shape_mismatch_fails_decoding(make_service):
    service = make_service(_respond(200, json={"data": {"profile": {}}}))
    with pytest.raises(DecodingFailedError) as exc:
        await service.execute(PROFILE, UserProfileResponse)
    assert exc.value.cause is not None


# ─── Transport classification ──────────────────────────────────

@pytest.mark.parametrize("raised,expected", [
    (httpx.ConnectError, NoConnectionError()),
    (httpx.ConnectTimeout, RequestTimeoutError()),
    (httpx.ReadTimeout, RequestTimeoutError()),
    (httpx.ReadError, TransportError(TransportFailure.NETWORK)),
    (httpx.RemoteProtocolError, TransportError(TransportFailure.PROTOCOL)),
    (httpx.UnsupportedProtocol, TransportError(TransportFailure.OTHER)),
])
async def test_httpx_failures_are_classified(make_service, raised, expected):
    service = make_service(_raise(raised))
    with pytest.raises(type(expected)) as exc:
        await service.execute(PROFILE, UserProfileResponse)
    assert exc.value == expected
    assert isinstance(exc.value.__cause__, raised)


async def test_unexpected_failure_is_unknown(make_service):
    def handler(request):
        raise RuntimeError("surprise")

    service = make_service(handler)
    with pytest.raises(UnknownNetworkingError) as exc:
        await service.execute(PROFILE, UserProfileResponse)
    assert isinstance(exc.value.cause, RuntimeError)


# ─── Build errors ──────────────────────────────────────────────

async def test_url_errors_propagate_untouched(make_service):
    service = make_service(_respond(200))
    with pytest.raises(InvalidURLError):
        await service.execute(Endpoint(HTTPMethod.GET, "/bad path"), UserProfileResponse)


async def test_body_without_encoder_propagates(make_service):
    service = make_service(_respond(200), encoder=False)
    with pytest.raises(RequestBuildingFailedError):
        await service.execute(Endpoint(HTTPMethod.POST, "/x"), UserProfileResponse, {"a": 1})


# ─── Logging ───────────────────────────────────────────────────

async def test_authorization_header_is_redacted_in_logs(make_service, caplog):
    service = make_service(_respond(200, json=PROFILE_BODY))
    endpoint = Endpoint(HTTPMethod.GET, "/v1/auth/me", headers={"Authorization": "Bearer s3cret"})
    with caplog.at_level(logging.DEBUG, logger="travelnet"):
        await service.execute(endpoint, UserProfileResponse)
    assert "s3cret" not in caplog.text
    assert "<redacted>" in caplog.text
