"""Network Service — endpoint + expected type -> decoded value or a classified error.

Invariants:
    - Single attempt at this layer; the one permitted retry belongs to the client below
    - 2xx: a present, non-empty Content-Type must mention "json" (a missing one is
      logged and tolerated); an empty body -> EmptyResponseError; then decode with
      snake -> camel key conversion
    - 4xx/5xx -> ServerError(status, parsed message or "Client error"/"Server error")
    - Any other status, or no usable response object -> TransportError(bad_server_response)
    - NetworkingError subclasses raised below (URL, request building, refresh) propagate
      untouched; raw httpx failures are classified here and nowhere else
    - Callers only ever see NetworkingError subclasses

Design Decisions:
    - Classification is one isinstance ladder from most to least specific, catch-all
      last (ADR: single classification point)
    - Error bodies parsed in both backend shapes ({message} and {errors: [{detail}]})
"""

import logging
from typing import TypeVar

import httpx
from pydantic import ValidationError

from travelnet.core.endpoints import Endpoint
from travelnet.core.errors import (
    EmptyResponseError,
    ErrorContext,
    InvalidContentTypeError,
    NetworkingError,
    NoConnectionError,
    RequestTimeoutError,
    ServerError,
    TransportError,
    TransportFailure,
    UnknownNetworkingError,
)
from travelnet.core.http_types import PreparedRequest, TransportResponse
from travelnet.core.repository_protocols import NetworkClient, RequestBuilder
from travelnet.infrastructure.observability import redact_headers
from travelnet.infrastructure.response_decoder import JSONResponseDecoder
from travelnet.schemas.auth import ErrorListResponse, ErrorResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HTTPNetworkService:
    """Executes endpoints through a network client and validates HTTP semantics."""

    def __init__(
        self,
        client: NetworkClient,
        request_builder: RequestBuilder,
        decoder: JSONResponseDecoder | None = None,
    ):
        self.client = client
        self.request_builder = request_builder
        self.decoder = decoder or JSONResponseDecoder()

    async def execute(
        self, endpoint: Endpoint, response_type: type[T], body: object | None = None,
    ) -> T:
        request: PreparedRequest | None = None
        try:
            request = self.request_builder.build(endpoint, body)
            self._log_request(request, endpoint)
            response = await self.client.send(request)
            return self._handle_response(request, response, response_type)
        except NetworkingError as e:
            self._log_failure(e, endpoint)
            raise
        except Exception as e:
            error = classify_exception(e, _context(request))
            self._log_failure(error, endpoint)
            raise error from e

    # ─── Response validation ─────────────────────────────────────

    def _handle_response(
        self, request: PreparedRequest, response: object, response_type: type[T],
    ) -> T:
        if not isinstance(response, TransportResponse):
            raise TransportError(TransportFailure.BAD_SERVER_RESPONSE, context=_context(request))

        status = response.status_code
        context = _context(request, status)

        if 200 <= status <= 299:
            content_type = response.header("Content-Type")
            if not content_type:
                logger.warning(
                    "Response has no Content-Type, decoding anyway",
                    extra={"url": request.url, "status_code": status},
                )
            elif "json" not in content_type.lower():
                raise InvalidContentTypeError(content_type, context=context)
            if not response.content:
                raise EmptyResponseError(context=context)
            result = self.decoder.decode(response.content, response_type)
            logger.debug(
                "Request succeeded",
                extra={"method": request.method.value, "url": request.url, "status_code": status},
            )
            return result

        if 400 <= status <= 599:
            default = "Client error" if status < 500 else "Server error"
            message = self._server_message(response.content) or default
            raise ServerError(status, message, context=context)

        raise TransportError(TransportFailure.BAD_SERVER_RESPONSE, context=context)

    def _server_message(self, content: bytes) -> str | None:
        """Best-effort message from a structured error body."""
        if not content:
            return None
        payload = self.decoder.decode_raw(content)
        if not isinstance(payload, dict):
            return None
        try:
            return ErrorResponse.model_validate(payload).message
        except ValidationError:
            pass
        try:
            first = ErrorListResponse.model_validate(payload).errors[0]
        except ValidationError:
            return None
        return first.detail or first.title

    # ─── Logging ─────────────────────────────────────────────────

    def _log_request(self, request: PreparedRequest, endpoint: Endpoint) -> None:
        logger.info(
            f"{request.method.value} {request.url}",
            extra={
                "method": request.method.value,
                "url": request.url,
                "endpoint": endpoint.name,
                "body_bytes": len(request.body) if request.body else 0,
            },
        )
        logger.debug(f"Request headers: {redact_headers(request.headers)}")

    def _log_failure(self, error: NetworkingError, endpoint: Endpoint) -> None:
        logger.warning(
            f"Request failed: {error.message}",
            extra={
                "endpoint": endpoint.name,
                "error_code": error.code,
                "error": error.to_dict()["error"],
            },
        )


def _context(request: PreparedRequest | None, status_code: int | None = None) -> ErrorContext:
    if request is None:
        return ErrorContext(status_code=status_code)
    return ErrorContext(method=request.method.value, url=request.url, status_code=status_code)


def classify_exception(e: Exception, context: ErrorContext | None = None) -> NetworkingError:
    """Map a raw failure onto the error taxonomy."""
    if isinstance(e, NetworkingError):
        return e
    if isinstance(e, httpx.TimeoutException):
        return RequestTimeoutError(e, context=context)
    if isinstance(e, httpx.ConnectError):
        return NoConnectionError(e, context=context)
    if isinstance(e, httpx.NetworkError):
        return TransportError(TransportFailure.NETWORK, e, context=context)
    if isinstance(e, httpx.ProtocolError):
        return TransportError(TransportFailure.PROTOCOL, e, context=context)
    if isinstance(e, httpx.TransportError):
        return TransportError(TransportFailure.OTHER, e, context=context)
    logger.error(f"Unclassified networking failure: {e!r}", exc_info=e)
    return UnknownNetworkingError(e, context=context)
