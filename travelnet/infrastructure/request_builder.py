"""Request Builder — endpoint descriptor + optional body -> PreparedRequest.

Invariants:
    - URL errors propagate untouched (InvalidURLError from URLBuilder)
    - Headers: common defaults first, endpoint headers override on collision
    - A body without a configured payload encoder -> RequestBuildingFailedError
    - Encoded bodies get Content-Type: application/json unless the endpoint set one
    - Every request gets the fixed 30s timeout
"""

from travelnet.core.endpoints import Endpoint, common_headers, merge_headers, DEFAULT_APP_VERSION
from travelnet.core.errors import RequestBuildingFailedError
from travelnet.core.http_types import PreparedRequest, REQUEST_TIMEOUT_SECONDS, get_header
from travelnet.infrastructure.payload_encoder import JSONPayloadEncoder
from travelnet.infrastructure.url_builder import URLBuilder


class HTTPRequestBuilder:
    """Builds fresh transport-ready requests; never reuses one across calls."""

    def __init__(
        self,
        url_builder: URLBuilder,
        payload_encoder: JSONPayloadEncoder | None = None,
        app_version: str = DEFAULT_APP_VERSION,
    ):
        self.url_builder = url_builder
        self.payload_encoder = payload_encoder
        self.app_version = app_version

    def build(self, endpoint: Endpoint, body: object | None = None) -> PreparedRequest:
        url = self.url_builder.build(endpoint)
        headers = merge_headers(common_headers(self.app_version), endpoint.headers)

        payload = None
        if body is not None:
            if self.payload_encoder is None:
                raise RequestBuildingFailedError(
                    "Payload encoder is required when body is present",
                )
            payload = self.payload_encoder.encode(body)
            if get_header(headers, "Content-Type") is None:
                headers["Content-Type"] = "application/json"

        return PreparedRequest(
            url=str(url),
            method=endpoint.method,
            headers=headers,
            body=payload,
            timeout_seconds=REQUEST_TIMEOUT_SECONDS,
        )
