"""Httpx Transport — the "send bytes, get bytes + status" boundary.

Invariants:
    - One attempt per send(); no retries, no redirects followed on its own
    - Applies the request's own timeout (30s) to every attempt
    - httpx exceptions propagate unchanged: classification belongs to the network service
    - aclose() releases the client only when this transport created it

Design Decisions:
    - Shared httpx.AsyncClient: connection pooling across calls
    - Client injectable so tests can plug httpx.MockTransport / httpx.ASGITransport
      underneath without touching the layers above
"""

import logging

import httpx

from travelnet.core.http_types import PreparedRequest, TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Transport implementation over httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient | None = None):
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(follow_redirects=False)

    async def send(self, request: PreparedRequest) -> TransportResponse:
        outgoing = self.client.build_request(
            request.method.value,
            request.url,
            headers=dict(request.headers),
            content=request.body,
            timeout=httpx.Timeout(request.timeout_seconds),
        )
        response = await self.client.send(outgoing)
        return TransportResponse(
            status_code=response.status_code,
            headers=response.headers,
            content=response.content,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()
