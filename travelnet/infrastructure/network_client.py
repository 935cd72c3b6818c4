"""Intercepting Client — adapt -> send -> evaluate, with at most one retry per call.

Invariants:
    - Without an interceptor this is a plain pass-through to the transport
    - RETRY re-runs the ORIGINAL, unadapted request, so adapt() picks up the fresh token
    - The retried call runs with allow_retry=False: its outcome (even another 401)
      is returned as-is, so the retry depth is exactly one
    - DO_NOT_RETRY_WITH_ERROR raises the refresh error; DO_NOT_RETRY and PROCEED
      return the response unchanged
    - Transport exceptions propagate untouched (the network service classifies them)
"""

import logging

from travelnet.core.http_types import PreparedRequest, TransportResponse
from travelnet.core.repository_protocols import Transport
from travelnet.infrastructure.auth_interceptor import AuthInterceptor, RetryDecision

logger = logging.getLogger(__name__)


class InterceptingClient:

    def __init__(self, transport: Transport, interceptor: AuthInterceptor | None = None):
        self.transport = transport
        self.interceptor = interceptor

    async def send(
        self, request: PreparedRequest, *, allow_retry: bool = True,
    ) -> TransportResponse:
        if self.interceptor is None:
            return await self.transport.send(request)

        adapted = self.interceptor.adapt(request)
        response = await self.transport.send(adapted)
        if not allow_retry:
            return response

        result = await self.interceptor.should_retry(adapted, response)
        if result.decision is RetryDecision.RETRY:
            logger.info(
                "Retrying request after token refresh",
                extra={"method": request.method.value, "url": request.url, "attempt": 2},
            )
            return await self.send(request, allow_retry=False)
        if result.decision is RetryDecision.DO_NOT_RETRY_WITH_ERROR:
            raise result.error
        return response
