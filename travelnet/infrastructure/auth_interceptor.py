"""Auth Interceptor — bearer injection and single-flight token refresh on 401.

Invariants:
    - adapt() never raises and never blocks: it injects `Bearer <token>` only when a
      token exists and the request carries no Authorization header of its own
    - Non-401 responses -> PROCEED
    - 401 on the login/refresh endpoints themselves -> DO_NOT_RETRY (no recursion)
    - At most one refresh call is in flight per interceptor; every concurrent 401
      awaits that same refresh and receives the same decision
    - The refresh call goes to the raw transport, bypassing this interceptor
    - The refresh body is {"refreshToken": <token>}, written here rather than by the
      snake_case payload encoder
    - Refresh failure clears both stored tokens BEFORE the decision is returned
    - State returns to IDLE when the refresh finishes, whatever its outcome

Design Decisions:
    - Single-flight asyncio.Task instead of a shared flag + fixed delay: waiters
      resume the moment the refresh completes and the check-then-act race between
      flag and token read disappears (ADR: await the in-flight refresh)
    - asyncio.shield around the shared task: a cancelled waiter never cancels the
      refresh other callers depend on
    - Retry bookkeeping (the one-shot flag) lives in InterceptingClient; this class
      only decides
"""

import asyncio
import json
import logging
from dataclasses import dataclass, replace
from enum import Enum
from urllib.parse import urlsplit

from travelnet.core.domain_types import OAuthTokens, RefreshState
from travelnet.core.endpoints import Endpoint
from travelnet.core.errors import ErrorContext, TransportError, TransportFailure
from travelnet.core.http_types import PreparedRequest, TransportResponse
from travelnet.core.repository_protocols import RequestBuilder, TokenStore, Transport
from travelnet.infrastructure.response_decoder import JSONResponseDecoder
from travelnet.schemas.auth import TokenPayload

logger = logging.getLogger(__name__)

UNAUTHORIZED = 401


class RetryDecision(str, Enum):
    PROCEED = "proceed"
    RETRY = "retry"
    DO_NOT_RETRY = "do_not_retry"
    DO_NOT_RETRY_WITH_ERROR = "do_not_retry_with_error"


@dataclass(frozen=True)
class RetryResult:
    decision: RetryDecision
    error: BaseException | None = None


PROCEED = RetryResult(RetryDecision.PROCEED)
RETRY = RetryResult(RetryDecision.RETRY)
DO_NOT_RETRY = RetryResult(RetryDecision.DO_NOT_RETRY)


class AuthInterceptor:
    """Adapts outgoing requests and decides what to do with their responses."""

    def __init__(
        self,
        token_store: TokenStore,
        transport: Transport,
        request_builder: RequestBuilder,
        refresh_endpoint: Endpoint,
        auth_paths: tuple[str, ...],
        decoder: JSONResponseDecoder | None = None,
    ):
        self.token_store = token_store
        self.transport = transport
        self.request_builder = request_builder
        self.refresh_endpoint = refresh_endpoint
        self.auth_paths = auth_paths
        self.decoder = decoder or JSONResponseDecoder()
        self._refresh_task: asyncio.Task[RetryResult] | None = None

    @property
    def state(self) -> RefreshState:
        return RefreshState.IDLE if self._refresh_task is None else RefreshState.REFRESHING

    def adapt(self, request: PreparedRequest) -> PreparedRequest:
        token = self.token_store.get_access_token()
        if not token or request.header("Authorization") is not None:
            return request
        return request.with_header("Authorization", f"Bearer {token}")

    async def should_retry(
        self, request: PreparedRequest, response: TransportResponse,
    ) -> RetryResult:
        if response.status_code != UNAUTHORIZED:
            return PROCEED

        if self._targets_auth_endpoint(request.url):
            logger.info(
                "401 from auth endpoint, not refreshing",
                extra={"url": request.url, "status_code": UNAUTHORIZED},
            )
            return DO_NOT_RETRY

        if self._refresh_task is None:
            self._refresh_task = asyncio.create_task(self._refresh())
        else:
            logger.debug(
                "Joining in-flight token refresh",
                extra={"refresh_state": self.state.value},
            )
        return await asyncio.shield(self._refresh_task)

    # ─── Refresh ─────────────────────────────────────────────────

    async def _refresh(self) -> RetryResult:
        logger.info(
            "Token refresh started",
            extra={"refresh_state": RefreshState.REFRESHING.value},
        )
        try:
            refresh_token = self.token_store.get_refresh_token()
            if not refresh_token:
                logger.warning("401 without refresh token, re-authentication required")
                return DO_NOT_RETRY
            tokens = await self._perform_refresh(refresh_token)
            self.token_store.save_tokens(tokens)
            logger.info("Token refresh succeeded")
            return RETRY
        except Exception as e:
            logger.warning(
                f"Token refresh failed: {e}",
                extra={"error_code": getattr(e, "code", type(e).__name__)},
            )
            self.token_store.clear_tokens()
            return RetryResult(RetryDecision.DO_NOT_RETRY_WITH_ERROR, e)
        finally:
            self._refresh_task = None

    async def _perform_refresh(self, refresh_token: str) -> OAuthTokens:
        request = replace(
            self.request_builder.build(self.refresh_endpoint),
            body=json.dumps({"refreshToken": refresh_token}).encode("utf-8"),
        )
        response = await self.transport.send(request)
        if response.status_code != 200:
            raise TransportError(
                TransportFailure.USER_AUTHENTICATION_REQUIRED,
                context=ErrorContext(
                    method=request.method.value,
                    url=request.url,
                    status_code=response.status_code,
                ),
            )
        payload = self.decoder.decode(response.content, TokenPayload)
        return OAuthTokens(payload.access_token, payload.refresh_token)

    def _targets_auth_endpoint(self, url: str) -> bool:
        path = urlsplit(url).path
        return any(path.endswith(auth_path) for auth_path in self.auth_paths)
