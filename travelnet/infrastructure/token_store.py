"""In-Memory Token Store — process-wide holder for the current credential pair.

Invariants:
    - Holds at most one access token and one refresh token
    - save_tokens overwrites both; a missing refresh token clears the stored one
    - clear_tokens removes both unconditionally and never raises
    - Reads and writes are serialized by a lock; last write wins

Design Decisions:
    - threading.Lock, not asyncio.Lock: the store is synchronous and may be shared
      with non-async code (e.g. a host app's own login flow)
    - Secure/persistent storage is the host's concern; it plugs in through the
      TokenStore protocol
"""

import logging
import threading

from travelnet.core.domain_types import OAuthTokens

logger = logging.getLogger(__name__)


class InMemoryTokenStore:

    def __init__(self, tokens: OAuthTokens | None = None):
        self._lock = threading.Lock()
        self._access_token: str | None = None
        self._refresh_token: str | None = None
        if tokens is not None:
            self.save_tokens(tokens)

    def get_access_token(self) -> str | None:
        with self._lock:
            return self._access_token

    def get_refresh_token(self) -> str | None:
        with self._lock:
            return self._refresh_token

    def save_tokens(self, tokens: OAuthTokens) -> None:
        with self._lock:
            self._access_token = tokens.access_token
            self._refresh_token = tokens.refresh_token
        logger.info("Tokens saved")

    def clear_tokens(self) -> None:
        with self._lock:
            self._access_token = None
            self._refresh_token = None
        logger.info("Tokens cleared")
