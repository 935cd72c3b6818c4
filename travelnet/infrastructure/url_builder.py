"""URL Builder — composes base URL + endpoint descriptor into an absolute URL.

Invariants:
    - The base URL is validated once, at construction: it must parse, carry a
      scheme and a host, and carry no query or fragment, else InvalidURLError
    - Path is always base_path + endpoint.path, byte for byte (no slash normalization)
    - Query items keep their order; "[", "]" and "," stay literal
    - Unescaped whitespace/control/unsafe characters in the composed path, or a result
      httpx cannot parse, fail closed with InvalidURLError

Design Decisions:
    - urllib.parse for splitting (keeps an empty base path empty; httpx would turn it
      into "/"), httpx.URL as the final parser so what we hand the transport is what
      httpx will send
"""

import logging
import re
from urllib.parse import quote, urlsplit, urlunsplit

import httpx

from travelnet.core.endpoints import Endpoint
from travelnet.core.errors import InvalidURLError
from travelnet.core.query_encoding import QueryItem

logger = logging.getLogger(__name__)

_UNSAFE_PATH_CHARS = re.compile(r'[\s<>"{}|\\^`\x00-\x1f\x7f]')
_QUERY_SAFE = "[],:/@!$'()*;"


def encode_query(items: tuple[QueryItem, ...] | list[QueryItem]) -> str:
    return "&".join(
        f"{quote(name, safe=_QUERY_SAFE)}={quote(value, safe=_QUERY_SAFE)}"
        for name, value in items
    )


class URLBuilder:
    """Builds absolute URLs against one validated base URL."""

    def __init__(self, base_url: str):
        try:
            parts = urlsplit(base_url)
            port = parts.port
        except ValueError as e:
            raise InvalidURLError("Error with base URL", cause=e) from e
        if not parts.scheme:
            raise InvalidURLError("Missing URL scheme")
        if not parts.hostname:
            raise InvalidURLError("Missing URL host")
        if parts.query or parts.fragment:
            raise InvalidURLError(f"Base URL must not carry a query or fragment: {base_url!r}")
        self.scheme = parts.scheme
        self.netloc = parts.netloc
        self.host = parts.hostname
        self.port = port
        self.base_path = parts.path

    def build(self, endpoint: Endpoint) -> httpx.URL:
        path = self.base_path + endpoint.path
        if _UNSAFE_PATH_CHARS.search(path):
            raise InvalidURLError(f"Unescaped characters in path {path!r}")
        query = encode_query(endpoint.query_items) if endpoint.query_items else ""
        raw = urlunsplit((self.scheme, self.netloc, path, query, ""))
        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as e:
            raise InvalidURLError(f"Cannot parse {raw!r}", cause=e) from e
        logger.debug("Built URL", extra={"url": str(url), "endpoint": endpoint.name})
        return url
