"""HTTP Value Types — the transport-ready request and the raw transport response.

Invariants:
    - PreparedRequest is immutable; every change (e.g. token injection) yields a copy,
      so the original request can always be replayed unmodified
    - timeout_seconds is fixed at 30 per attempt
    - Header lookups are case-insensitive
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace

from travelnet.core.domain_types import HTTPMethod

REQUEST_TIMEOUT_SECONDS = 30.0


def get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Case-insensitive header lookup."""
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


@dataclass(frozen=True)
class PreparedRequest:
    url: str
    method: HTTPMethod
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None
    timeout_seconds: float = REQUEST_TIMEOUT_SECONDS

    def header(self, name: str) -> str | None:
        return get_header(self.headers, name)

    def with_header(self, name: str, value: str) -> "PreparedRequest":
        headers = {k: v for k, v in self.headers.items() if k.lower() != name.lower()}
        headers[name] = value
        return replace(self, headers=headers)


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""

    def header(self, name: str) -> str | None:
        return get_header(self.headers, name)
