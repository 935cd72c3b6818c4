"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from infrastructure/ or services/ — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by the shell via dependency injection (see container.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
    - TokenStore is synchronous: implementations are in-process key-value surfaces;
      transport, client and service contracts are async because they do network IO
"""

from typing import Protocol, TypeVar

from travelnet.core.domain_types import (
    OAuthTokens,
    POIBoundingBoxParametersDomainModel,
    POIDomainModel,
    POIGetByNameParametersDomainModel,
    POIRadiusParametersDomainModel,
)
from travelnet.core.endpoints import Endpoint
from travelnet.core.http_types import PreparedRequest, TransportResponse

T = TypeVar("T")


class TokenStore(Protocol):
    """Holds at most one access token and one refresh token."""
    def get_access_token(self) -> str | None: ...
    def get_refresh_token(self) -> str | None: ...
    def save_tokens(self, tokens: OAuthTokens) -> None: ...
    def clear_tokens(self) -> None: ...


class Transport(Protocol):
    """Send one prepared request, get status + headers + bytes back."""
    async def send(self, request: PreparedRequest) -> TransportResponse: ...


class RequestBuilder(Protocol):
    def build(self, endpoint: Endpoint, body: object | None = None) -> PreparedRequest: ...


class NetworkClient(Protocol):
    """Transport, optionally wrapped by an interceptor."""
    async def send(self, request: PreparedRequest) -> TransportResponse: ...


class NetworkService(Protocol):
    async def execute(
        self, endpoint: Endpoint, response_type: type[T], body: object | None = None,
    ) -> T: ...


class POIRepository(Protocol):
    async def search_radius(
        self, params: POIRadiusParametersDomainModel,
    ) -> list[POIDomainModel]: ...
    async def search_bounding_box(
        self, params: POIBoundingBoxParametersDomainModel,
    ) -> list[POIDomainModel]: ...
    async def search_by_name(
        self, params: POIGetByNameParametersDomainModel,
    ) -> list[POIDomainModel]: ...
    async def get_by_id(self, poi_id: str) -> POIDomainModel: ...
