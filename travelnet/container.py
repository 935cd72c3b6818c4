"""Client Container — wires one complete client stack and owns its lifecycle.

Invariants:
    - Exactly one transport, one token store and one auth interceptor per stack
    - Public calls (login, register) run on a client WITHOUT the interceptor;
      authenticated calls (profile, POIs) run on the intercepting client
    - The interceptor's refresh call uses the raw transport, never an intercepting client
    - aclose() releases the transport; lifespan() guarantees it on exit

Design Decisions:
    - Explicit constructor wiring over a DI framework: the graph is small and
      every edge is visible here (ADR: composition root)
    - Lifespan as async context manager, mirroring the server-side startup/shutdown
      pattern: logging set up once, resources released on the way out
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator

from travelnet.config import Settings, get_settings
from travelnet.core.repository_protocols import POIRepository, TokenStore, Transport
from travelnet.infrastructure.auth_interceptor import AuthInterceptor
from travelnet.infrastructure.network_client import InterceptingClient
from travelnet.infrastructure.network_service import HTTPNetworkService
from travelnet.infrastructure.observability import setup_logging
from travelnet.infrastructure.payload_encoder import JSONPayloadEncoder
from travelnet.infrastructure.request_builder import HTTPRequestBuilder
from travelnet.infrastructure.token_store import InMemoryTokenStore
from travelnet.infrastructure.transport import HttpxTransport
from travelnet.infrastructure.url_builder import URLBuilder
from travelnet.services.auth_endpoints import AuthEndpoint
from travelnet.services.auth_service import AuthService
from travelnet.services.poi_repository import NetworkPOIRepository
from travelnet.services.user_service import UserService

logger = logging.getLogger(__name__)


@dataclass
class ClientStack:
    settings: Settings
    token_store: TokenStore
    transport: Transport
    interceptor: AuthInterceptor
    public_service: HTTPNetworkService
    authenticated_service: HTTPNetworkService
    auth: AuthService
    users: UserService
    pois: POIRepository

    async def aclose(self) -> None:
        aclose = getattr(self.transport, "aclose", None)
        if aclose is not None:
            await aclose()
        logger.info("Client stack closed")


def build_client_stack(
    settings: Settings,
    token_store: TokenStore,
    transport: Transport | None = None,
) -> ClientStack:
    """Wire URL builder -> request builder -> transport -> interceptor -> services."""
    url_builder = URLBuilder(settings.base_url)
    request_builder = HTTPRequestBuilder(
        url_builder, JSONPayloadEncoder(), app_version=settings.app_version,
    )
    transport = transport or HttpxTransport()
    endpoints = AuthEndpoint(settings.login_path, settings.refresh_path)

    interceptor = AuthInterceptor(
        token_store=token_store,
        transport=transport,
        request_builder=request_builder,
        refresh_endpoint=endpoints.refresh(),
        auth_paths=endpoints.auth_paths,
    )
    public_service = HTTPNetworkService(InterceptingClient(transport), request_builder)
    authenticated_service = HTTPNetworkService(
        InterceptingClient(transport, interceptor), request_builder,
    )

    return ClientStack(
        settings=settings,
        token_store=token_store,
        transport=transport,
        interceptor=interceptor,
        public_service=public_service,
        authenticated_service=authenticated_service,
        auth=AuthService(public_service, token_store, endpoints),
        users=UserService(authenticated_service, endpoints),
        pois=NetworkPOIRepository(authenticated_service),
    )


@asynccontextmanager
async def lifespan(
    settings: Settings | None = None,
    token_store: TokenStore | None = None,
    transport: Transport | None = None,
) -> AsyncIterator[ClientStack]:
    """Startup/shutdown lifecycle of one client stack."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    stack = build_client_stack(settings, token_store or InMemoryTokenStore(), transport)
    logger.info("Client stack started", extra={"url": settings.base_url})
    try:
        yield stack
    finally:
        await stack.aclose()
