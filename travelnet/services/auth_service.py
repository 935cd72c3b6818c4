"""Auth Service — login, registration and logout against the auth endpoints.

Invariants:
    - Login and register run on the public (non-intercepting) network service: a 401
      from them is a bad credential, never a reason to refresh
    - A successful login stores its tokens before returning the session
    - logout() only clears local credentials and never raises
    - Bodies are snake_case on the wire ({email, password}, {..., first_name, ...})
"""

import logging

from travelnet.core.domain_types import AuthSession, OAuthTokens, User
from travelnet.core.repository_protocols import NetworkService, TokenStore
from travelnet.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from travelnet.services.auth_endpoints import AuthEndpoint
from travelnet.services.user_mapper import user_to_domain

logger = logging.getLogger(__name__)


class AuthService:

    def __init__(
        self,
        network_service: NetworkService,
        token_store: TokenStore,
        endpoints: AuthEndpoint | None = None,
    ):
        self.network_service = network_service
        self.token_store = token_store
        self.endpoints = endpoints or AuthEndpoint()

    async def login(self, email: str, password: str) -> AuthSession:
        response = await self.network_service.execute(
            self.endpoints.login(),
            LoginResponse,
            LoginRequest(email=email, password=password),
        )
        tokens = OAuthTokens(response.data.access_token, response.data.refresh_token)
        self.token_store.save_tokens(tokens)
        user = user_to_domain(response.data.user)
        logger.info("Logged in", extra={"endpoint": "auth.login"})
        return AuthSession(user=user, tokens=tokens)

    async def register(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        phone: str,
    ) -> User:
        response = await self.network_service.execute(
            self.endpoints.register(),
            RegisterResponse,
            RegisterRequest(
                email=email,
                password=password,
                first_name=first_name,
                last_name=last_name,
                phone=phone,
            ),
        )
        return user_to_domain(response.data.user)

    def logout(self) -> None:
        self.token_store.clear_tokens()
        logger.info("Logged out")
