"""Auth Endpoints — login, refresh, register and current-user endpoint descriptors.

Invariants:
    - Login and refresh paths come from settings; the interceptor excludes the same
      paths from refresh-on-401
    - POST endpoints declare Content-Type: application/json
"""

from travelnet.core.domain_types import HTTPMethod
from travelnet.core.endpoints import Endpoint

JSON_CONTENT = {"Content-Type": "application/json"}

DEFAULT_LOGIN_PATH = "/v1/auth/login"
DEFAULT_REFRESH_PATH = "/v1/auth/refresh"
REGISTER_PATH = "/v1/auth/register"
ME_PATH = "/v1/auth/me"


class AuthEndpoint:

    def __init__(
        self,
        login_path: str = DEFAULT_LOGIN_PATH,
        refresh_path: str = DEFAULT_REFRESH_PATH,
    ):
        self.login_path = login_path
        self.refresh_path = refresh_path

    @property
    def auth_paths(self) -> tuple[str, ...]:
        """Paths whose 401s must never trigger a refresh."""
        return (self.login_path, self.refresh_path)

    def login(self) -> Endpoint:
        return Endpoint(HTTPMethod.POST, self.login_path, headers=JSON_CONTENT, name="auth.login")

    def refresh(self) -> Endpoint:
        return Endpoint(
            HTTPMethod.POST, self.refresh_path, headers=JSON_CONTENT, name="auth.refresh",
        )

    def register(self) -> Endpoint:
        return Endpoint(HTTPMethod.POST, REGISTER_PATH, headers=JSON_CONTENT, name="auth.register")

    def me(self) -> Endpoint:
        return Endpoint(HTTPMethod.GET, ME_PATH, name="auth.me")
