"""Client Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - base_url always carries a scheme and a host and no query or fragment
      (validated once, at load)
    - get_settings() is cached (lru_cache) — single instance per process
    - The per-attempt request timeout is NOT configurable (fixed 30s, core/http_types.py)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults target the local backend; production overrides TRAVELNET_BASE_URL
"""

from functools import lru_cache
from urllib.parse import urlsplit

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TRAVELNET_", env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Backend
    base_url: str = "http://localhost:3000"
    app_version: str = "1.0"

    @field_validator("base_url")
    @classmethod
    def require_scheme_and_host(cls, v: str) -> str:
        parts = urlsplit(v)
        if not parts.scheme or not parts.hostname:
            raise ValueError(f"base_url needs a scheme and a host: {v!r}")
        if parts.query or parts.fragment:
            raise ValueError(f"base_url must not carry a query or fragment: {v!r}")
        return v

    # Auth endpoints (also excluded from refresh-on-401)
    login_path: str = "/v1/auth/login"
    refresh_path: str = "/v1/auth/refresh"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
