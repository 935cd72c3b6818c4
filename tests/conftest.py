"""Root conftest — shared test configuration and transport fixtures.

Invariants:
    - Tests never read a developer's real TRAVELNET_* environment or .env
    - No test touches the network: httpx.MockTransport / httpx.ASGITransport only
"""

import os

import httpx
import pytest

# Ensure tests don't accidentally hit a real backend
os.environ["TRAVELNET_BASE_URL"] = "https://api.example.com"
os.environ.setdefault("TRAVELNET_LOG_FORMAT", "text")

from travelnet.config import Settings, get_settings  # noqa: E402
from travelnet.core.domain_types import OAuthTokens  # noqa: E402
from travelnet.infrastructure.token_store import InMemoryTokenStore  # noqa: E402
from travelnet.infrastructure.transport import HttpxTransport  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings(_env_file=None, base_url="https://api.example.com")


@pytest.fixture
def token_store():
    return InMemoryTokenStore()


@pytest.fixture
def signed_in_store():
    return InMemoryTokenStore(OAuthTokens("access-1", "refresh-1"))


@pytest.fixture
async def make_transport():
    """Factory: request handler -> HttpxTransport over httpx.MockTransport."""
    clients = []

    def _make(handler):
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return HttpxTransport(client)

    yield _make
    for client in clients:
        await client.aclose()
