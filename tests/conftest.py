"""Shared pytest fixtures and Hypothesis configuration."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import httpx
import pytest
from hypothesis import Verbosity, settings

from smarty_street_client import SmartyStreetClient

settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def _clear_credentials_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer credentials in the environment out of the tests."""
    for name in ("SMARTY_AUTH_ID", "SMARTY_AUTH_TOKEN", "SMARTY_STREET_URL", "SMARTY_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_client() -> Iterator[Callable[[Handler], SmartyStreetClient]]:
    """Build clients whose requests are answered by a handler function."""
    clients: list[SmartyStreetClient] = []

    def factory(handler: Handler) -> SmartyStreetClient:
        client = SmartyStreetClient(
            base_url="https://api.test/street-address",
            auth_id="id-123",
            auth_token="token-456",
            transport=httpx.MockTransport(handler),
        )
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()
