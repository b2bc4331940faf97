"""Shared fixtures for dashboard tests."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from macro_dashboard.config import Settings
from macro_dashboard.data import FredFetcher


@pytest.fixture
def settings() -> Settings:
    return Settings(
        fred_api_key="test-key",
        fred_base_url="https://fred.test/fred",
        request_timeout=1.0,
    )


@pytest.fixture
def make_fetcher(settings: Settings) -> Callable[..., FredFetcher]:
    """Build a FredFetcher whose HTTP traffic goes to ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> FredFetcher:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        return FredFetcher(settings, client=client)

    return _make
