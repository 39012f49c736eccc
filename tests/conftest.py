"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
Also load .env before setting defaults so local overrides are honored.
"""
from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable
from pathlib import Path

import httpx
import pytest
from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

os.environ.setdefault("QUOTES_CONTENT_URL", "https://quotes.test/quotes.json")
os.environ.setdefault("QUOTES_BACKGROUND_IMAGE_URL", "https://images.test/background.png")
os.environ.setdefault("QUOTES_LOG_LEVEL", "debug")

# pylint: disable=wrong-import-position,redefined-outer-name
from devrel_quotes.adapters.quote_source import HttpQuoteFetcher  # noqa: E402
from devrel_quotes.core.models import FulfillmentConfig  # noqa: E402
from devrel_quotes.services import ServiceContainer, build_default_services  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"
CONTENT_URL = "https://quotes.test/quotes.json"
BACKGROUND_IMAGE_URL = "https://images.test/background.png"


class FixedRandom:  # pylint: disable=too-few-public-methods
    """Random source replaying a fixed sequence of floats in [0, 1)."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self._values[self.calls % len(self._values)]
        self.calls += 1
        return value


@pytest.fixture
def make_random() -> Callable[..., FixedRandom]:
    """Return a factory for deterministic random sources."""

    def _make(*values: float) -> FixedRandom:
        return FixedRandom(values or (0.0,))

    return _make


@pytest.fixture
def read_fixture() -> Callable[[str], str]:
    """Return a reader for files under ``tests/fixtures``."""

    def _read(name: str) -> str:
        return (FIXTURES_DIR / name).read_text(encoding="utf-8")

    return _read


@pytest.fixture
def fulfillment_config() -> FulfillmentConfig:
    return FulfillmentConfig(
        content_url=CONTENT_URL,
        background_image_url=BACKGROUND_IMAGE_URL,
        fetch_timeout_seconds=5.0,
    )


@pytest.fixture
def make_fetcher() -> Callable[..., HttpQuoteFetcher]:
    """Build an HTTP fetcher whose transport serves ``body`` or raises ``error``."""

    def _make(
        body: str | bytes | None = None,
        *,
        status_code: int = 200,
        error: Exception | None = None,
    ) -> HttpQuoteFetcher:
        def handler(request: httpx.Request) -> httpx.Response:
            if error is not None:
                raise error
            content = body.encode("utf-8") if isinstance(body, str) else (body or b"")
            return httpx.Response(status_code, content=content, request=request)

        return HttpQuoteFetcher(CONTENT_URL, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def make_services(
    fulfillment_config: FulfillmentConfig, make_fetcher: Callable[..., HttpQuoteFetcher]
) -> Callable[..., ServiceContainer]:
    """Build a default service container around a mocked quote endpoint."""

    def _make(
        body: str | bytes | None = None,
        *,
        status_code: int = 200,
        error: Exception | None = None,
        values: Iterable[float] = (0.0, 0.0),
    ) -> ServiceContainer:
        return build_default_services(
            fulfillment_config=fulfillment_config,
            quote_fetcher=make_fetcher(body, status_code=status_code, error=error),
            random_source=FixedRandom(values),
        )

    return _make
