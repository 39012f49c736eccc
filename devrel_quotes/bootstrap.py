"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from fastapi import FastAPI

from devrel_quotes.adapters.quote_source import HttpQuoteFetcher
from devrel_quotes.apps.api.app import create_app
from devrel_quotes.core.config import Settings, settings
from devrel_quotes.core.models import FulfillmentConfig
from devrel_quotes.services import ServiceContainer, build_default_services


def build_default_service_container(source: Settings | None = None) -> ServiceContainer:
    """Return the default service container wired to production adapters."""

    fulfillment_config = FulfillmentConfig.from_settings(source or settings)
    return build_default_services(
        fulfillment_config=fulfillment_config,
        quote_fetcher=HttpQuoteFetcher(
            fulfillment_config.content_url,
            timeout=fulfillment_config.fetch_timeout_seconds,
        ),
    )


def create_default_app(source: Settings | None = None) -> FastAPI:
    """Create the webhook app served by ``main.py``."""

    return create_app(build_default_service_container(source))


__all__ = ["build_default_service_container", "create_default_app"]
