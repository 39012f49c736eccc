"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from devrel_quotes.apps.api.middleware import CorrelationIdMiddleware
from devrel_quotes.core.logging import get_logger
from devrel_quotes.services import ServiceContainer

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown along with the configured content URL."""
    logger.info("Initializing devrel quotes fulfillment...")
    services = getattr(app.state, "services", None)
    if isinstance(services, ServiceContainer) and services.fulfillment_config is not None:
        logger.info("Quote content URL: %s", services.fulfillment_config.content_url)
    try:
        yield
    finally:
        logger.info("devrel quotes fulfillment shut down.")


def create_app(services: ServiceContainer | None = None) -> FastAPI:
    """Build the FastAPI application around ``services``."""
    if services is None:
        raise RuntimeError("Service container must be provided when creating the app.")
    app = FastAPI(title="DevRel Quotes Fulfillment", lifespan=lifespan)
    app.state.services = services
    app.add_middleware(CorrelationIdMiddleware)

    # Import lazily to avoid potential circular imports when routers grow.
    from .routes import fulfillment, health  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(fulfillment.router)
    return app


__all__ = ["create_app", "lifespan"]
