"""Shared FastAPI dependencies for service access."""

from fastapi import HTTPException, Request, status

from devrel_quotes.services import ServiceContainer
from devrel_quotes.services.intent_router import IntentRouter


def get_service_container(request: Request) -> ServiceContainer:
    """Return the container the app was created with."""
    services = getattr(request.app.state, "services", None)
    if not isinstance(services, ServiceContainer):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Service container not configured",
        )
    return services


def require_intent_router(container: ServiceContainer) -> IntentRouter:
    """Return the container's intent router or fail the request."""
    if container.intent_router is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Intent router is unavailable",
        )
    return container.intent_router


__all__ = ["get_service_container", "require_intent_router"]
