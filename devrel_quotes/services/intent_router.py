"""Routing of Dialogflow intents to their handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Mapping

from devrel_quotes.core.intents import IntentType
from devrel_quotes.core.models import CapabilityFlags

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from . import ServiceContainer


@dataclass(slots=True)
class IntentRequest:
    """What a handler needs from the webhook envelope."""

    intent: IntentType
    language_code: str = "en"
    capabilities: CapabilityFlags = CapabilityFlags()


@dataclass(slots=True)
class IntentResponse:
    """Handler output; ``result`` is sent back verbatim as the webhook body."""

    intent: IntentType
    result: dict[str, Any]


IntentHandler = Callable[[IntentRequest, "ServiceContainer"], Awaitable[IntentResponse]]


class IntentHandlerNotFoundError(LookupError):
    """Raised when no handler is registered for the requested intent."""


class IntentRouter:
    """Map each supported intent to one async handler."""

    def __init__(self, handlers: Mapping[IntentType, IntentHandler] | None = None) -> None:
        self._handlers: dict[IntentType, IntentHandler] = dict(handlers or {})

    def register(self, intent: IntentType, handler: IntentHandler) -> None:
        self._handlers[intent] = handler

    def handler_for(self, intent: IntentType) -> IntentHandler:
        try:
            return self._handlers[intent]
        except KeyError as exc:
            raise IntentHandlerNotFoundError(
                f"No handler registered for intent {intent.value}"
            ) from exc

    async def dispatch(
        self, request: IntentRequest, services: "ServiceContainer"
    ) -> IntentResponse:
        """Run the handler for ``request.intent`` against ``services``."""
        return await self.handler_for(request.intent)(request, services)


__all__ = [
    "IntentRouter",
    "IntentHandlerNotFoundError",
    "IntentHandler",
    "IntentRequest",
    "IntentResponse",
]
