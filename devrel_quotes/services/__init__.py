"""Application service layer scaffolding for intent handling."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from devrel_quotes.core.models import FulfillmentConfig
from devrel_quotes.core.ports import QuoteFetcherPort, RandomSource

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .intent_router import IntentRouter


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to handlers."""

    fulfillment_config: Optional[FulfillmentConfig] = None
    quote_fetcher: Optional[QuoteFetcherPort] = None
    random_source: Optional[RandomSource] = None
    intent_router: Optional["IntentRouter"] = None


def build_default_services(
    *,
    fulfillment_config: Optional[FulfillmentConfig] = None,
    quote_fetcher: Optional[QuoteFetcherPort] = None,
    random_source: Optional[RandomSource] = None,
) -> ServiceContainer:
    """Return a service container with the default intent router wiring."""

    # pylint: disable=import-outside-toplevel
    from devrel_quotes.core.intents import IntentType

    from .intent_router import IntentRouter
    from .intents.welcome import handle_default_welcome

    intent_router = IntentRouter({IntentType.DEFAULT_WELCOME: handle_default_welcome})
    return ServiceContainer(
        fulfillment_config=fulfillment_config,
        quote_fetcher=quote_fetcher,
        random_source=random_source if random_source is not None else random.Random(),
        intent_router=intent_router,
    )


__all__ = ["ServiceContainer", "build_default_services"]
