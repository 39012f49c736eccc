"""Welcome intent: fetch the quote document and answer with one random quote."""

from __future__ import annotations

from typing import TYPE_CHECKING

from devrel_quotes.core.exceptions import QuoteSourceError
from devrel_quotes.core.logging import get_logger
from devrel_quotes.core.models import FulfillmentConfig, SelectedQuote
from devrel_quotes.core.ports import QuoteFetcherPort, RandomSource
from devrel_quotes.services.intent_router import IntentRequest, IntentResponse
from devrel_quotes.services.quote_selection import select_from_raw
from devrel_quotes.services.response_builder import build_problem_response, build_quote_response

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from devrel_quotes.services import ServiceContainer

logger = get_logger(__name__)


def _require_config(services: "ServiceContainer") -> FulfillmentConfig:
    config = services.fulfillment_config
    if config is None:
        raise RuntimeError("FulfillmentConfig has not been configured.")
    return config


def _require_fetcher(services: "ServiceContainer") -> QuoteFetcherPort:
    fetcher = services.quote_fetcher
    if fetcher is None:
        raise RuntimeError("QuoteFetcherPort has not been configured.")
    return fetcher


def _require_random(services: "ServiceContainer") -> RandomSource:
    rng = services.random_source
    if rng is None:
        raise RuntimeError("RandomSource has not been configured.")
    return rng


async def fetch_random_quote(fetcher: QuoteFetcherPort, rng: RandomSource) -> SelectedQuote:
    """Run the fetch-parse-select pipeline once."""
    raw = await fetcher.fetch()
    return select_from_raw(raw, rng)


async def handle_default_welcome(
    request: IntentRequest, services: "ServiceContainer"
) -> IntentResponse:
    """Reply with a random quote, or the apology message if none could be produced."""
    config = _require_config(services)
    fetcher = _require_fetcher(services)
    rng = _require_random(services)

    try:
        quote = await fetch_random_quote(fetcher, rng)
    except QuoteSourceError:
        logger.error(
            "Exception while fetching and parsing data from %s:",
            fetcher.source_url,
            exc_info=True,
        )
        result = build_problem_response(
            request.language_code, default_language=config.default_language
        )
        return IntentResponse(intent=request.intent, result=result)

    logger.info("Selected quote by %s", quote.author)
    result = build_quote_response(quote, request.capabilities, config, request.language_code)
    return IntentResponse(intent=request.intent, result=result)


__all__ = ["fetch_random_quote", "handle_default_welcome"]
