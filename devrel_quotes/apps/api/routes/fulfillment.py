"""Dialogflow fulfillment webhook route."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from devrel_quotes.apps.api.dependencies import get_service_container, require_intent_router
from devrel_quotes.core.exceptions import InvalidFulfillmentRequestError
from devrel_quotes.core.intents import IntentType
from devrel_quotes.core.logging import get_logger, session_id_context
from devrel_quotes.core.models import FulfillmentRequest
from devrel_quotes.services import ServiceContainer
from devrel_quotes.services.intent_router import IntentHandlerNotFoundError, IntentRequest

router = APIRouter()
logger = get_logger(__name__)


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def _resolve_intent(name: str) -> IntentType:
    try:
        return IntentType(name)
    except ValueError as exc:
        raise InvalidFulfillmentRequestError(f"unsupported intent: {name}") from exc


@router.post("/fulfillment")
async def handle_fulfillment(
    request: Request, services: ServiceContainer = Depends(get_service_container)
):
    """Answer a Dialogflow webhook call with an Actions on Google payload."""
    try:
        payload: Any = await request.json()
    except ValueError:
        # JSONDecodeError and UnicodeDecodeError (body not UTF-8) both land here
        logger.error("Invalid JSON received", exc_info=True)
        return _bad_request("Invalid JSON")

    try:
        fulfillment_request = FulfillmentRequest.from_payload(payload)
        intent = _resolve_intent(fulfillment_request.intent_name)
    except InvalidFulfillmentRequestError as exc:
        logger.warning("Rejected fulfillment request: %s", exc)
        return _bad_request(str(exc))

    intent_router = require_intent_router(services)
    intent_request = IntentRequest(
        intent=intent,
        language_code=fulfillment_request.language_code,
        capabilities=fulfillment_request.capability_flags(),
    )
    with session_id_context(fulfillment_request.session):
        logger.info(
            "Dispatching intent '%s' (response_id=%s, language=%s, screen=%s)",
            intent.value,
            fulfillment_request.response_id or "-",
            intent_request.language_code,
            intent_request.capabilities.screen_output,
        )
        try:
            response = await intent_router.dispatch(intent_request, services)
        except IntentHandlerNotFoundError as exc:
            logger.warning("No handler for intent '%s'", intent.value)
            return _bad_request(str(exc))
    return JSONResponse(content=response.result)


__all__ = ["router"]
