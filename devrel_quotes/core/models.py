"""Core data transfer objects shared across layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Any, List, Mapping

from pydantic import BaseModel, BeforeValidator, Field

from devrel_quotes.core.config import Settings
from devrel_quotes.core.exceptions import InvalidFulfillmentRequestError
from devrel_quotes.core.intents import SCREEN_OUTPUT_CAPABILITY


@dataclass(frozen=True, slots=True)
class FulfillmentConfig:
    """Immutable endpoint configuration handed to the quote pipeline."""

    content_url: str
    background_image_url: str
    fetch_timeout_seconds: float | None = 10.0
    default_language: str = "en"

    @classmethod
    def from_settings(cls, source: Settings) -> "FulfillmentConfig":
        """Snapshot the relevant values from application settings."""
        return cls(
            content_url=source.QUOTES_CONTENT_URL,
            background_image_url=source.QUOTES_BACKGROUND_IMAGE_URL,
            fetch_timeout_seconds=source.QUOTES_FETCH_TIMEOUT_SECONDS,
            default_language=source.QUOTES_DEFAULT_LANGUAGE,
        )


def _number_as_text(value: Any) -> Any:
    # JSON numbers are read as their text; booleans, objects and arrays still fail
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


Text = Annotated[str, BeforeValidator(_number_as_text)]


class AuthorQuotes(BaseModel):
    """One author entry of the remote quote document."""

    author: Text
    quotes: List[Text] = Field(..., min_length=1)


class QuoteSourceDocument(BaseModel):
    """The remote quote document: an info blurb plus quotes grouped by author."""

    info: Text
    data: List[AuthorQuotes] = Field(..., min_length=1)


@dataclass(frozen=True, slots=True)
class SelectedQuote:
    """A single quote picked for one response."""

    info: str
    author: str
    quote_text: str


@dataclass(frozen=True, slots=True)
class CapabilityFlags:
    """Client surface features that change the response shape."""

    screen_output: bool = False


@dataclass(slots=True)
class FulfillmentRequest:
    """Normalized webhook request with the fields the handlers consult."""

    intent_name: str
    language_code: str = "en"
    session: str = ""
    response_id: str = ""
    capabilities: list[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "FulfillmentRequest":
        """Build a request from a raw Dialogflow webhook body."""
        if not isinstance(data, Mapping):
            raise InvalidFulfillmentRequestError("request body must be a JSON object")
        query_result = data.get("queryResult")
        if not isinstance(query_result, Mapping):
            raise InvalidFulfillmentRequestError("missing or invalid queryResult")
        intent = query_result.get("intent")
        if not isinstance(intent, Mapping):
            raise InvalidFulfillmentRequestError("missing or invalid intent")
        intent_name = intent.get("displayName")
        if not isinstance(intent_name, str) or not intent_name:
            raise InvalidFulfillmentRequestError("missing or invalid intent display name")

        language_code = query_result.get("languageCode")
        if not isinstance(language_code, str) or not language_code:
            language_code = "en"
        session = data.get("session") if isinstance(data.get("session"), str) else ""
        response_id = data.get("responseId") if isinstance(data.get("responseId"), str) else ""

        return cls(
            intent_name=intent_name,
            language_code=language_code,
            session=session,
            response_id=response_id,
            capabilities=_surface_capabilities(data),
        )

    def has_capability(self, name: str) -> bool:
        """True when the client surface declared capability ``name``."""
        return name in self.capabilities

    def capability_flags(self) -> CapabilityFlags:
        """Collapse the declared capabilities into the flags we act on."""
        return CapabilityFlags(screen_output=self.has_capability(SCREEN_OUTPUT_CAPABILITY))


def _surface_capabilities(data: Mapping[str, Any]) -> list[str]:
    original = data.get("originalDetectIntentRequest")
    if not isinstance(original, Mapping):
        return []
    payload = original.get("payload")
    if not isinstance(payload, Mapping):
        return []
    surface = payload.get("surface")
    if not isinstance(surface, Mapping):
        return []
    entries = surface.get("capabilities")
    if not isinstance(entries, list):
        return []
    names: list[str] = []
    for entry in entries:
        if isinstance(entry, Mapping) and isinstance(entry.get("name"), str):
            names.append(entry["name"])
    return names


__all__ = [
    "FulfillmentConfig",
    "AuthorQuotes",
    "QuoteSourceDocument",
    "SelectedQuote",
    "CapabilityFlags",
    "FulfillmentRequest",
]
