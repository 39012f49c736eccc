"""Assemble Actions on Google webhook payloads from a selected quote."""

from __future__ import annotations

from typing import Any

from devrel_quotes.core.models import CapabilityFlags, FulfillmentConfig, SelectedQuote
from devrel_quotes.services import messages


def simple_response(text_to_speech: str, display_text: str | None = None) -> dict[str, Any]:
    """Return a ``simpleResponse`` item; ``displayText`` is omitted when unset."""
    body: dict[str, Any] = {"textToSpeech": text_to_speech}
    if display_text is not None:
        body["displayText"] = display_text
    return {"simpleResponse": body}


def basic_card(title: str, formatted_text: str, image_url: str, accessibility_text: str) -> dict:
    """Return a ``basicCard`` item with a single image."""
    return {
        "basicCard": {
            "title": title,
            "formattedText": formatted_text,
            "image": {"url": image_url, "accessibilityText": accessibility_text},
        }
    }


def final_response(items: list[dict[str, Any]]) -> dict[str, Any]:
    """Wrap rich response items in an envelope that ends the conversation."""
    return {
        "payload": {
            "google": {
                "expectUserResponse": False,
                "richResponse": {"items": items},
            }
        }
    }


def build_quote_response(
    quote: SelectedQuote,
    capabilities: CapabilityFlags,
    config: FulfillmentConfig,
    language: str | None = None,
) -> dict[str, Any]:
    """Build the spoken summary, plus a card when the surface has a screen."""
    lang_opts = {"default_language": config.default_language}
    items = [
        simple_response(
            messages.format_message(
                messages.LONG_ATTRIBUTION,
                language,
                author=quote.author,
                quote=quote.quote_text,
                **lang_opts,
            ),
            display_text=quote.info,
        )
    ]
    if capabilities.screen_output:
        items.append(
            basic_card(
                title=messages.format_message(
                    messages.SHORT_ATTRIBUTION, language, author=quote.author, **lang_opts
                ),
                formatted_text=quote.quote_text,
                image_url=config.background_image_url,
                accessibility_text=messages.get_message(
                    messages.ACCESSIBILITY_TEXT, language, **lang_opts
                ),
            )
        )
    return final_response(items)


def build_problem_response(
    language: str | None = None, *, default_language: str = messages.DEFAULT_LANGUAGE
) -> dict[str, Any]:
    """Build the apology shown for any fetch or content failure."""
    text = messages.get_message(messages.PROBLEM, language, default_language=default_language)
    return final_response([simple_response(text)])


__all__ = [
    "simple_response",
    "basic_card",
    "final_response",
    "build_quote_response",
    "build_problem_response",
]
