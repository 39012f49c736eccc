"""Localized response templates for the quote fulfillment.

Templates live in ``messages_data.json`` as ``{key: {language: template}}``.
Lookups resolve a language code such as ``en-US`` by trying the exact code,
then the base language, then the default language.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from devrel_quotes.core.logging import get_logger

logger = get_logger(__name__)

# Message key constants
PROBLEM = "problem"
LONG_ATTRIBUTION = "long_attribution"
SHORT_ATTRIBUTION = "short_attribution"
ACCESSIBILITY_TEXT = "accessibility_text"

DEFAULT_LANGUAGE = "en"

_MESSAGES_PATH = Path(__file__).parent / "messages_data.json"
with open(_MESSAGES_PATH, encoding="utf-8") as f:
    _MESSAGES: dict[str, dict[str, str]] = json.load(f)


def _candidate_languages(language: str | None, default_language: str) -> list[str]:
    candidates: list[str] = []
    if language:
        normalized = language.strip().replace("_", "-").lower()
        if normalized:
            candidates.append(normalized)
            base = normalized.split("-", 1)[0]
            if base != normalized:
                candidates.append(base)
    for fallback in (default_language.lower(), DEFAULT_LANGUAGE):
        if fallback not in candidates:
            candidates.append(fallback)
    return candidates


def get_message(
    message_key: str, language: str | None = None, *, default_language: str = DEFAULT_LANGUAGE
) -> str:
    """Return the raw template for ``message_key`` in the best matching language."""
    if message_key not in _MESSAGES:
        raise KeyError(f"Unknown message key: {message_key}")
    translations = {lang.lower(): text for lang, text in _MESSAGES[message_key].items()}
    for candidate in _candidate_languages(language, default_language):
        if candidate in translations:
            return translations[candidate]
    # Only reachable if a key lost its English entry
    logger.warning("No translation for message '%s' in '%s'", message_key, language)
    return next(iter(translations.values()))


def format_message(
    message_key: str,
    language: str | None = None,
    *,
    default_language: str = DEFAULT_LANGUAGE,
    **values: Any,
) -> str:
    """Return the template for ``message_key`` with ``values`` substituted."""
    return get_message(message_key, language, default_language=default_language).format(**values)


__all__ = [
    "PROBLEM",
    "LONG_ATTRIBUTION",
    "SHORT_ATTRIBUTION",
    "ACCESSIBILITY_TEXT",
    "DEFAULT_LANGUAGE",
    "get_message",
    "format_message",
]
