"""Parse the quote document and pick one author and one of their quotes."""

from __future__ import annotations

from typing import Sequence, TypeVar

from pydantic import ValidationError

from devrel_quotes.core.exceptions import QuoteContentError
from devrel_quotes.core.models import QuoteSourceDocument, SelectedQuote
from devrel_quotes.core.ports import RandomSource

T = TypeVar("T")


def parse_quote_document(raw: bytes | str) -> QuoteSourceDocument:
    """Validate ``raw`` JSON into a document with at least one quoted author."""
    try:
        return QuoteSourceDocument.model_validate_json(raw)
    except ValidationError as exc:
        raise QuoteContentError(f"quote document is malformed: {exc}") from exc


def pick_index(length: int, rng: RandomSource) -> int:
    """Return ``floor(rng.random() * length)`` clamped to a valid index."""
    if length <= 0:
        raise QuoteContentError("cannot pick from an empty collection")
    return min(int(rng.random() * length), length - 1)


def _pick(items: Sequence[T], rng: RandomSource) -> T:
    return items[pick_index(len(items), rng)]


def select_quote(document: QuoteSourceDocument, rng: RandomSource) -> SelectedQuote:
    """Pick a uniformly random author, then a uniformly random quote of theirs."""
    author = _pick(document.data, rng)
    quote_text = _pick(author.quotes, rng)
    return SelectedQuote(info=document.info, author=author.author, quote_text=quote_text)


def select_from_raw(raw: bytes | str, rng: RandomSource) -> SelectedQuote:
    """Parse ``raw`` and select a quote in one step."""
    return select_quote(parse_quote_document(raw), rng)


__all__ = ["parse_quote_document", "pick_index", "select_quote", "select_from_raw"]
