"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Protocol


class QuoteFetcherPort(Protocol):
    """Port exposing retrieval of the raw quote document."""

    @property
    def source_url(self) -> str:
        """Return the URL the document is fetched from (used in logs)."""
        ...

    async def fetch(self) -> bytes:
        """Return the raw document body or raise ``QuoteFetchError``."""
        ...


class RandomSource(Protocol):
    """Uniform pseudo-random source; ``random.Random`` satisfies it."""

    def random(self) -> float:
        """Return a float in the half-open interval [0.0, 1.0)."""
        ...


__all__ = ["QuoteFetcherPort", "RandomSource"]
