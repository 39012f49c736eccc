"""HTTP adapter implementing the quote fetcher port."""

from __future__ import annotations

from typing import Optional

import httpx

from devrel_quotes.core.exceptions import QuoteFetchError
from devrel_quotes.core.logging import get_logger
from devrel_quotes.core.ports import QuoteFetcherPort

logger = get_logger(__name__)


class HttpQuoteFetcher(QuoteFetcherPort):
    """Download the quote document with a single GET per call.

    ``transport`` lets tests swap in ``httpx.MockTransport`` so no network
    traffic happens.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float | None = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport

    @property
    def source_url(self) -> str:
        return self._url

    @property
    def timeout(self) -> float | None:
        return self._timeout

    async def fetch(self) -> bytes:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(self._url)
                response.raise_for_status()
                body = response.content
        except httpx.HTTPError as exc:
            raise QuoteFetchError(f"failed to fetch quotes from {self._url}: {exc}") from exc
        logger.info("Fetched quote document from %s (%d bytes)", self._url, len(body))
        return body


__all__ = ["HttpQuoteFetcher"]
