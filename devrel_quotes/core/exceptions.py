"""Core exception types shared across layers."""


class QuoteSourceError(Exception):
    """Base class for recoverable failures while producing a quote."""


class QuoteFetchError(QuoteSourceError):
    """Raised when the quote document cannot be downloaded or read."""


class QuoteContentError(QuoteSourceError):
    """Raised when the quote document is malformed or missing required fields."""


class InvalidFulfillmentRequestError(ValueError):
    """Raised when an inbound webhook envelope cannot be interpreted."""


__all__ = [
    "QuoteSourceError",
    "QuoteFetchError",
    "QuoteContentError",
    "InvalidFulfillmentRequestError",
]
