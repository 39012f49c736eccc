"""Infrastructure adapter exports."""

from .quote_source import HttpQuoteFetcher

__all__ = ["HttpQuoteFetcher"]
