"""Intent handler implementations."""

from .welcome import handle_default_welcome

__all__ = ["handle_default_welcome"]
