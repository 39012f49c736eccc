"""Router namespace exports for FastAPI include hooks."""

from . import fulfillment, health

__all__ = ["fulfillment", "health"]
