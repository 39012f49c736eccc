"""Top-level FastAPI entrypoint (``uvicorn main:app``)."""

from devrel_quotes.bootstrap import create_default_app

app = create_default_app()

__all__ = ["app"]
