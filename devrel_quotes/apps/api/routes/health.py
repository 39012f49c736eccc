"""Health and readiness routes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get("/")
def read_root() -> dict[str, str]:
    """Health/info endpoint with a short usage message."""
    return {"message": "DevRel Quotes fulfillment. POST webhook requests to /fulfillment."}


@router.get("/alive")
async def alive_check() -> JSONResponse:
    """Health check endpoint for infrastructure probes."""
    return JSONResponse({"status": "ok", "message": "DevRel Quotes is alive and healthy."})


__all__ = ["router"]
