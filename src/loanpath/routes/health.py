# This project was developed with assistance from AI tools.
"""Liveness endpoint."""

from fastapi import APIRouter

from ..core.config import settings

router = APIRouter()


@router.get("/")
async def health() -> dict[str, str]:
    """Report that the process is up. External services are not probed."""
    return {"status": "ok", "app": settings.APP_NAME}
