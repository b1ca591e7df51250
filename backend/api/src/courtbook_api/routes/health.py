"""Health check endpoint."""

from typing import Any

from fastapi import APIRouter

from courtbook import __version__

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Health check",
    response_description="Service status and version",
)
async def health() -> dict[str, Any]:
    """Report that the resolver API is up."""
    return {"status": "healthy", "version": __version__}
