"""
Health check API endpoints.

Routes: GET /health

System role: Health check HTTP API
"""

from fastapi import APIRouter
from pydantic import BaseModel

from study_gateway import __version__


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
    version: str = __version__


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")
