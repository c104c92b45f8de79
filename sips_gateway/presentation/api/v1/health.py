"""Health check endpoint for service monitoring."""

from fastapi import APIRouter
from pydantic import BaseModel

from sips_gateway import __version__
from sips_gateway.infrastructure.clients import SipsClient

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
    api_version: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the service.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        api_version=SipsClient.API_VERSION,
    )
