"""Liveness probe."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from thoughts.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)

API_VERSION = "0.1.0"


class HealthStatus(BaseModel):
    """Body of GET /health. Not wrapped in the success envelope."""

    status: str
    message: str
    timestamp: datetime
    version: str
    git_sha: str


@router.get("/health", response_model=HealthStatus)
async def health(settings: FromDishka[Settings]) -> HealthStatus:
    """Report that the API process is up. Storage is not checked."""
    return HealthStatus(
        status="ok",
        message="API is healthy and running!",
        timestamp=datetime.now(timezone.utc),
        version=API_VERSION,
        git_sha=settings.git_sha,
    )
