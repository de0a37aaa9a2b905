from fastapi import APIRouter, Response
from pydantic import BaseModel

from sliding_tile.version import VERSION, APP_NAME
from sliding_tile.channels import get_channel_registry
from sliding_tile.observability import get_metrics, get_metrics_content_type

router = APIRouter(tags=["System"])


class HealthResponse(BaseModel):
    status: str
    version: str
    platform: str
    channels: list[str]


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="healthy",
        version=VERSION,
        platform=APP_NAME,
        channels=get_channel_registry().names,
    )


@router.get("/")
async def root():
    return {
        "api": "Sliding Tile App-Info Bridge",
        "version": VERSION,
        "status": "online",
    }


@router.get("/metrics")
async def metrics():
    return Response(content=get_metrics(), media_type=get_metrics_content_type())
