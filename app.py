"""
Sliding Tile: App-Info Bridge

Single HTTP entry point for the bridge. On startup it configures logging,
tracing and the method channels (the app-info channel answering
`getVersion`), then serves them under /channels.

Run with:
  uvicorn app:app --reload --port 8080
"""

import structlog
import uvicorn

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sliding_tile.version import VERSION, APP_NAME
from sliding_tile.config import get_settings
from sliding_tile.logging import setup_logging
from sliding_tile.observability import setup_tracing
from sliding_tile.channels import get_channel_registry
from sliding_tile.app_info import configure_channels
from sliding_tile.errors import SlidingTileError
from sliding_tile.api.errors import sliding_tile_error_handler
from sliding_tile.api.channels import router as channels_router
from sliding_tile.api.system import router as system_router

logger = structlog.get_logger(__name__)

settings = get_settings()


# ── Lifespan ─────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Bridge lifespan: logging, tracing, channel registration."""
    setup_logging(level=settings.log_level_value, json_output=settings.log_json)

    if settings.tracing_enabled:
        setup_tracing(console_export=settings.environment == "development")

    registry = get_channel_registry()
    configure_channels(registry)

    logger.info(
        "bridge_ready",
        version=VERSION,
        platform=APP_NAME,
        channels=registry.names,
        metadata_source=settings.metadata_source,
    )

    yield

    logger.info("bridge_shutdown_complete")


OPENAPI_TAGS = [
    {
        "name": "Channels",
        "description": "Method channel transport. POST a method call to a "
        "channel and receive a success, error, or not_implemented envelope.",
    },
    {
        "name": "System",
        "description": "Health checks, Prometheus metrics, and bridge info.",
    },
]

# ── FastAPI App ───────────────────────────────────────────────────────
app = FastAPI(
    title=f"{APP_NAME}: App-Info Bridge",
    version=VERSION,
    lifespan=lifespan,
    openapi_tags=OPENAPI_TAGS,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS ─────────────────────────────────────────────────────────────
# Disabled unless SLIDING_TILE_CORS_ORIGINS lists browser origins.
if settings.allowed_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.add_exception_handler(SlidingTileError, sliding_tile_error_handler)

app.include_router(system_router)
app.include_router(channels_router)


if __name__ == "__main__":
    uvicorn.run("app:app", host=settings.host, port=settings.port, reload=True)
