from fastapi import Request
from fastapi.responses import JSONResponse
import structlog

from sliding_tile.errors import SlidingTileError

logger = structlog.get_logger(__name__)


async def sliding_tile_error_handler(request: Request, exc: SlidingTileError) -> JSONResponse:
    """
    Render bridge errors that escape a route as `{"error": exc.to_dict()}`.

    Channel-level outcomes (including UNAVAILABLE) never reach this handler;
    they are returned as 200 envelopes. What lands here is a routing failure
    such as an unknown channel, logged with the channel the client asked for.
    Server-side failures (5xx) log at error level, client mistakes at warning.
    """
    error_data = exc.to_dict()
    log = logger.error if exc.http_status >= 500 else logger.warning

    log(
        "api_error_handled",
        path=request.url.path,
        channel=request.path_params.get("channel"),
        error_code=exc.error_code,
        status_code=exc.http_status,
        detail=exc.detail,
    )

    headers = {"Retry-After": "1"} if exc.retryable else None
    return JSONResponse(
        status_code=exc.http_status,
        content={"error": error_data},
        headers=headers,
    )
