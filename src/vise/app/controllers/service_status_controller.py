import time
from datetime import datetime, timezone

from starlette.requests import Request
from starlette.responses import Response

from .orjson_response import OrjsonResponse

ENDPOINTS = (
    "POST /client - Register a client",
    "POST /purchase - Make a purchase",
    "GET /clients - List clients",
    "GET /health - Health check",
)


async def service_info_controller(request: Request) -> Response:
    return OrjsonResponse(
        {
            "status": "healthy",
            "service": request.state.service_name,
            "version": request.state.version,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "endpoints": ENDPOINTS,
        }
    )


async def health_controller(request: Request) -> Response:
    return OrjsonResponse(
        {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": time.monotonic() - request.state.started_at,
        }
    )
