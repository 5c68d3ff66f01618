import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from ..core.entities.event import Event, EventType
from .adapters.event_dispatcher import EventDispatcher


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, events: EventDispatcher) -> None:
        super().__init__(app)
        self.__events = events

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.perf_counter()
        self.__events.emit(
            Event(
                EventType.HTTP_REQUEST,
                {
                    "method": request.method,
                    "path": request.url.path,
                    "ip": request.client.host if request.client else None,
                    "userAgent": request.headers.get("user-agent"),
                },
                {"type": "http"},
            )
        )

        response = await call_next(request)

        self.__events.emit(
            Event(
                EventType.METRIC,
                {
                    "metric_name": "response_time",
                    "value": round((time.perf_counter() - start) * 1000, 3),
                    "tags": {
                        "method": request.method,
                        "path": request.url.path,
                        "status": response.status_code,
                    },
                },
                {"type": "metric"},
            )
        )
        return response
