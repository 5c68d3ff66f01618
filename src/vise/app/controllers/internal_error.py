import traceback

from starlette.requests import Request
from starlette.responses import Response

from ...core.entities.event import Event, EventType
from ..adapters.event_dispatcher import EventDispatcher
from .orjson_response import OrjsonResponse


async def internal_error_handler(request: Request, error: Exception) -> Response:
    events: EventDispatcher = request.state.events
    events.emit(
        Event(
            EventType.ERROR,
            {
                "message": str(error),
                "stack": "".join(traceback.format_exception(error)),
                "endpoint": request.url.path,
                "method": request.method,
            },
            {"severity": "error"},
        )
    )
    return OrjsonResponse(
        {"status": "Error", "error": "Internal server error"}, status_code=500
    )
