from __future__ import annotations

import time
from contextlib import asynccontextmanager
from pathlib import Path

from starlette.applications import Starlette
from starlette.config import Config
from starlette.middleware import Middleware
from starlette.routing import BaseRoute, Mount, Route
from starlette.staticfiles import StaticFiles

from ..adapters.event_logger import EventLogger
from ..core.entities.event import Event, EventType
from .adapters.event_dispatcher import EventDispatcher
from .adapters.in_memory_client_repository import InMemoryClientRepository
from .adapters.logging_event_logger import LoggingEventLogger
from .adapters.null_event_logger import NullEventLogger
from .card_service import CardService
from .controllers.internal_error import internal_error_handler
from .controllers.list_clients_controller import list_clients_controller
from .controllers.make_purchase_controller import make_purchase_controller
from .controllers.register_client_controller import register_client_controller
from .controllers.service_status_controller import (
    health_controller,
    service_info_controller,
)
from .middleware import RequestLoggingMiddleware

VERSION = "1.0.0"

ENV_PATH = Path(".env")
config = Config(ENV_PATH if ENV_PATH.exists() else None)

DEBUG = config("DEBUG", cast=bool, default=False)
HOST = config("HOST", default="0.0.0.0")
PORT = config("PORT", cast=int, default=3000)
LOG_LEVEL = config("LOG_LEVEL", default="INFO")
SERVICE_NAME = config("SERVICE_NAME", default="vise-api")
ENVIRONMENT = config("ENVIRONMENT", default="development")
EVENT_LOG_ENABLED = config("EVENT_LOG_ENABLED", cast=bool, default=True)
STATIC_DIR = config("STATIC_DIR", default=None)


def default_event_logger() -> EventLogger:
    if not EVENT_LOG_ENABLED:
        return NullEventLogger()
    return LoggingEventLogger({"environment": ENVIRONMENT, "service": SERVICE_NAME})


def create_app(
    event_logger: EventLogger | None = None,
    *,
    debug: bool = DEBUG,
    static_dir: str | None = STATIC_DIR,
) -> Starlette:
    events = EventDispatcher(event_logger or default_event_logger())

    @asynccontextmanager
    async def lifespan(_: Starlette):
        client_repository = InMemoryClientRepository()
        card_service = CardService(client_repository, events)
        events.emit(Event(EventType.SERVER_STARTED, {"port": PORT}))
        yield {
            "client_repository": client_repository,
            "card_service": card_service,
            "events": events,
            "service_name": SERVICE_NAME,
            "version": VERSION,
            "started_at": time.monotonic(),
        }
        await events.flush()

    routes: list[BaseRoute] = [
        Route("/", service_info_controller, methods=["GET"]),
        Route("/health", health_controller, methods=["GET"]),
        Route("/client", register_client_controller, methods=["POST"]),
        Route("/purchase", make_purchase_controller, methods=["POST"]),
        Route("/clients", list_clients_controller, methods=["GET"]),
    ]
    if static_dir is not None:
        routes.append(Mount("/", StaticFiles(directory=static_dir, html=True)))

    return Starlette(
        debug=debug,
        routes=routes,
        middleware=[Middleware(RequestLoggingMiddleware, events=events)],
        exception_handlers={Exception: internal_error_handler},
        lifespan=lifespan,
    )


app = create_app()
