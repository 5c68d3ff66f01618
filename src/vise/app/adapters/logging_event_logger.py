import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

import orjson

from ...adapters.event_logger import EventLogger
from ...core.entities.event import Event, EventType


def _default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError


class LoggingEventLogger(EventLogger):
    def __init__(self, metadata: Mapping[str, Any] | None = None) -> None:
        self.__metadata = dict(metadata or {})
        self.__events = logging.getLogger("vise.events")

    async def log(self, event: Event) -> None:
        entry = {
            "timestamp": event.timestamp,
            "event_type": event.type,
            "data": event.data,
            "metadata": {**self.__metadata, **event.metadata},
        }
        level = logging.ERROR if event.type == EventType.ERROR else logging.INFO
        self.__events.log(level, orjson.dumps(entry, default=_default).decode())
