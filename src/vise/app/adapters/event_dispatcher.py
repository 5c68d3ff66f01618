import asyncio
import logging

from ...adapters.event_logger import EventLogger
from ...core.entities.event import Event

logger = logging.getLogger(__name__)


class EventDispatcher:
    def __init__(self, event_logger: EventLogger) -> None:
        self.__event_logger = event_logger
        self.__pending = set[asyncio.Task[None]]()

    def emit(self, event: Event) -> None:
        task = asyncio.create_task(self.__deliver(event))
        self.__pending.add(task)
        task.add_done_callback(self.__pending.discard)

    async def flush(self) -> None:
        while self.__pending:
            await asyncio.gather(*tuple(self.__pending))

    async def __deliver(self, event: Event) -> None:
        try:
            await self.__event_logger.log(event)
        except Exception:
            logger.exception("Could not log %s event", event.type)
