from ...adapters.event_logger import EventLogger
from ...core.entities.event import Event


class NullEventLogger(EventLogger):
    async def log(self, event: Event) -> None:
        return None
