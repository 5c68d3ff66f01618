from typing import Protocol

from ..core.entities.event import Event


class EventLogger(Protocol):
    async def log(self, event: Event) -> None: ...
