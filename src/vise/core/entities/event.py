from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any


class EventType(StrEnum):
    CLIENT_CREATED = "client_created"
    PURCHASE_COMPLETED = "purchase_completed"
    ERROR = "error"
    HTTP_REQUEST = "http_request"
    METRIC = "metric"
    SERVER_STARTED = "server_started"


@dataclass(slots=True, frozen=True)
class Event:
    type: EventType
    data: Any
    metadata: Mapping[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
