from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(slots=True, frozen=True)
class Entity[T]:
    id: int
    props: T
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
