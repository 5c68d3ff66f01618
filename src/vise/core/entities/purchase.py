from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal


@dataclass(slots=True, frozen=True)
class Purchase:
    client_id: int
    amount: float
    currency: str
    purchase_date: str
    purchased_at: datetime
    purchase_country: str


@dataclass(slots=True, frozen=True)
class PurchaseRecord:
    client_id: int
    original_amount: float
    discount_percent: int
    discount_applied: Decimal
    final_amount: Decimal
    benefit: str
    currency: str
    purchase_date: str
    purchase_country: str
    processed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
