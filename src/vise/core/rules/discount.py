from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import IntEnum

from ..entities.card_type import CardType
from .restricted_countries import country_key

CENT = Decimal("0.01")


class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, moment: datetime) -> Weekday:
        if moment.tzinfo is not None:
            moment = moment.astimezone(timezone.utc)
        return cls(moment.isoweekday() % 7)


MONDAY_TO_WEDNESDAY = frozenset({Weekday.MONDAY, Weekday.TUESDAY, Weekday.WEDNESDAY})
WEEKDAYS = frozenset(
    {Weekday.MONDAY, Weekday.TUESDAY, Weekday.WEDNESDAY, Weekday.THURSDAY, Weekday.FRIDAY}
)
SATURDAY = frozenset({Weekday.SATURDAY})
WEEKEND = frozenset({Weekday.SATURDAY, Weekday.SUNDAY})


@dataclass(slots=True, frozen=True)
class DayRule:
    days: frozenset[Weekday]
    amount_over: float
    percent: int

    def applies(self, weekday: Weekday, amount: float) -> bool:
        return weekday in self.days and amount > self.amount_over


@dataclass(slots=True, frozen=True)
class TierRules:
    day_rules: Sequence[DayRule] = ()
    abroad_percent: int = 0


TIER_RULES: dict[CardType, TierRules] = {
    CardType.CLASSIC: TierRules(),
    CardType.GOLD: TierRules(day_rules=(DayRule(MONDAY_TO_WEDNESDAY, 100, 15),)),
    CardType.PLATINUM: TierRules(
        day_rules=(DayRule(MONDAY_TO_WEDNESDAY, 100, 20), DayRule(SATURDAY, 200, 30)),
        abroad_percent=5,
    ),
    CardType.BLACK: TierRules(
        day_rules=(DayRule(MONDAY_TO_WEDNESDAY, 100, 25), DayRule(SATURDAY, 200, 35)),
        abroad_percent=5,
    ),
    CardType.WHITE: TierRules(
        day_rules=(DayRule(WEEKDAYS, 100, 25), DayRule(WEEKEND, 200, 35)),
        abroad_percent=5,
    ),
}


def is_abroad(purchase_country: str | None, home_country: str | None) -> bool:
    return country_key(purchase_country) != country_key(home_country)


def calculate_discount(
    card_type: CardType,
    amount: float,
    purchased_at: datetime,
    purchase_country: str,
    home_country: str,
) -> int:
    rules = TIER_RULES[card_type]
    weekday = Weekday.of(purchased_at)

    candidates = [rule.percent for rule in rules.day_rules if rule.applies(weekday, amount)]
    if rules.abroad_percent and is_abroad(purchase_country, home_country):
        candidates.append(rules.abroad_percent)

    return max(candidates, default=0)


def to_decimal(amount: float | int | Decimal) -> Decimal:
    return amount if isinstance(amount, Decimal) else Decimal(str(amount))


def apply_discount(amount: float | int | Decimal, percent: int) -> tuple[Decimal, Decimal]:
    original = to_decimal(amount)
    with localcontext() as context:
        context.prec = max(context.prec, original.adjusted() + 6)
        discount_applied = (original * percent / 100).quantize(CENT, rounding=ROUND_HALF_UP)
        final_amount = (original - discount_applied).quantize(CENT, rounding=ROUND_HALF_UP)
    return discount_applied, final_amount


def describe_benefit(percent: int) -> str:
    if percent > 0:
        return f"Discount {percent}%"
    return "No applicable benefit"
