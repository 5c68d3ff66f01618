from __future__ import annotations

from enum import StrEnum


class CardType(StrEnum):
    CLASSIC = "Classic"
    GOLD = "Gold"
    PLATINUM = "Platinum"
    BLACK = "Black"
    WHITE = "White"

    @classmethod
    def parse(cls, value: str | None) -> CardType | None:
        if not isinstance(value, str):
            return None
        return _BY_KEY.get(value.casefold())


_BY_KEY = {card_type.value.casefold(): card_type for card_type in CardType}

PREMIUM_CARD_TYPES = frozenset({CardType.BLACK, CardType.WHITE})
