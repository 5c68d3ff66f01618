from dataclasses import dataclass

from .card_type import CardType


@dataclass(slots=True, frozen=True)
class Client:
    name: str
    country: str
    monthly_income: float
    vise_club: bool
    card_type: CardType
