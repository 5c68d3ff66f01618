from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..entities.card_type import CardType
from .restricted_countries import is_restricted_country


@dataclass(slots=True, frozen=True)
class EligibilityResult:
    eligible: bool
    reason: str | None = None

    @classmethod
    def accepted(cls) -> EligibilityResult:
        return cls(True)

    @classmethod
    def rejected(cls, reason: str) -> EligibilityResult:
        return cls(False, reason)


@dataclass(slots=True, frozen=True)
class Applicant:
    monthly_income: float
    vise_club: bool
    card_type: CardType
    country: str


type Check = Callable[[Applicant], str | None]


def minimum_income(threshold: int, tiers: str) -> Check:
    def check(applicant: Applicant) -> str | None:
        if applicant.monthly_income < threshold:
            return f"A minimum monthly income of {threshold} USD is required for {tiers}"
        return None

    return check


def vise_club_required(tiers: str) -> Check:
    def check(applicant: Applicant) -> str | None:
        if not applicant.vise_club:
            return f"A VISE CLUB subscription is required for {tiers}"
        return None

    return check


def not_from_restricted_country(applicant: Applicant) -> str | None:
    if is_restricted_country(applicant.country):
        return (
            f"Clients residing in {applicant.country} cannot request "
            f"a {applicant.card_type} card"
        )
    return None


TIER_CHECKS: dict[CardType, Sequence[Check]] = {
    CardType.CLASSIC: (),
    CardType.GOLD: (minimum_income(500, "Gold"),),
    CardType.PLATINUM: (
        minimum_income(1000, "Platinum"),
        vise_club_required("Platinum"),
    ),
    CardType.BLACK: (
        minimum_income(2000, "Black/White"),
        vise_club_required("Black/White"),
        not_from_restricted_country,
    ),
    CardType.WHITE: (
        minimum_income(2000, "Black/White"),
        vise_club_required("Black/White"),
        not_from_restricted_country,
    ),
}

INVALID_CARD_TYPE = "Invalid card type"


def evaluate(
    monthly_income: float | None,
    vise_club: bool | None,
    card_type: CardType | None,
    country: str | None,
) -> EligibilityResult:
    if card_type is None:
        return EligibilityResult.rejected(INVALID_CARD_TYPE)

    applicant = Applicant(
        monthly_income=monthly_income or 0,
        vise_club=bool(vise_club),
        card_type=card_type,
        country=country or "",
    )
    for check in TIER_CHECKS[card_type]:
        reason = check(applicant)
        if reason is not None:
            return EligibilityResult.rejected(reason)
    return EligibilityResult.accepted()
