from returns.result import Failure, Result, Success

from ..adapters.client_repository import ClientRepository
from ..adapters.errors import (
    ClientDoesNotExistError,
    CountryRestrictedError,
    EligibilityRejectedError,
)
from ..core.entities.card_type import PREMIUM_CARD_TYPES, CardType
from ..core.entities.client import Client
from ..core.entities.entity import Entity
from ..core.entities.event import Event, EventType
from ..core.entities.purchase import Purchase, PurchaseRecord
from ..core.rules.discount import apply_discount, calculate_discount, describe_benefit
from ..core.rules.eligibility import evaluate
from ..core.rules.restricted_countries import is_restricted_country
from .adapters.event_dispatcher import EventDispatcher
from .payloads import ClientPayload
from .serializers import client_to_json, purchase_to_json


class CardService:
    def __init__(
        self, client_repository: ClientRepository, events: EventDispatcher
    ) -> None:
        self.__client_repository = client_repository
        self.__events = events

    async def register_client(
        self, payload: ClientPayload
    ) -> Result[Entity[Client], EligibilityRejectedError]:
        card_type = CardType.parse(payload["cardType"])
        eligibility = evaluate(
            payload["monthlyIncome"], payload["viseClub"], card_type, payload["country"]
        )
        if not eligibility.eligible or card_type is None:
            return Failure(EligibilityRejectedError(eligibility.reason or ""))

        client = await self.__client_repository.create(
            Client(
                name=payload["name"],
                country=payload["country"],
                monthly_income=payload["monthlyIncome"] or 0,
                vise_club=bool(payload["viseClub"]),
                card_type=card_type,
            )
        )
        self.__events.emit(
            Event(
                EventType.CLIENT_CREATED,
                client_to_json(client),
                {"action": "registration"},
            )
        )
        return Success(client)

    async def process_purchase(
        self, purchase: Purchase
    ) -> Result[PurchaseRecord, ClientDoesNotExistError | CountryRestrictedError]:
        match await self.__client_repository.get(purchase.client_id):
            case Success(client):
                return self.__purchase(client, purchase)
            case Failure(error):
                return Failure(error)

    def __purchase(
        self, client: Entity[Client], purchase: Purchase
    ) -> Result[PurchaseRecord, CountryRestrictedError]:
        card_type = client.props.card_type
        if card_type in PREMIUM_CARD_TYPES and is_restricted_country(
            purchase.purchase_country
        ):
            return Failure(CountryRestrictedError(card_type, purchase.purchase_country))

        percent = calculate_discount(
            card_type,
            purchase.amount,
            purchase.purchased_at,
            purchase.purchase_country,
            client.props.country,
        )
        discount_applied, final_amount = apply_discount(purchase.amount, percent)
        record = PurchaseRecord(
            client_id=client.id,
            original_amount=purchase.amount,
            discount_percent=percent,
            discount_applied=discount_applied,
            final_amount=final_amount,
            benefit=describe_benefit(percent),
            currency=purchase.currency,
            purchase_date=purchase.purchase_date,
            purchase_country=purchase.purchase_country,
        )
        self.__events.emit(
            Event(
                EventType.PURCHASE_COMPLETED,
                purchase_to_json(record),
                {"action": "transaction"},
            )
        )
        return Success(record)
