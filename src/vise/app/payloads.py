from datetime import timezone
from typing import Any, TypedDict

import jsonschema
from dateutil.parser import isoparse
from jsonschema.exceptions import ValidationError
from returns.result import Failure, Result, Success

from ..adapters.errors import InvalidPayloadError
from ..core.entities.purchase import Purchase


class ClientPayload(TypedDict):
    name: str
    country: str
    monthlyIncome: float | None
    viseClub: bool | None
    cardType: str


CLIENT_FIELDS = ("name", "country", "monthlyIncome", "viseClub", "cardType")
CLIENT_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "country": {"type": "string", "minLength": 1},
        "monthlyIncome": {"type": ["number", "null"], "minimum": 0},
        "viseClub": {"type": ["boolean", "null"]},
        "cardType": {"type": "string", "minLength": 1},
    },
    "required": list(CLIENT_FIELDS),
}

PURCHASE_FIELDS = ("clientId", "amount", "currency", "purchaseDate", "purchaseCountry")
PURCHASE_SCHEMA = {
    "type": "object",
    "properties": {
        "clientId": {"type": "integer"},
        "amount": {"type": "number", "minimum": 0},
        "currency": {"type": "string", "minLength": 1},
        "purchaseDate": {"type": "string", "minLength": 1},
        "purchaseCountry": {"type": "string", "minLength": 1},
    },
    "required": list(PURCHASE_FIELDS),
}


def __validate(
    payload: Any, schema: dict[str, Any], fields: tuple[str, ...]
) -> InvalidPayloadError | None:
    try:
        jsonschema.validate(payload, schema)
    except ValidationError as error:
        if error.validator in ("required", "minLength"):
            return InvalidPayloadError(f"Missing required fields: {', '.join(fields)}")
        location = ".".join(str(part) for part in error.absolute_path)
        if location:
            return InvalidPayloadError(f"Invalid value for {location}: {error.message}")
        return InvalidPayloadError(f"Invalid payload: {error.message}")
    return None


def parse_client_payload(payload: Any) -> Result[ClientPayload, InvalidPayloadError]:
    error = __validate(payload, CLIENT_SCHEMA, CLIENT_FIELDS)
    if error is not None:
        return Failure(error)
    return Success(payload)


def parse_purchase_payload(payload: Any) -> Result[Purchase, InvalidPayloadError]:
    error = __validate(payload, PURCHASE_SCHEMA, PURCHASE_FIELDS)
    if error is not None:
        return Failure(error)

    try:
        purchased_at = isoparse(payload["purchaseDate"])
    except ValueError:
        return Failure(InvalidPayloadError("purchaseDate must be an ISO-8601 date"))
    if purchased_at.tzinfo is None:
        purchased_at = purchased_at.replace(tzinfo=timezone.utc)

    return Success(
        Purchase(
            client_id=int(payload["clientId"]),
            amount=payload["amount"],
            currency=payload["currency"],
            purchase_date=payload["purchaseDate"],
            purchased_at=purchased_at.astimezone(timezone.utc),
            purchase_country=payload["purchaseCountry"],
        )
    )
