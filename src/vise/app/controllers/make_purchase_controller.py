import orjson
from orjson import JSONDecodeError
from returns.result import Failure, Success
from starlette.requests import Request
from starlette.responses import Response

from ...adapters.errors import (
    ClientDoesNotExistError,
    CountryRestrictedError,
    InvalidPayloadError,
)
from ..card_service import CardService
from ..payloads import parse_purchase_payload
from ..serializers import purchase_to_json
from .orjson_response import OrjsonResponse, rejected


async def make_purchase_controller(request: Request) -> Response:
    try:
        payload = orjson.loads(await request.body())
    except JSONDecodeError:
        return rejected(InvalidPayloadError("Request body must be valid JSON"), 400)

    card_service: CardService = request.state.card_service
    match parse_purchase_payload(payload):
        case Success(purchase):
            result = await card_service.process_purchase(purchase)
        case Failure(error):
            return rejected(error, 400)

    match result:
        case Success(record):
            return OrjsonResponse(
                {"status": "Approved", "purchase": purchase_to_json(record)}
            )
        case Failure(error):
            match error:
                case ClientDoesNotExistError():
                    return rejected(error, 404)
                case CountryRestrictedError():
                    return rejected(error, 403)
