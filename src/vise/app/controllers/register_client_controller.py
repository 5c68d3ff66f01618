import orjson
from orjson import JSONDecodeError
from returns.result import Failure, Success
from starlette.requests import Request
from starlette.responses import Response

from ...adapters.errors import EligibilityRejectedError, InvalidPayloadError
from ..card_service import CardService
from ..payloads import parse_client_payload
from .orjson_response import OrjsonResponse, rejected


async def register_client_controller(request: Request) -> Response:
    try:
        payload = orjson.loads(await request.body())
    except JSONDecodeError:
        return rejected(InvalidPayloadError("Request body must be valid JSON"), 400)

    card_service: CardService = request.state.card_service
    match parse_client_payload(payload):
        case Success(client_payload):
            result = await card_service.register_client(client_payload)
        case Failure(error):
            return rejected(error, 400)

    match result:
        case Success(client):
            return OrjsonResponse(
                {
                    "clientId": client.id,
                    "name": client.props.name,
                    "cardType": client.props.card_type,
                    "status": "Registered",
                    "message": f"Client eligible for a {client.props.card_type} card",
                }
            )
        case Failure(error):
            match error:
                case EligibilityRejectedError():
                    return rejected(error, 400)
