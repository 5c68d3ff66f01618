from starlette.requests import Request
from starlette.responses import Response

from ...adapters.client_repository import ClientRepository
from ..serializers import client_to_json
from .orjson_response import OrjsonResponse


async def list_clients_controller(request: Request) -> Response:
    client_repository: ClientRepository = request.state.client_repository
    clients = await client_repository.get_all()
    return OrjsonResponse(
        {"total": len(clients), "clients": [client_to_json(client) for client in clients]}
    )
