import asyncio
from collections.abc import Sequence
from itertools import count

from returns.result import Failure, Result, Success

from ...adapters.client_repository import ClientRepository
from ...adapters.errors import ClientDoesNotExistError
from ...core.entities.client import Client
from ...core.entities.entity import Entity


class InMemoryClientRepository(ClientRepository):
    def __init__(self) -> None:
        self.__lock = asyncio.Lock()
        self.__next_id = count(1)
        self.__clients = list[Entity[Client]]()

    async def create(self, client: Client) -> Entity[Client]:
        async with self.__lock:
            entity = Entity(next(self.__next_id), client)
            self.__clients.append(entity)
        return entity

    async def get(self, id: int) -> Result[Entity[Client], ClientDoesNotExistError]:
        if not 1 <= id <= len(self.__clients):
            return Failure(ClientDoesNotExistError(id))
        return Success(self.__clients[id - 1])

    async def get_all(self) -> Sequence[Entity[Client]]:
        return tuple(self.__clients)
