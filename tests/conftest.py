import pytest
from starlette.testclient import TestClient

from vise.app import create_app
from vise.app.adapters.event_dispatcher import EventDispatcher
from vise.app.adapters.in_memory_client_repository import InMemoryClientRepository
from vise.app.card_service import CardService
from vise.core.entities.event import Event, EventType


class RecordingEventLogger:
    def __init__(self) -> None:
        self.events: list[Event] = []

    async def log(self, event: Event) -> None:
        self.events.append(event)

    def of_type(self, type: EventType) -> list[Event]:
        return [event for event in self.events if event.type == type]


class BrokenEventLogger:
    async def log(self, event: Event) -> None:
        raise ConnectionError("ingest unavailable")


@pytest.fixture
def event_logger() -> RecordingEventLogger:
    return RecordingEventLogger()


@pytest.fixture
def events(event_logger: RecordingEventLogger) -> EventDispatcher:
    return EventDispatcher(event_logger)


@pytest.fixture
def client_repository() -> InMemoryClientRepository:
    return InMemoryClientRepository()


@pytest.fixture
def card_service(
    client_repository: InMemoryClientRepository, events: EventDispatcher
) -> CardService:
    return CardService(client_repository, events)


@pytest.fixture
def api(event_logger: RecordingEventLogger):
    with TestClient(create_app(event_logger)) as client:
        yield client


def client_payload(**overrides):
    payload = {
        "name": "A",
        "country": "Peru",
        "monthlyIncome": 600,
        "viseClub": False,
        "cardType": "gold",
    }
    payload.update(overrides)
    return payload


def purchase_payload(**overrides):
    payload = {
        "clientId": 1,
        "amount": 150,
        "currency": "USD",
        "purchaseDate": "2025-09-16T10:00:00Z",
        "purchaseCountry": "Peru",
    }
    payload.update(overrides)
    return payload
