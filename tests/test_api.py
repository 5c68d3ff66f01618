import pytest
from starlette.testclient import TestClient

from vise.app import create_app
from vise.app.card_service import CardService
from vise.app.controllers import make_purchase_controller
from vise.core.entities.event import EventType

from .conftest import BrokenEventLogger, client_payload, purchase_payload


def test_register_gold_client(api):
    response = api.post("/client", json=client_payload())

    assert response.status_code == 200
    assert response.json() == {
        "clientId": 1,
        "name": "A",
        "cardType": "Gold",
        "status": "Registered",
        "message": "Client eligible for a Gold card",
    }


def test_purchase_with_weekday_discount(api):
    api.post("/client", json=client_payload())

    response = api.post("/purchase", json=purchase_payload())

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "Approved"
    purchase = body["purchase"]
    assert purchase["clientId"] == 1
    assert purchase["originalAmount"] == 150
    assert purchase["discountApplied"] == 22.5
    assert purchase["finalAmount"] == 127.5
    assert purchase["benefit"] == "Discount 15%"
    assert purchase["currency"] == "USD"
    assert purchase["purchaseDate"] == "2025-09-16T10:00:00Z"
    assert purchase["purchaseCountry"] == "Peru"
    assert "processedAt" in purchase


def test_black_card_rejected_for_restricted_country(api):
    response = api.post(
        "/client",
        json=client_payload(cardType="black", monthlyIncome=2500, viseClub=True, country="China"),
    )

    assert response.status_code == 400
    body = response.json()
    assert body["status"] == "Rejected"
    assert "China" in body["error"]
    assert api.get("/clients").json()["total"] == 0


def test_missing_fields_are_a_validation_error(api):
    payload = client_payload()
    del payload["viseClub"]

    response = api.post("/client", json=payload)

    assert response.status_code == 400
    assert response.json()["error"].startswith("Missing required fields")


def test_invalid_card_type(api):
    response = api.post("/client", json=client_payload(cardType="diamond"))

    assert response.status_code == 400
    assert response.json() == {"status": "Rejected", "error": "Invalid card type"}


def test_invalid_json(api):
    response = api.post(
        "/client", content=b"{not json", headers={"content-type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json()["status"] == "Rejected"


def test_purchase_for_unknown_client(api):
    response = api.post("/purchase", json=purchase_payload(clientId=42))

    assert response.status_code == 404
    assert response.json() == {"status": "Rejected", "error": "Client 42 is not registered"}


def test_purchase_from_restricted_country(api):
    api.post(
        "/client",
        json=client_payload(cardType="White", monthlyIncome=5000, viseClub=True, country="USA"),
    )

    response = api.post("/purchase", json=purchase_payload(purchaseCountry="India"))

    assert response.status_code == 403
    assert "India" in response.json()["error"]


def test_purchase_with_bad_date(api):
    api.post("/client", json=client_payload())

    response = api.post("/purchase", json=purchase_payload(purchaseDate="yesterday"))

    assert response.status_code == 400


def test_list_clients_in_registration_order(api):
    for name in ("A", "B", "C"):
        api.post("/client", json=client_payload(name=name, cardType="classic"))

    body = api.get("/clients").json()

    assert body["total"] == 3
    assert [(c["clientId"], c["name"]) for c in body["clients"]] == [
        (1, "A"),
        (2, "B"),
        (3, "C"),
    ]
    assert body["clients"][0]["cardType"] == "Classic"


def test_service_info_and_health(api):
    info = api.get("/").json()
    assert info["status"] == "healthy"
    assert info["service"] == "vise-api"
    assert "POST /purchase - Make a purchase" in info["endpoints"]

    health = api.get("/health").json()
    assert health["status"] == "healthy"
    assert health["uptime"] >= 0


def test_events_are_logged(event_logger):
    with TestClient(create_app(event_logger)) as api:
        api.post("/client", json=client_payload())
        api.post("/purchase", json=purchase_payload())

    assert len(event_logger.of_type(EventType.SERVER_STARTED)) == 1
    assert len(event_logger.of_type(EventType.CLIENT_CREATED)) == 1
    assert len(event_logger.of_type(EventType.PURCHASE_COMPLETED)) == 1
    assert len(event_logger.of_type(EventType.HTTP_REQUEST)) == 2
    metrics = event_logger.of_type(EventType.METRIC)
    assert [m.data["tags"]["status"] for m in metrics] == [200, 200]


def test_internal_errors_are_generic(event_logger, monkeypatch):
    async def explode(self, payload):
        raise RuntimeError("registry is on fire")

    monkeypatch.setattr(CardService, "register_client", explode)

    with TestClient(create_app(event_logger), raise_server_exceptions=False) as api:
        response = api.post("/client", json=client_payload())

    assert response.status_code == 500
    assert response.json() == {"status": "Error", "error": "Internal server error"}
    [error] = event_logger.of_type(EventType.ERROR)
    assert error.data["message"] == "registry is on fire"
    assert error.data["endpoint"] == "/client"
    assert error.metadata == {"severity": "error"}


def test_errors_outside_the_service_are_reported_as_json(event_logger, monkeypatch):
    def explode(record):
        raise ValueError("cannot serialize purchase")

    monkeypatch.setattr(make_purchase_controller, "purchase_to_json", explode)

    with TestClient(create_app(event_logger), raise_server_exceptions=False) as api:
        api.post("/client", json=client_payload())
        response = api.post("/purchase", json=purchase_payload())

    assert response.status_code == 500
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"status": "Error", "error": "Internal server error"}
    [error] = event_logger.of_type(EventType.ERROR)
    assert error.data["message"] == "cannot serialize purchase"
    assert error.data["endpoint"] == "/purchase"
    assert error.data["method"] == "POST"


def test_failing_event_logger_does_not_fail_requests():
    with TestClient(create_app(BrokenEventLogger())) as api:
        registered = api.post("/client", json=client_payload())
        purchased = api.post("/purchase", json=purchase_payload())

    assert registered.status_code == 200
    assert registered.json()["clientId"] == 1
    assert purchased.status_code == 200
    assert purchased.json()["purchase"]["finalAmount"] == 127.5


def test_static_files(tmp_path, event_logger):
    (tmp_path / "index.html").write_text("<h1>VISE</h1>")

    with TestClient(create_app(event_logger, static_dir=str(tmp_path))) as api:
        response = api.get("/index.html")

    assert response.status_code == 200
    assert "VISE" in response.text


@pytest.mark.parametrize("path", ["/client", "/purchase"])
def test_wrong_method(api, path):
    assert api.get(path).status_code == 405
