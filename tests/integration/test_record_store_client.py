"""Integration tests for the record store and session gateway clients"""

import json
import httpx
import pytest
from hitsort_dashboard.domain.exceptions import AuthenticationError, RecordStoreError
from hitsort_dashboard.domain.models import NOT_SOLD, CardRecord, ExpenditureRecord, PaymentType
from hitsort_dashboard.infrastructure.clients.auth import AuthClient, StoreSession
from hitsort_dashboard.infrastructure.clients.record_store import RecordStoreClient

BASE_URL = "http://record-store.test"
SESSION = StoreSession(token="opaque-token")


def store_client(handler) -> RecordStoreClient:
    return RecordStoreClient(base_url=BASE_URL, timeout=1.0, transport=httpx.MockTransport(handler))


async def test_get_cards_parses_payload():
    """Test cards are parsed and the raw token is forwarded"""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers.get("Authorization")
        seen["path"] = request.url.path
        return httpx.Response(200, json=[
            {"cardId": "HS02", "sellerName": NOT_SOLD, "amount": 50},
            {"cardId": "HS01", "sellerName": "Ana", "amount": 40, "numberOfGames": 1,
             "paymentType": "CASH", "date": "2025-03-07T18:30:00Z"},
        ])

    cards = await store_client(handler).get_cards(SESSION)

    assert seen == {"auth": "opaque-token", "path": "/api/cards"}
    assert [c.card_id for c in cards] == ["HS02", "HS01"]
    assert cards[1].payment_type is PaymentType.CASH
    assert not cards[0].is_sold


async def test_get_expenditures_uses_trailing_slash():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/expenditures/"
        return httpx.Response(200, json=[{"usedFor": "Stall", "amount": 500, "usedBy": "Anand"}])

    expenditures = await store_client(handler).get_expenditures(SESSION)

    assert expenditures == [ExpenditureRecord(used_for="Stall", amount=500, used_by="Anand")]


async def test_get_cards_server_error():
    """Test non-2xx responses raise RecordStoreError"""
    client = store_client(lambda request: httpx.Response(500, text="boom"))

    with pytest.raises(RecordStoreError):
        await client.get_cards(SESSION)


@pytest.mark.parametrize("status", [401, 403])
async def test_get_cards_rejected_session(status):
    client = store_client(lambda request: httpx.Response(status))

    with pytest.raises(AuthenticationError):
        await client.get_cards(SESSION)


async def test_get_cards_network_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(RecordStoreError):
        await store_client(handler).get_cards(SESSION)


async def test_get_cards_timeout():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    with pytest.raises(RecordStoreError, match="timeout"):
        await store_client(handler).get_cards(SESSION)


async def test_get_cards_invalid_payload():
    """Test a non-list body is reported as a store failure"""
    client = store_client(lambda request: httpx.Response(200, json={"error": "unexpected"}))

    with pytest.raises(RecordStoreError, match="Invalid card data"):
        await client.get_cards(SESSION)


async def test_update_card_sends_camel_case_payload():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"cardId": "HS07"})

    card = CardRecord(card_id="HS07", seller_name="Pandu", number_of_games=2, amount=80,
                      payment_type=PaymentType.UPI)

    result = await store_client(handler).update_card(SESSION, card)

    assert result == {"cardId": "HS07"}
    assert seen["method"] == "PUT"
    assert seen["path"] == "/api/cards/update"
    assert seen["body"] == {
        "cardId": "HS07",
        "sellerName": "Pandu",
        "numberOfGames": 2,
        "amount": 80,
        "paymentType": "UPI",
    }


async def test_update_expenditure_plain_text_confirmation():
    def handler(request: httpx.Request) -> httpx.Response:
        assert json.loads(request.content) == {"usedFor": "Prize", "amount": 300, "usedBy": "Anand"}
        return httpx.Response(200, text="Expenditure saved")

    expenditure = ExpenditureRecord(used_for="Prize", amount=300, used_by="Anand")

    result = await store_client(handler).update_expenditure(SESSION, expenditure)

    assert result == {"message": "Expenditure saved"}


async def test_login_returns_session():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/auth/login"
        assert json.loads(request.content) == {"username": "admin", "password": "secret"}
        return httpx.Response(200, json={"token": "opaque-token"})

    client = AuthClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))

    assert await client.login("admin", "secret") == SESSION


async def test_login_rejected():
    client = AuthClient(base_url=BASE_URL, transport=httpx.MockTransport(lambda request: httpx.Response(401)))

    with pytest.raises(AuthenticationError):
        await client.login("admin", "wrong")


async def test_login_without_token():
    client = AuthClient(base_url=BASE_URL, transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})))

    with pytest.raises(AuthenticationError):
        await client.login("admin", "secret")
