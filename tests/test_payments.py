# tests/test_payments.py
import asyncio
from decimal import Decimal
from urllib.parse import parse_qs

import httpx
import pytest
from fastapi import HTTPException

from app.main import app
from app.shared.services.payment_client import PaymentClient, get_payment_client


def _provider(status_code=200, captured=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if captured is not None:
            captured.append(request)
        if status_code != 200:
            return httpx.Response(status_code, text="card_declined")
        return httpx.Response(200, json={"id": "pi_123", "client_secret": "pi_123_secret"})
    return httpx.MockTransport(handler)


@pytest.mark.parametrize("price, cents", [("12.34", 1234), ("129", 12900), ("0.005", 1)])
def test_to_minor_units(price, cents):
    assert PaymentClient.to_minor_units(Decimal(price)) == cents


def test_create_payment_intent_sends_amount_in_cents():
    captured = []
    client = PaymentClient(transport=_provider(captured=captured))

    result = asyncio.run(client.create_payment_intent(Decimal("12.34")))

    assert result["client_secret"] == "pi_123_secret"
    assert result["payment_intent_id"] == "pi_123"
    assert result["amount"] == 1234

    form = parse_qs(captured[0].content.decode())
    assert captured[0].url.path == "/v1/payment_intents"
    assert form["amount"] == ["1234"]
    assert form["payment_method_types[]"] == ["card"]


def test_provider_error_is_bad_gateway():
    client = PaymentClient(transport=_provider(status_code=402))

    with pytest.raises(HTTPException) as exc_info:
        asyncio.run(client.create_payment_intent(Decimal("5")))

    assert exc_info.value.status_code == 502


def test_provider_timeout_is_gateway_timeout():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    client = PaymentClient(transport=httpx.MockTransport(handler))

    with pytest.raises(HTTPException) as exc_info:
        asyncio.run(client.create_payment_intent(Decimal("5")))

    assert exc_info.value.status_code == 504


@pytest.fixture
def mocked_provider():
    app.dependency_overrides[get_payment_client] = lambda: PaymentClient(transport=_provider())
    yield
    app.dependency_overrides.pop(get_payment_client, None)


def test_create_payment_intent_endpoint(client, owner_headers, mocked_provider):
    response = client.post("/create-payment-intent", json={"price": "9.99"}, headers=owner_headers)

    assert response.status_code == 200
    assert response.json()["clientSecret"] == "pi_123_secret"
    assert response.json()["amount"] == 999


def test_create_payment_intent_requires_positive_price(client, owner_headers, mocked_provider):
    response = client.post("/create-payment-intent", json={"price": "0"}, headers=owner_headers)
    assert response.status_code == 422


def test_create_payment_intent_requires_session(client, mocked_provider):
    response = client.post("/create-payment-intent", json={"price": "9.99"})
    assert response.status_code == 401
