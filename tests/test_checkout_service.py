import json

import pytest

from src.integrations.clients.mocks.mercadopago import SANDBOX_CHECKOUT_URL, MockMercadoPagoGateway
from src.integrations.contracts.checkout import decode_preference
from src.integrations.contracts.errors import ProviderError
from src.integrations.contracts.interfaces import CheckoutGateway, Credentials
from src.integrations.policy.checkout_service import CheckoutService


class RecordingGateway(CheckoutGateway):
    def __init__(self, error=None):
        self.error = error
        self.calls = []

    async def get_access_token(self, credentials):
        self.calls.append(("get_access_token", credentials))
        if self.error:
            raise self.error
        return "APP_USR-token"

    async def create_preference(self, access_token, preference):
        self.calls.append(("create_preference", access_token, preference))
        if self.error:
            raise self.error
        return "https://mp.test/checkout"

    async def get_total_payments(self, access_token, status):
        self.calls.append(("get_total_payments", access_token, status))
        if self.error:
            raise self.error
        return 3


@pytest.mark.asyncio
async def test_service_builds_credentials_for_gateway():
    gateway = RecordingGateway()
    service = CheckoutService(gateway)

    token = await service.get_access_token("ABC123", "123ABC")

    assert token == "APP_USR-token"
    assert gateway.calls == [("get_access_token", Credentials(client_id="ABC123", client_secret="123ABC"))]


@pytest.mark.asyncio
async def test_service_forwards_preference_and_total_payments(preference_body):
    gateway = RecordingGateway()
    service = CheckoutService(gateway)
    preference = decode_preference(json.dumps(preference_body))

    assert await service.create_preference("APP_USR-token", preference) == "https://mp.test/checkout"
    assert await service.get_total_payments("APP_USR-token", "approved") == 3
    assert gateway.calls == [
        ("create_preference", "APP_USR-token", preference),
        ("get_total_payments", "APP_USR-token", "approved"),
    ]


@pytest.mark.asyncio
async def test_service_passes_gateway_errors_through_unchanged():
    error = ProviderError("unauthorized", 401)
    service = CheckoutService(RecordingGateway(error=error))

    with pytest.raises(ProviderError) as exc_info:
        await service.get_access_token("ABC123", "123ABC")

    assert exc_info.value is error


@pytest.mark.asyncio
async def test_mock_gateway_returns_sandbox_checkout(preference_body):
    gateway = MockMercadoPagoGateway()
    preference = decode_preference(json.dumps(preference_body))

    token = await gateway.get_access_token(Credentials(client_id="ABC123", client_secret="123ABC"))
    checkout = await gateway.create_preference(token, preference)

    assert token.startswith("TEST-")
    assert checkout.startswith(f"{SANDBOX_CHECKOUT_URL}?pref_id=mock-")
    preference_id = checkout.split("pref_id=", 1)[1]
    assert gateway.preferences[preference_id] is preference


@pytest.mark.asyncio
async def test_mock_gateway_totals_by_status():
    gateway = MockMercadoPagoGateway(payment_totals={"approved": 4, "rejected": 1})

    assert await gateway.get_total_payments("TEST-token", "approved") == 4
    assert await gateway.get_total_payments("TEST-token", "pending") == 0
    assert await gateway.get_total_payments("TEST-token", "") == 5
