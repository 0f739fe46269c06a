import pytest
from fastapi import FastAPI

from src.api.dependencies import close_http_client, get_http_client, get_mock_gateway, select_gateway
from src.integrations.clients.mocks.mercadopago import MockMercadoPagoGateway
from src.integrations.clients.real_http.mercadopago import MercadoPagoGateway
from src.utils.config_loader import GatewayConfig


@pytest.mark.asyncio
async def test_real_gateways_share_one_http_client():
    app = FastAPI()
    config = GatewayConfig(integrations_mode="real", timeout_seconds=5)

    first = select_gateway(config, app)
    second = select_gateway(config, app)

    assert isinstance(first, MercadoPagoGateway)
    assert first.client is second.client
    assert first.client is app.state.http_client

    await close_http_client(app)

    assert first.client.is_closed
    assert app.state.http_client is None


@pytest.mark.asyncio
async def test_closed_http_client_is_replaced():
    app = FastAPI()
    config = GatewayConfig(integrations_mode="real")
    client = get_http_client(app, config)
    await client.aclose()

    replacement = get_http_client(app, config)

    assert replacement is not client
    assert not replacement.is_closed
    await close_http_client(app)


def test_mock_mode_uses_one_gateway_and_no_http_client():
    get_mock_gateway.cache_clear()
    app = FastAPI()
    config = GatewayConfig(integrations_mode="mock")

    first = select_gateway(config, app)
    second = select_gateway(config, app)

    assert isinstance(first, MockMercadoPagoGateway)
    assert first is second
    assert getattr(app.state, "http_client", None) is None


@pytest.mark.asyncio
async def test_close_without_client_is_a_no_op():
    app = FastAPI()

    await close_http_client(app)

    assert getattr(app.state, "http_client", None) is None
