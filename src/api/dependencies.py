import logging
from functools import lru_cache

import httpx
from fastapi import Depends, FastAPI, Request

from src.integrations.clients.mocks.mercadopago import MockMercadoPagoGateway
from src.integrations.clients.real_http.mercadopago import MercadoPagoGateway
from src.integrations.contracts.interfaces import CheckoutGateway
from src.integrations.policy.checkout_service import CheckoutService
from src.utils.config_loader import GatewayConfig, load_gateway_config

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_gateway_config() -> GatewayConfig:
    return load_gateway_config()


@lru_cache(maxsize=1)
def get_mock_gateway() -> MockMercadoPagoGateway:
    return MockMercadoPagoGateway()


def get_http_client(app: FastAPI, config: GatewayConfig) -> httpx.AsyncClient:
    """Shared provider client, created on first use and closed on shutdown."""
    client = getattr(app.state, "http_client", None)
    if client is None or client.is_closed:
        client = httpx.AsyncClient(timeout=config.timeout_seconds)
        app.state.http_client = client
        logger.info("Opened Mercado Pago HTTP client (timeout=%ss)", config.timeout_seconds)
    return client


async def close_http_client(app: FastAPI) -> None:
    client = getattr(app.state, "http_client", None)
    if client is not None:
        await client.aclose()
        app.state.http_client = None
        logger.info("Closed Mercado Pago HTTP client")


def select_gateway(config: GatewayConfig, app: FastAPI) -> CheckoutGateway:
    """The one place where mock vs real provider clients are chosen."""
    if config.uses_real_integrations:
        return MercadoPagoGateway(get_http_client(app, config), base_url=config.base_url)
    logger.debug("Using mock Mercado Pago gateway (mode=%s)", config.integrations_mode)
    return get_mock_gateway()


def get_checkout_service(
    request: Request,
    config: GatewayConfig = Depends(get_gateway_config),
) -> CheckoutService:
    return CheckoutService(select_gateway(config, request.app))
