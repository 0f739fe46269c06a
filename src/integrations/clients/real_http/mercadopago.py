"""
Real Mercado Pago HTTP Client.

Used when INTEGRATIONS_MODE is "real" (the default). Each method performs
exactly one outbound request; there are no retries.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from src.integrations.contracts.checkout import NewPreference
from src.integrations.contracts.errors import TransportError
from src.integrations.contracts.interfaces import CheckoutGateway, Credentials, HTTPClient
from src.integrations.policy.response_wrappers import (
    normalize_access_token_response,
    normalize_payment_search_response,
    normalize_preference_response,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.mercadopago.com"


class MercadoPagoGateway(CheckoutGateway):
    def __init__(self, client: HTTPClient, base_url: Optional[str] = None) -> None:
        self.client = client
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")

    async def get_access_token(self, credentials: Credentials) -> str:
        request = httpx.Request(
            "POST",
            f"{self.base_url}/oauth/token",
            params={
                "client_id": credentials.client_id,
                "client_secret": credentials.client_secret,
                "grant_type": "client_credentials",
            },
        )
        response = await self._send(request)
        return normalize_access_token_response(response)

    async def create_preference(self, access_token: str, preference: NewPreference) -> str:
        request = httpx.Request(
            "POST",
            f"{self.base_url}/checkout/preferences",
            params={"access_token": access_token},
            json=preference.to_payload(),
        )
        response = await self._send(request)
        return normalize_preference_response(response)

    async def get_total_payments(self, access_token: str, status: str) -> int:
        params: Dict[str, Any] = {"limit": 1, "offset": 0, "access_token": access_token}
        if status:
            params["status"] = status
        request = httpx.Request("GET", f"{self.base_url}/v1/payments/search", params=params)
        response = await self._send(request)
        return normalize_payment_search_response(response)

    async def _send(self, request: httpx.Request) -> httpx.Response:
        # Query strings carry credentials, so only the path is logged.
        logger.info("Calling Mercado Pago: %s %s", request.method, request.url.path)
        try:
            response = await self.client.send(request)
        except httpx.RequestError as exc:
            logger.error("Request error connecting to Mercado Pago %s: %s", request.url.path, exc)
            raise TransportError(f"couldn't reach payment provider: {exc}") from exc

        if response.status_code >= 400:
            logger.warning(
                "Mercado Pago rejected %s %s: status=%s",
                request.method,
                request.url.path,
                response.status_code,
            )
        else:
            logger.info("Received Mercado Pago response: status=%s", response.status_code)
        return response
