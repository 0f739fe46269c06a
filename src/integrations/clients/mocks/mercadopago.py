"""
Mercado Pago MOCK client.

⚠️  This is a mock implementation for development and testing.
    It makes no network calls. Select it with INTEGRATIONS_MODE=mock.
"""

import logging
import uuid
from typing import Dict

from src.integrations.contracts.checkout import NewPreference
from src.integrations.contracts.interfaces import CheckoutGateway, Credentials

logger = logging.getLogger(__name__)

SANDBOX_CHECKOUT_URL = "https://sandbox.mercadopago.com/checkout/v1/redirect"


class MockMercadoPagoGateway(CheckoutGateway):
    """Returns realistic-looking fake tokens, checkout URLs and payment counts.

    One instance serves the whole process in mock mode, so created preferences
    stay in ``preferences`` (keyed by preference id) for later inspection.
    """

    def __init__(self, payment_totals: Dict[str, int] = None):
        self.payment_totals = dict(payment_totals or {})
        self.preferences: Dict[str, NewPreference] = {}

    async def get_access_token(self, credentials: Credentials) -> str:
        logger.info("[MOCK] issuing access token for client %s", credentials.client_id)
        return f"TEST-{uuid.uuid4().hex}"

    async def create_preference(self, access_token: str, preference: NewPreference) -> str:
        preference_id = f"mock-{uuid.uuid4().hex[:12]}"
        self.preferences[preference_id] = preference
        logger.info("[MOCK] created preference %s with %d item(s)", preference_id, len(preference.items or []))
        return f"{SANDBOX_CHECKOUT_URL}?pref_id={preference_id}"

    async def get_total_payments(self, access_token: str, status: str) -> int:
        if not status:
            return sum(self.payment_totals.values())
        return self.payment_totals.get(status, 0)
