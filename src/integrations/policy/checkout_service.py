"""
Checkout Service

Adapts caller-shaped arguments into gateway calls. Gateway errors pass
through unchanged; rendering them is the API layer's job.
"""

from src.integrations.contracts.checkout import NewPreference
from src.integrations.contracts.interfaces import CheckoutGateway, Credentials


class CheckoutService:
    def __init__(self, gateway: CheckoutGateway):
        self.gateway = gateway

    async def get_access_token(self, client_id: str, client_secret: str) -> str:
        return await self.gateway.get_access_token(Credentials(client_id=client_id, client_secret=client_secret))

    async def create_preference(self, access_token: str, preference: NewPreference) -> str:
        return await self.gateway.create_preference(access_token, preference)

    async def get_total_payments(self, access_token: str, status: str) -> int:
        return await self.gateway.get_total_payments(access_token, status)
