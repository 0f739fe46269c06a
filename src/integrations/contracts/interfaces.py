from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

import httpx

if TYPE_CHECKING:
    from .checkout import NewPreference


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Credentials:
    client_id: str
    client_secret: str


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------

class HTTPClient(Protocol):
    """Anything able to send one request and return its response.

    ``httpx.AsyncClient`` satisfies this; tests pass small stubs.
    """

    async def send(self, request: httpx.Request) -> httpx.Response:
        ...


# ---------------------------------------------------------------------------
# Abstract provider interface
# ---------------------------------------------------------------------------

class CheckoutGateway(ABC):
    """Every payment provider client (real or mock) must implement this interface."""

    @abstractmethod
    async def get_access_token(self, credentials: Credentials) -> str:
        """Exchange client credentials for an access token."""

    @abstractmethod
    async def create_preference(self, access_token: str, preference: "NewPreference") -> str:
        """Create a checkout preference and return its checkout URL."""

    @abstractmethod
    async def get_total_payments(self, access_token: str, status: str) -> int:
        """Return how many payments match the given status."""
