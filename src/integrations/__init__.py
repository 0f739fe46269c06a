"""
Integrations layer.
This package contains all code used to communicate with the payment provider
(Mercado Pago): token exchange, checkout preferences and payment search.

Key rule:
- API endpoints MUST NOT call the provider directly.
- Endpoints call CheckoutService, which delegates to a CheckoutGateway client
  (under src/integrations/clients).
- We use the MOCK client during development and the REAL_HTTP client otherwise.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (src/api/dependencies.py).
"""

from .contracts.checkout import (
    Address,
    Item,
    NewPreference,
    Payer,
    Phone,
    Redirect,
    decode_preference,
    ensure_valid_preference,
    validate_preference,
)
from .contracts.errors import (
    AuthRequiredError,
    BodyDecodeError,
    CheckoutError,
    DecodeError,
    MissingParameterError,
    PreferenceValidationError,
    ProviderError,
    TransportError,
)
from .contracts.interfaces import CheckoutGateway, Credentials, HTTPClient

__all__ = [
    # interfaces
    "CheckoutGateway", "Credentials", "HTTPClient",
    # checkout
    "Address", "Item", "NewPreference", "Payer", "Phone", "Redirect",
    "decode_preference", "ensure_valid_preference", "validate_preference",
    # errors
    "AuthRequiredError", "BodyDecodeError", "CheckoutError", "DecodeError",
    "MissingParameterError", "PreferenceValidationError", "ProviderError", "TransportError",
]
