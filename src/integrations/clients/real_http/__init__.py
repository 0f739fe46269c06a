"""
Real HTTP integration clients.

These clients communicate with Mercado Pago over HTTPS.

Important:
- Must implement the same CheckoutGateway interface as the mock clients
- Provider failures surface as ProviderError / DecodeError / TransportError
  from src/integrations/contracts/errors.py

Switching:
The selection of mock vs real clients happens in src/api/dependencies.py only.
"""
