"""
Mock integration clients.

These clients return fake (but realistic) responses without calling any external API.
They are used when:
- No Mercado Pago test credentials are at hand
- We want to exercise the API end-to-end without external dependencies

Important:
- Mock clients implement the SAME CheckoutGateway interface as real HTTP clients.

Switching to real:
Set INTEGRATIONS_MODE=real (the default); src/api/dependencies.py picks the client.
"""
