"""
Contracts (data models).

This folder defines the shapes exchanged with the payment provider:
- the checkout preference payload and its validation rules
- the gateway interface every provider client implements
- the error taxonomy and the HTTP status each error renders to

Both mock and real HTTP clients use these contracts.
"""
