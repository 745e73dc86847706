# app/x402/__init__.py
"""
x402 Payment Protocol Integration Module.

The gateway takes part in the x402 pay-per-request flow as a relay: clients
ask for payment requirements for a catalog product, then submit a settlement
payload, and both are forwarded to the ZeroPay payment service.

Key components:
- payloads: decoding of raw settlement bodies

Routes live in app.api.endpoints.x402; upstream calls in
app.services.zeropay_api.
"""

__version__ = "0.1.0"
