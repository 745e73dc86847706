# app/api/models/gateway.py
from pydantic import BaseModel, Field

from app.services.errors import ErrorKind


class BuyForm(BaseModel):
    """Request model shared by product purchase and x402 requirements."""
    product: int = Field(..., description="Catalog product id", examples=[1])
    email: str = Field(..., description="Customer identifier passed to the payment service", examples=["a@x.com"])


class CheckoutErrorResponse(BaseModel):
    """Error document for the checkout-session routes."""
    error: ErrorKind


class X402ErrorResponse(BaseModel):
    """Error document for the x402 routes. Field name follows the x402 protocol."""
    errorReason: ErrorKind


class WebhookAck(BaseModel):
    status: str = "success"


def checkout_error(kind: ErrorKind) -> CheckoutErrorResponse:
    return CheckoutErrorResponse(error=kind)


def x402_error(kind: ErrorKind) -> X402ErrorResponse:
    return X402ErrorResponse(errorReason=kind)
