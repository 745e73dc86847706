# app/api/endpoints/checkout.py
from fastapi import APIRouter, Path
from typing import Any
import logging

from app.services import zeropay_api
from app.services.catalog import resolve_price
from app.services.errors import GatewayError, ProductNotFoundError
from app.api.models.gateway import BuyForm, WebhookAck, checkout_error

router = APIRouter()
logger = logging.getLogger(__name__)

# Handlers are plain `def`: FastAPI runs them in its thread pool, so the
# blocking upstream call never holds up other requests.


@router.post("/products", summary="Buy a Catalog Product")
def buy_product(form: BuyForm) -> Any:
    """
    Creates a checkout session for a catalog product.

    The product id is priced from the catalog and a `{customer, amount}`
    session request is sent to the payment service. Failures are reported
    with HTTP 200 and an `error` field.
    """
    try:
        price = resolve_price(form.product)
    except ProductNotFoundError as e:
        logger.warning(f"Purchase rejected: {e}")
        return checkout_error(e.kind)

    try:
        session = zeropay_api.create_session(form.email, price)
    except GatewayError as e:
        logger.error(f"Failed to create session for product {form.product}: {e.kind.value}")
        return checkout_error(e.kind)

    logger.info(f"Checkout session created for product {form.product} (amount {price})")
    return session


@router.get("/sessions/{session_id}", summary="Fetch a Checkout Session")
def get_session(
    session_id: int = Path(..., description="Session id issued by the payment service.", examples=[42])
) -> Any:
    """Relays a checkout session lookup to the payment service."""
    try:
        return zeropay_api.fetch_session(session_id)
    except GatewayError as e:
        logger.error(f"Failed to fetch session {session_id}: {e.kind.value}")
        return checkout_error(e.kind)


@router.post("/webhook", summary="Payment Service Notification")
def webhook() -> WebhookAck:
    """Acknowledges payment service notifications. The body is ignored."""
    logger.info("Webhook notification received")
    return WebhookAck()
