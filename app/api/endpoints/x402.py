# app/api/endpoints/x402.py
from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from typing import Any
import logging

from app.services import zeropay_api
from app.services.catalog import resolve_price
from app.services.errors import GatewayError, ProductNotFoundError, InvalidPayloadError
from app.api.models.gateway import BuyForm, x402_error
from app.x402.payloads import parse_settlement_payload

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/requirements", summary="Get x402 Payment Requirements")
def get_requirements(form: BuyForm) -> Any:
    """
    Returns what a payer must produce to buy a catalog product via x402.

    Failures are reported with HTTP 200 and an `errorReason` field.
    """
    try:
        price = resolve_price(form.product)
    except ProductNotFoundError as e:
        logger.warning(f"x402: Requirements rejected: {e}")
        return x402_error(e.kind)

    try:
        requirements = zeropay_api.get_x402_requirements(form.email, price)
    except GatewayError as e:
        logger.error(f"x402: Failed to get requirements for product {form.product}: {e.kind.value}")
        return x402_error(e.kind)

    logger.info(f"x402: Requirements issued for product {form.product} (amount {price})")
    return requirements


@router.post("/payments", summary="Submit an x402 Payment")
async def submit_payment(request: Request) -> Any:
    """
    Relays a settlement payload to the payment service for verification.

    The body is read raw and only checked for being well-formed JSON;
    anything else is answered with `{"errorReason": "invalid data"}`.
    """
    raw_body = await request.body()

    try:
        payload = parse_settlement_payload(raw_body)
    except InvalidPayloadError as e:
        return x402_error(e.kind)

    try:
        # requests is blocking, keep it off the event loop
        result = await run_in_threadpool(zeropay_api.submit_x402_payment, payload)
    except GatewayError as e:
        logger.error(f"x402: Payment submission failed: {e.kind.value}")
        return x402_error(e.kind)

    logger.info("x402: Payment submitted to payment service")
    return result
