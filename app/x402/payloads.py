# app/x402/payloads.py
"""
Decoding of x402 settlement payloads.

The gateway does not interpret the settlement schema; it only checks that the
body is well-formed JSON before relaying it to the payment service.
"""
import json
import logging
from typing import Any

from app.services.errors import InvalidPayloadError

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    """NaN and Infinity are accepted by json.loads but are not JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_settlement_payload(raw: bytes) -> Any:
    """
    Decode a raw request body into a JSON value.

    Args:
        raw: Request body bytes

    Returns:
        The decoded JSON value (object, array or scalar)

    Raises:
        InvalidPayloadError: If the body is empty, not UTF-8 or not JSON
    """
    if not raw or not raw.strip():
        logger.warning("x402: Empty settlement payload")
        raise InvalidPayloadError("Empty settlement payload")

    try:
        return json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except UnicodeDecodeError as e:
        logger.warning(f"x402: Settlement payload is not UTF-8: {e}")
        raise InvalidPayloadError(str(e)) from e
    except ValueError as e:
        logger.warning(f"x402: Failed to parse settlement payload JSON: {e}")
        raise InvalidPayloadError(str(e)) from e
