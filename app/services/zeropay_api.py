# app/services/zeropay_api.py
import requests
from requests.exceptions import RequestException
import logging
from typing import Dict, Any

from app.core.config import settings
from app.services.errors import UpstreamNetworkError, UpstreamResponseError

logger = logging.getLogger(__name__)

# Default for calls without a body; None is a payload in its own right (JSON null)
_NO_BODY = object()

SESSIONS_PATH = "sessions"
X402_REQUIREMENTS_PATH = "x402/requirements"
X402_PAYMENTS_PATH = "x402/payments"


def build_upstream_url(path: str) -> str:
    """Join the configured payment service URL with an API path."""
    base = str(settings.SERVICE).rstrip("/")
    return f"{base}/{path.lstrip('/')}"


def _call_upstream(method: str, path: str, payload: Any = _NO_BODY) -> Any:
    """
    Sends one request to the payment service and returns its parsed JSON body.

    The credential goes in the `apikey` query parameter. The body is returned
    as-is whatever the upstream status code is.

    Raises:
        UpstreamNetworkError: If the request could not be completed
        UpstreamResponseError: If the response body is not JSON
    """
    api_url = build_upstream_url(path)
    request_kwargs: Dict[str, Any] = {
        "params": {"apikey": settings.APIKEY},
        "timeout": settings.UPSTREAM_TIMEOUT,
    }
    if payload is None:
        # requests drops json=None, so JSON null is sent as raw data
        request_kwargs["data"] = b"null"
        request_kwargs["headers"] = {"Content-Type": "application/json"}
    elif payload is not _NO_BODY:
        request_kwargs["json"] = payload

    try:
        response = requests.request(method, api_url, **request_kwargs)
    except RequestException as e:
        # Exception text can include the full URL with the apikey, so only the type is logged
        logger.error(f"Error reaching payment service ({method} {api_url}): {type(e).__name__}")
        raise UpstreamNetworkError(str(e)) from e

    try:
        data = response.json()
    except ValueError as e:
        logger.error(
            f"Unparsable response from payment service ({method} {api_url}), "
            f"status {response.status_code}: {e}"
        )
        raise UpstreamResponseError(str(e)) from e

    logger.info(f"Payment service {method} {api_url} answered with status {response.status_code}")
    return data


def create_session(email: str, amount: int) -> Any:
    """
    Creates a checkout session for a customer.

    Args:
        email: Customer identifier, passed through unchecked
        amount: Price in minor currency units

    Returns:
        The session document from the payment service
    """
    return _call_upstream(
        "POST",
        SESSIONS_PATH,
        payload={"customer": email, "amount": amount},
    )


def fetch_session(session_id: int) -> Any:
    """Fetches a checkout session by id."""
    return _call_upstream("GET", f"{SESSIONS_PATH}/{session_id}")


def get_x402_requirements(email: str, amount: int) -> Any:
    """
    Asks the payment service what an x402 payer must produce for this amount.

    Returns:
        The requirements document from the payment service
    """
    return _call_upstream(
        "POST",
        X402_REQUIREMENTS_PATH,
        payload={"customer": email, "amount": amount},
    )


def submit_x402_payment(payload: Any) -> Any:
    """
    Forwards an x402 settlement payload for verification.

    The payload is sent unmodified; its schema belongs to the payment service.
    """
    return _call_upstream("POST", X402_PAYMENTS_PATH, payload=payload)
