# app/services/errors.py
"""
Error kinds shared by the checkout and x402 flows.

Every failure a route can report is one of four kinds. The kind's value is
the exact string sent back to the caller; the field it is sent under depends
on the protocol family (see app/api/models/gateway.py).
"""
from enum import Enum


class ErrorKind(str, Enum):
    NO_PRODUCT = "no product"
    INVALID_DATA = "invalid data"
    NETWORK_ERROR = "network error"
    RESPONSE_ERROR = "response error"


class GatewayError(Exception):
    """Base class for failures that are reported to the caller as a document."""
    kind: ErrorKind

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind.value)


class ProductNotFoundError(GatewayError, LookupError):
    """The product id is not in the catalog. Raised before any upstream call."""
    kind = ErrorKind.NO_PRODUCT

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product {product_id} is not in the catalog")


class InvalidPayloadError(GatewayError, ValueError):
    """The inbound body is not a well-formed JSON document."""
    kind = ErrorKind.INVALID_DATA


class UpstreamNetworkError(GatewayError):
    """The call to the payment service could not be completed."""
    kind = ErrorKind.NETWORK_ERROR


class UpstreamResponseError(GatewayError):
    """The payment service answered, but its body is not JSON."""
    kind = ErrorKind.RESPONSE_ERROR
