# app/services/catalog.py
"""
Static product catalog.

Prices are integers in minor currency units (cents). The catalog is loaded
once from settings and never written afterwards, so lookups need no locking.
"""
import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from app.core.config import settings
from app.services.errors import ProductNotFoundError

logger = logging.getLogger(__name__)


class ProductCatalog:
    """Read-only mapping of product id to price."""

    def __init__(self, prices: Mapping[int, int]):
        self._prices = MappingProxyType(dict(prices))

    def resolve(self, product_id: int) -> int:
        """
        Look up the price for a product.

        Args:
            product_id: Catalog identifier

        Returns:
            Price in minor currency units

        Raises:
            ProductNotFoundError: If the id is not configured
        """
        try:
            return self._prices[product_id]
        except KeyError:
            raise ProductNotFoundError(product_id) from None

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._prices

    def __iter__(self) -> Iterator[int]:
        return iter(self._prices)

    def __len__(self) -> int:
        return len(self._prices)

    def __repr__(self) -> str:
        return f"ProductCatalog({dict(self._prices)!r})"


@lru_cache()
def get_catalog() -> ProductCatalog:
    """The configured catalog, built once on first use."""
    return ProductCatalog(settings.PRODUCTS)


def resolve_price(product_id: int, products: Optional[Mapping[int, int]] = None) -> int:
    """
    Resolve a product id against the configured catalog.

    Args:
        product_id: Catalog identifier
        products: Optional explicit catalog. Uses config if not provided.

    Raises:
        ProductNotFoundError: If the id is not in the catalog
    """
    catalog = ProductCatalog(products) if products is not None else get_catalog()
    price = catalog.resolve(product_id)
    logger.debug(f"Resolved product {product_id} to price {price}")
    return price
