"""In-memory implementation of the product catalog repository."""

import logging
from typing import Optional

from src.restocking_domain.domain.entities.product import Product
from src.restocking_domain.domain.repositories.product_repository import IProductRepository

logger = logging.getLogger(__name__)


class InMemoryProductRepository(IProductRepository):
    """Ordered, process-local product catalog."""

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: list[Product] = list(products) if products else []

    def add_product(self, product: Product) -> None:
        if self.find_product_by_id(product.product_id) is not None:
            # Allowed, but lookups will only ever see the first entry
            logger.warning(f"Duplicate product ID {product.product_id} added to catalog")
        self._products.append(product)

    def remove_product(self, product_id: int) -> None:
        before = len(self._products)
        # Slice assignment keeps the list returned by get_all_products() live
        self._products[:] = [p for p in self._products if p.product_id != product_id]
        logger.debug(f"Removed {before - len(self._products)} product(s) with ID {product_id}")

    def find_product_by_id(self, product_id: int) -> Optional[Product]:
        for product in self._products:
            if product.product_id == product_id:
                return product
        return None

    def get_all_products(self) -> list[Product]:
        return self._products
