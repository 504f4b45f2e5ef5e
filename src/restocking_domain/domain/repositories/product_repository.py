"""Product catalog repository interface."""
from abc import ABC, abstractmethod
from typing import Optional

from src.restocking_domain.domain.entities.product import Product


class IProductRepository(ABC):

    @abstractmethod
    def add_product(self, product: Product) -> None:
        """Appends a product to the catalog. IDs are not checked for uniqueness."""
        pass

    @abstractmethod
    def remove_product(self, product_id: int) -> None:
        """Removes every product carrying the given ID."""
        pass

    @abstractmethod
    def find_product_by_id(self, product_id: int) -> Optional[Product]:
        """Returns the first product with the given ID, or None."""
        pass

    @abstractmethod
    def get_all_products(self) -> list[Product]:
        """Returns the catalog in insertion order."""
        pass
