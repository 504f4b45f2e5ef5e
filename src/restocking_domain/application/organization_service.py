"""Application service coordinating the catalog, suppliers and restock notifications."""

import logging
from threading import RLock
from typing import Optional

from src.common.dtos.restock_dtos import RestockAlertDTO, SaleResultDTO, SweepReportDTO
from src.common.exceptions.custom_exceptions import ProductNotFound, UnassignedSupplier
from src.restocking_domain.domain.entities.product import Product
from src.restocking_domain.domain.entities.supplier import Supplier
from src.restocking_domain.domain.repositories.product_repository import IProductRepository
from src.restocking_domain.domain.services import restock_policy
from src.restocking_domain.domain.services.notification_router import NotificationRouter
from src.restocking_domain.domain.services.supplier_assignment import reassign_products

logger = logging.getLogger(__name__)


class Organization:
    """Owns the product catalog and the list of subscribed suppliers.

    Suppliers are held by reference only; their lifetime belongs to the caller.
    """

    def __init__(self, product_repo: IProductRepository, notification_router: NotificationRouter) -> None:
        """Initializes the Organization."""
        self.product_repo = product_repo
        self.notification_router = notification_router
        self._subscribed_suppliers: list[Supplier] = []
        # Sale-then-notify is a read-modify-notify sequence; keep it serialized
        self._lock = RLock()

    # --- Catalog ---

    def add_product(self, product: Product) -> None:
        with self._lock:
            self.product_repo.add_product(product)

    def remove_product(self, product_id: int) -> None:
        with self._lock:
            self.product_repo.remove_product(product_id)

    def find_product_by_id(self, product_id: int) -> Optional[Product]:
        return self.product_repo.find_product_by_id(product_id)

    def get_product(self, product_id: int) -> Product:
        """Same as find_product_by_id, but a miss raises ProductNotFound."""
        product = self.product_repo.find_product_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)
        return product

    def get_all_products(self) -> list[Product]:
        return self.product_repo.get_all_products()

    def sell(self, product_id: int, quantity: int) -> int:
        """Sells units of a product and returns the remaining stock.

        No notification is sent; callers decide whether to follow up.
        """
        with self._lock:
            return self.get_product(product_id).sell(quantity)

    def set_stock_level(self, product_id: int, stock_level: int) -> None:
        with self._lock:
            self.get_product(product_id).set_stock_level(stock_level)
            logger.info(f"Stock level of product {product_id} reset to {stock_level}")

    def needs_restocking(self, product: Product) -> bool:
        return restock_policy.needs_restocking(product)

    def restock_quantity(self, product: Product) -> int:
        return restock_policy.restock_quantity(product)

    # --- Subscriptions ---

    def subscribe_supplier(self, supplier: Supplier) -> None:
        """Adds a supplier to the broadcast list. Duplicates are not filtered."""
        with self._lock:
            self._subscribed_suppliers.append(supplier)

    def get_subscribed_suppliers(self) -> list[Supplier]:
        return list(self._subscribed_suppliers)

    def refresh_supplier_assignments(self, supplier: Supplier) -> list[int]:
        """Re-snapshots a supplier's assignments against the current catalog."""
        with self._lock:
            assigned = reassign_products(supplier, self.get_all_products())
        logger.info(f"Refreshed assignments for '{supplier.name}': {assigned}")
        return assigned

    def get_products_for_supplier(self, supplier: Supplier) -> list[Product]:
        """Resolves a supplier's assigned IDs, skipping any no longer in the catalog."""
        products = []
        for product_id in supplier.get_assigned_products():
            product = self.find_product_by_id(product_id)
            if product:
                products.append(product)
        return products

    def get_sellable_product(self, supplier: Supplier, product_id: int) -> Product:
        """Returns the product if this supplier may sell it.

        Raises:
            ProductNotFound: product_id is not in the catalog
            UnassignedSupplier: the product is not in the supplier's assignment list
        """
        product = self.get_product(product_id)
        if not supplier.is_assigned(product_id):
            raise UnassignedSupplier(supplier.name, product_id)
        return product

    # --- Notifications ---

    def check_inventory_and_notify(self) -> SweepReportDTO:
        """Audits the whole catalog and broadcasts alerts to every subscriber."""
        with self._lock:
            report = self.notification_router.sweep(self.get_all_products(), self._subscribed_suppliers)
        logger.info(
            f"Inventory check finished: {len(report.alerts)} product(s) low, {report.deliveries} notification(s) sent"
        )
        return report

    def send_targeted_notification(self, product: Product, supplier: Supplier) -> Optional[RestockAlertDTO]:
        with self._lock:
            return self.notification_router.notify_targeted(product, supplier)

    def sell_for_supplier(self, supplier: Supplier, product_id: int, quantity: int) -> SaleResultDTO:
        """
        Point-of-sale flow: validates the product and the supplier's assignment,
        records the sale and alerts that supplier if the product ran low.

        Raises:
            ProductNotFound: product_id is not in the catalog
            UnassignedSupplier: the product is not in the supplier's assignment list
            InvalidQuantity: quantity is zero or negative
            InsufficientStock: quantity exceeds the current stock
        """
        with self._lock:
            product = self.get_sellable_product(supplier, product_id)
            remaining_stock = product.sell(quantity)
            logger.info(f"Sale successful! Remaining stock: {remaining_stock}")

            alert = None
            if restock_policy.needs_restocking(product):
                alert = self.send_targeted_notification(product, supplier)

        return SaleResultDTO(
            product_id=product_id,
            sold_quantity=quantity,
            remaining_stock=remaining_stock,
            alert=alert,
        )
