"""Delivery of restocking requests to suppliers."""

import logging
from typing import Iterable, Optional

from src.common.dtos.restock_dtos import RestockAlertDTO, SweepReportDTO
from src.restocking_domain.domain.entities.product import Product
from src.restocking_domain.domain.entities.supplier import Supplier
from src.restocking_domain.domain.services.restock_policy import needs_restocking, restock_quantity

logger = logging.getLogger(__name__)


class NotificationRouter:
    """Routes low-stock alerts either to every subscriber or to a single supplier."""

    def sweep(self, products: Iterable[Product], suppliers: list[Supplier]) -> SweepReportDTO:
        """
        Checks every product in catalog order and broadcasts each low-stock alert
        to all subscribed suppliers, regardless of their assignments.

        Args:
            products: The catalog to audit
            suppliers: Subscribed suppliers, in subscription order

        Returns:
            SweepReportDTO with one alert per product that needs restocking
        """
        report = SweepReportDTO()
        for product in products:
            if not needs_restocking(product):
                continue

            alert = self._build_alert(product)
            report.alerts.append(alert)
            for supplier in suppliers:
                supplier.notify_restock(alert.product_id, alert.quantity)
                report.deliveries += 1

        if not report.restocking_needed:
            logger.info("All products are well-stocked. No restocking needed.")

        return report

    def notify_targeted(self, product: Product, supplier: Supplier) -> Optional[RestockAlertDTO]:
        """Notifies one supplier about one product; silently does nothing if stock is fine."""
        if not needs_restocking(product):
            return None

        logger.info("Targeted Restock Notification")
        alert = self._build_alert(product)
        supplier.notify_restock(alert.product_id, alert.quantity)
        return alert

    def _build_alert(self, product: Product) -> RestockAlertDTO:
        logger.info(f"Low stock alert for: {product.name} (ID: {product.product_id})")
        return RestockAlertDTO(
            product_id=product.product_id,
            product_name=product.name,
            quantity=restock_quantity(product),
        )
