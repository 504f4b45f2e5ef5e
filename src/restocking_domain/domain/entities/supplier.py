"""Supplier entity."""

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

from src.common.config.settings import settings
from src.common.dtos.restock_dtos import RestockNotificationDTO
from src.common.utils.date_utils import now_in_configured_timezone

if TYPE_CHECKING:
    from src.restocking_domain.application.organization_service import Organization

logger = logging.getLogger(__name__)


class SupplierKind(Enum):
    LOCAL = "Local"
    GLOBAL = "Global"


# How each kind acknowledges a restocking request
_DELIVERY_NOTES = {
    SupplierKind.LOCAL: "Local Supplier will restock immediately!",
    SupplierKind.GLOBAL: "Global Supplier will process restocking (may take longer).",
}


@dataclass(eq=False)
class Supplier:
    """A restocking partner bound to a subset of the catalog.

    assigned_product_ids is a snapshot taken when the supplier subscribes;
    products added to the catalog later are not picked up automatically.
    """

    name: str
    kind: SupplierKind
    assigned_product_ids: list[int] = field(default_factory=list)
    # Most recent deliveries only; older ones drop off the front
    notifications: deque[RestockNotificationDTO] = field(
        default_factory=lambda: deque(maxlen=settings.NOTIFICATION_HISTORY_SIZE)
    )
    organization: Optional["Organization"] = field(default=None, repr=False)

    def subscribe_to_organization(self, organization: "Organization") -> None:
        """Registers with the organization and snapshots the matching products."""
        # Imported here to keep the entity module free of an import cycle
        from src.restocking_domain.domain.services.supplier_assignment import assign_products

        self.organization = organization
        organization.subscribe_supplier(self)
        assign_products(self, organization.get_all_products())
        logger.info(
            f"{self.kind.value} supplier '{self.name}' subscribed with {len(self.assigned_product_ids)} assigned products"
        )

    def assign_product(self, product_id: int) -> None:
        self.assigned_product_ids.append(product_id)

    def get_assigned_products(self) -> list[int]:
        return self.assigned_product_ids

    def is_assigned(self, product_id: int) -> bool:
        return product_id in self.assigned_product_ids

    def notify_restock(self, product_id: int, quantity: int) -> None:
        """Receives a restocking request. Terminal sink: nothing flows back."""
        logger.info(
            f"{self.kind.value} Supplier {self.name} received restocking request for "
            f"Product ID: {product_id}, Quantity: {quantity}"
        )
        logger.info(_DELIVERY_NOTES[self.kind])
        self.notifications.append(
            RestockNotificationDTO(product_id=product_id, quantity=quantity, received_at=now_in_configured_timezone())
        )
