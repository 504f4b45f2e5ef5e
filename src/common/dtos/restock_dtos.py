"""Data Transfer Objects for restocking notifications and sales."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class RestockAlertDTO:
    """A single low-stock alert raised for one product."""

    product_id: int
    product_name: str
    quantity: int  # Units to order


@dataclass(frozen=True)
class RestockNotificationDTO:
    """What a supplier received: the request itself plus when it arrived."""

    product_id: int
    quantity: int
    received_at: datetime | None = None


@dataclass
class SweepReportDTO:
    """Outcome of a full inventory check."""

    alerts: list[RestockAlertDTO] = field(default_factory=list)
    deliveries: int = 0  # Number of notify_restock calls made

    @property
    def restocking_needed(self) -> bool:
        return bool(self.alerts)


@dataclass
class SaleResultDTO:
    """Outcome of a successful point-of-sale transaction."""

    product_id: int
    sold_quantity: int
    remaining_stock: int
    alert: RestockAlertDTO | None = None  # Set when a targeted notification went out
