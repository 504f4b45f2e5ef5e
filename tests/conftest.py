# tests/conftest.py
import pytest

from src.common.config.settings import settings
from src.restocking_domain.application.organization_service import Organization
from src.restocking_domain.domain.entities.product import Product
from src.restocking_domain.domain.entities.supplier import Supplier, SupplierKind
from src.restocking_domain.domain.services.notification_router import NotificationRouter
from src.restocking_domain.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


@pytest.fixture(autouse=True)
def mock_settings_timezone(mocker) -> None:
    """Pins the timezone in settings for consistent notification timestamps."""
    mocker.patch.object(settings, "TIMEZONE", "UTC")


@pytest.fixture
def sample_products() -> list[Product]:
    """The five seed products: three Electronics, two Appliances."""
    return [
        Product(101, "Laptop", "Electronics", 1000.0, 10, 5),
        Product(102, "Smartphone", "Electronics", 500.0, 10, 5),
        Product(103, "Tablet", "Electronics", 300.0, 7, 4),
        Product(104, "Refrigerator", "Appliances", 500.0, 5, 3),
        Product(105, "Microwave", "Appliances", 200.0, 8, 4),
    ]


@pytest.fixture
def product_repository(sample_products) -> InMemoryProductRepository:
    return InMemoryProductRepository(sample_products)


@pytest.fixture
def organization(product_repository) -> Organization:
    """Organization over the seed catalog with a real router and no subscribers."""
    return Organization(product_repo=product_repository, notification_router=NotificationRouter())


@pytest.fixture
def local_supplier() -> Supplier:
    return Supplier("Local Supplier", SupplierKind.LOCAL)


@pytest.fixture
def global_supplier() -> Supplier:
    return Supplier("Global Supplier", SupplierKind.GLOBAL)


@pytest.fixture
def subscribed_organization(organization, local_supplier, global_supplier) -> Organization:
    """Organization with the local and then the global supplier subscribed."""
    local_supplier.subscribe_to_organization(organization)
    global_supplier.subscribe_to_organization(organization)
    return organization
