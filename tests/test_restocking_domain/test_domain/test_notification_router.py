"""Tests for the NotificationRouter."""

import logging
from unittest.mock import Mock, call

import pytest

from src.common.dtos.restock_dtos import RestockAlertDTO
from src.restocking_domain.domain.entities.product import Product
from src.restocking_domain.domain.entities.supplier import Supplier
from src.restocking_domain.domain.services.notification_router import NotificationRouter


@pytest.fixture
def router() -> NotificationRouter:
    return NotificationRouter()


@pytest.fixture
def mock_suppliers() -> list[Mock]:
    return [Mock(spec=Supplier), Mock(spec=Supplier)]


def test_sweep_well_stocked_catalog_sends_nothing(router, sample_products, mock_suppliers, caplog) -> None:
    caplog.set_level(logging.INFO)

    report = router.sweep(sample_products, mock_suppliers)

    assert report.restocking_needed is False
    assert report.alerts == []
    assert report.deliveries == 0
    for supplier in mock_suppliers:
        supplier.notify_restock.assert_not_called()
    assert "All products are well-stocked. No restocking needed." in caplog.text


def test_sweep_broadcasts_one_low_product_to_every_supplier(router, sample_products, mock_suppliers) -> None:
    sample_products[0].set_stock_level(4)  # Laptop, threshold 5

    report = router.sweep(sample_products, mock_suppliers)

    assert report.restocking_needed is True
    assert report.alerts == [RestockAlertDTO(product_id=101, product_name="Laptop", quantity=6)]
    assert report.deliveries == 2
    for supplier in mock_suppliers:
        supplier.notify_restock.assert_called_once_with(101, 6)


def test_sweep_ignores_assignments(router, sample_products, local_supplier, global_supplier) -> None:
    """An Appliances product still reaches the Electronics-only supplier."""
    local_supplier.assign_product(101)
    sample_products[3].set_stock_level(2)  # Refrigerator, threshold 3

    router.sweep(sample_products, [local_supplier, global_supplier])

    assert [(n.product_id, n.quantity) for n in local_supplier.notifications] == [(104, 4)]
    assert [(n.product_id, n.quantity) for n in global_supplier.notifications] == [(104, 4)]


def test_sweep_follows_catalog_order(router, sample_products, mock_suppliers) -> None:
    sample_products[4].set_stock_level(4)  # Microwave, threshold 4
    sample_products[1].set_stock_level(0)  # Smartphone, threshold 5

    report = router.sweep(sample_products, mock_suppliers)

    assert [a.product_id for a in report.alerts] == [102, 105]
    assert mock_suppliers[0].notify_restock.call_args_list == [call(102, 10), call(105, 4)]


def test_sweep_without_subscribers_still_reports(router, sample_products) -> None:
    sample_products[2].set_stock_level(1)  # Tablet, threshold 4

    report = router.sweep(sample_products, [])

    assert report.restocking_needed is True
    assert report.deliveries == 0


def test_notify_targeted_low_stock(router, sample_products) -> None:
    supplier = Mock(spec=Supplier)
    tablet = sample_products[2]
    tablet.set_stock_level(4)  # Exactly at threshold

    alert = router.notify_targeted(tablet, supplier)

    assert alert == RestockAlertDTO(product_id=103, product_name="Tablet", quantity=4)
    supplier.notify_restock.assert_called_once_with(103, 4)


def test_notify_targeted_is_noop_when_stock_is_fine(router, sample_products) -> None:
    supplier = Mock(spec=Supplier)

    alert = router.notify_targeted(sample_products[0], supplier)

    assert alert is None
    supplier.notify_restock.assert_not_called()


def test_alert_is_logged(router, caplog) -> None:
    caplog.set_level(logging.INFO)
    product = Product(104, "Refrigerator", "Appliances", 500.0, 1, 3)

    router.notify_targeted(product, Mock(spec=Supplier))

    assert "Low stock alert for: Refrigerator (ID: 104)" in caplog.text
