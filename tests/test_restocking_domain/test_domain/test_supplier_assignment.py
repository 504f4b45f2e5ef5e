"""Tests for category-based supplier assignment."""

from src.restocking_domain.domain.entities.product import Product
from src.restocking_domain.domain.entities.supplier import Supplier, SupplierKind
from src.restocking_domain.domain.services.supplier_assignment import (
    assign_products,
    is_responsible_for,
    reassign_products,
)


def test_local_supplier_gets_exactly_electronics(organization, local_supplier) -> None:
    local_supplier.subscribe_to_organization(organization)
    assert local_supplier.get_assigned_products() == [101, 102, 103]


def test_global_supplier_gets_the_complement(organization, global_supplier) -> None:
    global_supplier.subscribe_to_organization(organization)
    assert global_supplier.get_assigned_products() == [104, 105]


def test_assignments_partition_the_catalog(subscribed_organization, local_supplier, global_supplier) -> None:
    all_ids = {p.product_id for p in subscribed_organization.get_all_products()}
    local_ids = set(local_supplier.get_assigned_products())
    global_ids = set(global_supplier.get_assigned_products())

    assert local_ids | global_ids == all_ids
    assert not local_ids & global_ids


def test_assignment_is_a_snapshot(organization, local_supplier) -> None:
    """Products added after subscribing are not picked up."""
    local_supplier.subscribe_to_organization(organization)

    organization.add_product(Product(106, "Headphones", "Electronics", 80.0, 12, 4))

    assert 106 not in local_supplier.get_assigned_products()
    assert local_supplier.get_assigned_products() == [101, 102, 103]


def test_resubscribing_duplicates_entries(organization, local_supplier) -> None:
    local_supplier.subscribe_to_organization(organization)
    local_supplier.subscribe_to_organization(organization)

    assert local_supplier.get_assigned_products() == [101, 102, 103, 101, 102, 103]
    assert organization.get_subscribed_suppliers() == [local_supplier, local_supplier]


def test_category_match_is_exact() -> None:
    lowercase = Product(200, "Radio", "electronics", 20.0, 3, 1)

    assert not is_responsible_for(SupplierKind.LOCAL, lowercase)
    assert is_responsible_for(SupplierKind.GLOBAL, lowercase)


def test_assign_products_returns_added_ids(sample_products) -> None:
    supplier = Supplier("Global Supplier", SupplierKind.GLOBAL)

    added = assign_products(supplier, sample_products)

    assert added == [104, 105]
    assert supplier.get_assigned_products() == [104, 105]


def test_reassign_products_replaces_snapshot(sample_products) -> None:
    supplier = Supplier("Local Supplier", SupplierKind.LOCAL)
    assign_products(supplier, sample_products)
    sample_products.append(Product(106, "Headphones", "Electronics", 80.0, 12, 4))

    refreshed = reassign_products(supplier, sample_products)

    assert refreshed == [101, 102, 103, 106]
    assert supplier.get_assigned_products() == [101, 102, 103, 106]
