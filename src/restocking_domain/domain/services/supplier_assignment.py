"""Category rules that bind suppliers to catalog products."""

import logging
from typing import Callable, Iterable

from src.restocking_domain.domain.entities.product import Product
from src.restocking_domain.domain.entities.supplier import Supplier, SupplierKind

logger = logging.getLogger(__name__)

ELECTRONICS_CATEGORY = "Electronics"

ASSIGNMENT_RULES: dict[SupplierKind, Callable[[Product], bool]] = {
    SupplierKind.LOCAL: lambda product: product.category == ELECTRONICS_CATEGORY,
    SupplierKind.GLOBAL: lambda product: product.category != ELECTRONICS_CATEGORY,
}


def is_responsible_for(kind: SupplierKind, product: Product) -> bool:
    """Whether a supplier of the given kind handles this product."""
    return ASSIGNMENT_RULES[kind](product)


def assign_products(supplier: Supplier, products: Iterable[Product]) -> list[int]:
    """Appends matching product IDs to the supplier, in catalog order.

    Returns the IDs that were added by this call.
    """
    added = []
    for product in products:
        if is_responsible_for(supplier.kind, product):
            supplier.assign_product(product.product_id)
            added.append(product.product_id)
    logger.debug(f"Assigned {added} to supplier '{supplier.name}'")
    return added


def reassign_products(supplier: Supplier, products: Iterable[Product]) -> list[int]:
    """Discards the supplier's current snapshot and takes a fresh one."""
    supplier.assigned_product_ids.clear()
    return assign_products(supplier, products)
