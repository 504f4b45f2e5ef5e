"""Restocking rules shared by the sweep and targeted notification paths."""

from src.restocking_domain.domain.entities.product import Product


def needs_restocking(product: Product) -> bool:
    return product.stock_level <= product.reorder_threshold


def restock_quantity(product: Product) -> int:
    """Units to order so stock climbs back to twice the reorder threshold.

    Only meaningful when needs_restocking(product) is true; the result is then
    at least the reorder threshold.
    """
    return product.reorder_threshold * 2 - product.stock_level
