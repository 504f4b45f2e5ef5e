"""Loads the seed product catalog from JSON."""

import json
import logging

from src.common.exceptions.custom_exceptions import ApplicationError
from src.restocking_domain.domain.entities.product import Product

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("product_id", "name", "category", "price", "stock_level", "reorder_threshold")


def load_seed_products(config_path: str) -> list[Product]:
    """Reads the catalog file and builds Product entities in file order."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            catalog_data = json.load(f)
    except FileNotFoundError:
        raise ApplicationError(f"Catalog seed file not found at {config_path}")
    except json.JSONDecodeError as e:
        raise ApplicationError(f"Error decoding catalog seed file: {e}", original_exception=e)

    # Handle different JSON structures
    if isinstance(catalog_data, dict) and "products" in catalog_data:
        products_list = catalog_data["products"]
    elif isinstance(catalog_data, list):
        products_list = catalog_data
    else:
        raise ApplicationError("Invalid catalog seed format")

    products = [create_product(product_data) for product_data in products_list]
    logger.info(f"Loaded {len(products)} products from {config_path}")
    return products


def create_product(product_data: dict) -> Product:
    """Creates a Product from one catalog entry."""
    missing = [name for name in REQUIRED_FIELDS if product_data.get(name) is None]
    if missing:
        raise ApplicationError(f"Missing required product fields {missing} in catalog entry: {product_data}")

    try:
        return Product(
            product_id=int(product_data["product_id"]),
            name=str(product_data["name"]),
            category=str(product_data["category"]),
            price=float(product_data["price"]),
            stock_level=int(product_data["stock_level"]),
            reorder_threshold=int(product_data["reorder_threshold"]),
        )
    except (TypeError, ValueError) as e:
        raise ApplicationError(f"Invalid product entry {product_data}", original_exception=e)
