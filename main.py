"""Interactive entry point: sell products as a supplier and check inventory."""

import logging

import schedule
from rich.console import Console
from rich.prompt import IntPrompt
from rich.table import Table

from src.common.config.settings import settings
from src.common.dtos.restock_dtos import SweepReportDTO
from src.common.exceptions.custom_exceptions import ApplicationError, InventoryError
from src.common.logger_config import setup_logging
from src.common.utils.date_utils import format_datetime_for_display, now_in_configured_timezone
from src.restocking_domain.application.organization_service import Organization
from src.restocking_domain.domain.entities.product import Product
from src.restocking_domain.domain.entities.supplier import Supplier, SupplierKind
from src.restocking_domain.domain.services.notification_router import NotificationRouter
from src.restocking_domain.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from src.restocking_domain.infrastructure.seed.catalog_loader import load_seed_products

logger = logging.getLogger(__name__)
console = Console()


def setup_dependencies() -> tuple[Organization, Supplier, Supplier]:
    """Seeds the catalog, wires the organization and subscribes both suppliers."""
    product_repository = InMemoryProductRepository(load_seed_products(settings.CATALOG_SEED_PATH))
    organization = Organization(product_repo=product_repository, notification_router=NotificationRouter())

    local_supplier = Supplier(settings.LOCAL_SUPPLIER_NAME, SupplierKind.LOCAL)
    global_supplier = Supplier(settings.GLOBAL_SUPPLIER_NAME, SupplierKind.GLOBAL)
    local_supplier.subscribe_to_organization(organization)
    global_supplier.subscribe_to_organization(organization)

    return organization, local_supplier, global_supplier


def run_inventory_audit(organization: Organization) -> SweepReportDTO:
    """Runs one sweep over the live catalog and logs a summary."""
    logger.info(f"📋 Scheduled inventory audit at {format_datetime_for_display(now_in_configured_timezone())}")
    report = organization.check_inventory_and_notify()
    for alert in report.alerts:
        logger.info(f"   {alert.product_name} (ID: {alert.product_id}): order {alert.quantity}")
    return report


def schedule_inventory_audit(organization: Organization, scheduler: schedule.Scheduler) -> schedule.Job:
    """Registers the periodic sweep; it runs whenever the menu loop polls the scheduler."""
    logger.info(f"⏰ Scheduling inventory audit every {settings.AUDIT_INTERVAL_MINUTES} minutes")
    return scheduler.every(settings.AUDIT_INTERVAL_MINUTES).minutes.do(run_inventory_audit, organization)


def render_products(title: str, products: list[Product]) -> None:
    table = Table(title=title)
    table.add_column("ID", justify="right")
    table.add_column("Product Name")
    table.add_column("Category")
    table.add_column("Price", justify="right")
    table.add_column("Stock", justify="right")
    for product in products:
        table.add_row(
            str(product.product_id),
            product.name,
            product.category,
            f"{product.price:.2f}",
            str(product.stock_level),
        )
    console.print(table)


def sell_product(organization: Organization, supplier: Supplier) -> None:
    render_products(f"Products for {supplier.name}", organization.get_products_for_supplier(supplier))
    product_id = IntPrompt.ask("Enter Product ID to sell")

    try:
        # Unknown or unassigned products are rejected before asking for a quantity
        organization.get_sellable_product(supplier, product_id)
        quantity = IntPrompt.ask("Enter quantity to sell")
        result = organization.sell_for_supplier(supplier, product_id, quantity)
    except InventoryError as e:
        console.print(f"[red]{e}[/red]")
        return

    console.print(f"Sale successful! Remaining stock: {result.remaining_stock}")
    if result.alert:
        console.print(
            f"Targeted restock request sent to {supplier.name}: "
            f"{result.alert.quantity} x {result.alert.product_name}"
        )


def run_product_menu(organization: Organization, supplier: Supplier, scheduler: schedule.Scheduler) -> None:
    while True:
        scheduler.run_pending()
        console.print("\n[bold]Product Menu[/bold]")
        console.print("1. View Assigned Products")
        console.print("2. Sell Product")
        console.print("3. Check Inventory Status")
        console.print("4. Return to Supplier Menu")
        choice = IntPrompt.ask("Enter your choice")

        if choice == 1:
            render_products(f"Products for {supplier.name}", organization.get_products_for_supplier(supplier))
        elif choice == 2:
            sell_product(organization, supplier)
        elif choice == 3:
            render_products("Current Inventory", organization.get_all_products())
            # The router logs the "well-stocked" outcome itself
            organization.check_inventory_and_notify()
        elif choice == 4:
            return
        else:
            console.print("Invalid choice")


def run_supplier_menu() -> None:
    organization, local_supplier, global_supplier = setup_dependencies()
    suppliers = {1: local_supplier, 2: global_supplier}

    scheduler = schedule.Scheduler()
    schedule_inventory_audit(organization, scheduler)

    while True:
        scheduler.run_pending()
        console.print("\n[bold]Supplier Selection[/bold]")
        console.print("1. Local Supplier")
        console.print("2. Global Supplier")
        console.print("3. Exit")
        choice = IntPrompt.ask("Enter your choice")

        if choice == 3:
            break
        supplier = suppliers.get(choice)
        if supplier is None:
            console.print("Invalid choice")
            continue
        run_product_menu(organization, supplier, scheduler)


if __name__ == "__main__":
    setup_logging()
    try:
        run_supplier_menu()
    except ApplicationError as e:
        logger.error(f"Could not start the restocking console: {e}")
        raise
    except (KeyboardInterrupt, EOFError):
        logger.info("Session ended.")
