import questionary
from rich.console import Console
from rich.table import Table

from stockroom.cli.bill_menu import create_bill_menu, list_bills_menu
from stockroom.cli.order_menu import create_sales_order_menu, list_purchase_orders_menu, list_sales_orders_menu
from stockroom.cli.product_menu import create_product_menu, list_products_menu, low_stock_menu
from stockroom.cli.supplier_menu import create_supplier_menu, list_suppliers_menu
from stockroom.models import format_inr
from stockroom.repositories.factory import (
    get_bill_repository,
    get_product_repository,
    get_purchase_order_repository,
    get_sales_order_repository,
    get_supplier_repository,
)
from stockroom.services.bill_service import BillService
from stockroom.services.dashboard_service import DashboardService
from stockroom.services.product_service import ProductService
from stockroom.services.purchase_order_service import PurchaseOrderService
from stockroom.services.sales_order_service import SalesOrderService
from stockroom.services.supplier_service import SupplierService

console = Console()


def _build_services() -> dict:
    product_repo = get_product_repository()
    supplier_repo = get_supplier_repository()
    purchase_repo = get_purchase_order_repository()
    sales_repo = get_sales_order_repository()
    bill_repo = get_bill_repository()
    return {
        "products": ProductService(product_repo),
        "suppliers": SupplierService(supplier_repo),
        "purchases": PurchaseOrderService(purchase_repo, product_repo, supplier_repo),
        "sales": SalesOrderService(sales_repo, product_repo),
        "bills": BillService(bill_repo, purchase_repo, supplier_repo),
        "dashboard": DashboardService(product_repo, sales_repo, bill_repo),
    }


def show_dashboard(dashboard_service: DashboardService) -> None:
    m = dashboard_service.metrics()
    table = Table(title="Overview", show_header=False)
    table.add_column("Metric")
    table.add_column("Value", justify="right", style="bold")
    table.add_row("Total Products", str(m.total_products))
    table.add_row("Active Products", str(m.active_products))
    table.add_row("Current Stock Value", format_inr(m.current_stock_value))
    table.add_row("Today's Sales", str(m.todays_sales))
    table.add_row("Today's Revenue", format_inr(m.todays_revenue))
    table.add_row("Today's Profit", format_inr(m.todays_profit))
    table.add_row("Outstanding Bills", format_inr(m.outstanding_bills))
    console.print()
    console.print(table)
    if m.low_stock_items:
        console.print(f"  [yellow]{len(m.low_stock_items)} product(s) need restocking.[/yellow]")


def main_menu() -> None:
    services = _build_services()

    console.print()
    console.print("[bold]Stockroom[/bold]", style="cyan")
    console.print()

    actions = {
        "Dashboard": lambda: show_dashboard(services["dashboard"]),
        "Products": lambda: list_products_menu(services["products"]),
        "New Product": lambda: create_product_menu(services["products"]),
        "Low Stock": lambda: low_stock_menu(services["products"]),
        "Suppliers": lambda: list_suppliers_menu(services["suppliers"]),
        "New Supplier": lambda: create_supplier_menu(services["suppliers"]),
        "Purchase Orders": lambda: list_purchase_orders_menu(services["purchases"]),
        "Sales Orders": lambda: list_sales_orders_menu(services["sales"]),
        "New Sales Entry": lambda: create_sales_order_menu(services["sales"], services["products"]),
        "Bills": lambda: list_bills_menu(services["bills"]),
        "Record Bill": lambda: create_bill_menu(services["bills"], services["purchases"]),
    }

    while True:
        choice = questionary.select("Main Menu", choices=[*actions, "Exit"]).ask()

        if choice is None or choice == "Exit":
            console.print("[bold]Bye![/bold]")
            break
        actions[choice]()
