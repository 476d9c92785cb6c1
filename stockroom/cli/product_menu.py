from __future__ import annotations

import questionary
from rich.console import Console
from rich.table import Table

from stockroom.constants import UNIT_TYPES
from stockroom.models import format_inr, parse_inr
from stockroom.models.product import Product, ProductStatus
from stockroom.services.product_service import ProductService

console = Console()

STATUS_STYLES = {
    ProductStatus.ACTIVE: "green",
    ProductStatus.LOW_STOCK: "yellow",
    ProductStatus.OUT_OF_STOCK: "red",
    ProductStatus.INACTIVE: "dim",
}


def _products_table(products: list[Product], title: str) -> Table:
    table = Table(title=title)
    table.add_column("#", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("SKU")
    table.add_column("Category")
    table.add_column("Price", justify="right")
    table.add_column("Stock", justify="right")
    table.add_column("Status")

    for p in products:
        style = STATUS_STYLES.get(p.status, "")
        table.add_row(
            str(p.id),
            p.name,
            p.sku,
            p.category or "-",
            format_inr(p.selling_price),
            f"{p.stock} {p.unit_type}",
            f"[{style}]{p.status.value}[/{style}]" if style else p.status.value,
        )
    return table


def _ask_amount(prompt: str, default: int = 0) -> int | None:
    while True:
        val = questionary.text(prompt, default=f"{default / 100:.2f}").ask()
        if val is None:
            return None
        parsed = parse_inr(val)
        if parsed is not None and parsed >= 0:
            return parsed
        console.print("[red]Invalid amount. Try again.[/red]")


def _ask_int(prompt: str, default: int = 0) -> int | None:
    while True:
        val = questionary.text(prompt, default=str(default)).ask()
        if val is None:
            return None
        try:
            parsed = int(val.strip())
        except ValueError:
            parsed = -1
        if parsed >= 0:
            return parsed
        console.print("[red]Enter a whole number of 0 or more.[/red]")


def create_product_menu(product_service: ProductService) -> None:
    console.print()
    console.print("[bold]New Product[/bold]", style="cyan")

    name = questionary.text("Product name:").ask()
    if not name:
        console.print("[yellow]Cancelled.[/yellow]")
        return
    sku = questionary.text("SKU:").ask() or ""
    category = questionary.text("Category (optional):").ask() or ""
    unit_type = questionary.select("Unit:", choices=list(UNIT_TYPES), default="pcs").ask()
    if unit_type is None:
        console.print("[yellow]Cancelled.[/yellow]")
        return
    cost_price = _ask_amount("Cost price (e.g. 120.50):")
    selling_price = _ask_amount("Selling price (e.g. 199.00):")
    stock = _ask_int("Current stock:")
    min_stock = _ask_int("Minimum stock level:", default=10)
    if None in (cost_price, selling_price, stock, min_stock):
        console.print("[yellow]Cancelled.[/yellow]")
        return

    try:
        product = product_service.create_product(
            name=name,
            sku=sku,
            category=category,
            unit_type=unit_type,
            cost_price=cost_price,
            selling_price=selling_price,
            stock=stock,
            min_stock=min_stock,
        )
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        return

    console.print(f"[green bold]Product '{product.name}' added ({product.status.value}).[/green bold]")


def low_stock_menu(product_service: ProductService) -> None:
    products = product_service.low_stock_products()
    if not products:
        console.print("[green]All active products are above their minimum stock.[/green]")
        return
    console.print()
    console.print(_products_table(products, "Low Stock"))


def _product_detail_menu(product: Product, product_service: ProductService) -> None:
    while True:
        console.print()
        console.print(_products_table([product], product.name))
        toggle_label = "Deactivate" if product.is_active else "Activate"
        action = questionary.select(
            "Actions:",
            choices=["Adjust Stock", toggle_label, "Delete Product", "Back"],
        ).ask()

        if action is None or action == "Back":
            break
        elif action == "Adjust Stock":
            val = questionary.text("Change in stock (e.g. 10 or -3):").ask()
            try:
                delta = int((val or "").strip())
            except ValueError:
                console.print("[red]Enter a whole number.[/red]")
                continue
            try:
                product = product_service.adjust_stock(product.id, delta)
            except ValueError as e:
                console.print(f"[red]{e}[/red]")
                continue
            console.print(f"[green]Stock is now {product.stock}.[/green]")
        elif action == toggle_label:
            product.is_active = not product.is_active
            product = product_service.update_product(product)
            console.print(f"[green]Product is now {product.status.value}.[/green]")
        elif action == "Delete Product":
            confirm = questionary.confirm("Delete this product?", default=False).ask()
            if confirm:
                product_service.delete_product(product.id)
                console.print("[green]Product deleted.[/green]")
                break


def list_products_menu(product_service: ProductService) -> None:
    products = product_service.list_products()
    if not products:
        console.print("[yellow]No products yet.[/yellow]")
        return

    console.print()
    console.print(_products_table(products, "Products"))
    console.print()

    product_choices = {f"{p.id} - {p.name}": p for p in products}
    choices = list(product_choices.keys()) + ["Back"]
    choice = questionary.select("Select a product:", choices=choices).ask()
    if choice is None or choice == "Back":
        return

    product = product_service.get_product(product_choices[choice].id)
    if not product:
        console.print("[red]Product not found.[/red]")
        return
    _product_detail_menu(product, product_service)
