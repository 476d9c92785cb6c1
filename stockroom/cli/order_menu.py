from __future__ import annotations

import math

import questionary
from rich.console import Console
from rich.table import Table

from stockroom.constants import format_date
from stockroom.models import format_inr
from stockroom.models.order import LineItem, Order, PurchaseOrderStatus, SalesOrderStatus
from stockroom.services.product_service import ProductService
from stockroom.services.purchase_order_service import PurchaseOrderService
from stockroom.services.sales_order_service import SalesOrderService
from stockroom.totals import add_line_item, compute_totals, remove_line_item, update_line_item

console = Console()


def _print_totals(order: Order) -> None:
    console.print(f"  Subtotal: {format_inr(order.subtotal)}")
    if order.tax_percent:
        console.print(f"  GST ({order.tax_percent:g}%): {format_inr(order.tax_amount)}")
    console.print(f"  [bold]Grand Total: {format_inr(order.grand_total)}[/bold]")


def _orders_table(orders: list[Order], title: str, party_label: str, party) -> Table:
    table = Table(title=title)
    table.add_column("#", style="dim")
    table.add_column("Ref No", style="bold")
    table.add_column("Date")
    table.add_column(party_label)
    table.add_column("Items", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("Status")
    for o in orders:
        table.add_row(
            str(o.id),
            o.reference_no,
            format_date(o.order_date),
            party(o),
            str(len(o.items)),
            format_inr(o.grand_total),
            o.status.value,
        )
    return table


def list_purchase_orders_menu(purchase_service: PurchaseOrderService) -> None:
    orders = purchase_service.list_orders()
    if not orders:
        console.print("[yellow]No purchase orders.[/yellow]")
        return

    console.print()
    console.print(_orders_table(orders, "Purchase Orders", "Supplier", purchase_service.supplier_name))

    order_choices = {f"{o.id} - {o.reference_no}": o for o in orders}
    choice = questionary.select("Select an order:", choices=list(order_choices.keys()) + ["Back"]).ask()
    if choice is None or choice == "Back":
        return

    order = purchase_service.get_order(order_choices[choice].id)
    if not order:
        console.print("[red]Purchase order not found.[/red]")
        return

    console.print()
    _print_totals(order)
    new_status = questionary.select(
        f"Status ({order.status.value}):",
        choices=[s.value for s in PurchaseOrderStatus] + ["Back"],
    ).ask()
    if new_status is None or new_status == "Back" or new_status == order.status.value:
        return

    was_received = order.stock_received
    order.status = PurchaseOrderStatus(new_status)
    try:
        order = purchase_service.update_order(order)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        return
    if order.stock_received and not was_received:
        console.print("[green]Received quantities have been added to inventory.[/green]")
    console.print(f"[green]{order.reference_no} is now {order.status.value}.[/green]")


def list_sales_orders_menu(sales_service: SalesOrderService) -> None:
    orders = sales_service.list_orders()
    if not orders:
        console.print("[yellow]No sales orders.[/yellow]")
        return

    console.print()
    console.print(_orders_table(orders, "Sales Orders", "Customer", lambda o: o.customer_name))

    order_choices = {f"{o.id} - {o.reference_no}": o for o in orders}
    choice = questionary.select("Select an order:", choices=list(order_choices.keys()) + ["Back"]).ask()
    if choice is None or choice == "Back":
        return

    order = sales_service.get_order(order_choices[choice].id)
    if not order:
        console.print("[red]Sales order not found.[/red]")
        return

    console.print()
    _print_totals(order)
    new_status = questionary.select(
        f"Status ({order.status.value}):",
        choices=[s.value for s in SalesOrderStatus] + ["Back"],
    ).ask()
    if new_status is None or new_status == "Back" or new_status == order.status.value:
        return

    order.status = SalesOrderStatus(new_status)
    try:
        order = sales_service.update_order(order)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        return
    console.print(f"[green]{order.reference_no} is now {order.status.value}.[/green]")


def _ask_tax_percent() -> float | None:
    """Prompt until a finite GST percentage is given; negatives become 0."""
    while True:
        val = questionary.text("GST %:", default="0").ask()
        if val is None:
            return None
        try:
            tax_percent = float(val.strip() or "0")
        except ValueError:
            tax_percent = math.nan
        if math.isfinite(tax_percent):
            return max(0.0, tax_percent)
        console.print("[red]Enter a GST percentage such as 5 or 18.[/red]")


def _ask_quantity(default: int = 1) -> int | None:
    val = questionary.text("Quantity:", default=str(default)).ask() or str(default)
    try:
        return max(0, int(val))
    except ValueError:
        console.print("[red]Enter a whole number.[/red]")
        return None


def _pick_row(items: list[LineItem], names: dict[int, str], message: str) -> str | None:
    row_choices = {f"{names.get(i.product_id, '?')} x{i.quantity} [{i.id}]": i.id for i in items}
    label = questionary.select(message, choices=list(row_choices.keys())).ask()
    if label is None:
        return None
    return row_choices[label]


def create_sales_order_menu(sales_service: SalesOrderService, product_service: ProductService) -> None:
    console.print()
    console.print("[bold]New Sales Entry[/bold]", style="cyan")

    products = [p for p in product_service.list_products() if p.is_active]
    if not products:
        console.print("[yellow]No active products to sell.[/yellow]")
        return
    product_choices = {f"{p.name} ({p.sku}) - {p.stock} in stock": p for p in products}
    names = {p.id: p.name for p in products}

    customer_name = questionary.text("Customer name (optional):").ask() or ""
    tax_percent = _ask_tax_percent()
    if tax_percent is None:
        console.print("[yellow]Cancelled.[/yellow]")
        return

    items: list[LineItem] = []
    totals = compute_totals(items, tax_percent)
    while True:
        action = questionary.select(
            f"Items: {len(items)}  Total: {format_inr(totals.grand_total)}",
            choices=["Add Item", "Edit Item", "Remove Item", "Save Order", "Cancel"],
        ).ask()

        if action is None or action == "Cancel":
            console.print("[yellow]Cancelled.[/yellow]")
            return
        elif action == "Add Item":
            label = questionary.select("Product:", choices=list(product_choices.keys())).ask()
            if label is None:
                continue
            product = product_choices[label]
            quantity = _ask_quantity()
            if quantity is None:
                continue
            if product.stock < quantity:
                console.print(f"[yellow]Warning: only {product.stock} available.[/yellow]")
            items, totals = add_line_item(
                items, tax_percent, product_id=product.id, quantity=quantity, unit_price=product.selling_price
            )
        elif action == "Edit Item":
            if not items:
                continue
            row_id = _pick_row(items, names, "Edit:")
            if row_id is None:
                continue
            current = next(i for i in items if i.id == row_id)
            label = questionary.select("Product:", choices=list(product_choices.keys())).ask()
            if label is None:
                continue
            product = product_choices[label]
            quantity = _ask_quantity(current.quantity)
            if quantity is None:
                continue
            if product.stock < quantity:
                console.print(f"[yellow]Warning: only {product.stock} available.[/yellow]")
            changes: dict[str, int] = {"quantity": quantity}
            if product.id != current.product_id:
                changes["product_id"] = product.id
            items, totals = update_line_item(
                items, tax_percent, row_id, price_lookup=product_service.get_price, **changes
            )
        elif action == "Remove Item":
            if not items:
                continue
            row_id = _pick_row(items, names, "Remove:")
            if row_id is None:
                continue
            items, totals = remove_line_item(items, tax_percent, row_id)
        elif action == "Save Order":
            status = questionary.select("Status:", choices=[s.value for s in SalesOrderStatus]).ask()
            if status is None:
                continue
            try:
                order = sales_service.create_order(
                    items=items,
                    customer_name=customer_name,
                    status=SalesOrderStatus(status),
                    tax_percent=tax_percent,
                )
            except ValueError as e:
                console.print(f"[red]{e}[/red]")
                continue
            console.print(f"[green bold]Sales order {order.reference_no} saved.[/green bold]")
            _print_totals(order)
            return
