from __future__ import annotations

import questionary
from rich.console import Console
from rich.table import Table

from stockroom.models.supplier import SupplierStatus
from stockroom.services.supplier_service import SupplierService

console = Console()


def list_suppliers_menu(supplier_service: SupplierService) -> None:
    suppliers = supplier_service.list_suppliers()
    if not suppliers:
        console.print("[yellow]No suppliers yet.[/yellow]")
        return

    table = Table(title="Suppliers")
    table.add_column("#", style="dim")
    table.add_column("Shop", style="bold")
    table.add_column("Contact")
    table.add_column("Phone")
    table.add_column("Email")
    table.add_column("Status")
    for s in suppliers:
        status = s.status.value if s.is_active else f"[dim]{s.status.value}[/dim]"
        table.add_row(str(s.id), s.shop_name, s.contact_name, s.phone, s.email, status)
    console.print()
    console.print(table)


def create_supplier_menu(supplier_service: SupplierService) -> None:
    console.print()
    console.print("[bold]New Supplier[/bold]", style="cyan")

    shop_name = questionary.text("Shop name:").ask()
    if not shop_name:
        console.print("[yellow]Cancelled.[/yellow]")
        return
    contact_name = questionary.text("Contact name:").ask() or ""
    phone = questionary.text("Phone:").ask() or ""
    email = questionary.text("Email:").ask() or ""
    address = questionary.text("Address:").ask() or ""
    active = questionary.confirm("Active supplier?", default=True).ask()

    supplier = supplier_service.create_supplier(
        shop_name=shop_name,
        contact_name=contact_name,
        email=email,
        phone=phone,
        address=address,
        status=SupplierStatus.ACTIVE if active is not False else SupplierStatus.INACTIVE,
    )
    console.print(f"[green bold]Supplier '{supplier.shop_name}' added.[/green bold]")
