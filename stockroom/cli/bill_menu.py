from __future__ import annotations

import questionary
from rich.console import Console
from rich.table import Table

from stockroom.constants import format_date
from stockroom.models import format_inr, parse_inr
from stockroom.models.bill import Bill, BillStatus
from stockroom.payments import prefill_for_status
from stockroom.services.bill_service import BillService
from stockroom.services.purchase_order_service import PurchaseOrderService

console = Console()

STATUS_STYLES = {
    BillStatus.PAID: "green",
    BillStatus.PARTIALLY_PAID: "yellow",
    BillStatus.UNPAID: "red",
}


def _show_bill_detail(bill: Bill) -> None:
    style = STATUS_STYLES[bill.status]
    console.print(f"  Bill: [bold]{bill.bill_no}[/bold]  ({bill.po_reference}, {bill.supplier_name})")
    console.print(f"  Amount: {format_inr(bill.amount)}")
    console.print(f"  Paid: {format_inr(bill.paid_amount)}")
    console.print(f"  Due: [bold]{format_inr(bill.balance_due)}[/bold]")
    console.print(f"  Status: [{style}]{bill.status.value}[/{style}]")
    if bill.due_date:
        overdue = " [red](overdue)[/red]" if bill.is_overdue else ""
        console.print(f"  Due date: {format_date(bill.due_date)}{overdue}")
    if bill.notes:
        console.print(f"  Notes: {bill.notes}")


def record_payment_menu(bill: Bill, bill_service: BillService) -> Bill:
    status_label = questionary.select(
        "Payment status:",
        choices=[BillStatus.PARTIALLY_PAID.value, BillStatus.PAID.value, BillStatus.UNPAID.value],
    ).ask()
    if status_label is None:
        return bill
    status = BillStatus(status_label)

    _, suggested = prefill_for_status(status, bill.amount, bill.paid_amount)
    new_payment = 0
    if status != BillStatus.UNPAID:
        while True:
            val = questionary.text("Pay now (₹):", default=f"{suggested / 100:.2f}").ask()
            if val is None:
                return bill
            parsed = parse_inr(val)
            if parsed is not None and parsed >= 0:
                new_payment = parsed
                break
            console.print("[red]Invalid amount. Try again.[/red]")

    try:
        bill, outcome = bill_service.record_payment(bill, new_payment, status)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        return bill

    if outcome.auto_promoted:
        console.print("[green]Bill has been fully settled and status marked as Paid.[/green]")
    else:
        console.print(f"[green]Payment saved. Status: {bill.status.value}.[/green]")
    return bill


def create_bill_menu(bill_service: BillService, purchase_service: PurchaseOrderService) -> None:
    console.print()
    console.print("[bold]Record Bill[/bold]", style="cyan")

    orders = purchase_service.list_orders(status="Completed")
    if not orders:
        console.print("[yellow]Bills can only be generated for completed orders, and there are none.[/yellow]")
        return

    order_choices = {f"{o.reference_no} - {format_inr(o.grand_total)}": o for o in orders}
    choice = questionary.select("Purchase order:", choices=list(order_choices.keys()) + ["Back"]).ask()
    if choice is None or choice == "Back":
        return
    order = order_choices[choice]

    notes = questionary.text("Notes (optional):").ask() or ""
    try:
        bill = bill_service.create_bill_for_order(order.id, notes=notes)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        return

    console.print(f"[green bold]Bill {bill.bill_no} recorded for {format_inr(bill.amount)}.[/green bold]")


def _bill_detail_menu(bill: Bill, bill_service: BillService) -> None:
    while True:
        console.print()
        _show_bill_detail(bill)
        console.print()
        action = questionary.select("Actions:", choices=["Record Payment", "Delete Bill", "Back"]).ask()

        if action is None or action == "Back":
            break
        elif action == "Record Payment":
            bill = record_payment_menu(bill, bill_service)
        elif action == "Delete Bill":
            confirm = questionary.confirm("Delete this bill?", default=False).ask()
            if confirm:
                bill_service.delete_bill(bill.id)
                console.print("[green]Bill deleted.[/green]")
                break


def list_bills_menu(bill_service: BillService) -> None:
    bills = bill_service.list_bills()
    if not bills:
        console.print("[yellow]No bills recorded.[/yellow]")
        return

    table = Table(title="Bills")
    table.add_column("#", style="dim")
    table.add_column("Bill No", style="bold")
    table.add_column("PO Ref")
    table.add_column("Supplier")
    table.add_column("Amount", justify="right")
    table.add_column("Due", justify="right")
    table.add_column("Status")
    for b in bills:
        style = STATUS_STYLES[b.status]
        table.add_row(
            str(b.id),
            b.bill_no,
            b.po_reference,
            b.supplier_name,
            format_inr(b.amount),
            format_inr(b.balance_due),
            f"[{style}]{b.status.value}[/{style}]",
        )
    console.print()
    console.print(table)
    console.print(f"  Outstanding: [bold]{format_inr(bill_service.outstanding_total())}[/bold]")

    bill_choices = {f"{b.id} - {b.bill_no}": b for b in bills}
    choice = questionary.select("Select a bill:", choices=list(bill_choices.keys()) + ["Back"]).ask()
    if choice is None or choice == "Back":
        return

    bill = bill_service.get_bill(bill_choices[choice].id)
    if not bill:
        console.print("[red]Bill not found.[/red]")
        return
    _bill_detail_menu(bill, bill_service)
