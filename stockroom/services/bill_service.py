from __future__ import annotations

import logging
import secrets
from datetime import date, datetime, timedelta

from stockroom.constants import IST_TZ, UNKNOWN_SUPPLIER
from stockroom.models.bill import Bill, BillStatus
from stockroom.models.order import PurchaseOrder
from stockroom.payments import PaymentOutcome, reconcile_payment
from stockroom.repositories.base import BillRepository, PurchaseOrderRepository, SupplierRepository
from stockroom.settings import settings

logger = logging.getLogger(__name__)

MAX_BILL_NO_ATTEMPTS = 1000


def _bill_no(on: date) -> str:
    return f"BILL-{on:%Y%m%d}-{1000 + secrets.randbelow(9000)}"


class BillService:
    def __init__(
        self,
        bill_repo: BillRepository,
        order_repo: PurchaseOrderRepository,
        supplier_repo: SupplierRepository,
    ) -> None:
        self.bill_repo = bill_repo
        self.order_repo = order_repo
        self.supplier_repo = supplier_repo

    def generate_bill_no(self, on: date | None = None) -> str:
        on = on or datetime.now(IST_TZ).date()
        for _ in range(MAX_BILL_NO_ATTEMPTS):
            bill_no = _bill_no(on)
            if self.bill_repo.get_by_bill_no(bill_no) is None:
                return bill_no
        raise RuntimeError("Could not generate a unique bill number")

    def _existing_order(self, purchase_order_id: int | None) -> PurchaseOrder:
        if purchase_order_id is None:
            logger.warning("Bill rejected: no purchase order selected")
            raise ValueError("Selection required: please select a related purchase order to record this bill.")
        order = self.order_repo.get_by_id(purchase_order_id)
        if order is None:
            logger.warning("Bill rejected: purchase order %s not found", purchase_order_id)
            raise ValueError("Purchase order not found")
        return order

    def _billable_order(self, purchase_order_id: int | None) -> PurchaseOrder:
        order = self._existing_order(purchase_order_id)
        if not order.is_completed:
            logger.warning("Bill rejected: purchase order %s is %s", order.reference_no, order.status.value)
            raise ValueError("Bills can only be generated for completed orders.")
        return order

    def _supplier_name(self, order: PurchaseOrder) -> str:
        if order.supplier_id is None:
            return UNKNOWN_SUPPLIER
        supplier = self.supplier_repo.get_by_id(order.supplier_id)
        return supplier.shop_name if supplier else UNKNOWN_SUPPLIER

    def create_bill_for_order(
        self,
        purchase_order_id: int | None,
        amount: int | None = None,
        status: BillStatus = BillStatus.UNPAID,
        paid_amount: int = 0,
        new_payment: int = 0,
        bill_date: date | None = None,
        due_date: date | None = None,
        notes: str = "",
        bill_no: str = "",
    ) -> Bill:
        order = self._billable_order(purchase_order_id)
        bill_date = bill_date or datetime.now(IST_TZ).date()
        amount = order.grand_total if amount is None else amount
        outcome = reconcile_payment(amount, paid_amount, new_payment, status)

        bill = Bill(
            bill_no=bill_no.strip() or self.generate_bill_no(bill_date),
            purchase_order_id=order.id,
            po_reference=order.reference_no,
            supplier_name=self._supplier_name(order),
            amount=amount,
            paid_amount=outcome.paid_amount,
            bill_date=bill_date,
            due_date=due_date or bill_date + timedelta(days=settings.bill_due_days),
            status=outcome.status,
            notes=notes,
        )
        result = self.bill_repo.create(bill)
        logger.info(
            "Bill created: id=%s, no=%s, po=%s, amount=%d, status=%s",
            result.id,
            result.bill_no,
            result.po_reference,
            result.amount,
            result.status.value,
        )
        return result

    def update_bill(self, bill: Bill, new_payment: int = 0) -> tuple[Bill, PaymentOutcome]:
        """Save an edited bill; ``bill.status`` is the status the user declared."""
        if bill.id is None:
            raise ValueError("Cannot update bill without an id")
        stored = self.bill_repo.get_by_id(bill.id)
        if stored is not None and stored.purchase_order_id == bill.purchase_order_id:
            # Same order as before: it only has to still exist.
            order = self._existing_order(bill.purchase_order_id)
        else:
            order = self._billable_order(bill.purchase_order_id)
        outcome = reconcile_payment(bill.amount, bill.paid_amount, new_payment, bill.status)
        bill.po_reference = order.reference_no
        bill.supplier_name = self._supplier_name(order)
        bill.paid_amount = outcome.paid_amount
        bill.status = outcome.status

        result = self.bill_repo.update(bill)
        logger.info("Bill updated: id=%s, paid=%d, status=%s", result.id, result.paid_amount, result.status.value)
        return result, outcome

    def record_payment(
        self,
        bill: Bill,
        new_payment: int,
        declared_status: BillStatus = BillStatus.PARTIALLY_PAID,
    ) -> tuple[Bill, PaymentOutcome]:
        if bill.id is None:
            raise ValueError("Cannot record payment for bill without an id")
        outcome = reconcile_payment(bill.amount, bill.paid_amount, new_payment, declared_status)
        self.bill_repo.update_payment(bill.id, outcome.paid_amount, outcome.status.value)
        bill.paid_amount = outcome.paid_amount
        bill.status = outcome.status
        logger.info(
            "Payment recorded: bill=%s, new=%d, paid=%d/%d, status=%s",
            bill.bill_no,
            new_payment,
            bill.paid_amount,
            bill.amount,
            bill.status.value,
        )
        return bill, outcome

    def get_bill(self, bill_id: int) -> Bill | None:
        return self.bill_repo.get_by_id(bill_id)

    def get_bill_by_uuid(self, uuid: str) -> Bill | None:
        result = self.bill_repo.get_by_uuid(uuid)
        logger.debug("get_bill_by_uuid uuid=%s found=%s", uuid, result is not None)
        return result

    def delete_bill(self, bill_id: int) -> None:
        self.bill_repo.delete(bill_id)
        logger.info("Bill %s deleted", bill_id)

    def list_bills(self, search: str = "", status: BillStatus | str | None = None) -> list[Bill]:
        term = search.strip().lower()
        wanted_status = BillStatus(status) if status else None
        result = []
        for bill in self.bill_repo.list_all():
            haystack = f"{bill.bill_no} {bill.po_reference} {bill.supplier_name}".lower()
            if term and term not in haystack:
                continue
            if wanted_status is not None and bill.status != wanted_status:
                continue
            result.append(bill)
        logger.debug("Listed %d bills", len(result))
        return result

    def outstanding_total(self) -> int:
        return sum(bill.balance_due for bill in self.bill_repo.list_all())
