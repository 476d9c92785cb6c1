"""Bill payment reconciliation.

Combines what was already paid on a bill with a new payment and checks the
result against the status the user picked. Rejections raise ``ValueError``
with a message fit to show the user; nothing is applied in that case.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from stockroom.models import format_inr
from stockroom.models.bill import BillStatus

logger = logging.getLogger(__name__)


class PaymentOutcome(BaseModel):
    status: BillStatus
    paid_amount: int  # paise
    auto_promoted: bool = False


def total_paid(amount: int, prior_paid: int, new_payment: int) -> int:
    """Paid so far plus the new payment, capped at the bill amount."""
    return min(max(0, amount), max(0, prior_paid) + max(0, new_payment))


def reconcile_payment(
    amount: int,
    prior_paid: int,
    new_payment: int,
    declared_status: BillStatus,
) -> PaymentOutcome:
    declared_status = BillStatus(declared_status)
    amount = max(0, amount)

    if declared_status == BillStatus.UNPAID:
        return PaymentOutcome(status=BillStatus.UNPAID, paid_amount=0)

    paid = total_paid(amount, prior_paid, new_payment)

    if declared_status == BillStatus.PARTIALLY_PAID:
        if paid <= 0:
            logger.warning("Payment rejected: partial payment with total paid %d", paid)
            raise ValueError("Total paid amount must be greater than 0 for partial payments.")
        if paid >= amount:
            logger.info("Bill fully settled (%d of %d), promoting to Paid", paid, amount)
            return PaymentOutcome(status=BillStatus.PAID, paid_amount=paid, auto_promoted=True)
        return PaymentOutcome(status=BillStatus.PARTIALLY_PAID, paid_amount=paid)

    if paid < amount:
        logger.warning("Payment rejected: declared Paid with %d of %d", paid, amount)
        raise ValueError(
            f"Total payment ({format_inr(paid)}) is less than bill amount. Use 'Partially Paid' status instead."
        )
    return PaymentOutcome(status=BillStatus.PAID, paid_amount=paid)


def prefill_for_status(status: BillStatus, amount: int, paid_amount: int) -> tuple[int, int]:
    """Return ``(paid_amount, new_payment)`` to show after switching status.

    Paid proposes the remaining due as the new payment, Unpaid clears both,
    Partially Paid keeps what was already paid and starts a blank payment.
    """
    status = BillStatus(status)
    if status == BillStatus.PAID:
        return paid_amount, max(0, amount - paid_amount)
    if status == BillStatus.UNPAID:
        return 0, 0
    return paid_amount, 0
