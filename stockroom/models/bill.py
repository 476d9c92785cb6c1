from __future__ import annotations

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field, computed_field, field_validator

from stockroom.constants import IST_TZ


class BillStatus(str, Enum):
    UNPAID = "Unpaid"
    PARTIALLY_PAID = "Partially Paid"
    PAID = "Paid"


def _today() -> date:
    return datetime.now(IST_TZ).date()


class Bill(BaseModel):
    id: int | None = None
    uuid: str = ""
    bill_no: str = ""
    purchase_order_id: int | None = None
    po_reference: str = ""
    supplier_name: str = ""
    amount: int = 0  # paise
    paid_amount: int = 0  # paise
    bill_date: date = Field(default_factory=_today)
    due_date: date | None = None
    status: BillStatus = BillStatus.UNPAID
    notes: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("amount", "paid_amount")
    @classmethod
    def _clamp_non_negative(cls, value: int) -> int:
        return max(0, value)

    @computed_field
    @property
    def balance_due(self) -> int:
        return max(0, self.amount - self.paid_amount)

    @computed_field
    @property
    def is_overdue(self) -> bool:
        if self.status == BillStatus.PAID or self.due_date is None:
            return False
        return datetime.now(IST_TZ).date() > self.due_date
