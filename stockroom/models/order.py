from __future__ import annotations

import secrets
from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field, computed_field, field_validator

from stockroom.constants import IST_TZ


def new_row_id() -> str:
    return secrets.token_hex(5)[:9]


def _today() -> date:
    return datetime.now(IST_TZ).date()


class PurchaseOrderStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class SalesOrderStatus(str, Enum):
    PENDING = "Pending"
    SHIPPED = "Shipped"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


STOCK_OUT_STATUSES = {SalesOrderStatus.SHIPPED, SalesOrderStatus.COMPLETED}


class LineItem(BaseModel):
    id: str = Field(default_factory=new_row_id)
    product_id: int | None = None
    quantity: int = 1
    unit_price: int = 0  # paise

    @field_validator("quantity", "unit_price")
    @classmethod
    def _clamp_non_negative(cls, value: int) -> int:
        return max(0, value)

    @computed_field
    @property
    def total(self) -> int:
        return self.quantity * self.unit_price


class OrderTotals(BaseModel):
    subtotal: int = 0  # paise
    tax_amount: int = 0  # paise
    grand_total: int = 0  # paise


class Order(BaseModel):
    id: int | None = None
    uuid: str = ""
    reference_no: str = ""
    order_date: date = Field(default_factory=_today)
    items: list[LineItem] = []
    notes: str = ""
    tax_percent: float = Field(0.0, allow_inf_nan=False)
    subtotal: int = 0  # paise
    tax_amount: int = 0  # paise
    grand_total: int = 0  # paise
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("tax_percent")
    @classmethod
    def _clamp_tax(cls, value: float) -> float:
        return max(0.0, value)

    def apply_totals(self, totals: OrderTotals) -> None:
        self.subtotal = totals.subtotal
        self.tax_amount = totals.tax_amount
        self.grand_total = totals.grand_total

    def quantities_by_product(self) -> dict[int, int]:
        result: dict[int, int] = {}
        for item in self.items:
            if item.product_id is None:
                continue
            result[item.product_id] = result.get(item.product_id, 0) + item.quantity
        return result


class PurchaseOrder(Order):
    supplier_id: int | None = None
    status: PurchaseOrderStatus = PurchaseOrderStatus.PENDING
    stock_received: bool = False

    @property
    def is_completed(self) -> bool:
        return self.status == PurchaseOrderStatus.COMPLETED


class SalesOrder(Order):
    customer_name: str = ""
    status: SalesOrderStatus = SalesOrderStatus.PENDING

    @property
    def stock_deducted(self) -> bool:
        return self.status in STOCK_OUT_STATUSES
