"""Request and response bodies for the JSON API. Money is in paise."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from stockroom.models.bill import Bill, BillStatus
from stockroom.models.order import LineItem, OrderTotals, PurchaseOrderStatus, SalesOrderStatus
from stockroom.models.supplier import SupplierStatus


class ProductIn(BaseModel):
    name: str
    sku: str
    category: str = ""
    cost_price: int = 0
    selling_price: int = 0
    stock: int = 0
    unit_type: str = "pcs"
    min_stock: int | None = None
    is_active: bool = True
    image: str | None = None


class StockAdjustment(BaseModel):
    delta: int


class SupplierIn(BaseModel):
    shop_name: str
    contact_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    details: str = ""
    status: SupplierStatus = SupplierStatus.ACTIVE


class LineItemIn(BaseModel):
    id: str | None = None
    product_id: int | None = None
    quantity: int = 1
    unit_price: int | None = None

    def to_model(self) -> LineItem:
        data = self.model_dump(exclude_none=True)
        return LineItem(**data)


class PurchaseOrderIn(BaseModel):
    supplier_id: int | None = None
    items: list[LineItemIn] = []
    status: PurchaseOrderStatus = PurchaseOrderStatus.PENDING
    tax_percent: float = Field(0, allow_inf_nan=False)
    notes: str = ""
    order_date: date | None = None
    reference_no: str = ""


class SalesOrderIn(BaseModel):
    customer_name: str = ""
    items: list[LineItemIn] = []
    status: SalesOrderStatus = SalesOrderStatus.PENDING
    tax_percent: float = Field(0, allow_inf_nan=False)
    notes: str = ""
    order_date: date | None = None
    reference_no: str = ""


class BillIn(BaseModel):
    purchase_order_id: int | None = None
    amount: int | None = None
    status: BillStatus = BillStatus.UNPAID
    paid_amount: int = 0
    new_payment: int = 0
    bill_date: date | None = None
    due_date: date | None = None
    notes: str = ""
    bill_no: str = ""


class PaymentIn(BaseModel):
    new_payment: int = 0
    status: BillStatus = BillStatus.PARTIALLY_PAID


class BillPaymentResponse(BaseModel):
    bill: Bill
    auto_promoted: bool = False


class TotalsIn(BaseModel):
    items: list[LineItemIn] = []
    tax_percent: float = Field(0, allow_inf_nan=False)


class TotalsResponse(OrderTotals):
    items: list[LineItem] = []


class PaymentPreviewIn(BaseModel):
    amount: int = Field(ge=0)
    prior_paid: int = 0
    new_payment: int = 0
    status: BillStatus


class CatalogueItem(BaseModel):
    id: int
    name: str
    sku: str
    stock: int
    price: float


class CatalogueResponse(BaseModel):
    data: list[CatalogueItem]
    total: int
