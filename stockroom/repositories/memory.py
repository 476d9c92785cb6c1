"""Process-local repositories.

All records live in an ``InMemoryStore`` for the lifetime of the process.
Repositories hand out deep copies so that callers only change the store
through ``create``/``update``/``delete``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel
from ulid import ULID

from stockroom.constants import IST_TZ
from stockroom.models.bill import Bill, BillStatus
from stockroom.models.order import PurchaseOrder, SalesOrder
from stockroom.models.product import Product
from stockroom.models.supplier import Supplier
from stockroom.repositories.base import (
    BillRepository,
    ProductRepository,
    PurchaseOrderRepository,
    SalesOrderRepository,
    SupplierRepository,
)

M = TypeVar("M", bound=BaseModel)


def _now() -> datetime:
    return datetime.now(IST_TZ)


class InMemoryStore:
    TABLES = ("products", "suppliers", "purchase_orders", "sales_orders", "bills")

    def __init__(self) -> None:
        self.tables: dict[str, dict[int, BaseModel]] = {name: {} for name in self.TABLES}
        self._sequences: dict[str, int] = {name: 0 for name in self.TABLES}

    def next_id(self, table: str) -> int:
        self._sequences[table] += 1
        return self._sequences[table]

    def clear(self) -> None:
        for name in self.TABLES:
            self.tables[name].clear()
            self._sequences[name] = 0


class _InMemoryRepository(Generic[M]):
    table = ""
    label = ""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    @property
    def _rows(self) -> dict[int, M]:
        return self.store.tables[self.table]  # type: ignore[return-value]

    def _insert(self, model: M) -> M:
        record_id = self.store.next_id(self.table)
        now = _now()
        record = model.model_copy(
            deep=True,
            update={"id": record_id, "uuid": str(ULID()), "created_at": now, "updated_at": now},
        )
        self._rows[record_id] = record
        return record.model_copy(deep=True)

    def _find(self, **criteria) -> M | None:
        for row in self._rows.values():
            if all(getattr(row, key) == value for key, value in criteria.items()):
                return row.model_copy(deep=True)
        return None

    def get_by_id(self, record_id: int) -> M | None:
        row = self._rows.get(record_id)
        return row.model_copy(deep=True) if row is not None else None

    def get_by_uuid(self, uuid: str) -> M | None:
        return self._find(uuid=uuid)

    def list_all(self) -> list[M]:
        return [self._rows[key].model_copy(deep=True) for key in sorted(self._rows, reverse=True)]

    def update(self, model: M) -> M:
        existing = self._rows.get(model.id)  # type: ignore[attr-defined]
        if existing is None:
            raise ValueError(f"{self.label} not found")
        record = model.model_copy(
            deep=True,
            update={"uuid": existing.uuid, "created_at": existing.created_at, "updated_at": _now()},
        )
        self._rows[record.id] = record
        return record.model_copy(deep=True)

    def delete(self, record_id: int) -> None:
        self._rows.pop(record_id, None)


class InMemoryProductRepository(_InMemoryRepository[Product], ProductRepository):
    table = "products"
    label = "Product"

    def create(self, product: Product) -> Product:
        return self._insert(product)

    def get_by_sku(self, sku: str) -> Product | None:
        wanted = sku.strip().lower()
        for row in self._rows.values():
            if row.sku.strip().lower() == wanted:
                return row.model_copy(deep=True)
        return None

    def update_stock(self, product_id: int, stock: int) -> None:
        row = self._rows.get(product_id)
        if row is None:
            raise ValueError("Product not found")
        self._rows[product_id] = row.model_copy(update={"stock": stock, "updated_at": _now()})


class InMemorySupplierRepository(_InMemoryRepository[Supplier], SupplierRepository):
    table = "suppliers"
    label = "Supplier"

    def create(self, supplier: Supplier) -> Supplier:
        return self._insert(supplier)


class InMemoryPurchaseOrderRepository(_InMemoryRepository[PurchaseOrder], PurchaseOrderRepository):
    table = "purchase_orders"
    label = "Purchase order"

    def create(self, order: PurchaseOrder) -> PurchaseOrder:
        return self._insert(order)

    def get_by_reference(self, reference_no: str) -> PurchaseOrder | None:
        return self._find(reference_no=reference_no)


class InMemorySalesOrderRepository(_InMemoryRepository[SalesOrder], SalesOrderRepository):
    table = "sales_orders"
    label = "Sales order"

    def create(self, order: SalesOrder) -> SalesOrder:
        return self._insert(order)

    def get_by_reference(self, reference_no: str) -> SalesOrder | None:
        return self._find(reference_no=reference_no)


class InMemoryBillRepository(_InMemoryRepository[Bill], BillRepository):
    table = "bills"
    label = "Bill"

    def create(self, bill: Bill) -> Bill:
        return self._insert(bill)

    def get_by_bill_no(self, bill_no: str) -> Bill | None:
        return self._find(bill_no=bill_no)

    def update_payment(self, bill_id: int, paid_amount: int, status: str) -> None:
        row = self._rows.get(bill_id)
        if row is None:
            raise ValueError("Bill not found")
        self._rows[bill_id] = row.model_copy(
            update={"paid_amount": paid_amount, "status": BillStatus(status), "updated_at": _now()}
        )
