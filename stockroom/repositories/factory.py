from stockroom.repositories.base import (
    BillRepository,
    ProductRepository,
    PurchaseOrderRepository,
    SalesOrderRepository,
    SupplierRepository,
)
from stockroom.repositories.memory import (
    InMemoryBillRepository,
    InMemoryProductRepository,
    InMemoryPurchaseOrderRepository,
    InMemorySalesOrderRepository,
    InMemoryStore,
    InMemorySupplierRepository,
)

_store = InMemoryStore()


def get_store() -> InMemoryStore:
    return _store


def reset_store() -> None:
    """Drop every record, e.g. between tests."""
    _store.clear()


def get_product_repository() -> ProductRepository:
    return InMemoryProductRepository(get_store())


def get_supplier_repository() -> SupplierRepository:
    return InMemorySupplierRepository(get_store())


def get_purchase_order_repository() -> PurchaseOrderRepository:
    return InMemoryPurchaseOrderRepository(get_store())


def get_sales_order_repository() -> SalesOrderRepository:
    return InMemorySalesOrderRepository(get_store())


def get_bill_repository() -> BillRepository:
    return InMemoryBillRepository(get_store())
