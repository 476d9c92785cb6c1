from abc import ABC, abstractmethod

from stockroom.models.bill import Bill
from stockroom.models.order import PurchaseOrder, SalesOrder
from stockroom.models.product import Product
from stockroom.models.supplier import Supplier


class ProductRepository(ABC):
    @abstractmethod
    def create(self, product: Product) -> Product: ...

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None: ...

    @abstractmethod
    def get_by_uuid(self, uuid: str) -> Product | None: ...

    @abstractmethod
    def get_by_sku(self, sku: str) -> Product | None: ...

    @abstractmethod
    def list_all(self) -> list[Product]: ...

    @abstractmethod
    def update(self, product: Product) -> Product: ...

    @abstractmethod
    def update_stock(self, product_id: int, stock: int) -> None: ...

    @abstractmethod
    def delete(self, product_id: int) -> None: ...


class SupplierRepository(ABC):
    @abstractmethod
    def create(self, supplier: Supplier) -> Supplier: ...

    @abstractmethod
    def get_by_id(self, supplier_id: int) -> Supplier | None: ...

    @abstractmethod
    def get_by_uuid(self, uuid: str) -> Supplier | None: ...

    @abstractmethod
    def list_all(self) -> list[Supplier]: ...

    @abstractmethod
    def update(self, supplier: Supplier) -> Supplier: ...

    @abstractmethod
    def delete(self, supplier_id: int) -> None: ...


class PurchaseOrderRepository(ABC):
    @abstractmethod
    def create(self, order: PurchaseOrder) -> PurchaseOrder: ...

    @abstractmethod
    def get_by_id(self, order_id: int) -> PurchaseOrder | None: ...

    @abstractmethod
    def get_by_uuid(self, uuid: str) -> PurchaseOrder | None: ...

    @abstractmethod
    def get_by_reference(self, reference_no: str) -> PurchaseOrder | None: ...

    @abstractmethod
    def list_all(self) -> list[PurchaseOrder]: ...

    @abstractmethod
    def update(self, order: PurchaseOrder) -> PurchaseOrder: ...

    @abstractmethod
    def delete(self, order_id: int) -> None: ...


class SalesOrderRepository(ABC):
    @abstractmethod
    def create(self, order: SalesOrder) -> SalesOrder: ...

    @abstractmethod
    def get_by_id(self, order_id: int) -> SalesOrder | None: ...

    @abstractmethod
    def get_by_uuid(self, uuid: str) -> SalesOrder | None: ...

    @abstractmethod
    def get_by_reference(self, reference_no: str) -> SalesOrder | None: ...

    @abstractmethod
    def list_all(self) -> list[SalesOrder]: ...

    @abstractmethod
    def update(self, order: SalesOrder) -> SalesOrder: ...

    @abstractmethod
    def delete(self, order_id: int) -> None: ...


class BillRepository(ABC):
    @abstractmethod
    def create(self, bill: Bill) -> Bill: ...

    @abstractmethod
    def get_by_id(self, bill_id: int) -> Bill | None: ...

    @abstractmethod
    def get_by_uuid(self, uuid: str) -> Bill | None: ...

    @abstractmethod
    def get_by_bill_no(self, bill_no: str) -> Bill | None: ...

    @abstractmethod
    def list_all(self) -> list[Bill]: ...

    @abstractmethod
    def update(self, bill: Bill) -> Bill: ...

    @abstractmethod
    def update_payment(self, bill_id: int, paid_amount: int, status: str) -> None: ...

    @abstractmethod
    def delete(self, bill_id: int) -> None: ...
