from stockroom.repositories.factory import (
    get_bill_repository,
    get_product_repository,
    get_purchase_order_repository,
    get_sales_order_repository,
    get_store,
    get_supplier_repository,
    reset_store,
)
from stockroom.repositories.memory import (
    InMemoryBillRepository,
    InMemoryProductRepository,
    InMemoryPurchaseOrderRepository,
    InMemorySalesOrderRepository,
    InMemorySupplierRepository,
)
from tests.conftest import make_product


class TestRepoFactory:
    def test_repository_types(self):
        assert isinstance(get_product_repository(), InMemoryProductRepository)
        assert isinstance(get_supplier_repository(), InMemorySupplierRepository)
        assert isinstance(get_purchase_order_repository(), InMemoryPurchaseOrderRepository)
        assert isinstance(get_sales_order_repository(), InMemorySalesOrderRepository)
        assert isinstance(get_bill_repository(), InMemoryBillRepository)

    def test_repositories_share_store(self):
        get_product_repository().create(make_product())
        assert len(get_product_repository().list_all()) == 1
        assert get_product_repository().store is get_store()

    def test_reset_store(self):
        get_product_repository().create(make_product())
        reset_store()
        assert get_product_repository().list_all() == []
