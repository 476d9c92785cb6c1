import pytest

from stockroom.models.order import LineItem, PurchaseOrder, PurchaseOrderStatus, SalesOrder, SalesOrderStatus


class TestLineItem:
    def test_row_ids_are_unique(self):
        assert LineItem().id != LineItem().id

    def test_total(self):
        assert LineItem(product_id=1, quantity=3, unit_price=500).total == 1500

    def test_clamps_negative(self):
        item = LineItem(quantity=-1, unit_price=-10)
        assert item.quantity == 0
        assert item.unit_price == 0


class TestOrder:
    def test_quantities_by_product_merges_rows(self):
        order = SalesOrder(
            items=[
                LineItem(product_id=1, quantity=2),
                LineItem(product_id=2, quantity=1),
                LineItem(product_id=1, quantity=3),
                LineItem(product_id=None, quantity=9),
            ]
        )
        assert order.quantities_by_product() == {1: 5, 2: 1}

    def test_clamps_tax(self):
        assert PurchaseOrder(tax_percent=-5).tax_percent == 0

    def test_rejects_non_finite_tax(self):
        with pytest.raises(ValueError):
            SalesOrder(tax_percent=float("inf"))

    def test_purchase_completed(self):
        assert PurchaseOrder(status=PurchaseOrderStatus.COMPLETED).is_completed is True
        assert PurchaseOrder().is_completed is False

    def test_sales_stock_deducted(self):
        assert SalesOrder(status=SalesOrderStatus.SHIPPED).stock_deducted is True
        assert SalesOrder(status=SalesOrderStatus.COMPLETED).stock_deducted is True
        assert SalesOrder(status=SalesOrderStatus.PENDING).stock_deducted is False
        assert SalesOrder(status=SalesOrderStatus.CANCELLED).stock_deducted is False
