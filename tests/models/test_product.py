import pytest

from stockroom.models.product import Product, ProductStatus, derive_stock_status


class TestDeriveStockStatus:
    @pytest.mark.parametrize(
        ("stock", "min_stock", "expected"),
        [
            (0, 10, ProductStatus.OUT_OF_STOCK),
            (1, 10, ProductStatus.LOW_STOCK),
            (10, 10, ProductStatus.LOW_STOCK),
            (11, 10, ProductStatus.ACTIVE),
            (0, 0, ProductStatus.OUT_OF_STOCK),
        ],
    )
    def test_active_product(self, stock, min_stock, expected):
        assert derive_stock_status(stock, min_stock) == expected

    def test_inactive_wins(self):
        assert derive_stock_status(0, 10, is_active=False) == ProductStatus.INACTIVE
        assert derive_stock_status(500, 10, is_active=False) == ProductStatus.INACTIVE


class TestProduct:
    def test_defaults(self):
        product = Product(name="Widget A", sku="WGT-001")
        assert product.id is None
        assert product.uuid == ""
        assert product.unit_type == "pcs"
        assert product.min_stock == 10
        assert product.is_active is True
        assert product.status == ProductStatus.OUT_OF_STOCK

    def test_clamps_negative_numbers(self):
        product = Product(name="X", sku="X-1", cost_price=-1, selling_price=-5, stock=-3, min_stock=-2)
        assert product.cost_price == 0
        assert product.selling_price == 0
        assert product.stock == 0
        assert product.min_stock == 0

    def test_status_follows_stock(self):
        product = Product(name="Gadget B", sku="GDG-002", stock=23, min_stock=25)
        assert product.status == ProductStatus.LOW_STOCK
        product.stock = 100
        assert product.status == ProductStatus.ACTIVE

    def test_status_in_dump(self):
        product = Product(name="Widget A", sku="WGT-001", stock=150)
        assert product.model_dump()["status"] == ProductStatus.ACTIVE

    def test_stock_value(self):
        product = Product(name="Widget A", sku="WGT-001", stock=4, cost_price=1850)
        assert product.stock_value == 7400
