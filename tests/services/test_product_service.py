from unittest.mock import MagicMock, patch

import pytest

from stockroom.models.product import Product, ProductStatus
from stockroom.services.product_service import ProductService
from tests.conftest import make_product


class TestProductServiceMocked:
    def setup_method(self):
        self.mock_repo = MagicMock()
        self.service = ProductService(self.mock_repo)

    def test_create_product(self):
        self.mock_repo.get_by_sku.return_value = None
        self.mock_repo.create.return_value = make_product(id=1, uuid="u")

        result = self.service.create_product(name=" Widget A ", sku=" WGT-001 ", cost_price=1850)

        created = self.mock_repo.create.call_args[0][0]
        assert created.name == "Widget A"
        assert created.sku == "WGT-001"
        assert result.id == 1

    def test_create_uses_default_min_stock(self):
        self.mock_repo.get_by_sku.return_value = None
        self.mock_repo.create.return_value = make_product(id=1)
        with patch("stockroom.services.product_service.settings") as mock_settings:
            mock_settings.default_min_stock = 7
            self.service.create_product(name="A", sku="A-1")
        assert self.mock_repo.create.call_args[0][0].min_stock == 7

    def test_create_requires_name(self):
        with pytest.raises(ValueError, match="name is required"):
            self.service.create_product(name="  ", sku="X")
        self.mock_repo.create.assert_not_called()

    def test_create_requires_sku(self):
        with pytest.raises(ValueError, match="SKU is required"):
            self.service.create_product(name="X", sku="")

    def test_create_duplicate_sku(self):
        self.mock_repo.get_by_sku.return_value = make_product(id=3)
        with pytest.raises(ValueError, match="already in use"):
            self.service.create_product(name="Other", sku="WGT-001")
        self.mock_repo.create.assert_not_called()

    def test_update_same_product_keeps_sku(self):
        product = make_product(id=3)
        self.mock_repo.get_by_sku.return_value = make_product(id=3)
        self.mock_repo.update.return_value = product
        assert self.service.update_product(product) is product

    def test_get_price(self):
        self.mock_repo.get_by_id.return_value = make_product(id=1)
        assert self.service.get_price(1) == 2999
        assert self.service.get_price(1, "cost") == 1850

    def test_get_price_missing(self):
        self.mock_repo.get_by_id.return_value = None
        assert self.service.get_price(1) is None


class TestProductServiceStore:
    @pytest.fixture(autouse=True)
    def _service(self, product_repo):
        self.service = ProductService(product_repo)
        self.widget = self.service.create_product(
            name="Widget A", sku="WGT-001", category="Hardware", stock=150, min_stock=20
        )
        self.gadget = self.service.create_product(
            name="Gadget B", sku="GDG-002", category="Electronics", stock=23, min_stock=25
        )
        self.cable = self.service.create_product(
            name="Cable", sku="CBL-004", category="Electronics", stock=0, is_active=False
        )

    def test_list_search_name_and_sku(self):
        assert [p.sku for p in self.service.list_products(search="widget")] == ["WGT-001"]
        assert [p.sku for p in self.service.list_products(search="gdg")] == ["GDG-002"]

    def test_list_by_category(self):
        assert {p.sku for p in self.service.list_products(category="Electronics")} == {"GDG-002", "CBL-004"}

    def test_list_by_status(self):
        low = self.service.list_products(status=ProductStatus.LOW_STOCK)
        assert [p.sku for p in low] == ["GDG-002"]
        inactive = self.service.list_products(status="Inactive")
        assert [p.sku for p in inactive] == ["CBL-004"]

    def test_categories(self):
        assert self.service.list_categories() == ["Electronics", "Hardware"]

    def test_low_stock_excludes_inactive(self):
        assert [p.sku for p in self.service.low_stock_products()] == ["GDG-002"]

    def test_adjust_stock(self):
        product = self.service.adjust_stock(self.widget.id, -50)
        assert product.stock == 100
        assert self.service.get_product(self.widget.id).stock == 100

    def test_adjust_stock_below_zero_rejected(self):
        with pytest.raises(ValueError, match="Insufficient stock for Gadget B: only 23 available"):
            self.service.adjust_stock(self.gadget.id, -24)
        assert self.service.get_product(self.gadget.id).stock == 23

    def test_adjust_stock_missing(self):
        with pytest.raises(ValueError, match="Product not found"):
            self.service.adjust_stock(999, 1)

    def test_update_duplicate_sku_rejected(self):
        gadget = self.service.get_product(self.gadget.id)
        gadget.sku = "wgt-001"
        with pytest.raises(ValueError, match="already in use"):
            self.service.update_product(gadget)

    def test_get_by_uuid_and_delete(self):
        assert self.service.get_product_by_uuid(self.widget.uuid).id == self.widget.id
        self.service.delete_product(self.widget.id)
        assert self.service.get_product_by_uuid(self.widget.uuid) is None

    def test_deactivate_changes_status(self):
        widget: Product = self.service.get_product(self.widget.id)
        widget.is_active = False
        assert self.service.update_product(widget).status == ProductStatus.INACTIVE
