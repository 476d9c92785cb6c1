"""Web test fixtures: TestClient over the shared in-memory store."""

from __future__ import annotations

import pytest

from stockroom.models.order import LineItem, PurchaseOrderStatus
from stockroom.repositories.factory import (
    get_product_repository,
    get_purchase_order_repository,
    get_supplier_repository,
)
from stockroom.services.product_service import ProductService
from stockroom.services.purchase_order_service import PurchaseOrderService
from stockroom.services.supplier_service import SupplierService


def create_product_in_store(**overrides):
    defaults = dict(name="Widget A", sku="WGT-001", cost_price=1850, selling_price=2999, stock=150, min_stock=20)
    defaults.update(overrides)
    return ProductService(get_product_repository()).create_product(**defaults)


def create_supplier_in_store(shop_name="Sharma Traders"):
    return SupplierService(get_supplier_repository()).create_supplier(shop_name=shop_name)


def create_purchase_order_in_store(product, supplier, status=PurchaseOrderStatus.COMPLETED, quantity=10):
    service = PurchaseOrderService(get_purchase_order_repository(), get_product_repository(), get_supplier_repository())
    return service.create_order(supplier.id, [LineItem(product_id=product.id, quantity=quantity)], status=status)


@pytest.fixture()
def client():
    from starlette.testclient import TestClient

    from web.app import app

    return TestClient(app)
