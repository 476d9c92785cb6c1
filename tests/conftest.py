"""Root conftest: a clean in-memory store for every test."""

from __future__ import annotations

import pytest

from stockroom.models.order import LineItem, PurchaseOrder, PurchaseOrderStatus, SalesOrder
from stockroom.models.product import Product
from stockroom.repositories.factory import (
    get_bill_repository,
    get_product_repository,
    get_purchase_order_repository,
    get_sales_order_repository,
    get_supplier_repository,
    reset_store,
)


@pytest.fixture(autouse=True)
def clean_store():
    reset_store()
    yield
    reset_store()


@pytest.fixture()
def product_repo():
    return get_product_repository()


@pytest.fixture()
def supplier_repo():
    return get_supplier_repository()


@pytest.fixture()
def purchase_repo():
    return get_purchase_order_repository()


@pytest.fixture()
def sales_repo():
    return get_sales_order_repository()


@pytest.fixture()
def bill_repo():
    return get_bill_repository()


def make_product(**overrides) -> Product:
    defaults = dict(
        name="Widget A",
        sku="WGT-001",
        category="Hardware",
        cost_price=1850,
        selling_price=2999,
        stock=150,
        min_stock=20,
    )
    defaults.update(overrides)
    return Product(**defaults)


def make_purchase_order(**overrides) -> PurchaseOrder:
    defaults = dict(
        reference_no="PO-00001",
        supplier_id=1,
        items=[LineItem(product_id=1, quantity=10, unit_price=1850)],
        status=PurchaseOrderStatus.PENDING,
    )
    defaults.update(overrides)
    return PurchaseOrder(**defaults)


def make_sales_order(**overrides) -> SalesOrder:
    defaults = dict(
        reference_no="SO-00001",
        customer_name="Asha Rao",
        items=[LineItem(product_id=1, quantity=2, unit_price=2999)],
    )
    defaults.update(overrides)
    return SalesOrder(**defaults)
