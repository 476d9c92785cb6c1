from __future__ import annotations

import logging

from fastapi import HTTPException, Request

from stockroom.repositories.factory import (
    get_bill_repository,
    get_product_repository,
    get_purchase_order_repository,
    get_sales_order_repository,
    get_supplier_repository,
)
from stockroom.services.bill_service import BillService
from stockroom.services.dashboard_service import DashboardService
from stockroom.services.product_service import ProductService
from stockroom.services.purchase_order_service import PurchaseOrderService
from stockroom.services.sales_order_service import SalesOrderService
from stockroom.services.supplier_service import SupplierService

logger = logging.getLogger(__name__)


def get_product_service(request: Request) -> ProductService:
    return ProductService(get_product_repository())


def get_supplier_service(request: Request) -> SupplierService:
    return SupplierService(get_supplier_repository())


def get_purchase_order_service(request: Request) -> PurchaseOrderService:
    return PurchaseOrderService(
        get_purchase_order_repository(),
        get_product_repository(),
        get_supplier_repository(),
    )


def get_sales_order_service(request: Request) -> SalesOrderService:
    return SalesOrderService(get_sales_order_repository(), get_product_repository())


def get_bill_service(request: Request) -> BillService:
    return BillService(
        get_bill_repository(),
        get_purchase_order_repository(),
        get_supplier_repository(),
    )


def get_dashboard_service(request: Request) -> DashboardService:
    return DashboardService(
        get_product_repository(),
        get_sales_order_repository(),
        get_bill_repository(),
    )


def not_found(request: Request, label: str, uuid: str) -> HTTPException:
    logger.info("%s %s not found (%s %s)", label, uuid, request.method, request.url.path)
    return HTTPException(status_code=404, detail=f"{label} not found")
