from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from stockroom.models.order import SalesOrder, SalesOrderStatus
from stockroom.services.sales_order_service import SalesOrderService
from web.deps import get_sales_order_service, not_found
from web.schemas import SalesOrderIn

router = APIRouter(prefix="/api/v1/sales-orders", tags=["sales-orders"])


def _load(request: Request, service: SalesOrderService, uuid: str) -> SalesOrder:
    order = service.get_order_by_uuid(uuid)
    if order is None:
        raise not_found(request, "Sales order", uuid)
    return order


@router.get("", response_model=list[SalesOrder])
async def list_orders(
    search: str = "",
    status: SalesOrderStatus | None = None,
    service: SalesOrderService = Depends(get_sales_order_service),
):
    return service.list_orders(search=search, status=status)


@router.get("/next-reference")
async def next_reference(service: SalesOrderService = Depends(get_sales_order_service)):
    return {"reference_no": service.generate_reference()}


@router.post("", response_model=SalesOrder, status_code=201)
async def create_order(body: SalesOrderIn, service: SalesOrderService = Depends(get_sales_order_service)):
    return service.create_order(
        items=[item.to_model() for item in body.items],
        customer_name=body.customer_name,
        status=body.status,
        tax_percent=body.tax_percent,
        notes=body.notes,
        order_date=body.order_date,
        reference_no=body.reference_no,
    )


@router.get("/{uuid}", response_model=SalesOrder)
async def get_order(uuid: str, request: Request, service: SalesOrderService = Depends(get_sales_order_service)):
    return _load(request, service, uuid)


@router.put("/{uuid}", response_model=SalesOrder)
async def update_order(
    uuid: str,
    body: SalesOrderIn,
    request: Request,
    service: SalesOrderService = Depends(get_sales_order_service),
):
    order = _load(request, service, uuid)
    order.customer_name = body.customer_name
    order.items = [item.to_model() for item in body.items]
    order.status = body.status
    order.tax_percent = max(0.0, body.tax_percent)
    order.notes = body.notes
    if body.order_date is not None:
        order.order_date = body.order_date
    return service.update_order(order)


@router.delete("/{uuid}", status_code=204)
async def delete_order(uuid: str, request: Request, service: SalesOrderService = Depends(get_sales_order_service)):
    order = _load(request, service, uuid)
    service.delete_order(order.id)
    return Response(status_code=204)
