from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from stockroom.models.order import PurchaseOrder, PurchaseOrderStatus
from stockroom.services.purchase_order_service import PurchaseOrderService
from web.deps import get_purchase_order_service, not_found
from web.schemas import PurchaseOrderIn

router = APIRouter(prefix="/api/v1/purchase-orders", tags=["purchase-orders"])


def _load(request: Request, service: PurchaseOrderService, uuid: str) -> PurchaseOrder:
    order = service.get_order_by_uuid(uuid)
    if order is None:
        raise not_found(request, "Purchase order", uuid)
    return order


@router.get("", response_model=list[PurchaseOrder])
async def list_orders(
    search: str = "",
    status: PurchaseOrderStatus | None = None,
    service: PurchaseOrderService = Depends(get_purchase_order_service),
):
    return service.list_orders(search=search, status=status)


@router.post("", response_model=PurchaseOrder, status_code=201)
async def create_order(body: PurchaseOrderIn, service: PurchaseOrderService = Depends(get_purchase_order_service)):
    return service.create_order(
        supplier_id=body.supplier_id,
        items=[item.to_model() for item in body.items],
        status=body.status,
        tax_percent=body.tax_percent,
        notes=body.notes,
        order_date=body.order_date,
        reference_no=body.reference_no,
    )


@router.get("/{uuid}", response_model=PurchaseOrder)
async def get_order(
    uuid: str,
    request: Request,
    service: PurchaseOrderService = Depends(get_purchase_order_service),
):
    return _load(request, service, uuid)


@router.put("/{uuid}", response_model=PurchaseOrder)
async def update_order(
    uuid: str,
    body: PurchaseOrderIn,
    request: Request,
    service: PurchaseOrderService = Depends(get_purchase_order_service),
):
    order = _load(request, service, uuid)
    order.supplier_id = body.supplier_id
    order.items = [item.to_model() for item in body.items]
    order.status = body.status
    order.tax_percent = max(0.0, body.tax_percent)
    order.notes = body.notes
    if body.order_date is not None:
        order.order_date = body.order_date
    if body.reference_no.strip():
        order.reference_no = body.reference_no.strip()
    return service.update_order(order)


@router.delete("/{uuid}", status_code=204)
async def delete_order(
    uuid: str,
    request: Request,
    service: PurchaseOrderService = Depends(get_purchase_order_service),
):
    order = _load(request, service, uuid)
    service.delete_order(order.id)
    return Response(status_code=204)
