from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from stockroom.models.supplier import Supplier, SupplierStatus
from stockroom.services.supplier_service import SupplierService
from web.deps import get_supplier_service, not_found
from web.schemas import SupplierIn

router = APIRouter(prefix="/api/v1/suppliers", tags=["suppliers"])


def _load(request: Request, service: SupplierService, uuid: str) -> Supplier:
    supplier = service.get_supplier_by_uuid(uuid)
    if supplier is None:
        raise not_found(request, "Supplier", uuid)
    return supplier


@router.get("", response_model=list[Supplier])
async def list_suppliers(
    search: str = "",
    status: SupplierStatus | None = None,
    service: SupplierService = Depends(get_supplier_service),
):
    return service.list_suppliers(search=search, status=status)


@router.post("", response_model=Supplier, status_code=201)
async def create_supplier(body: SupplierIn, service: SupplierService = Depends(get_supplier_service)):
    return service.create_supplier(**body.model_dump())


@router.get("/{uuid}", response_model=Supplier)
async def get_supplier(uuid: str, request: Request, service: SupplierService = Depends(get_supplier_service)):
    return _load(request, service, uuid)


@router.put("/{uuid}", response_model=Supplier)
async def update_supplier(
    uuid: str,
    body: SupplierIn,
    request: Request,
    service: SupplierService = Depends(get_supplier_service),
):
    supplier = _load(request, service, uuid)
    return service.update_supplier(supplier.model_copy(update=body.model_dump()))


@router.delete("/{uuid}", status_code=204)
async def delete_supplier(uuid: str, request: Request, service: SupplierService = Depends(get_supplier_service)):
    supplier = _load(request, service, uuid)
    service.delete_supplier(supplier.id)
    return Response(status_code=204)
