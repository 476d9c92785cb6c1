from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response

from stockroom.models.product import Product, ProductStatus
from stockroom.services.product_service import ProductService
from web.deps import get_product_service, not_found
from web.schemas import ProductIn, StockAdjustment

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/products", tags=["products"])


def _load(request: Request, service: ProductService, uuid: str) -> Product:
    product = service.get_product_by_uuid(uuid)
    if product is None:
        raise not_found(request, "Product", uuid)
    return product


@router.get("", response_model=list[Product])
async def list_products(
    search: str = "",
    category: str = "",
    status: ProductStatus | None = None,
    service: ProductService = Depends(get_product_service),
):
    return service.list_products(search=search, category=category, status=status)


@router.get("/categories", response_model=list[str])
async def list_categories(service: ProductService = Depends(get_product_service)):
    return service.list_categories()


@router.get("/low-stock", response_model=list[Product])
async def low_stock(service: ProductService = Depends(get_product_service)):
    return service.low_stock_products()


@router.post("", response_model=Product, status_code=201)
async def create_product(body: ProductIn, service: ProductService = Depends(get_product_service)):
    return service.create_product(**body.model_dump())


@router.get("/{uuid}", response_model=Product)
async def get_product(uuid: str, request: Request, service: ProductService = Depends(get_product_service)):
    return _load(request, service, uuid)


@router.put("/{uuid}", response_model=Product)
async def update_product(
    uuid: str,
    body: ProductIn,
    request: Request,
    service: ProductService = Depends(get_product_service),
):
    product = _load(request, service, uuid)
    changes = body.model_dump()
    if changes["min_stock"] is None:
        changes.pop("min_stock")
    updated = product.model_copy(update=changes)
    # Re-validate so numeric clamps apply to the edited values
    return service.update_product(Product.model_validate(updated.model_dump()))


@router.post("/{uuid}/stock", response_model=Product)
async def adjust_stock(
    uuid: str,
    body: StockAdjustment,
    request: Request,
    service: ProductService = Depends(get_product_service),
):
    product = _load(request, service, uuid)
    return service.adjust_stock(product.id, body.delta)


@router.delete("/{uuid}", status_code=204)
async def delete_product(uuid: str, request: Request, service: ProductService = Depends(get_product_service)):
    product = _load(request, service, uuid)
    service.delete_product(product.id)
    return Response(status_code=204)
