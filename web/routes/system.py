from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from stockroom.settings import settings
from web.schemas import CatalogueItem, CatalogueResponse

router = APIRouter()

# Static catalogue served to the front-end before it talks to /api/v1
CATALOGUE = [
    CatalogueItem(id=1, name="Widget A", sku="WGT-001", stock=150, price=29.99),
    CatalogueItem(id=2, name="Gadget B", sku="GDG-002", stock=23, price=79.99),
    CatalogueItem(id=3, name="Component C", sku="CMP-003", stock=5, price=14.99),
]


@router.get("/health")
async def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/api")
async def api_info():
    return {"message": "Inventory Management API", "version": settings.api_version}


@router.get("/api/products", response_model=CatalogueResponse)
async def catalogue():
    return CatalogueResponse(data=[item.model_copy() for item in CATALOGUE], total=len(CATALOGUE))
