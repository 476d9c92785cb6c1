from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, computed_field, field_validator


class ProductStatus(str, Enum):
    ACTIVE = "Active"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"
    INACTIVE = "Inactive"


def derive_stock_status(stock: int, min_stock: int, is_active: bool = True) -> ProductStatus:
    """Stock level only matters for active products."""
    if not is_active:
        return ProductStatus.INACTIVE
    if stock <= 0:
        return ProductStatus.OUT_OF_STOCK
    if stock <= min_stock:
        return ProductStatus.LOW_STOCK
    return ProductStatus.ACTIVE


class Product(BaseModel):
    id: int | None = None
    uuid: str = ""
    name: str
    category: str = ""
    sku: str
    cost_price: int = 0  # paise
    selling_price: int = 0  # paise
    stock: int = 0
    unit_type: str = "pcs"
    min_stock: int = 10
    is_active: bool = True
    image: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("cost_price", "selling_price", "stock", "min_stock")
    @classmethod
    def _clamp_non_negative(cls, value: int) -> int:
        return max(0, value)

    @computed_field
    @property
    def status(self) -> ProductStatus:
        return derive_stock_status(self.stock, self.min_stock, self.is_active)

    @property
    def stock_value(self) -> int:
        return self.stock * self.cost_price
