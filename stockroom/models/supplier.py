from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class SupplierStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class Supplier(BaseModel):
    id: int | None = None
    uuid: str = ""
    shop_name: str
    contact_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    details: str = ""
    status: SupplierStatus = SupplierStatus.ACTIVE
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.status == SupplierStatus.ACTIVE
