from __future__ import annotations

import logging

from stockroom.models.supplier import Supplier, SupplierStatus
from stockroom.repositories.base import SupplierRepository

logger = logging.getLogger(__name__)


class SupplierService:
    def __init__(self, repo: SupplierRepository) -> None:
        self.repo = repo

    def create_supplier(
        self,
        shop_name: str,
        contact_name: str = "",
        email: str = "",
        phone: str = "",
        address: str = "",
        details: str = "",
        status: SupplierStatus = SupplierStatus.ACTIVE,
    ) -> Supplier:
        if not shop_name.strip():
            raise ValueError("Shop name is required")
        supplier = Supplier(
            shop_name=shop_name.strip(),
            contact_name=contact_name.strip(),
            email=email.strip(),
            phone=phone.strip(),
            address=address.strip(),
            details=details.strip(),
            status=status,
        )
        result = self.repo.create(supplier)
        logger.info("Supplier created: id=%s, shop=%s", result.id, result.shop_name)
        return result

    def update_supplier(self, supplier: Supplier) -> Supplier:
        if not supplier.shop_name.strip():
            raise ValueError("Shop name is required")
        result = self.repo.update(supplier)
        logger.info("Supplier updated: id=%s, shop=%s", result.id, result.shop_name)
        return result

    def get_supplier(self, supplier_id: int) -> Supplier | None:
        return self.repo.get_by_id(supplier_id)

    def get_supplier_by_uuid(self, uuid: str) -> Supplier | None:
        return self.repo.get_by_uuid(uuid)

    def delete_supplier(self, supplier_id: int) -> None:
        self.repo.delete(supplier_id)
        logger.info("Supplier %s deleted", supplier_id)

    def list_suppliers(self, search: str = "", status: SupplierStatus | str | None = None) -> list[Supplier]:
        term = search.strip().lower()
        wanted_status = SupplierStatus(status) if status else None
        result = []
        for supplier in self.repo.list_all():
            haystack = f"{supplier.shop_name} {supplier.contact_name} {supplier.email}".lower()
            if term and term not in haystack:
                continue
            if wanted_status is not None and supplier.status != wanted_status:
                continue
            result.append(supplier)
        logger.debug("Listed %d suppliers", len(result))
        return result
