from __future__ import annotations

import logging
from datetime import date

from stockroom.constants import UNKNOWN_SUPPLIER
from stockroom.models.order import LineItem, PurchaseOrder, PurchaseOrderStatus
from stockroom.repositories.base import ProductRepository, PurchaseOrderRepository, SupplierRepository
from stockroom.services.order_lines import generate_reference, prepare_line_items, recompute

logger = logging.getLogger(__name__)


class PurchaseOrderService:
    def __init__(
        self,
        order_repo: PurchaseOrderRepository,
        product_repo: ProductRepository,
        supplier_repo: SupplierRepository,
    ) -> None:
        self.order_repo = order_repo
        self.product_repo = product_repo
        self.supplier_repo = supplier_repo

    def _receive_stock(self, order: PurchaseOrder) -> PurchaseOrder:
        """Add the ordered quantities to product stock, once per order."""
        if order.stock_received:
            logger.debug("Stock already received for purchase order %s", order.reference_no)
            return order
        for product_id, quantity in order.quantities_by_product().items():
            product = self.product_repo.get_by_id(product_id)
            if product is None:
                logger.warning("Receive skipped: product %s no longer exists (order=%s)", product_id, order.reference_no)
                continue
            self.product_repo.update_stock(product_id, product.stock + quantity)
        order.stock_received = True
        logger.info("Stock received for purchase order %s", order.reference_no)
        return self.order_repo.update(order)

    def _check_supplier(self, supplier_id: int | None) -> None:
        if supplier_id is None:
            raise ValueError("Please select a supplier for this purchase order")
        if self.supplier_repo.get_by_id(supplier_id) is None:
            logger.warning("Purchase order rejected: supplier %s not found", supplier_id)
            raise ValueError("Supplier not found")

    def create_order(
        self,
        supplier_id: int | None,
        items: list[LineItem],
        status: PurchaseOrderStatus = PurchaseOrderStatus.PENDING,
        tax_percent: float = 0,
        notes: str = "",
        order_date: date | None = None,
        reference_no: str = "",
    ) -> PurchaseOrder:
        self._check_supplier(supplier_id)
        reference_no = reference_no.strip() or generate_reference(
            "PO", lambda ref: self.order_repo.get_by_reference(ref) is not None
        )
        order = PurchaseOrder(
            reference_no=reference_no,
            supplier_id=supplier_id,
            items=prepare_line_items(items, self.product_repo, "cost_price"),
            status=status,
            tax_percent=tax_percent,
            notes=notes,
        )
        if order_date is not None:
            order.order_date = order_date
        recompute(order)

        result = self.order_repo.create(order)
        logger.info(
            "Purchase order created: id=%s, ref=%s, status=%s, total=%d",
            result.id,
            result.reference_no,
            result.status.value,
            result.grand_total,
        )
        if result.is_completed:
            result = self._receive_stock(result)
        return result

    def update_order(self, order: PurchaseOrder) -> PurchaseOrder:
        if order.id is None:
            raise ValueError("Cannot update purchase order without an id")
        original = self.order_repo.get_by_id(order.id)
        if original is None:
            raise ValueError("Purchase order not found")
        self._check_supplier(order.supplier_id)
        order.stock_received = original.stock_received
        order.items = prepare_line_items(order.items, self.product_repo, "cost_price")
        recompute(order)

        result = self.order_repo.update(order)
        logger.info(
            "Purchase order updated: id=%s, status=%s -> %s, total=%d",
            result.id,
            original.status.value,
            result.status.value,
            result.grand_total,
        )
        if result.is_completed:
            result = self._receive_stock(result)
        return result

    def get_order(self, order_id: int) -> PurchaseOrder | None:
        return self.order_repo.get_by_id(order_id)

    def get_order_by_uuid(self, uuid: str) -> PurchaseOrder | None:
        result = self.order_repo.get_by_uuid(uuid)
        logger.debug("get_order_by_uuid uuid=%s found=%s", uuid, result is not None)
        return result

    def delete_order(self, order_id: int) -> None:
        order = self.order_repo.get_by_id(order_id)
        if order is not None and order.is_completed:
            logger.warning("Purchase order %s deleted after completion; received stock is not reverted", order.reference_no)
        self.order_repo.delete(order_id)
        logger.info("Purchase order %s deleted", order_id)

    def list_orders(self, search: str = "", status: PurchaseOrderStatus | str | None = None) -> list[PurchaseOrder]:
        term = search.strip().lower()
        wanted_status = PurchaseOrderStatus(status) if status else None
        result = []
        for order in self.order_repo.list_all():
            if term and term not in order.reference_no.lower() and term not in order.notes.lower():
                continue
            if wanted_status is not None and order.status != wanted_status:
                continue
            result.append(order)
        logger.debug("Listed %d purchase orders", len(result))
        return result

    def supplier_name(self, order: PurchaseOrder) -> str:
        if order.supplier_id is None:
            return UNKNOWN_SUPPLIER
        supplier = self.supplier_repo.get_by_id(order.supplier_id)
        return supplier.shop_name if supplier else UNKNOWN_SUPPLIER
