from __future__ import annotations

import logging
from datetime import date

from stockroom.constants import WALK_IN_CUSTOMER
from stockroom.models.order import LineItem, SalesOrder, SalesOrderStatus
from stockroom.repositories.base import ProductRepository, SalesOrderRepository
from stockroom.services.order_lines import generate_reference, prepare_line_items, recompute

logger = logging.getLogger(__name__)


class SalesOrderService:
    def __init__(self, order_repo: SalesOrderRepository, product_repo: ProductRepository) -> None:
        self.order_repo = order_repo
        self.product_repo = product_repo

    def generate_reference(self) -> str:
        return generate_reference("SO", lambda ref: self.order_repo.get_by_reference(ref) is not None)

    def _deduct_stock(self, order: SalesOrder) -> None:
        """Take the ordered quantities out of stock, all lines or none."""
        quantities = order.quantities_by_product()
        new_levels: dict[int, int] = {}
        for product_id, quantity in quantities.items():
            product = self.product_repo.get_by_id(product_id)
            if product is None:
                logger.warning("Deduction skipped: product %s no longer exists (order=%s)", product_id, order.reference_no)
                continue
            if product.stock < quantity:
                logger.warning(
                    "Sales order %s rejected: %s has %d, needs %d",
                    order.reference_no,
                    product.sku,
                    product.stock,
                    quantity,
                )
                raise ValueError(f"Insufficient stock for {product.name}: only {product.stock} available")
            new_levels[product_id] = product.stock - quantity
        for product_id, stock in new_levels.items():
            self.product_repo.update_stock(product_id, stock)
        logger.info("Stock deducted for sales order %s", order.reference_no)

    def _restore_stock(self, order: SalesOrder) -> None:
        for product_id, quantity in order.quantities_by_product().items():
            product = self.product_repo.get_by_id(product_id)
            if product is None:
                continue
            self.product_repo.update_stock(product_id, product.stock + quantity)
        logger.info("Stock restored for sales order %s", order.reference_no)

    def create_order(
        self,
        items: list[LineItem],
        customer_name: str = "",
        status: SalesOrderStatus = SalesOrderStatus.PENDING,
        tax_percent: float = 0,
        notes: str = "",
        order_date: date | None = None,
        reference_no: str = "",
    ) -> SalesOrder:
        reference_no = reference_no.strip() or self.generate_reference()
        if self.order_repo.get_by_reference(reference_no) is not None:
            raise ValueError(f"Reference {reference_no} is already in use")
        order = SalesOrder(
            reference_no=reference_no,
            customer_name=customer_name.strip() or WALK_IN_CUSTOMER,
            items=prepare_line_items(items, self.product_repo, "selling_price"),
            status=status,
            tax_percent=tax_percent,
            notes=notes,
        )
        if order_date is not None:
            order.order_date = order_date
        recompute(order)

        if order.stock_deducted:
            self._deduct_stock(order)
        result = self.order_repo.create(order)
        logger.info(
            "Sales order created: id=%s, ref=%s, status=%s, total=%d",
            result.id,
            result.reference_no,
            result.status.value,
            result.grand_total,
        )
        return result

    def update_order(self, order: SalesOrder) -> SalesOrder:
        if order.id is None:
            raise ValueError("Cannot update sales order without an id")
        original = self.order_repo.get_by_id(order.id)
        if original is None:
            raise ValueError("Sales order not found")
        order.items = prepare_line_items(order.items, self.product_repo, "selling_price")
        order.customer_name = order.customer_name.strip() or WALK_IN_CUSTOMER
        recompute(order)

        if not original.stock_deducted and order.stock_deducted:
            self._deduct_stock(order)
        elif original.stock_deducted and not order.stock_deducted:
            self._restore_stock(original)

        result = self.order_repo.update(order)
        logger.info(
            "Sales order updated: id=%s, status=%s -> %s, total=%d",
            result.id,
            original.status.value,
            result.status.value,
            result.grand_total,
        )
        return result

    def get_order(self, order_id: int) -> SalesOrder | None:
        return self.order_repo.get_by_id(order_id)

    def get_order_by_uuid(self, uuid: str) -> SalesOrder | None:
        result = self.order_repo.get_by_uuid(uuid)
        logger.debug("get_order_by_uuid uuid=%s found=%s", uuid, result is not None)
        return result

    def delete_order(self, order_id: int) -> None:
        order = self.order_repo.get_by_id(order_id)
        if order is not None and order.stock_deducted:
            logger.warning("Sales order %s deleted after shipping; deducted stock is not reverted", order.reference_no)
        self.order_repo.delete(order_id)
        logger.info("Sales order %s deleted", order_id)

    def list_orders(self, search: str = "", status: SalesOrderStatus | str | None = None) -> list[SalesOrder]:
        term = search.strip().lower()
        wanted_status = SalesOrderStatus(status) if status else None
        result = []
        for order in self.order_repo.list_all():
            if term and term not in order.reference_no.lower() and term not in order.customer_name.lower():
                continue
            if wanted_status is not None and order.status != wanted_status:
                continue
            result.append(order)
        logger.debug("Listed %d sales orders", len(result))
        return result
