from __future__ import annotations

import logging
from datetime import date, datetime

from stockroom.constants import IST_TZ
from stockroom.models.dashboard import DashboardMetrics
from stockroom.models.product import ProductStatus
from stockroom.repositories.base import BillRepository, ProductRepository, SalesOrderRepository

logger = logging.getLogger(__name__)


class DashboardService:
    def __init__(
        self,
        product_repo: ProductRepository,
        sales_repo: SalesOrderRepository,
        bill_repo: BillRepository,
    ) -> None:
        self.product_repo = product_repo
        self.sales_repo = sales_repo
        self.bill_repo = bill_repo

    def metrics(self, today: date | None = None) -> DashboardMetrics:
        today = today or datetime.now(IST_TZ).date()
        products = self.product_repo.list_all()
        costs = {p.id: p.cost_price for p in products}

        todays_orders = [o for o in self.sales_repo.list_all() if o.order_date == today and o.stock_deducted]
        profit = 0
        for order in todays_orders:
            for item in order.items:
                cost = costs.get(item.product_id, 0)
                profit += (item.unit_price - cost) * item.quantity

        result = DashboardMetrics(
            total_products=len(products),
            active_products=sum(1 for p in products if p.is_active),
            current_stock_value=sum(p.stock_value for p in products),
            todays_sales=len(todays_orders),
            todays_revenue=sum(o.grand_total for o in todays_orders),
            todays_profit=profit,
            outstanding_bills=sum(b.balance_due for b in self.bill_repo.list_all()),
            low_stock_items=[
                p for p in products if p.status in (ProductStatus.LOW_STOCK, ProductStatus.OUT_OF_STOCK)
            ],
        )
        logger.debug("Dashboard metrics computed for %s: sales=%d", today, result.todays_sales)
        return result
