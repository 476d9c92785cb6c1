from __future__ import annotations

from pydantic import BaseModel

from stockroom.models.product import Product


class DashboardMetrics(BaseModel):
    total_products: int = 0
    active_products: int = 0
    current_stock_value: int = 0  # paise, at cost
    todays_sales: int = 0
    todays_revenue: int = 0  # paise
    todays_profit: int = 0  # paise, estimated
    outstanding_bills: int = 0  # paise
    low_stock_items: list[Product] = []
