from __future__ import annotations

import logging
import secrets
from collections.abc import Callable

from stockroom.models.order import LineItem, Order
from stockroom.repositories.base import ProductRepository
from stockroom.totals import compute_totals

logger = logging.getLogger(__name__)

MAX_REFERENCE_ATTEMPTS = 1000


def prepare_line_items(items: list[LineItem], product_repo: ProductRepository, price_attr: str) -> list[LineItem]:
    """Check every line points at a known product and fill missing unit prices.

    A line whose unit price was never given takes the product's ``price_attr``
    (``cost_price`` on purchases, ``selling_price`` on sales). An explicit
    price, zero included, is kept.
    """
    if not items:
        raise ValueError("Add at least one line item")
    prepared: list[LineItem] = []
    for item in items:
        if item.product_id is None:
            raise ValueError("Select a product for every line item")
        product = product_repo.get_by_id(item.product_id)
        if product is None:
            logger.warning("Line item rejected: product %s not found", item.product_id)
            raise ValueError(f"Product {item.product_id} not found")
        if "unit_price" in item.model_fields_set:
            prepared.append(item.model_copy())
        else:
            prepared.append(item.model_copy(update={"unit_price": getattr(product, price_attr)}))
    return prepared


def recompute(order: Order) -> None:
    order.apply_totals(compute_totals(order.items, order.tax_percent))


def generate_reference(prefix: str, exists: Callable[[str], bool]) -> str:
    """Random ``PREFIX-NNNNN`` reference not yet taken."""
    for _ in range(MAX_REFERENCE_ATTEMPTS):
        reference = f"{prefix}-{secrets.randbelow(100000):05d}"
        if not exists(reference):
            return reference
    raise RuntimeError(f"Could not generate a unique {prefix} reference")
