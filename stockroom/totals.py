"""Order total calculation.

Every mutation of an order's line items (add, remove, field edit) or of its
tax percentage goes through here so that subtotal, tax and grand total are
always recomputed from the current items. All amounts are integer paise.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from stockroom.models.order import LineItem, OrderTotals

PriceLookup = Callable[[int], int | None]

_EDITABLE_FIELDS = {"product_id", "quantity", "unit_price"}


def _non_negative(value: int) -> int:
    return max(0, value)


def line_total(quantity: int, unit_price: int) -> int:
    """Quantity times unit price, with both clamped to zero first."""
    return _non_negative(quantity) * _non_negative(unit_price)


def compute_tax(subtotal: int, tax_percent: float) -> int:
    """Tax on ``subtotal`` in paise, rounded half-up."""
    if not math.isfinite(tax_percent):
        raise ValueError("Tax percentage must be a finite number")
    rate = Decimal(str(tax_percent)) if tax_percent > 0 else Decimal("0")
    tax = Decimal(_non_negative(subtotal)) * rate / Decimal("100")
    try:
        return int(tax.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except InvalidOperation as e:
        raise ValueError("Tax percentage is too large") from e


def compute_totals(items: Iterable[LineItem], tax_percent: float = 0) -> OrderTotals:
    subtotal = _non_negative(sum(line_total(item.quantity, item.unit_price) for item in items))
    tax_amount = _non_negative(compute_tax(subtotal, tax_percent))
    return OrderTotals(
        subtotal=subtotal,
        tax_amount=tax_amount,
        grand_total=subtotal + tax_amount,
    )


def add_line_item(
    items: list[LineItem],
    tax_percent: float = 0,
    *,
    product_id: int | None = None,
    quantity: int = 1,
    unit_price: int = 0,
) -> tuple[list[LineItem], OrderTotals]:
    new_items = [*items, LineItem(product_id=product_id, quantity=quantity, unit_price=unit_price)]
    return new_items, compute_totals(new_items, tax_percent)


def update_line_item(
    items: list[LineItem],
    tax_percent: float,
    row_id: str,
    price_lookup: PriceLookup | None = None,
    **changes,
) -> tuple[list[LineItem], OrderTotals]:
    """Edit one row and recompute.

    When the product changes and no explicit unit price is given, the price is
    filled in from ``price_lookup``.
    """
    unknown = set(changes) - _EDITABLE_FIELDS
    if unknown:
        raise ValueError(f"Unknown line item field(s): {', '.join(sorted(unknown))}")

    found = False
    new_items: list[LineItem] = []
    for item in items:
        if item.id != row_id:
            new_items.append(item)
            continue
        found = True
        data = item.model_dump()
        data.update(changes)
        if "product_id" in changes and "unit_price" not in changes and price_lookup is not None:
            product_id = changes["product_id"]
            price = price_lookup(product_id) if product_id is not None else None
            if price is not None:
                data["unit_price"] = price
        new_items.append(LineItem(**data))

    if not found:
        raise ValueError(f"Line item {row_id} not found")
    return new_items, compute_totals(new_items, tax_percent)


def remove_line_item(
    items: list[LineItem],
    tax_percent: float,
    row_id: str,
) -> tuple[list[LineItem], OrderTotals]:
    new_items = [item for item in items if item.id != row_id]
    return new_items, compute_totals(new_items, tax_percent)
