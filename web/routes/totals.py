"""Live previews for order and bill forms. Nothing here touches the store."""

from __future__ import annotations

from fastapi import APIRouter

from stockroom.payments import PaymentOutcome, reconcile_payment
from stockroom.totals import compute_totals
from web.schemas import PaymentPreviewIn, TotalsIn, TotalsResponse

router = APIRouter(prefix="/api/v1/totals", tags=["totals"])


@router.post("", response_model=TotalsResponse)
async def preview_totals(body: TotalsIn):
    items = [item.to_model() for item in body.items]
    totals = compute_totals(items, body.tax_percent)
    return TotalsResponse(items=items, **totals.model_dump())


@router.post("/payment", response_model=PaymentOutcome)
async def preview_payment(body: PaymentPreviewIn):
    return reconcile_payment(body.amount, body.prior_paid, body.new_payment, body.status)
