from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response

from stockroom.models.bill import Bill, BillStatus
from stockroom.services.bill_service import BillService
from web.deps import get_bill_service, not_found
from web.schemas import BillIn, BillPaymentResponse, PaymentIn

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/bills", tags=["bills"])


def _load(request: Request, service: BillService, uuid: str) -> Bill:
    bill = service.get_bill_by_uuid(uuid)
    if bill is None:
        raise not_found(request, "Bill", uuid)
    return bill


@router.get("", response_model=list[Bill])
async def list_bills(
    search: str = "",
    status: BillStatus | None = None,
    service: BillService = Depends(get_bill_service),
):
    return service.list_bills(search=search, status=status)


@router.get("/next-number")
async def next_bill_number(service: BillService = Depends(get_bill_service)):
    return {"bill_no": service.generate_bill_no()}


@router.get("/outstanding")
async def outstanding(service: BillService = Depends(get_bill_service)):
    return {"outstanding": service.outstanding_total()}


@router.post("", response_model=Bill, status_code=201)
async def create_bill(body: BillIn, service: BillService = Depends(get_bill_service)):
    return service.create_bill_for_order(**body.model_dump())


@router.get("/{uuid}", response_model=Bill)
async def get_bill(uuid: str, request: Request, service: BillService = Depends(get_bill_service)):
    return _load(request, service, uuid)


@router.put("/{uuid}", response_model=BillPaymentResponse)
async def update_bill(
    uuid: str,
    body: BillIn,
    request: Request,
    service: BillService = Depends(get_bill_service),
):
    bill = _load(request, service, uuid)
    bill.purchase_order_id = body.purchase_order_id
    if body.amount is not None:
        bill.amount = max(0, body.amount)
    bill.status = body.status
    bill.paid_amount = max(0, body.paid_amount)
    if body.bill_date is not None:
        bill.bill_date = body.bill_date
    if body.due_date is not None:
        bill.due_date = body.due_date
    bill.notes = body.notes
    if body.bill_no.strip():
        bill.bill_no = body.bill_no.strip()
    updated, outcome = service.update_bill(bill, body.new_payment)
    return BillPaymentResponse(bill=updated, auto_promoted=outcome.auto_promoted)


@router.post("/{uuid}/payments", response_model=BillPaymentResponse)
async def record_payment(
    uuid: str,
    body: PaymentIn,
    request: Request,
    service: BillService = Depends(get_bill_service),
):
    bill = _load(request, service, uuid)
    updated, outcome = service.record_payment(bill, body.new_payment, body.status)
    if outcome.auto_promoted:
        logger.info("Bill %s settled in full by payment", updated.bill_no)
    return BillPaymentResponse(bill=updated, auto_promoted=outcome.auto_promoted)


@router.delete("/{uuid}", status_code=204)
async def delete_bill(uuid: str, request: Request, service: BillService = Depends(get_bill_service)):
    bill = _load(request, service, uuid)
    service.delete_bill(bill.id)
    return Response(status_code=204)
