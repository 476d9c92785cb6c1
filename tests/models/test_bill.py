from datetime import date

from freezegun import freeze_time

from stockroom.models.bill import Bill, BillStatus


class TestBill:
    def test_defaults(self):
        bill = Bill()
        assert bill.id is None
        assert bill.uuid == ""
        assert bill.amount == 0
        assert bill.paid_amount == 0
        assert bill.status == BillStatus.UNPAID
        assert bill.due_date is None

    def test_clamps_negative_amounts(self):
        bill = Bill(amount=-100, paid_amount=-5)
        assert bill.amount == 0
        assert bill.paid_amount == 0

    def test_balance_due(self):
        assert Bill(amount=10000, paid_amount=2500).balance_due == 7500
        assert Bill(amount=10000, paid_amount=10000).balance_due == 0


class TestIsOverdue:
    @freeze_time("2025-04-15 12:00:00")
    def test_overdue_when_past_due(self):
        bill = Bill(amount=100, due_date=date(2025, 4, 10))
        assert bill.is_overdue is True

    @freeze_time("2025-04-05 12:00:00")
    def test_not_overdue_before_due(self):
        bill = Bill(amount=100, due_date=date(2025, 4, 10))
        assert bill.is_overdue is False

    @freeze_time("2025-04-15 12:00:00")
    def test_paid_never_overdue(self):
        bill = Bill(amount=100, paid_amount=100, status=BillStatus.PAID, due_date=date(2025, 4, 10))
        assert bill.is_overdue is False

    def test_no_due_date(self):
        assert Bill(amount=100).is_overdue is False
