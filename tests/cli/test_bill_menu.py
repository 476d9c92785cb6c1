from datetime import date
from unittest.mock import MagicMock, patch

from stockroom.models.bill import Bill, BillStatus
from stockroom.models.order import PurchaseOrder, PurchaseOrderStatus
from stockroom.payments import PaymentOutcome


def _bill(**overrides) -> Bill:
    defaults = dict(
        id=1,
        uuid="u",
        bill_no="BILL-20250301-1234",
        purchase_order_id=1,
        po_reference="PO-10001",
        supplier_name="Sharma Traders",
        amount=10000,
        due_date=date(2025, 3, 31),
    )
    defaults.update(overrides)
    return Bill(**defaults)


class TestRecordPaymentMenu:
    @patch("stockroom.cli.bill_menu.questionary")
    def test_cancel_status(self, mock_q):
        from stockroom.cli.bill_menu import record_payment_menu

        mock_service = MagicMock()
        mock_q.select.return_value.ask.return_value = None
        bill = _bill()
        assert record_payment_menu(bill, mock_service) is bill
        mock_service.record_payment.assert_not_called()

    @patch("stockroom.cli.bill_menu.questionary")
    def test_paid_prefills_remaining_due(self, mock_q):
        from stockroom.cli.bill_menu import record_payment_menu

        bill = _bill(paid_amount=2500, status=BillStatus.PARTIALLY_PAID)
        mock_service = MagicMock()
        mock_service.record_payment.return_value = (
            _bill(paid_amount=10000, status=BillStatus.PAID),
            PaymentOutcome(status=BillStatus.PAID, paid_amount=10000),
        )
        mock_q.select.return_value.ask.return_value = "Paid"
        mock_q.text.return_value.ask.return_value = "75.00"

        result = record_payment_menu(bill, mock_service)

        assert mock_q.text.call_args.kwargs["default"] == "75.00"
        mock_service.record_payment.assert_called_once_with(bill, 7500, BillStatus.PAID)
        assert result.status == BillStatus.PAID

    @patch("stockroom.cli.bill_menu.questionary")
    def test_invalid_amount_retries(self, mock_q):
        from stockroom.cli.bill_menu import record_payment_menu

        mock_service = MagicMock()
        mock_service.record_payment.return_value = (
            _bill(paid_amount=4000, status=BillStatus.PARTIALLY_PAID),
            PaymentOutcome(status=BillStatus.PARTIALLY_PAID, paid_amount=4000),
        )
        mock_q.select.return_value.ask.return_value = "Partially Paid"
        mock_q.text.return_value.ask.side_effect = ["abc", "40"]

        record_payment_menu(_bill(), mock_service)

        assert mock_service.record_payment.call_args[0][1] == 4000

    @patch("stockroom.cli.bill_menu.questionary")
    def test_unpaid_skips_amount(self, mock_q):
        from stockroom.cli.bill_menu import record_payment_menu

        mock_service = MagicMock()
        mock_service.record_payment.return_value = (
            _bill(),
            PaymentOutcome(status=BillStatus.UNPAID, paid_amount=0),
        )
        mock_q.select.return_value.ask.return_value = "Unpaid"

        record_payment_menu(_bill(paid_amount=500, status=BillStatus.PARTIALLY_PAID), mock_service)

        mock_q.text.assert_not_called()
        assert mock_service.record_payment.call_args[0][1] == 0

    @patch("stockroom.cli.bill_menu.questionary")
    def test_rejection_returns_original(self, mock_q):
        from stockroom.cli.bill_menu import record_payment_menu

        mock_service = MagicMock()
        mock_service.record_payment.side_effect = ValueError("Total paid amount must be greater than 0")
        mock_q.select.return_value.ask.return_value = "Partially Paid"
        mock_q.text.return_value.ask.return_value = "0"
        bill = _bill()

        assert record_payment_menu(bill, mock_service) is bill


class TestCreateBillMenu:
    @patch("stockroom.cli.bill_menu.questionary")
    def test_no_completed_orders(self, mock_q):
        from stockroom.cli.bill_menu import create_bill_menu

        mock_purchases = MagicMock()
        mock_purchases.list_orders.return_value = []
        mock_bills = MagicMock()

        create_bill_menu(mock_bills, mock_purchases)

        mock_q.select.assert_not_called()
        mock_bills.create_bill_for_order.assert_not_called()

    @patch("stockroom.cli.bill_menu.questionary")
    def test_creates_for_selected_order(self, mock_q):
        from stockroom.cli.bill_menu import create_bill_menu

        order = PurchaseOrder(id=5, reference_no="PO-10001", status=PurchaseOrderStatus.COMPLETED, grand_total=10000)
        mock_purchases = MagicMock()
        mock_purchases.list_orders.return_value = [order]
        mock_bills = MagicMock()
        mock_bills.create_bill_for_order.return_value = _bill()
        mock_q.select.return_value.ask.return_value = "PO-10001 - ₹100.00"
        mock_q.text.return_value.ask.return_value = "March delivery"

        create_bill_menu(mock_bills, mock_purchases)

        mock_purchases.list_orders.assert_called_once_with(status="Completed")
        mock_bills.create_bill_for_order.assert_called_once_with(5, notes="March delivery")

    @patch("stockroom.cli.bill_menu.questionary")
    def test_back(self, mock_q):
        from stockroom.cli.bill_menu import create_bill_menu

        mock_purchases = MagicMock()
        mock_purchases.list_orders.return_value = [PurchaseOrder(id=5, reference_no="PO-1", grand_total=1)]
        mock_bills = MagicMock()
        mock_q.select.return_value.ask.return_value = "Back"

        create_bill_menu(mock_bills, mock_purchases)

        mock_bills.create_bill_for_order.assert_not_called()


class TestListBillsMenu:
    @patch("stockroom.cli.bill_menu.questionary")
    def test_empty_list(self, mock_q):
        from stockroom.cli.bill_menu import list_bills_menu

        mock_service = MagicMock()
        mock_service.list_bills.return_value = []
        list_bills_menu(mock_service)
        mock_q.select.assert_not_called()

    @patch("stockroom.cli.bill_menu.questionary")
    def test_select_bill_then_back(self, mock_q):
        from stockroom.cli.bill_menu import list_bills_menu

        bill = _bill()
        mock_service = MagicMock()
        mock_service.list_bills.return_value = [bill]
        mock_service.outstanding_total.return_value = 10000
        mock_service.get_bill.return_value = bill
        mock_q.select.return_value.ask.side_effect = [
            "1 - BILL-20250301-1234",  # select bill
            "Back",  # detail -> back
        ]

        list_bills_menu(mock_service)

        mock_service.get_bill.assert_called_once_with(1)

    @patch("stockroom.cli.bill_menu.questionary")
    def test_select_bill_not_found(self, mock_q):
        from stockroom.cli.bill_menu import list_bills_menu

        mock_service = MagicMock()
        mock_service.list_bills.return_value = [_bill()]
        mock_service.outstanding_total.return_value = 10000
        mock_service.get_bill.return_value = None
        mock_q.select.return_value.ask.return_value = "1 - BILL-20250301-1234"

        list_bills_menu(mock_service)

    @patch("stockroom.cli.bill_menu.questionary")
    def test_delete_bill(self, mock_q):
        from stockroom.cli.bill_menu import list_bills_menu

        bill = _bill()
        mock_service = MagicMock()
        mock_service.list_bills.return_value = [bill]
        mock_service.outstanding_total.return_value = 10000
        mock_service.get_bill.return_value = bill
        mock_q.select.return_value.ask.side_effect = ["1 - BILL-20250301-1234", "Delete Bill"]
        mock_q.confirm.return_value.ask.return_value = True

        list_bills_menu(mock_service)

        mock_service.delete_bill.assert_called_once_with(1)
