from unittest.mock import MagicMock, patch

from stockroom.models.supplier import Supplier, SupplierStatus


class TestListSuppliersMenu:
    def test_empty(self):
        from stockroom.cli.supplier_menu import list_suppliers_menu

        mock_service = MagicMock()
        mock_service.list_suppliers.return_value = []
        list_suppliers_menu(mock_service)

    def test_lists(self):
        from stockroom.cli.supplier_menu import list_suppliers_menu

        mock_service = MagicMock()
        mock_service.list_suppliers.return_value = [
            Supplier(id=1, shop_name="Sharma Traders"),
            Supplier(id=2, shop_name="Old Co", status=SupplierStatus.INACTIVE),
        ]
        list_suppliers_menu(mock_service)


class TestCreateSupplierMenu:
    @patch("stockroom.cli.supplier_menu.questionary")
    def test_cancel(self, mock_q):
        from stockroom.cli.supplier_menu import create_supplier_menu

        mock_service = MagicMock()
        mock_q.text.return_value.ask.return_value = None
        create_supplier_menu(mock_service)
        mock_service.create_supplier.assert_not_called()

    @patch("stockroom.cli.supplier_menu.questionary")
    def test_create_inactive(self, mock_q):
        from stockroom.cli.supplier_menu import create_supplier_menu

        mock_service = MagicMock()
        mock_service.create_supplier.return_value = Supplier(id=1, shop_name="Sharma Traders")
        mock_q.text.return_value.ask.side_effect = ["Sharma Traders", "Anil", "98450 00000", "", "MG Road"]
        mock_q.confirm.return_value.ask.return_value = False

        create_supplier_menu(mock_service)

        kwargs = mock_service.create_supplier.call_args.kwargs
        assert kwargs["shop_name"] == "Sharma Traders"
        assert kwargs["phone"] == "98450 00000"
        assert kwargs["status"] == SupplierStatus.INACTIVE
