from tests.web.conftest import create_supplier_in_store


class TestSupplierRoutes:
    def test_create_and_list(self, client):
        response = client.post("/api/v1/suppliers", json={"shop_name": "Kumar Electricals", "contact_name": "Ravi"})
        assert response.status_code == 201
        assert response.json()["status"] == "Active"
        assert [s["shop_name"] for s in client.get("/api/v1/suppliers", params={"search": "ravi"}).json()] == [
            "Kumar Electricals"
        ]

    def test_blank_shop_name(self, client):
        response = client.post("/api/v1/suppliers", json={"shop_name": "  "})
        assert response.status_code == 400
        assert response.json()["detail"] == "Shop name is required"

    def test_update_status(self, client):
        supplier = create_supplier_in_store()
        response = client.put(
            f"/api/v1/suppliers/{supplier.uuid}", json={"shop_name": "Sharma Traders", "status": "Inactive"}
        )
        assert response.json()["status"] == "Inactive"
        inactive = client.get("/api/v1/suppliers", params={"status": "Inactive"}).json()
        assert [s["uuid"] for s in inactive] == [supplier.uuid]

    def test_delete_and_404(self, client):
        supplier = create_supplier_in_store()
        assert client.delete(f"/api/v1/suppliers/{supplier.uuid}").status_code == 204
        assert client.get(f"/api/v1/suppliers/{supplier.uuid}").status_code == 404
