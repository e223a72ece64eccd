"""Integration tests for the dashboard and service endpoints."""

from support import ADMIN, STAFF, category_payload, product_payload


class TestDashboard:
    def test_empty(self, client):
        response = client.get("/api/dashboard", headers=STAFF)

        assert response.status_code == 200
        assert response.json() == {
            "totalProducts": 0,
            "totalCategories": 0,
            "lowStockItems": 0,
            "outOfStockItems": 0,
        }

    def test_counts(self, client):
        client.post("/api/categories", json=category_payload(), headers=ADMIN)
        for sku, quantity in (("V-1", 50), ("V-2", 5), ("V-3", 0)):
            client.post(
                "/api/products",
                json=product_payload(sku=sku, stock={"quantity": quantity, "minStock": 10}),
                headers=STAFF,
            )

        body = client.get("/api/dashboard", headers=STAFF).json()

        assert body["totalProducts"] == 3
        assert body["totalCategories"] == 1
        assert body["lowStockItems"] == 2
        assert body["outOfStockItems"] == 1

    def test_requires_identity(self, client):
        assert client.get("/api/dashboard").status_code == 401


class TestService:
    def test_health_needs_no_identity(self, client):
        response = client.get("/api/health")

        body = response.json()
        assert response.status_code == 200
        assert body["status"] == "OK"
        assert body["database"] == "Connected"
        assert "timestamp" in body

    def test_unknown_route(self, client):
        response = client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json() == {"message": "Route not found", "path": "/api/nothing-here", "method": "GET"}
