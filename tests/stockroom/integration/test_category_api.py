"""Integration tests for the category and subcategory endpoints."""

from support import ADMIN, MANAGER, STAFF, category_payload, product_payload


def _create_category(client, headers=ADMIN, **overrides):
    response = client.post("/api/categories", json=category_payload(**overrides), headers=headers)
    assert response.status_code == 201
    return response.json()


def _create_product(client, **overrides):
    response = client.post("/api/products", json=product_payload(**overrides), headers=STAFF)
    assert response.status_code == 201
    return response.json()


class TestCreateCategory:
    def test_admin_creates(self, client):
        data = _create_category(client)

        assert data["name"] == "Valves"
        assert data["isActive"] is True
        assert data["createdBy"] == "admin-1"
        assert data["subCategories"] == []

    def test_manager_creates_with_subcategories(self, client):
        data = _create_category(
            client,
            headers=MANAGER,
            subCategories=[
                {
                    "name": "Globe Valves",
                    "specifications": {"commonSizes": ["15 NB", "25 NB"], "temperatureRange": "425 C"},
                }
            ],
        )

        [sub] = data["subCategories"]
        assert sub["name"] == "Globe Valves"
        assert sub["specifications"]["commonSizes"] == ["15 NB", "25 NB"]
        assert sub["specifications"]["commonMaterials"] == []
        assert sub["specifications"]["temperatureRange"] == "425 C"

    def test_plain_user_forbidden(self, client):
        response = client.post("/api/categories", json=category_payload(), headers=STAFF)

        assert response.status_code == 403
        assert response.json() == {"message": "Access denied. Admin or Manager role required."}

    def test_duplicate_name_conflict(self, client):
        _create_category(client)

        response = client.post("/api/categories", json=category_payload(), headers=ADMIN)

        assert response.status_code == 409
        assert response.json() == {"message": "Category name already exists"}


class TestReadCategories:
    def test_list_active_sorted_with_counts(self, client):
        _create_category(client, name="Valves")
        _create_category(client, name="Fittings")
        _create_product(client, sku="V-1", category="Valves")

        response = client.get("/api/categories", headers=STAFF)

        body = response.json()
        assert response.status_code == 200
        assert [c["name"] for c in body] == ["Fittings", "Valves"]
        assert [c["productCount"] for c in body] == [0, 1]

    def test_detail(self, client):
        category_id = _create_category(client)["id"]
        _create_product(client, sku="V-1", stock={"quantity": 4, "minStock": 10})
        _create_product(client, sku="V-2", stock={"quantity": 40, "minStock": 10})

        response = client.get(f"/api/categories/{category_id}", headers=STAFF)

        body = response.json()
        assert body["productCount"] == 2
        assert body["lowStockProducts"] == 1
        assert sorted(p["sku"] for p in body["products"]) == ["V-1", "V-2"]
        assert set(body["products"][0]) == {"id", "name", "sku", "stock", "status"}

    def test_unknown_category(self, client):
        response = client.get("/api/categories/missing", headers=STAFF)
        assert response.status_code == 404
        assert response.json() == {"message": "Category not found"}

    def test_stats_summary(self, client):
        _create_category(client)
        _create_product(client, sku="V-1", stock={"quantity": 0, "minStock": 10})
        _create_product(client, sku="V-2", stock={"quantity": 5, "minStock": 10})
        _create_product(client, sku="V-3", stock={"quantity": 20, "minStock": 10}, status="discontinued")

        response = client.get("/api/categories/stats/summary", headers=STAFF)

        assert response.status_code == 200
        assert response.json() == [
            {
                "category": "Valves",
                "totalProducts": 3,
                "activeProducts": 2,
                "lowStockProducts": 1,
                "outOfStockProducts": 1,
                "subCategories": 0,
            }
        ]


class TestUpdateCategory:
    def test_manager_updates(self, client):
        category_id = _create_category(client)["id"]

        response = client.put(
            f"/api/categories/{category_id}",
            json={"description": "Updated", "image": "valves.png"},
            headers=MANAGER,
        )

        assert response.status_code == 200
        assert response.json()["description"] == "Updated"
        assert response.json()["image"] == "valves.png"

    def test_rename_orphans_products_in_summary(self, client):
        category_id = _create_category(client)["id"]
        _create_product(client, sku="V-1")

        client.put(f"/api/categories/{category_id}", json={"name": "Industrial Valves"}, headers=ADMIN)

        [stat] = client.get("/api/categories/stats/summary", headers=STAFF).json()
        assert stat["category"] == "Industrial Valves"
        assert stat["totalProducts"] == 0

    def test_manager_cannot_deactivate(self, client):
        category_id = _create_category(client)["id"]

        response = client.put(f"/api/categories/{category_id}", json={"isActive": False}, headers=MANAGER)

        assert response.status_code == 403
        assert response.json() == {"message": "Access denied. Admin role required."}

    def test_deactivate_with_active_products_conflict(self, client):
        category_id = _create_category(client)["id"]
        _create_product(client, sku="V-1")

        response = client.put(f"/api/categories/{category_id}", json={"isActive": False}, headers=ADMIN)

        assert response.status_code == 409
        assert "Please reassign products first" in response.json()["message"]
        detail = client.get(f"/api/categories/{category_id}", headers=STAFF).json()
        assert detail["isActive"] is True
        assert detail["productCount"] == 1

    def test_plain_user_forbidden(self, client):
        category_id = _create_category(client)["id"]
        response = client.put(f"/api/categories/{category_id}", json={"name": "X"}, headers=STAFF)
        assert response.status_code == 403


class TestDeleteCategory:
    def test_admin_deletes_empty_category(self, client):
        category_id = _create_category(client)["id"]

        response = client.delete(f"/api/categories/{category_id}", headers=ADMIN)

        assert response.status_code == 200
        assert response.json() == {"message": "Category deleted successfully"}
        assert client.get("/api/categories", headers=STAFF).json() == []

    def test_manager_forbidden(self, client):
        category_id = _create_category(client)["id"]

        response = client.delete(f"/api/categories/{category_id}", headers=MANAGER)

        assert response.status_code == 403
        assert response.json() == {"message": "Access denied. Admin role required."}

    def test_active_products_conflict(self, client):
        category_id = _create_category(client)["id"]
        _create_product(client, sku="V-1")

        response = client.delete(f"/api/categories/{category_id}", headers=ADMIN)

        assert response.status_code == 409
        assert "Please reassign products first" in response.json()["message"]
        detail = client.get(f"/api/categories/{category_id}", headers=STAFF).json()
        assert detail["isActive"] is True


class TestSubcategories:
    def test_add_update_remove(self, client):
        category_id = _create_category(client)["id"]

        added = client.post(
            f"/api/categories/{category_id}/subcategories",
            json={"name": "Globe Valves", "specifications": {"commonMaterials": ["WCB"]}},
            headers=MANAGER,
        )
        assert added.status_code == 200
        [sub] = added.json()["subCategories"]

        updated = client.put(
            f"/api/categories/{category_id}/subcategories/{sub['id']}",
            json={"name": "Gate Valves"},
            headers=MANAGER,
        )
        assert updated.status_code == 200
        [sub] = updated.json()["subCategories"]
        assert sub["name"] == "Gate Valves"
        assert sub["specifications"]["commonMaterials"] == ["WCB"]

        removed = client.delete(f"/api/categories/{category_id}/subcategories/{sub['id']}", headers=MANAGER)
        assert removed.status_code == 200
        assert removed.json()["subCategories"] == []

    def test_update_unknown_subcategory(self, client):
        category_id = _create_category(client)["id"]

        response = client.put(
            f"/api/categories/{category_id}/subcategories/missing",
            json={"name": "X"},
            headers=ADMIN,
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Subcategory not found"}

    def test_plain_user_forbidden(self, client):
        category_id = _create_category(client)["id"]
        response = client.post(
            f"/api/categories/{category_id}/subcategories",
            json={"name": "Globe Valves"},
            headers=STAFF,
        )
        assert response.status_code == 403
