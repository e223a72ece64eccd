"""Request headers and payload builders shared by the API tests."""

ADMIN = {"X-User-Id": "admin-1", "X-User-Role": "admin"}
MANAGER = {"X-User-Id": "manager-1", "X-User-Role": "manager"}
STAFF = {"X-User-Id": "staff-1", "X-User-Role": "staff"}


def product_payload(**overrides):
    payload = {
        "name": "Globe Valve 2in Class 150",
        "sku": "GV-150-50",
        "category": "Valves",
        "subCategory": "Globe Valves",
        "description": "Cast steel flanged globe valve",
        "specifications": {"size": "50 NB", "rating": "Class 150", "IBR_approved": True},
        "stock": {"quantity": 25, "minStock": 10, "unit": "pcs"},
        "pricing": {"cost": 5400.0, "sellingPrice": 7200.0},
        "supplier": {"name": "Shree Castings", "contact": "+91 98200 00000"},
    }
    payload.update(overrides)
    return payload


def category_payload(**overrides):
    payload = {"name": "Valves", "description": "Industrial valves for steam and process lines"}
    payload.update(overrides)
    return payload
