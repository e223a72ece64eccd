import pytest
from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient
from stockroom.api import category_router, dashboard_router, health_router, product_router
from stockroom.api.errors import register_exception_handlers


@pytest.fixture()
def client():
    api = APIRouter(prefix="/api")
    api.include_router(product_router)
    api.include_router(category_router)
    api.include_router(dashboard_router)
    api.include_router(health_router)

    app = FastAPI()
    app.include_router(api)
    register_exception_handlers(app)
    return TestClient(app)
