"""Stockroom domain API package."""

from stockroom.api.routes import category_router, dashboard_router, health_router, product_router

__all__ = ["product_router", "category_router", "dashboard_router", "health_router"]
