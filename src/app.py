"""Stockroom FastAPI application.

Industrial-parts inventory API: products, categories with their
subcategories, stock operations and dashboard summaries. Commands are
processed synchronously inside the request.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 5000 --reload
"""

import os

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from stockroom.domain import stockroom
from stockroom.utils.logging import add_context, clear_context, configure_logging

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the domain.toml overlay (e.g. "production" for PostgreSQL).
configure_logging(log_file_prefix="stockroom")
stockroom.init()

API_VERSION = "1.0.0"


def _cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Stockroom API",
    description="Industrial parts inventory: products, categories and stock levels",
    version=API_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the stockroom domain context for each request."""
    clear_context()
    add_context(method=request.method, path=request.url.path)
    with stockroom.domain_context():
        return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from stockroom.api import category_router, dashboard_router, health_router, product_router  # noqa: E402
from stockroom.api.errors import register_exception_handlers  # noqa: E402

api_router = APIRouter(prefix="/api")
api_router.include_router(product_router)
api_router.include_router(category_router)
api_router.include_router(dashboard_router)
api_router.include_router(health_router)

app.include_router(api_router)
register_exception_handlers(app)


@app.get("/")
async def root():
    return {"message": "Stockroom Inventory API", "version": API_VERSION}
