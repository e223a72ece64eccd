"""FastAPI endpoints for the Stockroom domain."""

import json
from datetime import datetime

import structlog
from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from stockroom.access import CATALOGUE_EDITORS, Actor, Role, require_role
from stockroom.api.dependencies import current_actor, page_limit
from stockroom.api.schemas import (
    AddSubcategoryRequest,
    CategoryDetailResponse,
    CategoryResponse,
    CategoryStatResponse,
    CategoryWithCountResponse,
    CreateCategoryRequest,
    CreateProductRequest,
    DashboardResponse,
    HealthResponse,
    MessageResponse,
    ProductListResponse,
    ProductResponse,
    ProductSummaryResponse,
    StockResponse,
    UpdateCategoryRequest,
    UpdateProductRequest,
    UpdateStockRequest,
    UpdateSubcategoryRequest,
)
from stockroom.category.category import Category
from stockroom.category.listing import category_detail, list_categories
from stockroom.category.lookup import load_category
from stockroom.category.management import CreateCategory, DeactivateCategory, UpdateCategory
from stockroom.category.subcategories import AddSubcategory, RemoveSubcategory, UpdateSubcategory
from stockroom.product.creation import CreateProduct
from stockroom.product.details import UpdateProduct
from stockroom.product.listing import list_products
from stockroom.product.lookup import load_product
from stockroom.product.removal import DeleteProduct
from stockroom.product.stock import UpdateStock
from stockroom.reports.statistics import category_summary, dashboard_summary

product_router = APIRouter(prefix="/products", tags=["products"])
category_router = APIRouter(prefix="/categories", tags=["categories"])
dashboard_router = APIRouter(prefix="/dashboard", tags=["dashboard"])
health_router = APIRouter(tags=["service"])

logger = structlog.get_logger(__name__)


def _dump(values):
    return json.dumps(values) if values is not None else None


def _product_fields(body):
    """Flatten the nested product payload into command keyword arguments."""
    fields = {
        "sku": body.sku,
        "name": body.name,
        "description": body.description,
        "category": body.category,
        "sub_category": body.sub_category,
        "images": _dump(body.images),
        "documents": _dump(body.documents),
        "status": body.status,
    }
    if body.specifications:
        fields.update(
            size=body.specifications.size,
            rating=body.specifications.rating,
            material=body.specifications.material,
            pressure=body.specifications.pressure,
            temperature=body.specifications.temperature,
            ibr_approved=body.specifications.ibr_approved,
        )
    if body.stock:
        fields.update(quantity=body.stock.quantity, min_stock=body.stock.min_stock, unit=body.stock.unit)
    if body.pricing:
        fields.update(
            cost=body.pricing.cost,
            selling_price=body.pricing.selling_price,
            currency=body.pricing.currency,
        )
    if body.supplier:
        fields.update(supplier_name=body.supplier.name, supplier_contact=body.supplier.contact)
    return {key: value for key, value in fields.items() if value is not None}


def _subcategory_fields(body):
    fields = {"name": body.name, "description": body.description}
    specs = body.specifications
    if specs:
        fields.update(
            common_sizes=_dump(specs.common_sizes),
            common_materials=_dump(specs.common_materials),
            pressure_ratings=_dump(specs.pressure_ratings),
            temperature_range=specs.temperature_range,
        )
    return {key: value for key, value in fields.items() if value is not None}


def _subcategory_payload(body):
    """Plain-dict form of a subcategory for embedding in CreateCategory."""
    specs = body.specifications
    return {
        "name": body.name,
        "description": body.description,
        "common_sizes": specs.common_sizes if specs else None,
        "common_materials": specs.common_materials if specs else None,
        "pressure_ratings": specs.pressure_ratings if specs else None,
        "temperature_range": specs.temperature_range if specs else None,
    }


# --- Product endpoints ---


@product_router.get("", response_model=ProductListResponse)
async def get_products(
    category: str | None = None,
    search: str | None = None,
    status: str | None = None,
    low_stock: bool = Query(False, alias="lowStock"),
    page: int = Query(1, ge=1),
    limit: int = Depends(page_limit),
    actor: Actor = Depends(current_actor),
) -> ProductListResponse:
    result = list_products(
        category=category,
        search=search,
        status=status,
        low_stock=low_stock,
        page=page,
        limit=limit,
    )
    return ProductListResponse(
        products=[ProductResponse.from_product(p) for p in result.products],
        total_pages=result.total_pages,
        current_page=result.current_page,
        total=result.total,
    )


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, actor: Actor = Depends(current_actor)) -> ProductResponse:
    return ProductResponse.from_product(load_product(product_id))


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(body: CreateProductRequest, actor: Actor = Depends(current_actor)) -> ProductResponse:
    command = CreateProduct(**_product_fields(body))
    product_id = current_domain.process(command, asynchronous=False)
    return ProductResponse.from_product(load_product(product_id))


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str, body: UpdateProductRequest, actor: Actor = Depends(current_actor)
) -> ProductResponse:
    command = UpdateProduct(product_id=product_id, **_product_fields(body))
    current_domain.process(command, asynchronous=False)
    return ProductResponse.from_product(load_product(product_id))


@product_router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: str, actor: Actor = Depends(current_actor)) -> MessageResponse:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return MessageResponse(message="Product deleted successfully")


@product_router.patch("/{product_id}/stock", response_model=ProductResponse)
async def update_stock(
    product_id: str, body: UpdateStockRequest, actor: Actor = Depends(current_actor)
) -> ProductResponse:
    command = UpdateStock(product_id=product_id, quantity=body.quantity, operation=body.operation)
    current_domain.process(command, asynchronous=False)
    return ProductResponse.from_product(load_product(product_id))


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryWithCountResponse])
async def get_categories(actor: Actor = Depends(current_actor)) -> list[CategoryWithCountResponse]:
    return [
        CategoryWithCountResponse(**CategoryResponse.fields_from(entry.category), product_count=entry.product_count)
        for entry in list_categories()
    ]


@category_router.get("/stats/summary", response_model=list[CategoryStatResponse])
async def get_category_stats(actor: Actor = Depends(current_actor)) -> list[CategoryStatResponse]:
    return [
        CategoryStatResponse(
            category=stat.category,
            total_products=stat.total_products,
            active_products=stat.active_products,
            low_stock_products=stat.low_stock_products,
            out_of_stock_products=stat.out_of_stock_products,
            sub_categories=stat.sub_categories,
        )
        for stat in category_summary()
    ]


@category_router.get("/{category_id}", response_model=CategoryDetailResponse)
async def get_category(category_id: str, actor: Actor = Depends(current_actor)) -> CategoryDetailResponse:
    detail = category_detail(category_id)
    products = [
        ProductSummaryResponse(
            id=str(p.id),
            name=p.name,
            sku=p.sku,
            stock=StockResponse.from_stock(p.stock),
            status=p.status,
        )
        for p in detail.products
    ]
    return CategoryDetailResponse(
        **CategoryResponse.fields_from(detail.category),
        products=products,
        product_count=detail.product_count,
        low_stock_products=detail.low_stock_products,
    )


@category_router.post("", status_code=201, response_model=CategoryResponse)
async def create_category(body: CreateCategoryRequest, actor: Actor = Depends(current_actor)) -> CategoryResponse:
    require_role(actor, *CATALOGUE_EDITORS)

    sub_categories = None
    if body.sub_categories:
        sub_categories = json.dumps([_subcategory_payload(sub) for sub in body.sub_categories])

    command = CreateCategory(
        name=body.name,
        description=body.description,
        image=body.image,
        created_by=actor.id,
        sub_categories=sub_categories,
    )
    category_id = current_domain.process(command, asynchronous=False)
    return CategoryResponse.from_category(load_category(category_id))


@category_router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str, body: UpdateCategoryRequest, actor: Actor = Depends(current_actor)
) -> CategoryResponse:
    require_role(actor, *CATALOGUE_EDITORS)
    if body.is_active is False:
        require_role(actor, Role.ADMIN)

    command = UpdateCategory(
        category_id=category_id,
        name=body.name,
        description=body.description,
        image=body.image,
        is_active=body.is_active,
    )
    current_domain.process(command, asynchronous=False)
    return CategoryResponse.from_category(load_category(category_id))


@category_router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(category_id: str, actor: Actor = Depends(current_actor)) -> MessageResponse:
    require_role(actor, Role.ADMIN)

    current_domain.process(DeactivateCategory(category_id=category_id), asynchronous=False)
    return MessageResponse(message="Category deleted successfully")


@category_router.post("/{category_id}/subcategories", response_model=CategoryResponse)
async def add_subcategory(
    category_id: str, body: AddSubcategoryRequest, actor: Actor = Depends(current_actor)
) -> CategoryResponse:
    require_role(actor, *CATALOGUE_EDITORS)

    command = AddSubcategory(category_id=category_id, **_subcategory_fields(body))
    current_domain.process(command, asynchronous=False)
    return CategoryResponse.from_category(load_category(category_id))


@category_router.put("/{category_id}/subcategories/{subcategory_id}", response_model=CategoryResponse)
async def update_subcategory(
    category_id: str,
    subcategory_id: str,
    body: UpdateSubcategoryRequest,
    actor: Actor = Depends(current_actor),
) -> CategoryResponse:
    require_role(actor, *CATALOGUE_EDITORS)

    command = UpdateSubcategory(category_id=category_id, subcategory_id=subcategory_id, **_subcategory_fields(body))
    current_domain.process(command, asynchronous=False)
    return CategoryResponse.from_category(load_category(category_id))


@category_router.delete("/{category_id}/subcategories/{subcategory_id}", response_model=CategoryResponse)
async def remove_subcategory(
    category_id: str, subcategory_id: str, actor: Actor = Depends(current_actor)
) -> CategoryResponse:
    require_role(actor, *CATALOGUE_EDITORS)

    command = RemoveSubcategory(category_id=category_id, subcategory_id=subcategory_id)
    current_domain.process(command, asynchronous=False)
    return CategoryResponse.from_category(load_category(category_id))


# --- Dashboard ---


@dashboard_router.get("", response_model=DashboardResponse)
async def get_dashboard(actor: Actor = Depends(current_actor)) -> DashboardResponse:
    summary = dashboard_summary()
    return DashboardResponse(
        total_products=summary.total_products,
        total_categories=summary.total_categories,
        low_stock_items=summary.low_stock_items,
        out_of_stock_items=summary.out_of_stock_items,
    )


# --- Service ---


@health_router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    try:
        current_domain.repository_for(Category)._dao.query.limit(1).all()
        database = "Connected"
    except Exception as exc:  # noqa: BLE001
        logger.warning("Health check could not reach the database", error=str(exc))
        database = "Disconnected"

    return HealthResponse(status="OK", database=database, timestamp=datetime.now())
