"""Pydantic request/response schemas for the Stockroom API.

Field names on the wire are camelCase; the models use snake_case attributes
with aliases and accept either spelling on input.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from stockroom.category.category import Category, Subcategory
from stockroom.product.product import Product, Stock


class _Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# --- Product payloads ---


class SpecificationsPayload(_Schema):
    size: str | None = Field(None, max_length=100)
    rating: str | None = Field(None, max_length=100)
    material: str | None = Field(None, max_length=100)
    pressure: str | None = Field(None, max_length=100)
    temperature: str | None = Field(None, max_length=100)
    ibr_approved: bool | None = Field(None, alias="IBR_approved")


class StockPayload(_Schema):
    quantity: int | None = None
    min_stock: int | None = Field(None, alias="minStock")
    unit: str | None = Field(None, max_length=20)


class PricingPayload(_Schema):
    cost: float | None = None
    selling_price: float | None = Field(None, alias="sellingPrice")
    currency: str | None = Field(None, max_length=3)


class SupplierPayload(_Schema):
    name: str | None = Field(None, max_length=255)
    contact: str | None = Field(None, max_length=255)


class CreateProductRequest(_Schema):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Globe Valve 2in Class 150",
                    "sku": "GV-150-50",
                    "category": "Valves",
                    "subCategory": "Globe Valves",
                    "description": "Cast steel flanged globe valve.",
                    "specifications": {
                        "size": "50 NB",
                        "rating": "Class 150",
                        "material": "WCB",
                        "pressure": "20 bar",
                        "temperature": "425 C",
                        "IBR_approved": True,
                    },
                    "stock": {"quantity": 25, "minStock": 10, "unit": "pcs"},
                    "pricing": {"cost": 5400.0, "sellingPrice": 7200.0, "currency": "INR"},
                    "supplier": {"name": "Shree Castings", "contact": "+91 98200 00000"},
                    "status": "active",
                }
            ]
        },
    )

    name: str = Field(..., max_length=255)
    sku: str = Field(..., max_length=100)
    category: str = Field(..., max_length=100)
    sub_category: str = Field(..., alias="subCategory", max_length=100)
    description: str
    specifications: SpecificationsPayload | None = None
    stock: StockPayload | None = None
    pricing: PricingPayload | None = None
    supplier: SupplierPayload | None = None
    images: list[str] | None = None
    documents: list[str] | None = None
    status: str | None = Field(None, max_length=20)


class UpdateProductRequest(_Schema):
    name: str | None = Field(None, max_length=255)
    sku: str | None = Field(None, max_length=100)
    category: str | None = Field(None, max_length=100)
    sub_category: str | None = Field(None, alias="subCategory", max_length=100)
    description: str | None = None
    specifications: SpecificationsPayload | None = None
    stock: StockPayload | None = None
    pricing: PricingPayload | None = None
    supplier: SupplierPayload | None = None
    images: list[str] | None = None
    documents: list[str] | None = None
    status: str | None = Field(None, max_length=20)


class UpdateStockRequest(_Schema):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"examples": [{"quantity": 5, "operation": "subtract"}]},
    )

    quantity: int
    operation: str = Field(..., description="One of add, subtract or set")


# --- Product responses ---


class SpecificationsResponse(_Schema):
    size: str | None = None
    rating: str | None = None
    material: str | None = None
    pressure: str | None = None
    temperature: str | None = None
    ibr_approved: bool | None = Field(None, alias="IBR_approved")


class StockResponse(_Schema):
    quantity: int
    min_stock: int = Field(..., alias="minStock")
    unit: str

    @classmethod
    def from_stock(cls, stock: Stock | None) -> StockResponse:
        stock = stock or Stock()
        return cls(quantity=stock.quantity, min_stock=stock.min_stock, unit=stock.unit)


class PricingResponse(_Schema):
    cost: float | None = None
    selling_price: float | None = Field(None, alias="sellingPrice")
    currency: str | None = None


class SupplierResponse(_Schema):
    name: str | None = None
    contact: str | None = None


class ProductResponse(_Schema):
    id: str
    sku: str
    name: str
    category: str
    sub_category: str = Field(..., alias="subCategory")
    description: str | None = None
    specifications: SpecificationsResponse | None = None
    stock: StockResponse
    pricing: PricingResponse | None = None
    supplier: SupplierResponse | None = None
    images: list[str] = []
    documents: list[str] = []
    status: str
    stock_status: str = Field(..., alias="stockStatus")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")

    @classmethod
    def from_product(cls, product: Product) -> ProductResponse:
        specs = product.specifications
        pricing = product.pricing
        supplier = product.supplier
        return cls(
            id=str(product.id),
            sku=product.sku,
            name=product.name,
            category=product.category,
            sub_category=product.sub_category,
            description=product.description,
            specifications=SpecificationsResponse(
                size=specs.size,
                rating=specs.rating,
                material=specs.material,
                pressure=specs.pressure,
                temperature=specs.temperature,
                ibr_approved=specs.ibr_approved,
            )
            if specs
            else None,
            stock=StockResponse.from_stock(product.stock),
            pricing=PricingResponse(
                cost=pricing.cost,
                selling_price=pricing.selling_price,
                currency=pricing.currency,
            )
            if pricing
            else None,
            supplier=SupplierResponse(name=supplier.name, contact=supplier.contact) if supplier else None,
            images=list(product.images or []),
            documents=list(product.documents or []),
            status=product.status,
            stock_status=product.stock_status.value,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class ProductListResponse(_Schema):
    products: list[ProductResponse]
    total_pages: int = Field(..., alias="totalPages")
    current_page: int = Field(..., alias="currentPage")
    total: int


class ProductSummaryResponse(_Schema):
    id: str
    name: str
    sku: str
    stock: StockResponse
    status: str


class MessageResponse(_Schema):
    message: str


# --- Category payloads ---


class SubcategorySpecificationsPayload(_Schema):
    common_sizes: list[str] | None = Field(None, alias="commonSizes")
    common_materials: list[str] | None = Field(None, alias="commonMaterials")
    pressure_ratings: list[str] | None = Field(None, alias="pressureRatings")
    temperature_range: str | None = Field(None, alias="temperatureRange", max_length=100)


class AddSubcategoryRequest(_Schema):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Globe Valves",
                    "description": "Throttling service valves",
                    "specifications": {
                        "commonSizes": ["15 NB", "25 NB", "50 NB"],
                        "commonMaterials": ["WCB", "CF8M"],
                        "pressureRatings": ["Class 150", "Class 300"],
                        "temperatureRange": "-29 C to 425 C",
                    },
                }
            ]
        },
    )

    name: str = Field(..., max_length=100)
    description: str | None = None
    specifications: SubcategorySpecificationsPayload | None = None


class UpdateSubcategoryRequest(_Schema):
    name: str | None = Field(None, max_length=100)
    description: str | None = None
    specifications: SubcategorySpecificationsPayload | None = None


class CreateCategoryRequest(_Schema):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Valves",
                    "description": "Industrial valves for steam, water and process lines",
                    "image": "",
                    "subCategories": [{"name": "Globe Valves", "description": "Throttling service"}],
                }
            ]
        },
    )

    name: str = Field(..., max_length=100)
    description: str
    image: str | None = Field(None, max_length=500)
    sub_categories: list[AddSubcategoryRequest] | None = Field(None, alias="subCategories")


class UpdateCategoryRequest(_Schema):
    name: str | None = Field(None, max_length=100)
    description: str | None = None
    image: str | None = Field(None, max_length=500)
    is_active: bool | None = Field(None, alias="isActive")


# --- Category responses ---


class SubcategorySpecificationsResponse(_Schema):
    common_sizes: list[str] = Field([], alias="commonSizes")
    common_materials: list[str] = Field([], alias="commonMaterials")
    pressure_ratings: list[str] = Field([], alias="pressureRatings")
    temperature_range: str | None = Field(None, alias="temperatureRange")


class SubcategoryResponse(_Schema):
    id: str
    name: str
    description: str | None = None
    specifications: SubcategorySpecificationsResponse

    @classmethod
    def from_subcategory(cls, subcategory: Subcategory) -> SubcategoryResponse:
        return cls(
            id=str(subcategory.id),
            name=subcategory.name,
            description=subcategory.description,
            specifications=SubcategorySpecificationsResponse(
                common_sizes=list(subcategory.common_sizes or []),
                common_materials=list(subcategory.common_materials or []),
                pressure_ratings=list(subcategory.pressure_ratings or []),
                temperature_range=subcategory.temperature_range,
            ),
        )


class CategoryResponse(_Schema):
    id: str
    name: str
    description: str | None = None
    image: str | None = None
    is_active: bool = Field(..., alias="isActive")
    created_by: str | None = Field(None, alias="createdBy")
    sub_categories: list[SubcategoryResponse] = Field([], alias="subCategories")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")

    @classmethod
    def fields_from(cls, category: Category) -> dict:
        return {
            "id": str(category.id),
            "name": category.name,
            "description": category.description,
            "image": category.image or "",
            "is_active": bool(category.is_active),
            "created_by": str(category.created_by) if category.created_by else None,
            "sub_categories": [SubcategoryResponse.from_subcategory(s) for s in (category.sub_categories or [])],
            "created_at": category.created_at,
            "updated_at": category.updated_at,
        }

    @classmethod
    def from_category(cls, category: Category) -> CategoryResponse:
        return cls(**cls.fields_from(category))


class CategoryWithCountResponse(CategoryResponse):
    product_count: int = Field(..., alias="productCount")


class CategoryDetailResponse(CategoryResponse):
    products: list[ProductSummaryResponse]
    product_count: int = Field(..., alias="productCount")
    low_stock_products: int = Field(..., alias="lowStockProducts")


class CategoryStatResponse(_Schema):
    category: str
    total_products: int = Field(..., alias="totalProducts")
    active_products: int = Field(..., alias="activeProducts")
    low_stock_products: int = Field(..., alias="lowStockProducts")
    out_of_stock_products: int = Field(..., alias="outOfStockProducts")
    sub_categories: int = Field(..., alias="subCategories")


# --- Dashboard / service ---


class DashboardResponse(_Schema):
    total_products: int = Field(..., alias="totalProducts")
    total_categories: int = Field(..., alias="totalCategories")
    low_stock_items: int = Field(..., alias="lowStockItems")
    out_of_stock_items: int = Field(..., alias="outOfStockItems")


class HealthResponse(_Schema):
    status: str
    database: str
    timestamp: datetime
