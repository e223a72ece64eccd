"""Product creation: command and handler."""

import json

import structlog
from protean import handle
from protean.fields import Boolean, Float, Integer, String, Text
from protean.utils.globals import current_domain

from stockroom.domain import stockroom
from stockroom.errors import ConflictError
from stockroom.product.product import Pricing, Product, Specifications, Stock, Supplier

logger = structlog.get_logger(__name__)


@stockroom.command(part_of="Product")
class CreateProduct:
    sku: String(required=True, max_length=100)
    name: String(required=True, max_length=255)
    description: Text(required=True)
    category: String(required=True, max_length=100)
    sub_category: String(required=True, max_length=100)
    size: String(max_length=100)
    rating: String(max_length=100)
    material: String(max_length=100)
    pressure: String(max_length=100)
    temperature: String(max_length=100)
    ibr_approved: Boolean(default=False)
    quantity: Integer(default=0)
    min_stock: Integer(default=10)
    unit: String(max_length=20, default="pcs")
    cost: Float()
    selling_price: Float()
    currency: String(max_length=3, default="INR")
    supplier_name: String(max_length=255)
    supplier_contact: String(max_length=255)
    images: Text()  # JSON array of URLs
    documents: Text()  # JSON array of URLs
    status: String(max_length=20)


def _given(**values) -> dict:
    """Drop unset values so value object defaults apply."""
    return {key: value for key, value in values.items() if value is not None}


def ensure_sku_available(sku, product_id=None):
    """Raise ConflictError when another product already uses ``sku``."""
    repo = current_domain.repository_for(Product)
    existing = repo._dao.query.filter(sku=sku.strip()).all().items
    if any(str(p.id) != str(product_id) for p in existing):
        raise ConflictError(f"Product with SKU '{sku}' already exists")


@stockroom.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        ensure_sku_available(command.sku)

        supplier = None
        if command.supplier_name or command.supplier_contact:
            supplier = Supplier(name=command.supplier_name, contact=command.supplier_contact)

        product = Product.create(
            sku=command.sku,
            name=command.name,
            description=command.description,
            category=command.category,
            sub_category=command.sub_category,
            specifications=Specifications(
                size=command.size,
                rating=command.rating,
                material=command.material,
                pressure=command.pressure,
                temperature=command.temperature,
                ibr_approved=bool(command.ibr_approved),
            ),
            stock=Stock(**_given(quantity=command.quantity, min_stock=command.min_stock, unit=command.unit or None)),
            pricing=Pricing(
                cost=command.cost,
                selling_price=command.selling_price,
                **_given(currency=command.currency or None),
            ),
            supplier=supplier,
            images=json.loads(command.images) if command.images else [],
            documents=json.loads(command.documents) if command.documents else [],
            status=command.status,
        )
        current_domain.repository_for(Product).add(product)

        logger.info(
            "Product created",
            product_id=str(product.id),
            sku=product.sku,
            category=product.category,
            quantity=product.stock.quantity,
        )
        return str(product.id)
