"""Product updates: command and handler.

Every field is optional; ``None`` leaves the stored value alone. Nested
groups (specifications, stock, pricing, supplier) are merged field by field.
"""

import json

import structlog
from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from stockroom.domain import stockroom
from stockroom.product.creation import ensure_sku_available
from stockroom.product.lookup import load_product
from stockroom.product.product import (
    Pricing,
    Product,
    Specifications,
    Stock,
    Supplier,
    merge_value_object,
)

logger = structlog.get_logger(__name__)


@stockroom.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    sku: String(max_length=100)
    name: String(max_length=255)
    description: Text()
    category: String(max_length=100)
    sub_category: String(max_length=100)
    size: String(max_length=100)
    rating: String(max_length=100)
    material: String(max_length=100)
    pressure: String(max_length=100)
    temperature: String(max_length=100)
    ibr_approved: Boolean()
    quantity: Integer()
    min_stock: Integer()
    unit: String(max_length=20)
    cost: Float()
    selling_price: Float()
    currency: String(max_length=3)
    supplier_name: String(max_length=255)
    supplier_contact: String(max_length=255)
    images: Text()  # JSON array of URLs
    documents: Text()  # JSON array of URLs
    status: String(max_length=20)


@stockroom.command_handler(part_of=Product)
class UpdateProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = load_product(command.product_id)

        if command.sku is not None and command.sku.strip() != product.sku:
            ensure_sku_available(command.sku, product_id=product.id)

        specifications = merge_value_object(
            Specifications,
            product.specifications,
            size=command.size,
            rating=command.rating,
            material=command.material,
            pressure=command.pressure,
            temperature=command.temperature,
            ibr_approved=command.ibr_approved,
        )
        stock = merge_value_object(
            Stock,
            product.stock,
            quantity=command.quantity,
            min_stock=command.min_stock,
            unit=command.unit,
        )
        pricing = merge_value_object(
            Pricing,
            product.pricing,
            cost=command.cost,
            selling_price=command.selling_price,
            currency=command.currency,
        )
        supplier = merge_value_object(
            Supplier,
            product.supplier,
            name=command.supplier_name,
            contact=command.supplier_contact,
        )

        product.update_details(
            sku=command.sku,
            name=command.name,
            description=command.description,
            category=command.category,
            sub_category=command.sub_category,
            specifications=specifications,
            stock=stock,
            pricing=pricing,
            supplier=supplier,
            images=json.loads(command.images) if command.images is not None else None,
            documents=json.loads(command.documents) if command.documents is not None else None,
            status=command.status,
        )
        repo.add(product)

        logger.info("Product updated", product_id=str(product.id), sku=product.sku)
