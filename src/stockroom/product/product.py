"""Product aggregate root and its value objects."""

from datetime import datetime
from enum import Enum

from protean.fields import Boolean, DateTime, Float, Integer, List, String, Text, ValueObject

from stockroom.domain import stockroom
from stockroom.stock.levels import StockStatus, apply_stock_operation, classify_stock


class ProductStatus(Enum):
    """Lifecycle status, always chosen by the operator."""

    ACTIVE = "active"
    DISCONTINUED = "discontinued"
    OUT_OF_STOCK = "out_of_stock"


@stockroom.value_object(part_of="Product")
class Specifications:
    """Technical attributes. Stored and displayed, never interpreted."""

    size: String(max_length=100)
    rating: String(max_length=100)
    material: String(max_length=100)
    pressure: String(max_length=100)
    temperature: String(max_length=100)
    ibr_approved: Boolean(default=False)


@stockroom.value_object(part_of="Product")
class Stock:
    quantity: Integer(default=0)
    min_stock: Integer(default=10)
    unit: String(max_length=20, default="pcs")


@stockroom.value_object(part_of="Product")
class Pricing:
    cost: Float()
    selling_price: Float()
    currency: String(max_length=3, default="INR")


@stockroom.value_object(part_of="Product")
class Supplier:
    name: String(max_length=255)
    contact: String(max_length=255)


def merge_value_object(vo_cls, current, **changes):
    """Build a new ``vo_cls`` from ``current`` with the non-None ``changes`` applied.

    Returns ``current`` untouched when there is nothing to change.
    """
    changes = {key: value for key, value in changes.items() if value is not None}
    if not changes:
        return current

    values = current.to_dict() if current is not None else {}
    values.update(changes)
    return vo_cls(**values)


@stockroom.aggregate
class Product:
    """An industrial part held in the stockroom.

    ``category`` and ``sub_category`` are free-text names. They match a
    Category by name only, so renaming a category leaves existing products
    pointing at the old name.
    """

    sku: String(required=True, max_length=100)
    name: String(required=True, max_length=255)
    description: Text(required=True)
    category: String(required=True, max_length=100)
    sub_category: String(required=True, max_length=100)
    specifications: ValueObject(Specifications)
    stock: ValueObject(Stock)
    pricing: ValueObject(Pricing)
    supplier: ValueObject(Supplier)
    images: List(content_type=String)
    documents: List(content_type=String)
    status: String(choices=ProductStatus, default=ProductStatus.ACTIVE.value)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(
        cls,
        sku,
        name,
        description,
        category,
        sub_category,
        specifications=None,
        stock=None,
        pricing=None,
        supplier=None,
        images=None,
        documents=None,
        status=None,
    ):
        from stockroom.product.events import ProductCreated

        now = datetime.now()
        stock = stock or Stock()

        product = cls(
            sku=sku.strip(),
            name=name.strip(),
            description=description,
            category=category,
            sub_category=sub_category,
            specifications=specifications or Specifications(),
            stock=stock,
            pricing=pricing or Pricing(),
            supplier=supplier,
            images=list(images or []),
            documents=list(documents or []),
            status=status or ProductStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                sku=product.sku,
                name=product.name,
                category=product.category,
                sub_category=product.sub_category,
                status=product.status,
                quantity=stock.quantity,
                created_at=now,
            )
        )
        return product

    @property
    def stock_status(self) -> StockStatus:
        stock = self.stock or Stock()
        return classify_stock(stock.quantity, stock.min_stock)

    def update_details(
        self,
        sku=None,
        name=None,
        description=None,
        category=None,
        sub_category=None,
        specifications=None,
        stock=None,
        pricing=None,
        supplier=None,
        images=None,
        documents=None,
        status=None,
    ):
        from stockroom.product.events import ProductUpdated

        if sku is not None:
            self.sku = sku.strip()
        if name is not None:
            self.name = name.strip()
        if description is not None:
            self.description = description
        if category is not None:
            self.category = category
        if sub_category is not None:
            self.sub_category = sub_category
        if specifications is not None:
            self.specifications = specifications
        if stock is not None:
            self.stock = stock
        if pricing is not None:
            self.pricing = pricing
        if supplier is not None:
            self.supplier = supplier
        if images is not None:
            self.images = list(images)
        if documents is not None:
            self.documents = list(documents)
        if status is not None:
            self.status = status

        self.updated_at = datetime.now()

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                sku=self.sku,
                name=self.name,
                category=self.category,
                status=self.status,
                updated_at=self.updated_at,
            )
        )

    def update_stock(self, operation, amount):
        """Apply a stock operation to the on-hand quantity.

        Only ``stock.quantity`` and ``updated_at`` change; ``status`` is left
        exactly as the operator last set it.
        """
        from stockroom.product.events import StockUpdated

        current = self.stock or Stock()
        new_quantity = apply_stock_operation(current.quantity, operation, amount)

        self.stock = Stock(
            quantity=new_quantity,
            min_stock=current.min_stock,
            unit=current.unit,
        )
        self.updated_at = datetime.now()

        self.raise_(
            StockUpdated(
                product_id=self.id,
                sku=self.sku,
                operation=str(getattr(operation, "value", operation)),
                amount=amount,
                previous_quantity=current.quantity,
                new_quantity=new_quantity,
                stock_status=self.stock_status.value,
                updated_at=self.updated_at,
            )
        )
        return new_quantity
