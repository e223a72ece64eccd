"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from stockroom.domain import stockroom


@stockroom.event(part_of="Product")
class ProductCreated:
    """A new part was added to the stockroom."""

    product_id: Identifier(required=True)
    sku: String(required=True)
    name: String(required=True)
    category: String(required=True)
    sub_category: String(required=True)
    status: String(required=True)
    quantity: Integer(required=True)
    created_at: DateTime(required=True)


@stockroom.event(part_of="Product")
class ProductUpdated:
    """One or more product fields were changed by an operator."""

    product_id: Identifier(required=True)
    sku: String(required=True)
    name: String(required=True)
    category: String(required=True)
    status: String(required=True)
    updated_at: DateTime(required=True)


@stockroom.event(part_of="Product")
class StockUpdated:
    """The on-hand quantity of a product changed through a stock operation."""

    product_id: Identifier(required=True)
    sku: String(required=True)
    operation: String(required=True)
    amount: Integer(required=True)
    previous_quantity: Integer(required=True)
    new_quantity: Integer(required=True)
    stock_status: String(required=True)
    updated_at: DateTime(required=True)
