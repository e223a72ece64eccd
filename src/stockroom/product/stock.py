"""Stock updates: command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from stockroom.domain import stockroom
from stockroom.product.lookup import load_product
from stockroom.product.product import Product

logger = structlog.get_logger(__name__)


@stockroom.command(part_of="Product")
class UpdateStock:
    """Change on-hand quantity with one of ``add``, ``subtract`` or ``set``."""

    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    operation: String(required=True, max_length=20)


@stockroom.command_handler(part_of=Product)
class UpdateStockHandler:
    @handle(UpdateStock)
    def update_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = load_product(command.product_id)

        previous = product.stock.quantity if product.stock else 0
        new_quantity = product.update_stock(command.operation, command.quantity)
        repo.add(product)

        logger.info(
            "Stock updated",
            product_id=str(product.id),
            sku=product.sku,
            operation=command.operation,
            amount=command.quantity,
            previous_quantity=previous,
            new_quantity=new_quantity,
        )
        return new_quantity
