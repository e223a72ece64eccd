"""Product removal: command and handler.

Products are deleted outright; there is no soft-delete flag on a product.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from stockroom.domain import stockroom
from stockroom.product.lookup import load_product
from stockroom.product.product import Product

logger = structlog.get_logger(__name__)


@stockroom.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@stockroom.command_handler(part_of=Product)
class DeleteProductHandler:
    @handle(DeleteProduct)
    def delete_product(self, command):
        product = load_product(command.product_id)
        current_domain.repository_for(Product)._dao.delete(product)

        logger.info("Product deleted", product_id=str(product.id), sku=product.sku)
