"""Loading a single product by identifier."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from stockroom.errors import RecordNotFoundError
from stockroom.product.product import Product


def load_product(product_id) -> Product:
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise RecordNotFoundError("Product not found") from None
