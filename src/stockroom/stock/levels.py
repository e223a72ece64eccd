"""Stock arithmetic and stock-status classification.

Both functions are pure. Callers load the product, apply the result and save
it; nothing here touches a repository.
"""

from enum import Enum

from stockroom.errors import InvalidStockOperationError


class StockOperation(Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    SET = "set"


class StockStatus(Enum):
    OUT_OF_STOCK = "out_of_stock"
    LOW_STOCK = "low_stock"
    IN_STOCK = "in_stock"


def apply_stock_operation(current_quantity: int, operation: str | StockOperation, amount: int) -> int:
    """Return the quantity that results from applying ``operation``.

    ``subtract`` floors at zero instead of failing on over-subtraction.
    ``set`` takes ``amount`` as given, negative values included.
    """
    try:
        op = StockOperation(operation)
    except ValueError:
        raise InvalidStockOperationError(operation) from None

    if op is StockOperation.ADD:
        return current_quantity + amount
    if op is StockOperation.SUBTRACT:
        return max(0, current_quantity - amount)
    return amount


def classify_stock(quantity: int, min_stock: int) -> StockStatus:
    """Derive the stock status shown next to a product.

    Out of stock is checked first, so it wins even when ``min_stock`` is 0.
    """
    if quantity <= 0:
        return StockStatus.OUT_OF_STOCK
    if quantity <= min_stock:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK
