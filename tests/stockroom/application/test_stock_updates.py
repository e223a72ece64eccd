"""Application tests for the stock update command."""

import pytest
from protean.utils.globals import current_domain
from stockroom.errors import InvalidStockOperationError, RecordNotFoundError
from stockroom.product.creation import CreateProduct
from stockroom.product.product import Product
from stockroom.product.stock import UpdateStock


@pytest.fixture()
def product_id():
    command = CreateProduct(
        sku="BV-25",
        name="Ball Valve 1in",
        description="Forged ball valve",
        category="Valves",
        sub_category="Ball Valves",
        quantity=25,
        min_stock=10,
    )
    return current_domain.process(command, asynchronous=False)


def _update_stock(product_id, operation, quantity):
    return current_domain.process(
        UpdateStock(product_id=product_id, operation=operation, quantity=quantity),
        asynchronous=False,
    )


def _stored(product_id):
    return current_domain.repository_for(Product).get(product_id)


class TestUpdateStockHandler:
    def test_add(self, product_id):
        assert _update_stock(product_id, "add", 10) == 35
        assert _stored(product_id).stock.quantity == 35

    def test_subtract(self, product_id):
        _update_stock(product_id, "subtract", 5)
        assert _stored(product_id).stock.quantity == 20

    def test_subtract_floors_at_zero(self, product_id):
        _update_stock(product_id, "subtract", 100)
        assert _stored(product_id).stock.quantity == 0

    def test_set(self, product_id):
        _update_stock(product_id, "set", 7)
        assert _stored(product_id).stock.quantity == 7

    def test_set_negative_is_stored(self, product_id):
        _update_stock(product_id, "set", -2)
        assert _stored(product_id).stock.quantity == -2

    def test_status_left_alone(self, product_id):
        _update_stock(product_id, "set", 0)
        assert _stored(product_id).status == "active"

    def test_invalid_operation_leaves_quantity_unchanged(self, product_id):
        with pytest.raises(InvalidStockOperationError):
            _update_stock(product_id, "multiply", 3)

        assert _stored(product_id).stock.quantity == 25

    def test_unknown_product(self):
        with pytest.raises(RecordNotFoundError):
            _update_stock("missing-id", "add", 1)
