"""Product read side: filtered, paginated listings."""

import math
from dataclasses import dataclass

from protean.utils.globals import current_domain

from stockroom.product.product import Product, ProductStatus
from stockroom.stock.levels import StockStatus
from stockroom.utils.query import iter_records


@dataclass(frozen=True)
class ProductPage:
    products: list
    total_pages: int
    current_page: int
    total: int


def matches_category(product, category_name: str) -> bool:
    return (product.category or "").casefold() == category_name.casefold()


def matches_search(product, search: str) -> bool:
    needle = search.strip().casefold()
    haystack = (product.name, product.description, product.sku)
    return any(needle in (value or "").casefold() for value in haystack)


def list_products(category=None, search=None, status=None, low_stock=False, page=1, limit=10) -> ProductPage:
    """Return one page of products, newest first.

    ``status`` is an exact match pushed down to the repository.
    ``category`` matches the category name case-insensitively. ``search`` is a case-insensitive substring match on name,
    description and SKU. ``low_stock`` keeps products at or below their
    minimum stock, out-of-stock ones included.
    """
    query = current_domain.repository_for(Product)._dao.query
    if status:
        query = query.filter(status=status)
    query = query.order_by("-created_at")

    offset = (page - 1) * limit

    if not category and not search and not low_stock:
        result = query.offset(offset).limit(limit).all()
        items, total = list(result.items), result.total
    else:
        matched = [
            product
            for product in iter_records(query)
            if (not category or matches_category(product, category))
            and (not search or matches_search(product, search))
            and (not low_stock or product.stock_status is not StockStatus.IN_STOCK)
        ]
        items, total = matched[offset : offset + limit], len(matched)

    return ProductPage(
        products=items,
        total_pages=math.ceil(total / limit) if limit else 0,
        current_page=page,
        total=total,
    )


def products_in_category(category_name: str, active_only: bool = False) -> list:
    """Products whose ``category`` matches ``category_name`` case-insensitively."""
    query = current_domain.repository_for(Product)._dao.query.order_by("id")
    matched = [product for product in iter_records(query) if matches_category(product, category_name)]
    if active_only:
        matched = [product for product in matched if product.status == ProductStatus.ACTIVE.value]
    return matched


def all_products() -> list:
    return list(iter_records(current_domain.repository_for(Product)._dao.query.order_by("id")))
