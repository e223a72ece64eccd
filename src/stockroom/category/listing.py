"""Category read side: active listings and per-category detail."""

from dataclasses import dataclass

from protean.utils.globals import current_domain

from stockroom.category.category import Category
from stockroom.category.lookup import load_category
from stockroom.product.listing import products_in_category
from stockroom.stock.levels import StockStatus
from stockroom.utils.query import iter_records


@dataclass(frozen=True)
class CategoryWithCount:
    category: Category
    product_count: int


@dataclass(frozen=True)
class CategoryDetail:
    category: Category
    products: list
    product_count: int
    low_stock_products: int


def active_categories() -> list[Category]:
    """Active categories sorted by name."""
    query = current_domain.repository_for(Category)._dao.query.filter(is_active=True).order_by("id")
    return sorted(iter_records(query), key=lambda c: c.name.casefold())


def list_categories() -> list[CategoryWithCount]:
    return [
        CategoryWithCount(category=c, product_count=len(products_in_category(c.name, active_only=True)))
        for c in active_categories()
    ]


def category_detail(category_id) -> CategoryDetail:
    category = load_category(category_id)
    products = products_in_category(category.name, active_only=True)
    return CategoryDetail(
        category=category,
        products=products,
        product_count=len(products),
        low_stock_products=sum(1 for p in products if p.stock_status is StockStatus.LOW_STOCK),
    )
