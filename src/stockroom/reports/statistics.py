"""Per-category stock statistics and the dashboard summary.

Products join categories on the category *name* (compared case-insensitively),
not on an identifier. A product whose category was renamed away from it is
counted under no category at all.
"""

from dataclasses import dataclass

from stockroom.category.listing import active_categories
from stockroom.product.listing import all_products
from stockroom.product.product import ProductStatus, Stock
from stockroom.stock.levels import StockStatus, classify_stock


@dataclass(frozen=True)
class CategoryStat:
    category: str
    total_products: int
    active_products: int
    low_stock_products: int
    out_of_stock_products: int
    sub_categories: int


@dataclass(frozen=True)
class DashboardSummary:
    total_products: int
    total_categories: int
    low_stock_items: int
    out_of_stock_items: int


def _quantities(product) -> tuple[int, int]:
    stock = product.stock or Stock()
    return stock.quantity, stock.min_stock


def summarize(categories, products) -> list[CategoryStat]:
    """Count products per category, in the order the categories are given."""
    stats = []
    for category in categories:
        name = category.name.casefold()
        matching = [p for p in products if (p.category or "").casefold() == name]
        active = [p for p in matching if p.status == ProductStatus.ACTIVE.value]
        statuses = [classify_stock(*_quantities(p)) for p in active]

        stats.append(
            CategoryStat(
                category=category.name,
                total_products=len(matching),
                active_products=len(active),
                low_stock_products=sum(1 for s in statuses if s is StockStatus.LOW_STOCK),
                out_of_stock_products=sum(1 for s in statuses if s is StockStatus.OUT_OF_STOCK),
                sub_categories=len(category.sub_categories or []),
            )
        )
    return stats


def category_summary() -> list[CategoryStat]:
    return summarize(active_categories(), all_products())


def dashboard_summary() -> DashboardSummary:
    """Headline numbers for the dashboard, across every product regardless of status."""
    products = all_products()
    statuses = [classify_stock(*_quantities(p)) for p in products]
    return DashboardSummary(
        total_products=len(products),
        total_categories=len(active_categories()),
        low_stock_items=sum(1 for s in statuses if s is not StockStatus.IN_STOCK),
        out_of_stock_items=sum(1 for s in statuses if s is StockStatus.OUT_OF_STOCK),
    )
