"""Loading a single category by identifier."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from stockroom.category.category import Category
from stockroom.errors import RecordNotFoundError


def load_category(category_id) -> Category:
    try:
        return current_domain.repository_for(Category).get(category_id)
    except ObjectNotFoundError:
        raise RecordNotFoundError("Category not found") from None
