"""BDD tests for category deletion and renaming."""

from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, scenarios, then, when
from stockroom.category.category import Category
from stockroom.category.management import CreateCategory, DeactivateCategory, UpdateCategory
from stockroom.errors import ConflictError
from stockroom.product.creation import CreateProduct
from stockroom.product.product import Product
from stockroom.reports.statistics import category_summary

scenarios("features/category_deletion.feature")


def _add_product(sku, category, status):
    command = CreateProduct(
        sku=sku,
        name=f"Part {sku}",
        description="Industrial part",
        category=category,
        sub_category="General",
        quantity=5,
        status=status,
    )
    current_domain.process(command, asynchronous=False)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a category "{name}"'), target_fixture="category_id")
def category_named(name):
    command = CreateCategory(name=name, description=f"{name} for process lines", created_by="admin-1")
    return current_domain.process(command, asynchronous=False)


@given(parsers.cfparse('an active product "{sku}" in category "{category}"'))
def active_product(sku, category):
    _add_product(sku, category, "active")


@given(parsers.cfparse('a discontinued product "{sku}" in category "{category}"'))
def discontinued_product(sku, category):
    _add_product(sku, category, "discontinued")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the category is deleted")
def delete_category(category_id, error):
    try:
        current_domain.process(DeactivateCategory(category_id=category_id), asynchronous=False)
    except ConflictError as exc:
        error["exc"] = exc


@when(parsers.cfparse('the category is renamed to "{name}"'))
def rename_category(category_id, name):
    current_domain.process(UpdateCategory(category_id=category_id, name=name), asynchronous=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the category is inactive")
def category_inactive(category_id):
    assert current_domain.repository_for(Category).get(category_id).is_active is False


@then("the category is still active")
def category_active(category_id):
    assert current_domain.repository_for(Category).get(category_id).is_active is True


@then("the deletion is refused with a conflict")
def deletion_refused(error):
    assert isinstance(error["exc"], ConflictError)
    assert error["exc"].status_code == 409


@then(parsers.cfparse('the summary for "{name}" counts {count:d} products'))
def summary_counts(name, count):
    stats = {stat.category: stat for stat in category_summary()}
    assert stats[name].total_products == count


@then(parsers.cfparse('product "{sku}" still names category "{category}"'))
def product_category(sku, category):
    [product] = current_domain.repository_for(Product)._dao.query.filter(sku=sku).all().items
    assert product.category == category
