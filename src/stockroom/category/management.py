"""Category management: commands and handler."""

import json

import structlog
from protean import handle
from protean.fields import Boolean, Identifier, String, Text
from protean.utils.globals import current_domain

from stockroom.category.category import Category
from stockroom.category.lookup import load_category
from stockroom.domain import stockroom
from stockroom.errors import ConflictError
from stockroom.product.listing import products_in_category

logger = structlog.get_logger(__name__)


@stockroom.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    description: Text(required=True)
    image: String(max_length=500)
    created_by: Identifier()
    sub_categories: Text()  # JSON array of subcategory objects


@stockroom.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(max_length=100)
    description: Text()
    image: String(max_length=500)
    is_active: Boolean()


@stockroom.command(part_of="Category")
class DeactivateCategory:
    category_id: Identifier(required=True)


def ensure_name_available(name, category_id=None):
    """Raise ConflictError when another category already uses ``name``."""
    repo = current_domain.repository_for(Category)
    existing = repo._dao.query.filter(name=name.strip()).all().items
    if any(str(c.id) != str(category_id) for c in existing):
        raise ConflictError("Category name already exists")


def ensure_no_active_products(category):
    """Raise ConflictError while an active product still names ``category``."""
    if products_in_category(category.name, active_only=True):
        raise ConflictError("Cannot delete category with existing products. Please reassign products first.")


@stockroom.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        ensure_name_available(command.name)

        category = Category.create(
            name=command.name,
            description=command.description,
            created_by=command.created_by,
            image=command.image,
        )
        for sub in json.loads(command.sub_categories) if command.sub_categories else []:
            category.add_subcategory(**sub)

        current_domain.repository_for(Category).add(category)

        logger.info("Category created", category_id=str(category.id), name=category.name)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = load_category(command.category_id)

        if command.name is not None and command.name.strip() != category.name:
            ensure_name_available(command.name, category_id=category.id)

        deactivating = command.is_active is False and category.is_active
        if deactivating:
            ensure_no_active_products(category)

        previous_name = category.name
        category.update_details(
            name=command.name,
            description=command.description,
            image=command.image,
            is_active=True if command.is_active else None,
        )
        if deactivating:
            category.deactivate()
        repo.add(category)

        if previous_name != category.name:
            logger.warning(
                "Category renamed; products keep the previous name",
                category_id=str(category.id),
                previous_name=previous_name,
                name=category.name,
            )
        else:
            logger.info("Category updated", category_id=str(category.id), name=category.name)

    @handle(DeactivateCategory)
    def deactivate_category(self, command):
        repo = current_domain.repository_for(Category)
        category = load_category(command.category_id)

        ensure_no_active_products(category)
        category.deactivate()
        repo.add(category)

        logger.info("Category deactivated", category_id=str(category.id), name=category.name)
