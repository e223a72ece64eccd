"""Subcategory management: commands and handler.

Subcategories live inside their category, so every command names both ids.
"""

import json

import structlog
from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from stockroom.category.category import Category
from stockroom.category.lookup import load_category
from stockroom.domain import stockroom

logger = structlog.get_logger(__name__)


@stockroom.command(part_of="Category")
class AddSubcategory:
    category_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    description: Text()
    common_sizes: Text()  # JSON array of strings
    common_materials: Text()  # JSON array of strings
    pressure_ratings: Text()  # JSON array of strings
    temperature_range: String(max_length=100)


@stockroom.command(part_of="Category")
class UpdateSubcategory:
    category_id: Identifier(required=True)
    subcategory_id: Identifier(required=True)
    name: String(max_length=100)
    description: Text()
    common_sizes: Text()  # JSON array of strings
    common_materials: Text()  # JSON array of strings
    pressure_ratings: Text()  # JSON array of strings
    temperature_range: String(max_length=100)


@stockroom.command(part_of="Category")
class RemoveSubcategory:
    category_id: Identifier(required=True)
    subcategory_id: Identifier(required=True)


def _json_list(value):
    return json.loads(value) if value is not None else None


@stockroom.command_handler(part_of=Category)
class ManageSubcategoryHandler:
    @handle(AddSubcategory)
    def add_subcategory(self, command):
        repo = current_domain.repository_for(Category)
        category = load_category(command.category_id)

        subcategory = category.add_subcategory(
            name=command.name,
            description=command.description,
            common_sizes=_json_list(command.common_sizes),
            common_materials=_json_list(command.common_materials),
            pressure_ratings=_json_list(command.pressure_ratings),
            temperature_range=command.temperature_range,
        )
        repo.add(category)

        logger.info(
            "Subcategory added",
            category_id=str(category.id),
            subcategory_id=str(subcategory.id),
            name=subcategory.name,
        )
        return str(subcategory.id)

    @handle(UpdateSubcategory)
    def update_subcategory(self, command):
        repo = current_domain.repository_for(Category)
        category = load_category(command.category_id)

        subcategory = category.update_subcategory(
            command.subcategory_id,
            name=command.name,
            description=command.description,
            common_sizes=_json_list(command.common_sizes),
            common_materials=_json_list(command.common_materials),
            pressure_ratings=_json_list(command.pressure_ratings),
            temperature_range=command.temperature_range,
        )
        repo.add(category)

        logger.info("Subcategory updated", category_id=str(category.id), subcategory_id=str(subcategory.id))

    @handle(RemoveSubcategory)
    def remove_subcategory(self, command):
        repo = current_domain.repository_for(Category)
        category = load_category(command.category_id)

        category.remove_subcategory(command.subcategory_id)
        repo.add(category)

        logger.info(
            "Subcategory removed",
            category_id=str(category.id),
            subcategory_id=str(command.subcategory_id),
        )
