"""Domain events for the Category aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from stockroom.domain import stockroom


@stockroom.event(part_of="Category")
class CategoryCreated:
    """A new product category was added."""

    category_id: Identifier(required=True)
    name: String(required=True)
    created_by: Identifier()
    created_at: DateTime(required=True)


@stockroom.event(part_of="Category")
class CategoryUpdated:
    """A category's name, description, image or active flag changed.

    Products are not touched; a rename leaves them under ``previous_name``.
    """

    category_id: Identifier(required=True)
    name: String(required=True)
    previous_name: String(required=True)
    is_active: Boolean(default=True)
    updated_at: DateTime(required=True)


@stockroom.event(part_of="Category")
class CategoryDeactivated:
    """A category was soft-deleted."""

    category_id: Identifier(required=True)
    name: String(required=True)
    deactivated_at: DateTime(required=True)


@stockroom.event(part_of="Category")
class SubcategoryAdded:
    category_id: Identifier(required=True)
    subcategory_id: Identifier(required=True)
    name: String(required=True)


@stockroom.event(part_of="Category")
class SubcategoryUpdated:
    category_id: Identifier(required=True)
    subcategory_id: Identifier(required=True)
    name: String(required=True)


@stockroom.event(part_of="Category")
class SubcategoryRemoved:
    category_id: Identifier(required=True)
    subcategory_id: Identifier(required=True)
    name: String(required=True)
