"""Category aggregate root with its embedded subcategories."""

from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, HasMany, Identifier, List, String, Text

from stockroom.domain import stockroom
from stockroom.errors import RecordNotFoundError


@stockroom.entity(part_of="Category")
class Subcategory:
    """A named subdivision of one category.

    The size, material, pressure and temperature fields describe what parts in
    the subcategory usually look like. Products are never checked against them.
    """

    name: String(required=True, max_length=100)
    description: Text()
    common_sizes: List(content_type=String)
    common_materials: List(content_type=String)
    pressure_ratings: List(content_type=String)
    temperature_range: String(max_length=100)


@stockroom.aggregate
class Category:
    """A top-level grouping of products.

    Products point at a category by its ``name``. Deleting a category only
    clears ``is_active``.
    """

    name: String(required=True, max_length=100)
    description: Text(required=True)
    image: String(max_length=500)
    is_active: Boolean(default=True)
    created_by: Identifier()
    sub_categories: HasMany(Subcategory)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, description, created_by=None, image=None):
        from stockroom.category.events import CategoryCreated

        now = datetime.now()
        category = cls(
            name=name.strip(),
            description=description,
            image=image or "",
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=category.name,
                created_by=created_by,
                created_at=now,
            )
        )
        return category

    def update_details(self, name=None, description=None, image=None, is_active=None):
        from stockroom.category.events import CategoryUpdated

        previous_name = self.name
        if name is not None:
            self.name = name.strip()
        if description is not None:
            self.description = description
        if image is not None:
            self.image = image
        if is_active is not None:
            self.is_active = is_active

        self.updated_at = datetime.now()

        self.raise_(
            CategoryUpdated(
                category_id=self.id,
                name=self.name,
                previous_name=previous_name,
                is_active=self.is_active,
                updated_at=self.updated_at,
            )
        )

    def deactivate(self):
        from stockroom.category.events import CategoryDeactivated

        if not self.is_active:
            raise ValidationError({"is_active": ["Category is already inactive"]})

        self.is_active = False
        now = datetime.now()
        self.updated_at = now

        self.raise_(
            CategoryDeactivated(
                category_id=self.id,
                name=self.name,
                deactivated_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Subcategories
    # -------------------------------------------------------------------
    def find_subcategory(self, subcategory_id) -> Subcategory:
        subcategory = next(
            (s for s in (self.sub_categories or []) if str(s.id) == str(subcategory_id)),
            None,
        )
        if subcategory is None:
            raise RecordNotFoundError("Subcategory not found")
        return subcategory

    def add_subcategory(
        self,
        name,
        description=None,
        common_sizes=None,
        common_materials=None,
        pressure_ratings=None,
        temperature_range=None,
    ) -> Subcategory:
        from stockroom.category.events import SubcategoryAdded

        subcategory = Subcategory(
            name=name.strip(),
            description=description,
            common_sizes=list(common_sizes or []),
            common_materials=list(common_materials or []),
            pressure_ratings=list(pressure_ratings or []),
            temperature_range=temperature_range,
        )
        self.add_sub_categories(subcategory)
        self.updated_at = datetime.now()

        self.raise_(
            SubcategoryAdded(
                category_id=self.id,
                subcategory_id=subcategory.id,
                name=subcategory.name,
            )
        )
        return subcategory

    def update_subcategory(
        self,
        subcategory_id,
        name=None,
        description=None,
        common_sizes=None,
        common_materials=None,
        pressure_ratings=None,
        temperature_range=None,
    ) -> Subcategory:
        from stockroom.category.events import SubcategoryUpdated

        subcategory = self.find_subcategory(subcategory_id)
        if name is not None:
            subcategory.name = name.strip()
        if description is not None:
            subcategory.description = description
        if common_sizes is not None:
            subcategory.common_sizes = list(common_sizes)
        if common_materials is not None:
            subcategory.common_materials = list(common_materials)
        if pressure_ratings is not None:
            subcategory.pressure_ratings = list(pressure_ratings)
        if temperature_range is not None:
            subcategory.temperature_range = temperature_range
        self.updated_at = datetime.now()

        self.raise_(
            SubcategoryUpdated(
                category_id=self.id,
                subcategory_id=subcategory.id,
                name=subcategory.name,
            )
        )
        return subcategory

    def remove_subcategory(self, subcategory_id):
        from stockroom.category.events import SubcategoryRemoved

        subcategory = self.find_subcategory(subcategory_id)
        self.remove_sub_categories(subcategory)
        self.updated_at = datetime.now()

        self.raise_(
            SubcategoryRemoved(
                category_id=self.id,
                subcategory_id=subcategory.id,
                name=subcategory.name,
            )
        )
