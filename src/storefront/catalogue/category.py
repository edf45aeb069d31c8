"""Category aggregate root for product classification."""

import re
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


def slugify(text):
    slug = re.sub(r"[^a-z0-9]+", "-", text.strip().lower()).strip("-")
    if not slug:
        raise ValidationError({"slug": [f"Cannot derive a slug from {text!r}"]})
    return slug


@storefront.aggregate
class Category:
    """A node in the category tree.

    ``parent_id`` is a weak pointer: removing the parent turns this category
    into a root instead of deleting it. Reparenting never creates a cycle.
    """

    name: String(required=True, max_length=150, sanitize=False)
    slug: String(required=True, max_length=200)
    parent_id: Identifier()
    created_at: DateTime()

    @classmethod
    def create(cls, name, slug=None, parent_id=None):
        from storefront.catalogue.events import CategoryCreated

        category = cls(
            name=name,
            slug=slug or slugify(name),
            parent_id=parent_id,
            created_at=datetime.now(UTC),
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=category.name,
                slug=category.slug,
                parent_id=parent_id,
            )
        )
        return category

    def move_to(self, parent_id, parent_lineage=()):
        """Attach this category under ``parent_id``.

        ``parent_lineage`` lists the new parent's ancestors, nearest first.
        The move is rejected when this category appears in the new parent's
        ancestry, which would close a loop.
        """
        from storefront.catalogue.events import CategoryMoved

        if parent_id is not None:
            chain = [str(parent_id), *(str(ancestor) for ancestor in parent_lineage)]
            if str(self.id) in chain:
                raise ValidationError({"parent_id": ["A category cannot be moved beneath itself or its descendants"]})

        previous_parent_id = self.parent_id
        self.parent_id = parent_id

        self.raise_(
            CategoryMoved(
                category_id=self.id,
                previous_parent_id=previous_parent_id,
                parent_id=parent_id,
            )
        )
