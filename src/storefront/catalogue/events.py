"""Domain events for the Category aggregate."""

from protean.fields import Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Category")
class CategoryCreated:
    """A new category was added to the tree."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True, sanitize=False)
    slug: String(required=True)
    parent_id: Identifier()


@storefront.event(part_of="Category")
class CategoryMoved:
    """A category was attached to a different parent, or made a root."""

    __version__ = 1

    category_id: Identifier(required=True)
    previous_parent_id: Identifier()
    parent_id: Identifier()
