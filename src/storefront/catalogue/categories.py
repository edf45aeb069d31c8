"""Category tree management: commands and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.catalogue.category import Category, slugify
from storefront.domain import storefront
from storefront.integrity import propagation
from storefront.shared.queries import ensure_unique, require


@storefront.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=150, sanitize=False)
    slug: String(max_length=200)
    parent_id: Identifier()


@storefront.command(part_of="Category")
class MoveCategory:
    """Attach a category under another one, or make it a root when ``parent_id`` is empty."""

    category_id: Identifier(required=True)
    parent_id: Identifier()


@storefront.command(part_of="Category")
class DeleteCategory:
    """Delete a category. Its children become roots; its product links are removed."""

    category_id: Identifier(required=True)


def lineage(category_id):
    """Identifiers of the ancestors of ``category_id``, nearest first."""
    repo = current_domain.repository_for(Category)
    ancestors = []
    parent_id = repo.get(category_id).parent_id
    while parent_id is not None and str(parent_id) not in ancestors:
        ancestors.append(str(parent_id))
        parent_id = repo.get(parent_id).parent_id
    return ancestors


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        if command.parent_id:
            require(Category, command.parent_id, field="parent_id")

        slug = command.slug or slugify(command.name)
        ensure_unique(Category, name=command.name)
        ensure_unique(Category, slug=slug)

        category = Category.create(name=command.name, slug=slug, parent_id=command.parent_id)
        current_domain.repository_for(Category).add(category)
        return str(category.id)

    @handle(MoveCategory)
    def move_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)

        parent_lineage = ()
        if command.parent_id:
            require(Category, command.parent_id, field="parent_id")
            parent_lineage = lineage(command.parent_id)

        category.move_to(command.parent_id, parent_lineage)
        repo.add(category)

    @handle(DeleteCategory)
    def delete_category(self, command):
        category = current_domain.repository_for(Category).get(command.category_id)
        propagation.delete(category)
