"""Application tests for the category tree."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.catalogue.associations import LinkProductCategory
from storefront.catalogue.categories import CreateCategory, DeleteCategory, MoveCategory
from storefront.catalogue.category import Category
from storefront.catalogue.links import ProductCategory
from storefront.catalogue.product import Product
from storefront.exceptions import ConstraintViolation
from storefront.shared.queries import find_all


def _create(name, parent_id=None, **overrides):
    return current_domain.process(CreateCategory(name=name, parent_id=parent_id, **overrides), asynchronous=False)


def _move(category_id, parent_id):
    current_domain.process(MoveCategory(category_id=category_id, parent_id=parent_id), asynchronous=False)


def _get(category_id):
    return current_domain.repository_for(Category).get(category_id)


class TestCreateCategory:
    def test_slug_is_derived_from_name(self):
        assert _get(_create("Home & Garden")).slug == "home-garden"

    def test_name_is_stored_as_given(self):
        assert _get(_create("Home & Garden")).name == "Home & Garden"

    def test_explicit_slug(self):
        assert _get(_create("Electronics", slug="tech")).slug == "tech"

    def test_name_is_unique(self):
        _create("Books")
        with pytest.raises(ConstraintViolation):
            _create("Books", slug="books-2")

    def test_slug_is_unique(self):
        _create("Books")
        with pytest.raises(ConstraintViolation):
            _create("Novels", slug="books")

    def test_unknown_parent(self):
        with pytest.raises(ConstraintViolation):
            _create("Orphan", parent_id="cat-missing")

    def test_child_category(self):
        root = _create("Electronics")
        child = _create("Laptops", parent_id=root)
        assert str(_get(child).parent_id) == root


class TestMoveCategory:
    def test_move_under_new_parent(self):
        a = _create("A")
        b = _create("B")
        _move(b, a)
        assert str(_get(b).parent_id) == a

    def test_make_root(self):
        a = _create("A")
        b = _create("B", parent_id=a)
        _move(b, None)
        assert _get(b).parent_id is None

    def test_cannot_move_under_itself(self):
        a = _create("A")
        with pytest.raises(ValidationError):
            _move(a, a)

    def test_cannot_move_under_a_descendant(self):
        a = _create("A")
        b = _create("B", parent_id=a)
        c = _create("C", parent_id=b)

        with pytest.raises(ValidationError):
            _move(a, c)
        assert _get(a).parent_id is None


class TestDeleteCategory:
    def test_children_become_roots(self):
        parent = _create("Parent")
        child = _create("Child", parent_id=parent)
        grandchild = _create("Grandchild", parent_id=child)

        current_domain.process(DeleteCategory(category_id=parent), asynchronous=False)

        with pytest.raises(ObjectNotFoundError):
            _get(parent)
        assert _get(child).parent_id is None
        assert str(_get(grandchild).parent_id) == child

    def test_product_links_go_but_products_stay(self, create_product):
        category_id = _create("Peripherals")
        product_id = create_product()
        current_domain.process(
            LinkProductCategory(product_id=product_id, category_id=category_id),
            asynchronous=False,
        )

        current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)

        assert find_all(ProductCategory) == []
        assert current_domain.repository_for(Product).get(product_id) is not None
