"""Unit tests for catalog aggregates."""

import pytest

from catalog.domain.aggregates import Category, HeroBanner, Product, Subcategory
from catalog.domain.value_objects import (
    CategoryId,
    ProductImage,
    ProductStatus,
    slugify,
)


class TestSlugify:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Men's Shoes & Boots", "men-s-shoes-boots"),
            ("  Electronics  ", "electronics"),
            ("Phones--2024", "phones-2024"),
            ("!!!", ""),
        ],
    )
    def test_slugify(self, text, expected):
        assert slugify(text) == expected


class TestCategory:
    def test_create_derives_slug_from_name(self):
        category = Category.create(name=" Home & Garden ")

        assert category.name == "Home & Garden"
        assert category.slug == "home-garden"

    def test_explicit_slug_is_normalized(self):
        assert Category.create(name="Home", slug="Home Decor").slug == "home-decor"

    def test_blank_name_is_rejected(self):
        with pytest.raises(ValueError, match="Name is required"):
            Category.create(name="   ")

    def test_updated_keeps_unset_fields(self):
        category = Category.create(name="Toys", description="Fun things")

        updated = category.updated(name="Games")

        assert updated.id == category.id
        assert updated.name == "Games"
        assert updated.slug == "toys"
        assert updated.description == "Fun things"


class TestSubcategory:
    def test_create(self):
        parent = CategoryId.generate()

        subcategory = Subcategory.create(
            category_id=parent, name="Running", slug="Running Shoes"
        )

        assert subcategory.category_id == parent
        assert subcategory.slug == "running-shoes"

    def test_updated_moves_to_new_parent(self):
        subcategory = Subcategory.create(
            category_id=CategoryId.generate(), name="Running", slug="running"
        )
        new_parent = CategoryId.generate()

        assert subcategory.updated(category_id=new_parent).category_id == new_parent


class TestProduct:
    def _product(self, **fields) -> Product:
        return Product.create(
            name="Cotton Saree",
            price=4500.0,
            category_id=CategoryId.generate(),
            **fields,
        )

    def test_create_defaults(self):
        product = self._product()

        assert product.slug == "cotton-saree"
        assert product.currency == "LKR"
        assert product.status is ProductStatus.ACTIVE
        assert product.is_visible is True

    @pytest.mark.parametrize(
        ("fields", "message"),
        [
            ({"price": -1}, "Price"),
            ({"stock": -5}, "Stock"),
        ],
    )
    def test_rejects_negative_values(self, fields, message):
        with pytest.raises(ValueError, match=message):
            self._product().updated(**fields)

    def test_drafts_are_hidden(self):
        assert self._product(status=ProductStatus.DRAFT).is_visible is False

    def test_primary_image_is_lowest_position(self):
        product = self._product(
            images=(
                ProductImage(url="https://cdn.test/b.jpg", position=2),
                ProductImage(url="https://cdn.test/a.jpg", position=0),
            )
        )

        assert product.primary_image.url == "https://cdn.test/a.jpg"

    def test_primary_image_none_without_images(self):
        assert self._product().primary_image is None

    def test_updated_ignores_none_and_normalizes_slug(self):
        product = self._product(description="Handwoven")

        updated = product.updated(description=None, slug="Saree Blue", price=3999.0)

        assert updated.description == "Handwoven"
        assert updated.slug == "saree-blue"
        assert updated.price == 3999.0


class TestHeroBanner:
    def test_defaults(self):
        banner = HeroBanner.create(
            title="Avurudu Sale", image_url="https://cdn.test/h.jpg"
        )

        assert banner.cta_text == "Shop Now"
        assert banner.cta_link == "/products"
        assert banner.is_active is True

    def test_title_is_required(self):
        with pytest.raises(ValueError, match="Title is required"):
            HeroBanner.create(title=" ", image_url="https://cdn.test/h.jpg")
