"""Unit tests for catalog routes."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from catalog.application.services import (
    CategoryService,
    HeroBannerService,
    ProductService,
)
from catalog.domain.aggregates import Category, HeroBanner, Product, Subcategory
from catalog.domain.value_objects import CategoryId, ProductId, ProductStatus
from catalog.ports.exceptions import (
    CategoryInUseError,
    CategoryNotFoundError,
    DuplicateSlugError,
    ProductNotFoundError,
)
from infrastructure.errors import register_exception_handlers


@pytest.fixture
def mock_category_service() -> AsyncMock:
    return AsyncMock(spec=CategoryService)


@pytest.fixture
def mock_product_service() -> AsyncMock:
    return AsyncMock(spec=ProductService)


@pytest.fixture
def mock_banner_service() -> AsyncMock:
    return AsyncMock(spec=HeroBannerService)


@pytest.fixture
def current_identity(admin_identity):
    return admin_identity


@pytest.fixture
def test_client(
    mock_category_service, mock_product_service, mock_banner_service, current_identity
) -> TestClient:
    from catalog.dependencies.category import get_category_service
    from catalog.dependencies.product import (
        get_hero_banner_service,
        get_product_service,
    )
    from catalog.presentation import router
    from iam.dependencies.user import get_optional_identity

    app = FastAPI()
    register_exception_handlers(app)
    app.dependency_overrides[get_category_service] = lambda: mock_category_service
    app.dependency_overrides[get_product_service] = lambda: mock_product_service
    app.dependency_overrides[get_hero_banner_service] = lambda: mock_banner_service
    app.dependency_overrides[get_optional_identity] = lambda: current_identity
    app.include_router(router)

    return TestClient(app)


@pytest.fixture
def category() -> Category:
    return Category.create(name="Electronics")


@pytest.fixture
def product(category) -> Product:
    return Product.create(
        name="Smart Phone", price=89999.0, category_id=category.id, stock=3
    )


class TestCategoryRoutes:
    def test_list_is_public(self, test_client, mock_category_service, category):
        mock_category_service.list_categories.return_value = [category]

        response = test_client.get("/categories")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()[0]["slug"] == "electronics"

    def test_create(self, test_client, mock_category_service, category):
        mock_category_service.create_category.return_value = category

        response = test_client.post("/categories", json={"name": "Electronics"})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["id"] == category.id.value

    def test_create_duplicate_slug(self, test_client, mock_category_service):
        mock_category_service.create_category.side_effect = DuplicateSlugError(
            "A category with this slug already exists"
        )

        response = test_client.post("/categories", json={"name": "Electronics"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "A category with this slug already exists"}

    def test_delete_in_use(self, test_client, mock_category_service, category):
        mock_category_service.delete_category.side_effect = CategoryInUseError(
            "Cannot delete category with existing products"
        )

        response = test_client.delete(f"/categories/{category.id.value}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "error": "Cannot delete category with existing products"
        }

    def test_delete(self, test_client, mock_category_service, category):
        response = test_client.delete(f"/categories/{category.id.value}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True}

    def test_get_missing(self, test_client, mock_category_service):
        mock_category_service.get_category.side_effect = CategoryNotFoundError("x")

        response = test_client.get(f"/categories/{CategoryId.generate().value}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Category not found"}

    def test_malformed_id(self, test_client):
        response = test_client.get("/categories/42")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Invalid category ID format"}


class TestSubcategoryRoutes:
    def test_create_requires_fields(self, test_client, mock_category_service):
        response = test_client.post("/subcategories", json={"name": "Laptops"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Name, slug, and category are required"}
        mock_category_service.create_subcategory.assert_not_called()

    def test_create(self, test_client, mock_category_service, category):
        subcategory = Subcategory.create(
            category_id=category.id, name="Laptops", slug="laptops"
        )
        mock_category_service.create_subcategory.return_value = subcategory

        response = test_client.post(
            "/subcategories",
            json={
                "categoryId": category.id.value,
                "name": "Laptops",
                "slug": "laptops",
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["categoryId"] == category.id.value

    def test_list_filters_by_category(self, test_client, mock_category_service):
        mock_category_service.list_subcategories.return_value = []
        category_id = CategoryId.generate()

        response = test_client.get(f"/subcategories?categoryId={category_id.value}")

        assert response.status_code == status.HTTP_200_OK
        mock_category_service.list_subcategories.assert_awaited_once_with(
            category_id=category_id
        )


class TestProductRoutes:
    def test_storefront_list(self, test_client, mock_product_service, product):
        mock_product_service.list_products.return_value = [product]

        response = test_client.get("/products")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body[0]["price"] == 89999.0
        assert body[0]["categoryId"] == product.category_id.value

    def test_featured(self, test_client, mock_product_service):
        mock_product_service.list_featured.return_value = []

        response = test_client.get("/products/featured")

        assert response.status_code == status.HTTP_200_OK
        mock_product_service.list_featured.assert_awaited_once()
        mock_product_service.get_product.assert_not_called()

    def test_get_by_slug(self, test_client, mock_product_service, product):
        mock_product_service.get_product.return_value = product

        response = test_client.get("/products/smart-phone")

        assert response.status_code == status.HTTP_200_OK
        mock_product_service.get_product.assert_awaited_once_with("smart-phone")

    def test_get_missing(self, test_client, mock_product_service):
        mock_product_service.get_product.side_effect = ProductNotFoundError("x")

        response = test_client.get("/products/nothing-here")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Product not found"}

    def test_create(self, test_client, mock_product_service, product, category):
        mock_product_service.create_product.return_value = product

        response = test_client.post(
            "/products",
            json={
                "name": "Smart Phone",
                "price": 89999,
                "categoryId": category.id.value,
                "currency": "lkr",
                "status": "draft",
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        kwargs = mock_product_service.create_product.call_args.kwargs
        assert kwargs["category_id"] == category.id
        assert kwargs["currency"] == "LKR"
        assert kwargs["status"] is ProductStatus.DRAFT

    def test_create_negative_price_is_400(self, test_client, category):
        response = test_client.post(
            "/products",
            json={"name": "X", "price": -5, "categoryId": category.id.value},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_unknown_category(self, test_client, mock_product_service):
        mock_product_service.create_product.side_effect = CategoryNotFoundError("x")

        response = test_client.post(
            "/products",
            json={
                "name": "X",
                "price": 5,
                "categoryId": CategoryId.generate().value,
            },
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Invalid category"}

    def test_update_missing(self, test_client, mock_product_service):
        mock_product_service.update_product.side_effect = ProductNotFoundError("x")

        response = test_client.put(
            f"/products/{ProductId.generate().value}", json={"price": 10}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestCustomerCannotWrite:
    @pytest.fixture
    def current_identity(self, customer_identity):
        return customer_identity

    def test_create_product_forbidden(self, test_client, mock_product_service):
        response = test_client.post(
            "/products",
            json={"name": "X", "price": 5, "categoryId": CategoryId.generate().value},
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        mock_product_service.create_product.assert_not_called()

    def test_admin_product_list_forbidden(self, test_client):
        assert test_client.get("/admin/products").status_code == 403


class TestHeroBannerRoutes:
    def test_public_list(self, test_client, mock_banner_service):
        mock_banner_service.list_banners.return_value = [
            HeroBanner.create(title="Sale", image_url="https://cdn.test/s.jpg")
        ]

        response = test_client.get("/hero-banners")

        assert response.status_code == status.HTTP_200_OK
        mock_banner_service.list_banners.assert_awaited_once_with(active_only=True)

    def test_admin_list_includes_inactive(self, test_client, mock_banner_service):
        mock_banner_service.list_banners.return_value = []

        test_client.get("/admin/hero-banners")

        mock_banner_service.list_banners.assert_awaited_once_with(active_only=False)
