"""Product routes.

The storefront sees active products only; admins manage every status.
"""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from catalog.application.services import ProductService
from catalog.dependencies.product import get_product_service
from catalog.domain.value_objects import CategoryId, ProductId, SubcategoryId
from catalog.ports.exceptions import (
    CategoryNotFoundError,
    DuplicateSlugError,
    ProductNotFoundError,
    SubcategoryNotFoundError,
)
from catalog.presentation.products.models import (
    CreateProductRequest,
    ProductResponse,
    UpdateProductRequest,
)
from iam.dependencies.user import AdminIdentity
from shared_kernel.api_models import SuccessResponse, parse_entity_id
from shared_kernel.errors import NotFoundError, UnexpectedError, ValidationError

logger = structlog.get_logger()

router = APIRouter(tags=["products"])

ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]


def _optional_id(id_type, value: str | None, label: str):
    return parse_entity_id(id_type, value, label) if value else None


@router.get(
    "/products",
    response_model=list[ProductResponse],
    summary="List storefront products",
    description="Active products, newest first.",
)
async def list_products(
    service: ProductServiceDep,
    category_id: Annotated[str | None, Query(alias="categoryId")] = None,
    subcategory_id: Annotated[str | None, Query(alias="subcategoryId")] = None,
) -> list[ProductResponse]:
    category = _optional_id(CategoryId, category_id, "category ID")
    subcategory = _optional_id(SubcategoryId, subcategory_id, "subcategory ID")
    try:
        products = await service.list_products(
            category_id=category, subcategory_id=subcategory
        )
        return [ProductResponse.from_domain(product) for product in products]
    except Exception as e:
        logger.error("product_list_failed", error=str(e))
        raise UnexpectedError("Failed to fetch products")


@router.get(
    "/products/featured",
    response_model=list[ProductResponse],
    summary="List featured products",
    description="Up to 8 active featured products, newest first.",
)
async def list_featured_products(service: ProductServiceDep) -> list[ProductResponse]:
    try:
        products = await service.list_featured()
        return [ProductResponse.from_domain(product) for product in products]
    except Exception as e:
        logger.error("featured_product_list_failed", error=str(e))
        raise UnexpectedError("Failed to fetch featured products")


@router.get(
    "/products/{id_or_slug}",
    response_model=ProductResponse,
    summary="Get a product by ID or slug",
    responses={404: {"description": "Product not found or not active"}},
)
async def get_product(id_or_slug: str, service: ProductServiceDep) -> ProductResponse:
    try:
        return ProductResponse.from_domain(await service.get_product(id_or_slug))
    except ProductNotFoundError:
        raise NotFoundError("Product not found")
    except Exception as e:
        logger.error("product_fetch_failed", product=id_or_slug, error=str(e))
        raise UnexpectedError("Failed to fetch product")


@router.get(
    "/admin/products",
    response_model=list[ProductResponse],
    summary="List every product",
    description="All statuses, newest first.",
)
async def list_all_products(
    admin: AdminIdentity,
    service: ProductServiceDep,
    category_id: Annotated[str | None, Query(alias="categoryId")] = None,
) -> list[ProductResponse]:
    category = _optional_id(CategoryId, category_id, "category ID")
    try:
        products = await service.list_products(
            category_id=category, include_hidden=True
        )
        return [ProductResponse.from_domain(product) for product in products]
    except Exception as e:
        logger.error("product_list_failed", error=str(e))
        raise UnexpectedError("Failed to fetch products")


@router.post(
    "/products",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
    responses={
        400: {"description": "Validation error, unknown category or duplicate slug"},
        401: {"description": "Authentication required"},
        403: {"description": "Admin role required"},
    },
)
async def create_product(
    request: CreateProductRequest,
    admin: AdminIdentity,
    service: ProductServiceDep,
) -> ProductResponse:
    category = parse_entity_id(CategoryId, request.category_id, "category ID")
    subcategory = _optional_id(SubcategoryId, request.subcategory_id, "subcategory ID")
    try:
        product = await service.create_product(
            name=request.name,
            price=request.price,
            category_id=category,
            slug=request.slug,
            subcategory_id=subcategory,
            description=request.description,
            currency=request.currency.upper(),
            status=request.status,
            stock=request.stock,
            featured=request.featured,
            images=tuple(image.to_domain() for image in request.images),
        )
        return ProductResponse.from_domain(product)
    except CategoryNotFoundError:
        raise ValidationError("Invalid category")
    except SubcategoryNotFoundError:
        raise ValidationError("Invalid subcategory")
    except (DuplicateSlugError, ValueError) as e:
        raise ValidationError(str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error("product_create_failed", error=str(e))
        raise UnexpectedError("Failed to create product")


@router.put(
    "/products/{product_id}",
    response_model=ProductResponse,
    summary="Update a product",
    responses={
        400: {"description": "Validation error, unknown category or duplicate slug"},
        404: {"description": "Product not found"},
    },
)
async def update_product(
    product_id: str,
    request: UpdateProductRequest,
    admin: AdminIdentity,
    service: ProductServiceDep,
) -> ProductResponse:
    product_id_obj = parse_entity_id(ProductId, product_id, "product ID")
    try:
        product = await service.update_product(
            product_id_obj,
            name=request.name,
            slug=request.slug,
            description=request.description,
            price=request.price,
            currency=request.currency.upper() if request.currency else None,
            category_id=_optional_id(CategoryId, request.category_id, "category ID"),
            subcategory_id=_optional_id(
                SubcategoryId, request.subcategory_id, "subcategory ID"
            ),
            status=request.status,
            stock=request.stock,
            featured=request.featured,
            images=(
                tuple(image.to_domain() for image in request.images)
                if request.images is not None
                else None
            ),
        )
        return ProductResponse.from_domain(product)
    except ProductNotFoundError:
        raise NotFoundError("Product not found")
    except CategoryNotFoundError:
        raise ValidationError("Invalid category")
    except SubcategoryNotFoundError:
        raise ValidationError("Invalid subcategory")
    except (DuplicateSlugError, ValueError) as e:
        raise ValidationError(str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error("product_update_failed", product_id=product_id, error=str(e))
        raise UnexpectedError("Failed to update product")


@router.delete(
    "/products/{product_id}",
    response_model=SuccessResponse,
    summary="Delete a product",
    responses={404: {"description": "Product not found"}},
)
async def delete_product(
    product_id: str,
    admin: AdminIdentity,
    service: ProductServiceDep,
) -> SuccessResponse:
    product_id_obj = parse_entity_id(ProductId, product_id, "product ID")
    try:
        await service.delete_product(product_id_obj)
        return SuccessResponse()
    except ProductNotFoundError:
        raise NotFoundError("Product not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error("product_delete_failed", product_id=product_id, error=str(e))
        raise UnexpectedError("Failed to delete product")
