"""Category and subcategory routes.

Reads are public; writes require the admin role.
"""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from catalog.application.services import CategoryService
from catalog.dependencies.category import get_category_service
from catalog.domain.value_objects import CategoryId, SubcategoryId
from catalog.ports.exceptions import (
    CategoryInUseError,
    CategoryNotFoundError,
    DuplicateSlugError,
    SubcategoryInUseError,
    SubcategoryNotFoundError,
)
from catalog.presentation.categories.models import (
    CategoryResponse,
    CreateCategoryRequest,
    CreateSubcategoryRequest,
    SubcategoryResponse,
    UpdateCategoryRequest,
    UpdateSubcategoryRequest,
)
from iam.dependencies.user import AdminIdentity
from shared_kernel.api_models import SuccessResponse, parse_entity_id
from shared_kernel.errors import NotFoundError, UnexpectedError, ValidationError

logger = structlog.get_logger()

router = APIRouter(tags=["categories"])

CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]


@router.get(
    "/categories",
    response_model=list[CategoryResponse],
    summary="List categories",
    description="All categories ordered by name.",
)
async def list_categories(service: CategoryServiceDep) -> list[CategoryResponse]:
    try:
        categories = await service.list_categories()
        return [CategoryResponse.from_domain(category) for category in categories]
    except Exception as e:
        logger.error("category_list_failed", error=str(e))
        raise UnexpectedError("Failed to fetch categories")


@router.get(
    "/categories/{category_id}",
    response_model=CategoryResponse,
    summary="Get category by ID",
    responses={404: {"description": "Category not found"}},
)
async def get_category(
    category_id: str, service: CategoryServiceDep
) -> CategoryResponse:
    category_id_obj = parse_entity_id(CategoryId, category_id, "category ID")
    try:
        return CategoryResponse.from_domain(await service.get_category(category_id_obj))
    except CategoryNotFoundError:
        raise NotFoundError("Category not found")
    except Exception as e:
        logger.error("category_fetch_failed", category_id=category_id, error=str(e))
        raise UnexpectedError("Failed to fetch category")


@router.post(
    "/categories",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
    responses={
        201: {"description": "Category created"},
        400: {"description": "Validation error or duplicate slug"},
        401: {"description": "Authentication required"},
        403: {"description": "Admin role required"},
    },
)
async def create_category(
    request: CreateCategoryRequest,
    admin: AdminIdentity,
    service: CategoryServiceDep,
) -> CategoryResponse:
    try:
        category = await service.create_category(
            name=request.name,
            slug=request.slug,
            description=request.description,
            image=request.image,
        )
        return CategoryResponse.from_domain(category)
    except (DuplicateSlugError, ValueError) as e:
        raise ValidationError(str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error("category_create_failed", error=str(e))
        raise UnexpectedError("Failed to create category")


@router.put(
    "/categories/{category_id}",
    response_model=CategoryResponse,
    summary="Update a category",
    responses={
        400: {"description": "Validation error or duplicate slug"},
        404: {"description": "Category not found"},
    },
)
async def update_category(
    category_id: str,
    request: UpdateCategoryRequest,
    admin: AdminIdentity,
    service: CategoryServiceDep,
) -> CategoryResponse:
    category_id_obj = parse_entity_id(CategoryId, category_id, "category ID")
    try:
        category = await service.update_category(
            category_id_obj,
            name=request.name,
            slug=request.slug,
            description=request.description,
            image=request.image,
        )
        return CategoryResponse.from_domain(category)
    except CategoryNotFoundError:
        raise NotFoundError("Category not found")
    except (DuplicateSlugError, ValueError) as e:
        raise ValidationError(str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error("category_update_failed", category_id=category_id, error=str(e))
        raise UnexpectedError("Failed to update category")


@router.delete(
    "/categories/{category_id}",
    response_model=SuccessResponse,
    summary="Delete a category",
    description="Refused with 400 while any product references the category.",
    responses={
        400: {"description": "Category still has products"},
        404: {"description": "Category not found"},
    },
)
async def delete_category(
    category_id: str,
    admin: AdminIdentity,
    service: CategoryServiceDep,
) -> SuccessResponse:
    category_id_obj = parse_entity_id(CategoryId, category_id, "category ID")
    try:
        await service.delete_category(category_id_obj)
        return SuccessResponse()
    except CategoryNotFoundError:
        raise NotFoundError("Category not found")
    except CategoryInUseError as e:
        raise ValidationError(str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error("category_delete_failed", category_id=category_id, error=str(e))
        raise UnexpectedError("Failed to delete category")


@router.get(
    "/subcategories",
    response_model=list[SubcategoryResponse],
    summary="List subcategories",
    tags=["subcategories"],
)
async def list_subcategories(
    service: CategoryServiceDep,
    category_id: Annotated[
        str | None, Query(alias="categoryId", description="Parent category filter")
    ] = None,
) -> list[SubcategoryResponse]:
    category_id_obj = (
        parse_entity_id(CategoryId, category_id, "category ID")
        if category_id
        else None
    )
    try:
        subcategories = await service.list_subcategories(category_id=category_id_obj)
        return [SubcategoryResponse.from_domain(item) for item in subcategories]
    except Exception as e:
        logger.error("subcategory_list_failed", error=str(e))
        raise UnexpectedError("Failed to fetch subcategories")


@router.get(
    "/subcategories/{subcategory_id}",
    response_model=SubcategoryResponse,
    summary="Get subcategory by ID",
    tags=["subcategories"],
    responses={404: {"description": "Subcategory not found"}},
)
async def get_subcategory(
    subcategory_id: str, service: CategoryServiceDep
) -> SubcategoryResponse:
    subcategory_id_obj = parse_entity_id(
        SubcategoryId, subcategory_id, "subcategory ID"
    )
    try:
        subcategory = await service.get_subcategory(subcategory_id_obj)
        return SubcategoryResponse.from_domain(subcategory)
    except SubcategoryNotFoundError:
        raise NotFoundError("Subcategory not found")
    except Exception as e:
        logger.error(
            "subcategory_fetch_failed", subcategory_id=subcategory_id, error=str(e)
        )
        raise UnexpectedError("Failed to fetch subcategory")


@router.post(
    "/subcategories",
    response_model=SubcategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a subcategory",
    tags=["subcategories"],
    responses={
        400: {"description": "Missing fields or duplicate slug in category"},
        404: {"description": "Parent category not found"},
    },
)
async def create_subcategory(
    request: CreateSubcategoryRequest,
    admin: AdminIdentity,
    service: CategoryServiceDep,
) -> SubcategoryResponse:
    if not (request.name and request.slug and request.category_id):
        raise ValidationError("Name, slug, and category are required")
    category_id_obj = parse_entity_id(CategoryId, request.category_id, "category ID")

    try:
        subcategory = await service.create_subcategory(
            category_id=category_id_obj,
            name=request.name,
            slug=request.slug,
            description=request.description,
            image=request.image,
        )
        return SubcategoryResponse.from_domain(subcategory)
    except CategoryNotFoundError:
        raise NotFoundError("Category not found")
    except (DuplicateSlugError, ValueError) as e:
        raise ValidationError(str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error("subcategory_create_failed", error=str(e))
        raise UnexpectedError("Failed to create subcategory")


@router.put(
    "/subcategories/{subcategory_id}",
    response_model=SubcategoryResponse,
    summary="Update a subcategory",
    tags=["subcategories"],
    responses={
        400: {"description": "Validation error or duplicate slug in category"},
        404: {"description": "Subcategory or category not found"},
    },
)
async def update_subcategory(
    subcategory_id: str,
    request: UpdateSubcategoryRequest,
    admin: AdminIdentity,
    service: CategoryServiceDep,
) -> SubcategoryResponse:
    subcategory_id_obj = parse_entity_id(
        SubcategoryId, subcategory_id, "subcategory ID"
    )
    category_id_obj = (
        parse_entity_id(CategoryId, request.category_id, "category ID")
        if request.category_id
        else None
    )
    try:
        subcategory = await service.update_subcategory(
            subcategory_id_obj,
            category_id=category_id_obj,
            name=request.name,
            slug=request.slug,
            description=request.description,
            image=request.image,
        )
        return SubcategoryResponse.from_domain(subcategory)
    except SubcategoryNotFoundError:
        raise NotFoundError("Subcategory not found")
    except CategoryNotFoundError:
        raise NotFoundError("Category not found")
    except (DuplicateSlugError, ValueError) as e:
        raise ValidationError(str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(
            "subcategory_update_failed", subcategory_id=subcategory_id, error=str(e)
        )
        raise UnexpectedError("Failed to update subcategory")


@router.delete(
    "/subcategories/{subcategory_id}",
    response_model=SuccessResponse,
    summary="Delete a subcategory",
    tags=["subcategories"],
    responses={
        400: {"description": "Subcategory still has products"},
        404: {"description": "Subcategory not found"},
    },
)
async def delete_subcategory(
    subcategory_id: str,
    admin: AdminIdentity,
    service: CategoryServiceDep,
) -> SuccessResponse:
    subcategory_id_obj = parse_entity_id(
        SubcategoryId, subcategory_id, "subcategory ID"
    )
    try:
        await service.delete_subcategory(subcategory_id_obj)
        return SuccessResponse()
    except SubcategoryNotFoundError:
        raise NotFoundError("Subcategory not found")
    except SubcategoryInUseError as e:
        raise ValidationError(str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(
            "subcategory_delete_failed", subcategory_id=subcategory_id, error=str(e)
        )
        raise UnexpectedError("Failed to delete subcategory")
