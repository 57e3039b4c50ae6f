"""Protocol for catalog application service observability."""

from __future__ import annotations

from typing import Protocol

import structlog


class CatalogServiceProbe(Protocol):
    """Domain probe for category, subcategory, product and banner writes."""

    def category_created(self, category_id: str, slug: str) -> None: ...

    def category_updated(self, category_id: str) -> None: ...

    def category_deleted(self, category_id: str) -> None: ...

    def category_delete_blocked(self, category_id: str, product_count: int) -> None:
        """Record a refused delete of a category that products still use."""
        ...

    def subcategory_created(
        self, subcategory_id: str, category_id: str, slug: str
    ) -> None: ...

    def subcategory_updated(self, subcategory_id: str) -> None: ...

    def subcategory_deleted(self, subcategory_id: str) -> None: ...

    def subcategory_delete_blocked(
        self, subcategory_id: str, product_count: int
    ) -> None: ...

    def product_created(self, product_id: str, slug: str) -> None: ...

    def product_updated(self, product_id: str) -> None: ...

    def product_deleted(self, product_id: str) -> None: ...

    def slug_conflict(self, kind: str, slug: str) -> None:
        """Record a write rejected because the slug is already taken."""
        ...

    def hero_banner_saved(self, banner_id: str, created: bool) -> None: ...

    def hero_banner_deleted(self, banner_id: str) -> None: ...


class DefaultCatalogServiceProbe:
    """Default implementation of CatalogServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def category_created(self, category_id: str, slug: str) -> None:
        self._logger.info("category_created", category_id=category_id, slug=slug)

    def category_updated(self, category_id: str) -> None:
        self._logger.info("category_updated", category_id=category_id)

    def category_deleted(self, category_id: str) -> None:
        self._logger.info("category_deleted", category_id=category_id)

    def category_delete_blocked(self, category_id: str, product_count: int) -> None:
        self._logger.warning(
            "category_delete_blocked",
            category_id=category_id,
            product_count=product_count,
        )

    def subcategory_created(
        self, subcategory_id: str, category_id: str, slug: str
    ) -> None:
        self._logger.info(
            "subcategory_created",
            subcategory_id=subcategory_id,
            category_id=category_id,
            slug=slug,
        )

    def subcategory_updated(self, subcategory_id: str) -> None:
        self._logger.info("subcategory_updated", subcategory_id=subcategory_id)

    def subcategory_deleted(self, subcategory_id: str) -> None:
        self._logger.info("subcategory_deleted", subcategory_id=subcategory_id)

    def subcategory_delete_blocked(
        self, subcategory_id: str, product_count: int
    ) -> None:
        self._logger.warning(
            "subcategory_delete_blocked",
            subcategory_id=subcategory_id,
            product_count=product_count,
        )

    def product_created(self, product_id: str, slug: str) -> None:
        self._logger.info("product_created", product_id=product_id, slug=slug)

    def product_updated(self, product_id: str) -> None:
        self._logger.info("product_updated", product_id=product_id)

    def product_deleted(self, product_id: str) -> None:
        self._logger.info("product_deleted", product_id=product_id)

    def slug_conflict(self, kind: str, slug: str) -> None:
        self._logger.info("slug_conflict", kind=kind, slug=slug)

    def hero_banner_saved(self, banner_id: str, created: bool) -> None:
        self._logger.info("hero_banner_saved", banner_id=banner_id, created=created)

    def hero_banner_deleted(self, banner_id: str) -> None:
        self._logger.info("hero_banner_deleted", banner_id=banner_id)
