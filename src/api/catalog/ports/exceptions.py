"""Domain exceptions for the catalog bounded context."""


class CategoryNotFoundError(Exception):
    pass


class SubcategoryNotFoundError(Exception):
    pass


class ProductNotFoundError(Exception):
    pass


class HeroBannerNotFoundError(Exception):
    pass


class DuplicateSlugError(Exception):
    """Raised when a slug is already taken in its scope."""

    pass


class CategoryInUseError(Exception):
    """Raised when deleting a category that products still reference."""

    pass


class SubcategoryInUseError(Exception):
    """Raised when deleting a subcategory that products still reference."""

    pass
