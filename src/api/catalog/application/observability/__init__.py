"""Domain-Oriented Observability for the catalog application layer."""

from catalog.application.observability.catalog_service_probe import (
    CatalogServiceProbe,
    DefaultCatalogServiceProbe,
)

__all__ = ["CatalogServiceProbe", "DefaultCatalogServiceProbe"]
