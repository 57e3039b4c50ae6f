"""Domain-Oriented Observability for the inventory application layer."""

from inventory.application.observability.inventory_service_probe import (
    DefaultInventoryServiceProbe,
    InventoryServiceProbe,
)

__all__ = ["InventoryServiceProbe", "DefaultInventoryServiceProbe"]
