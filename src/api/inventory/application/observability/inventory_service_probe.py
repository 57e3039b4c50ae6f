"""Protocol for inventory service observability."""

from __future__ import annotations

from typing import Protocol

import structlog


class InventoryServiceProbe(Protocol):
    """Domain probe for inventory changes."""

    def item_created(self, item_id: str, name: str) -> None: ...

    def item_updated(self, item_id: str) -> None: ...

    def quantity_adjusted(
        self, item_id: str, delta: int, quantity: int, low_stock: bool
    ) -> None:
        """Record a restock or consumption and the resulting quantity."""
        ...

    def item_deleted(self, item_id: str) -> None: ...


class DefaultInventoryServiceProbe:
    """Default implementation of InventoryServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def item_created(self, item_id: str, name: str) -> None:
        self._logger.info("inventory_item_created", item_id=item_id, name=name)

    def item_updated(self, item_id: str) -> None:
        self._logger.info("inventory_item_updated", item_id=item_id)

    def quantity_adjusted(
        self, item_id: str, delta: int, quantity: int, low_stock: bool
    ) -> None:
        log = self._logger.warning if low_stock else self._logger.info
        log(
            "inventory_quantity_adjusted",
            item_id=item_id,
            delta=delta,
            quantity=quantity,
            low_stock=low_stock,
        )

    def item_deleted(self, item_id: str) -> None:
        self._logger.info("inventory_item_deleted", item_id=item_id)
