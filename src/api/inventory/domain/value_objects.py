"""Value objects for the inventory domain."""

from __future__ import annotations

from dataclasses import dataclass

from shared_kernel.identifiers import EntityId


@dataclass(frozen=True)
class InventoryItemId(EntityId):
    pass
