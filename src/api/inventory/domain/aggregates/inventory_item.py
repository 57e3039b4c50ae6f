"""InventoryItem aggregate: back-office stock of supplies and goods."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from inventory.domain.value_objects import InventoryItemId
from shared_kernel.money import round_money

DEFAULT_CATEGORY = "General"
DEFAULT_UNIT = "pcs"
DEFAULT_LOW_STOCK_ALERT = 5

_CLEARABLE = ("cost_per_unit", "supplier", "notes")


def _clean(value: str | None) -> str | None:
    """Trim text; blank becomes None."""
    if value is None:
        return None
    return value.strip() or None


@dataclass(frozen=True)
class InventoryItem:
    """A tracked stock line.

    Business rules:
    - Quantity is never negative
    - An item is low on stock when quantity is at or below its alert level
    """

    id: InventoryItemId
    name: str
    category: str = DEFAULT_CATEGORY
    quantity: int = 0
    unit: str = DEFAULT_UNIT
    low_stock_alert: int = DEFAULT_LOW_STOCK_ALERT
    cost_per_unit: float | None = None
    supplier: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Name is required")
        if self.quantity < 0:
            raise ValueError("Quantity cannot be negative")
        if self.low_stock_alert < 0:
            raise ValueError("Low stock alert cannot be negative")
        if self.cost_per_unit is not None and self.cost_per_unit < 0:
            raise ValueError("Cost per unit cannot be negative")

    @classmethod
    def create(cls, name: str, **fields) -> InventoryItem:
        """Create an item; text fields are trimmed.

        Raises:
            ValueError: If the name is blank or a number is negative
        """
        fields = {key: value for key, value in fields.items() if value is not None}
        for key in ("category", "unit"):
            if key in fields:
                fields[key] = fields[key].strip()
        for key in ("supplier", "notes"):
            if key in fields:
                fields[key] = _clean(fields[key])
        return cls(id=InventoryItemId.generate(), name=name.strip(), **fields)

    def updated(self, **changes) -> InventoryItem:
        """Return a re-validated copy with only the given fields changed.

        Unlike other aggregates, explicit ``None`` clears cost, supplier and
        notes, so callers pass only the fields the client actually sent.
        """
        changes = {
            key: value
            for key, value in changes.items()
            if value is not None or key in _CLEARABLE
        }
        for key in ("name", "category", "unit"):
            if changes.get(key) is not None:
                changes[key] = changes[key].strip()
        for key in ("supplier", "notes"):
            if key in changes:
                changes[key] = _clean(changes[key])
        return replace(self, **changes)

    def adjusted(self, delta: int) -> InventoryItem:
        """Add ``delta`` units (negative consumes), never going below zero."""
        return replace(self, quantity=max(0, self.quantity + delta))

    @property
    def is_low_stock(self) -> bool:
        return self.quantity <= self.low_stock_alert

    @property
    def stock_value(self) -> float:
        return round_money(self.quantity * (self.cost_per_unit or 0.0))
