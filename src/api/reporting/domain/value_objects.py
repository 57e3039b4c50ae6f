"""Value objects for the reporting bounded context.

Read models assembled from other contexts' tables; none of them is
persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class StoreCounts:
    """Raw counts behind the admin dashboard."""

    total_products: int
    active_products: int
    total_categories: int
    total_customers: int
    total_orders: int
    pending_orders: int
    completed_orders: int
    total_coupons: int
    active_coupons: int
    total_sales: float
    messages_new: int = 0
    messages_read: int = 0
    messages_replied: int = 0

    @property
    def active_orders(self) -> int:
        return self.total_orders - self.completed_orders

    @property
    def messages_total(self) -> int:
        return self.messages_new + self.messages_read + self.messages_replied


@dataclass(frozen=True)
class ProductSummary:
    id: str
    name: str
    price: float
    stock: int
    images: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class OrderExportRow:
    """One order flattened for the spreadsheet export.

    ``shipping_address`` wins over the account profile for contact details.
    """

    order_number: str
    status: str
    created_at: datetime
    customer_name: str
    customer_email: str
    total_amount: float
    payment_method: str
    items: list[tuple[str, int]]
    shipping_address: dict[str, Any] | None = None
    notes: str | None = None
    profile_phone: str | None = None
    profile_address: str | None = None

    @property
    def contact_name(self) -> str:
        return self._shipping("name") or self.customer_name or "N/A"

    @property
    def contact_email(self) -> str:
        return self._shipping("email") or self.customer_email or "N/A"

    @property
    def contact_phone(self) -> str:
        return self._shipping("phone") or self.profile_phone or "N/A"

    @property
    def delivery_address(self) -> str:
        if not self.shipping_address:
            return self.profile_address or "N/A"
        parts = [
            self._shipping(key) for key in ("address", "city", "postalCode")
        ]
        return ", ".join(part for part in parts if part) or "N/A"

    @property
    def items_summary(self) -> str:
        return ", ".join(f"{name} (x{quantity})" for name, quantity in self.items)

    def _shipping(self, key: str) -> str | None:
        if not self.shipping_address:
            return None
        value = self.shipping_address.get(key)
        return str(value) if value else None
