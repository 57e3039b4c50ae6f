"""Domain probes for sales repositories."""

from __future__ import annotations

from typing import Protocol

import structlog


class CouponRepositoryProbe(Protocol):
    def redemption_refused(self, coupon_id: str) -> None:
        """Record a conditional increment that found the limit reached."""
        ...

    def usage_recorded(self, coupon_id: str, order_id: str) -> None: ...


class DefaultCouponRepositoryProbe:
    """Default implementation of CouponRepositoryProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def redemption_refused(self, coupon_id: str) -> None:
        self._logger.warning("coupon_redemption_refused", coupon_id=coupon_id)

    def usage_recorded(self, coupon_id: str, order_id: str) -> None:
        self._logger.debug(
            "coupon_usage_recorded", coupon_id=coupon_id, order_id=order_id
        )
