"""Protocols for sales application service observability."""

from __future__ import annotations

from typing import Protocol

import structlog


class CouponServiceProbe(Protocol):
    """Domain probe for coupon validation and management."""

    def coupon_validated(
        self, code: str, order_total: float, discount_amount: float
    ) -> None: ...

    def coupon_validation_rejected(self, code: str, reason: str) -> None:
        """Record a coupon that failed one of its redemption checks."""
        ...

    def coupon_created(self, coupon_id: str, code: str) -> None: ...

    def coupon_updated(self, coupon_id: str) -> None: ...

    def coupon_deleted(self, coupon_id: str) -> None: ...


class DefaultCouponServiceProbe:
    """Default implementation of CouponServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def coupon_validated(
        self, code: str, order_total: float, discount_amount: float
    ) -> None:
        self._logger.info(
            "coupon_validated",
            code=code,
            order_total=order_total,
            discount_amount=discount_amount,
        )

    def coupon_validation_rejected(self, code: str, reason: str) -> None:
        self._logger.info("coupon_validation_rejected", code=code, reason=reason)

    def coupon_created(self, coupon_id: str, code: str) -> None:
        self._logger.info("coupon_created", coupon_id=coupon_id, code=code)

    def coupon_updated(self, coupon_id: str) -> None:
        self._logger.info("coupon_updated", coupon_id=coupon_id)

    def coupon_deleted(self, coupon_id: str) -> None:
        self._logger.info("coupon_deleted", coupon_id=coupon_id)


class OrderServiceProbe(Protocol):
    """Domain probe for order placement and fulfilment."""

    def order_created(
        self,
        order_id: str,
        order_number: str,
        customer_id: str,
        total_amount: float,
        coupon_code: str | None,
    ) -> None: ...

    def order_rejected(self, customer_id: str, reason: str) -> None:
        """Record an order that could not be placed."""
        ...

    def order_status_changed(self, order_id: str, status: str) -> None: ...


class DefaultOrderServiceProbe:
    """Default implementation of OrderServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def order_created(
        self,
        order_id: str,
        order_number: str,
        customer_id: str,
        total_amount: float,
        coupon_code: str | None,
    ) -> None:
        self._logger.info(
            "order_created",
            order_id=order_id,
            order_number=order_number,
            customer_id=customer_id,
            total_amount=total_amount,
            coupon_code=coupon_code,
        )

    def order_rejected(self, customer_id: str, reason: str) -> None:
        self._logger.info("order_rejected", customer_id=customer_id, reason=reason)

    def order_status_changed(self, order_id: str, status: str) -> None:
        self._logger.info("order_status_changed", order_id=order_id, status=status)
