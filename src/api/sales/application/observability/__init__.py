"""Domain-Oriented Observability for the sales application layer."""

from sales.application.observability.sales_service_probe import (
    CouponServiceProbe,
    DefaultCouponServiceProbe,
    DefaultOrderServiceProbe,
    OrderServiceProbe,
)

__all__ = [
    "CouponServiceProbe",
    "DefaultCouponServiceProbe",
    "OrderServiceProbe",
    "DefaultOrderServiceProbe",
]
