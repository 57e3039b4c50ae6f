"""Observability for shared middleware operations."""

from shared_kernel.middleware.observability.perimeter_probe import (
    DefaultPerimeterProbe,
    PerimeterProbe,
)

__all__ = [
    "DefaultPerimeterProbe",
    "PerimeterProbe",
]
