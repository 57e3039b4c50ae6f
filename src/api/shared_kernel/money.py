"""Display formatting for monetary amounts."""

from __future__ import annotations


def format_amount(amount: float, currency: str) -> str:
    """Format ``amount`` with thousands separators behind the currency code.

    Up to three fraction digits are kept and trailing zeros dropped, as
    browsers render ``Number.toLocaleString()`` for en-US.

    Example:
        >>> format_amount(12345, "LKR")
        'LKR 12,345'
        >>> format_amount(1500.5, "LKR")
        'LKR 1,500.5'
    """
    digits = f"{amount:,.3f}".rstrip("0").rstrip(".")
    return f"{currency} {digits}"


def round_money(amount: float) -> float:
    """Round to cents."""
    return round(amount, 2)
