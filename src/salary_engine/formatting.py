"""Display formatting for VND amounts."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CURRENCY_SYMBOL = "\u20ab"
NBSP = "\u00a0"


def round_to_dong(amount: Decimal) -> Decimal:
    """Round amount to whole dong (VND has no minor unit in display)."""
    return amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def format_vnd(amount: Decimal) -> str:
    """Format like vi-VN currency display, e.g. ``10.000.000 ₫``."""
    rounded = round_to_dong(Decimal(amount))
    sign = "-" if rounded < 0 else ""
    digits = f"{abs(rounded):,.0f}".replace(",", ".")
    return f"{sign}{digits}{NBSP}{CURRENCY_SYMBOL}"


def format_percent(rate: Decimal) -> str:
    """Format a decimal rate as a percentage label, e.g. ``1.5%``."""
    value = (Decimal(rate) * 100).normalize()
    if value == value.to_integral_value():
        value = value.quantize(Decimal("1"))
    return f"{value}%"
