"""
reporting/formatting.py - Display formatting for currency, numbers and units.

Number grouping follows the en-AU convention (comma thousands separator,
point decimal), which is also what Python's "," format option produces.
"""

from __future__ import annotations
from typing import Optional, Union

from ..bootstrap.config import CurrencyConfig

Number = Union[int, float]

_DEFAULT_CURRENCY = CurrencyConfig()


def format_number(value: Number, decimals: int = 0) -> str:
    """Format a number with thousands separators."""
    return f"{value:,.{decimals}f}"


def format_currency(
    value: Number,
    currency: Optional[CurrencyConfig] = None,
    compact: bool = False,
    decimals: int = 0,
) -> str:
    """
    Format a currency value.

    Compact mode abbreviates to millions ("$2.5M") or thousands ("$750K");
    smaller values and non-compact mode print the full grouped amount.
    """
    currency = currency or _DEFAULT_CURRENCY

    if compact and abs(value) >= 1_000_000:
        return f"{currency.symbol}{value / 1_000_000:.1f}M"
    if compact and abs(value) >= 1_000:
        return f"{currency.symbol}{value / 1_000:.0f}K"

    sign = "-" if value < 0 else ""
    return f"{sign}{currency.symbol}{format_number(abs(value), decimals)}"


def format_percent(value: Number, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"


def format_area(ha: Number) -> str:
    return f"{format_number(ha, 1)} ha"


def format_volume(m3: Number) -> str:
    """Cubic metres, switching to Mm³ at one million."""
    if m3 >= 1_000_000:
        return f"{format_number(m3 / 1_000_000, 2)} Mm³"
    return f"{format_number(m3, 0)} m³"


def format_distance(km: Number) -> str:
    return f"{format_number(km, 1)} km"


def format_duration(years: Number) -> str:
    if years == 1:
        return "1 year"
    if isinstance(years, float) and years.is_integer():
        years = int(years)
    return f"{years} years"


def format_rate(value: Number, unit: str, currency: Optional[CurrencyConfig] = None) -> str:
    """Unit rate such as "$8/m³"."""
    currency = currency or _DEFAULT_CURRENCY
    return f"{currency.symbol}{format_number(value)}/{unit}"
