"""Display formatting helpers (pt-BR conventions)."""

from datetime import datetime
from decimal import Decimal

from src.domain.constants import MONTH_ABBREVIATIONS
from src.utils.decimal_utils import to_money


def format_day_month(instant: datetime) -> str:
    """Return ``D/M`` without zero padding, e.g. ``"3/6"``."""
    return f"{instant.day}/{instant.month}"


def format_date(instant: datetime) -> str:
    """Return ``dd/mm/yyyy``."""
    return instant.strftime("%d/%m/%Y")


def format_month_abbreviation(instant: datetime) -> str:
    return MONTH_ABBREVIATIONS[instant.month - 1]


def format_brl(amount: Decimal) -> str:
    """Format an amount as Brazilian reais, e.g. ``"R$ 1.234,56"``."""
    value = to_money(amount)
    sign = "-" if value < 0 else ""
    grouped = f"{abs(value):,.2f}"
    swapped = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {swapped}"


__all__ = [
    "format_day_month",
    "format_date",
    "format_month_abbreviation",
    "format_brl",
]
