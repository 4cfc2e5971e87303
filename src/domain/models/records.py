"""Domain models for sale and expense records."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from src.domain.constants import (
    DELIVERY_PARTNER_SALE_LABEL,
    DIRECT_SALE_LABEL,
)


class SaleChannel(str, Enum):
    """Where a sale came from. Values match the stored tags."""

    DIRECT = "normal"
    DELIVERY_PARTNER = "ifood"


class ExpenseCategory(str, Enum):
    """Closed set of expense categories. Values match the stored tags."""

    FIXED = "fixo"
    EMERGENCY = "emergencial"


def _check_amount(amount: Decimal) -> None:
    if not isinstance(amount, Decimal):
        raise TypeError(f"amount must be a Decimal, got {type(amount).__name__}")
    if amount < 0:
        raise ValueError(f"amount must not be negative: {amount}")


@dataclass(frozen=True)
class Sale:
    """A dated sale.

    Attributes:
        id: Opaque identifier supplied by the record store.
        amount: Non-negative sale value.
        occurred_at: When the sale happened.
        product: Optional product label typed by the user.
        channel: Sales channel.
    """

    id: str
    amount: Decimal
    occurred_at: datetime
    product: str | None = None
    channel: SaleChannel = SaleChannel.DIRECT

    def __post_init__(self) -> None:
        _check_amount(self.amount)

    @property
    def display_product(self) -> str:
        """Return the product label, or the channel default when blank."""
        if self.product and self.product.strip():
            return self.product.strip()
        if self.channel is SaleChannel.DELIVERY_PARTNER:
            return DELIVERY_PARTNER_SALE_LABEL
        return DIRECT_SALE_LABEL


@dataclass(frozen=True)
class Expense:
    """A dated expense.

    Attributes:
        id: Opaque identifier supplied by the record store.
        amount: Non-negative expense value.
        occurred_at: When the expense happened.
        description: Free-text description.
        category: Fixed or emergency.
    """

    id: str
    amount: Decimal
    occurred_at: datetime
    description: str = ""
    category: ExpenseCategory = ExpenseCategory.FIXED

    def __post_init__(self) -> None:
        _check_amount(self.amount)


FinancialRecord = Sale | Expense


__all__ = [
    "SaleChannel",
    "ExpenseCategory",
    "Sale",
    "Expense",
    "FinancialRecord",
]
