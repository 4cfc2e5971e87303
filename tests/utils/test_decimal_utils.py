"""Tests for Decimal helpers."""

from decimal import Decimal

from src.utils.decimal_utils import ZERO, coerce_decimal, to_money


def test_coerce_decimal_handles_common_inputs() -> None:
    assert coerce_decimal(None) == ZERO
    assert coerce_decimal(19.9) == Decimal("19.9")
    assert coerce_decimal(3) == Decimal("3")
    assert coerce_decimal("12.50") == Decimal("12.50")


def test_coerce_decimal_returns_decimal_unchanged() -> None:
    value = Decimal("7.125")

    assert coerce_decimal(value) is value


def test_to_money_rounds_half_up_to_cents() -> None:
    assert to_money(Decimal("2.345")) == Decimal("2.35")
    assert to_money(Decimal("-2.345")) == Decimal("-2.35")
    assert to_money(None) == Decimal("0.00")
