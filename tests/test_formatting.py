"""Tests for VND display formatting."""

from decimal import Decimal

import pytest

from salary_engine.formatting import (
    CURRENCY_SYMBOL,
    NBSP,
    format_percent,
    format_vnd,
    round_to_dong,
)


@pytest.mark.parametrize(
    "amount,expected",
    [
        (Decimal("0"), "0"),
        (Decimal("950"), "950"),
        (Decimal("10000000"), "10.000.000"),
        (Decimal("25882500"), "25.882.500"),
        (Decimal("1234.5"), "1.235"),
        (Decimal("1234.49"), "1.234"),
        (Decimal("-1500000"), "-1.500.000"),
    ],
)
def test_format_vnd(amount, expected):
    assert format_vnd(amount) == f"{expected}{NBSP}{CURRENCY_SYMBOL}"


def test_round_to_dong_half_up():
    assert round_to_dong(Decimal("0.5")) == Decimal("1")
    assert round_to_dong(Decimal("2.5")) == Decimal("3")
    assert round_to_dong(Decimal("-2.5")) == Decimal("-3")


@pytest.mark.parametrize(
    "rate,expected",
    [
        (Decimal("0.08"), "8%"),
        (Decimal("0.015"), "1.5%"),
        (Decimal("0.10"), "10%"),
        (Decimal("0.175"), "17.5%"),
    ],
)
def test_format_percent(rate, expected):
    assert format_percent(rate) == expected
