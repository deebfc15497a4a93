"""Formatter collaborator: format_usd / parse_usd / direction helpers."""

from __future__ import annotations

from decimal import Decimal

import pytest

from pricetick.core.errors import FormatError, ParseError
from pricetick.core.tokens import Direction
from pricetick.utils.price import (
    compute_delta_amount,
    compute_direction,
    format_usd,
    parse_usd,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (159.95, "$159.95"),
        (0, "$0.00"),
        (5, "$5.00"),
        (1000, "$1,000.00"),
        (999.99, "$999.99"),
        (Decimal("1234567.891"), "$1,234,567.89"),
        ("42.1", "$42.10"),
    ],
)
def test_format_usd(value, expected) -> None:
    assert format_usd(value) == expected


def test_format_rounds_half_up() -> None:
    assert format_usd("0.005") == "$0.01"
    assert format_usd("2.675") == "$2.68"
    assert format_usd(2.675) == "$2.68"  # float goes through repr, not its binary value
    assert format_usd("999.995") == "$1,000.00"


def test_negative_zero_has_no_sign() -> None:
    assert format_usd(-0.0) == "$0.00"


@pytest.mark.parametrize("bad", [-0.01, -5, "abc", float("nan"), float("inf"), True, None, [1]])
def test_format_rejects_bad_values(bad) -> None:
    with pytest.raises(FormatError):
        format_usd(bad)


def test_format_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        format_usd(-1)


def test_parse_usd() -> None:
    assert parse_usd("$159.95") == Decimal("159.95")
    assert parse_usd("$1,234,567.89") == Decimal("1234567.89")
    assert parse_usd("$0.00") == Decimal("0")


@pytest.mark.parametrize(
    "bad",
    ["159.95", "$159.9", "$1000.00", "$01.00", " $1.00", "$1,00.00", "$1.00 ", "$", "", "$-1.00"],
)
def test_parse_rejects_malformed(bad) -> None:
    with pytest.raises(ParseError):
        parse_usd(bad)


def test_parse_rejects_non_string() -> None:
    with pytest.raises(ParseError):
        parse_usd(159.95)


@pytest.mark.parametrize("v", ["0", "0.01", "9.99", "159.95", "999.99", "1000", "1234567.89"])
def test_parse_inverts_format(v) -> None:
    assert parse_usd(format_usd(Decimal(v))) == Decimal(v)


def test_compute_direction() -> None:
    assert compute_direction("159.95", "160.00") is Direction.INCREASED
    assert compute_direction("159.95", "159.00") is Direction.DECREASED
    assert compute_direction("159.95", Decimal("159.950")) is Direction.UNCHANGED


def test_compute_delta_amount() -> None:
    assert compute_delta_amount("160.00", "159.95") == Decimal("0.05")
    assert compute_delta_amount(1, 3) == Decimal(-2)


@pytest.mark.parametrize(
    "value, expected",
    [
        (10**30, "$1," + ",".join(["000"] * 10) + ".00"),
        (1e30, "$1," + ",".join(["000"] * 10) + ".00"),
        ("1e30", "$1," + ",".join(["000"] * 10) + ".00"),
        (Decimal("1E+40"), "$10," + ",".join(["000"] * 13) + ".00"),
        (Decimal("123456789012345678901234567890.125"), "$123,456,789,012,345,678,901,234,567,890.13"),
    ],
)
def test_format_huge_values(value, expected) -> None:
    assert format_usd(value) == expected
    assert parse_usd(expected) == Decimal(expected[1:].replace(",", ""))
