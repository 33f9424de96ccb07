from datetime import date
from decimal import Decimal

import pytest

from src.employee_csv.employee_csv.common.parsers import parse_date, parse_decimal, parse_identifier
from src.employee_csv.employee_csv.core.exceptions import InvalidFormat, NullInput


def test_identifier_is_trimmed():
    assert parse_identifier("  28281 ") == 28281
    assert parse_identifier("-7") == -7


@pytest.mark.parametrize("value", ["", "abc", "12.5", "1_000", "9223372036854775808"])
def test_identifier_rejects_bad_input(value):
    with pytest.raises(InvalidFormat):
        parse_identifier(value)


def test_identifier_accepts_int64_bounds():
    assert parse_identifier("9223372036854775807") == 2**63 - 1
    assert parse_identifier("-9223372036854775808") == -(2**63)


def test_decimal_accepts_comma_and_dot():
    assert parse_decimal("1234,56") == Decimal("1234.56")
    assert parse_decimal("1234.56") == Decimal("1234.56")
    assert parse_decimal(" 4800 ") == Decimal("4800")


def test_decimal_keeps_sign():
    assert parse_decimal("-10") == Decimal("-10")


@pytest.mark.parametrize("value", ["", "twelve", "1,2,3", "NaN", "Infinity", "1e1000000", "9e999999", "1e-1000000"])
def test_decimal_rejects_bad_input(value):
    with pytest.raises(InvalidFormat):
        parse_decimal(value)


def test_date_accepts_leap_day():
    assert parse_date("29.02.2000") == date(2000, 2, 29)
    assert parse_date(" 15.03.1985 ") == date(1985, 3, 15)


@pytest.mark.parametrize("value", ["31.02.2000", "29.02.2001", "1985-03-15", "5.3.1985", "15.13.1985"])
def test_date_rejects_bad_input(value):
    with pytest.raises(InvalidFormat):
        parse_date(value)


def test_none_is_null_input():
    with pytest.raises(NullInput):
        parse_decimal(None)


def test_decimal_accepts_large_but_summable_exponent():
    assert parse_decimal("1e300") == Decimal("1e300")
