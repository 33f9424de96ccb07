"""Field converters for raw CSV cells.

Every parser trims its input and raises InvalidFormat on bad data.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, getcontext
from typing import Optional

from ..core.constants import DATE_FORMAT, DATE_PATTERN_HINT
from ..core.exceptions import InvalidFormat, NullInput

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")
_DATE_RE = re.compile(r"^[0-9]{2}\.[0-9]{2}\.[0-9]{4}$")


def _require_text(value: Optional[str], field_name: str) -> str:
    if value is None:
        raise NullInput(f"{field_name} cannot be None")
    return value.strip()


def parse_identifier(value: Optional[str]) -> int:
    """Parse a signed 64-bit integer."""
    text = _require_text(value, "Identifier")
    if not _INTEGER_RE.match(text):
        raise InvalidFormat(f"Invalid ID format: {value}")
    number = int(text)
    if number < INT64_MIN or number > INT64_MAX:
        raise InvalidFormat(f"Invalid ID format: {value} (out of 64-bit range)")
    return number


def parse_decimal(value: Optional[str]) -> Decimal:
    """Parse a decimal number; both '.' and ',' are accepted as fraction separator."""
    text = _require_text(value, "Decimal").replace(",", ".")
    if not text or "_" in text:
        raise InvalidFormat(f"Invalid salary format: {value}")
    try:
        number = Decimal(text)
    except InvalidOperation:
        raise InvalidFormat(f"Invalid salary format: {value}") from None
    if not number.is_finite():
        raise InvalidFormat(f"Invalid salary format: {value}")
    # Keeps sums and averages well inside the decimal context range.
    limits = getcontext()
    if not (limits.Emin // 2 <= number.adjusted() <= limits.Emax // 2):
        raise InvalidFormat(f"Invalid salary format: {value} (magnitude out of range)")
    return number


def parse_date(value: Optional[str]) -> date:
    """Parse dd.MM.yyyy into date. Impossible calendar dates are rejected."""
    text = _require_text(value, "Date")
    if not _DATE_RE.match(text):
        raise InvalidFormat(f"Invalid date format: {value}. Expected format: {DATE_PATTERN_HINT}")
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        raise InvalidFormat(f"Invalid date format: {value}. Expected format: {DATE_PATTERN_HINT}") from None
