from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from ..core.exceptions import InvalidFormat, NullInput


def require_present(value: Any, field_name: str) -> Any:
    if value is None:
        raise NullInput(f"{field_name} cannot be None")
    return value


def require_non_empty(value: Optional[str], field_name: str) -> str:
    require_present(value, field_name)
    if not value.strip():
        raise InvalidFormat(f"{field_name} cannot be empty")
    return value.strip()


def require_non_negative(value: Decimal, field_name: str) -> Decimal:
    require_present(value, field_name)
    if value < 0:
        raise InvalidFormat(f"{field_name} cannot be negative: {value}")
    return value
