from __future__ import annotations

from typing import Optional

from ..core.enums import Gender
from ..core.exceptions import EmptyInput, NullInput, UnknownValue

# Lower-cased tokens; the Cyrillic letters are the Russian abbreviations.
GENDER_ALIASES = {
    "male": Gender.MALE,
    "м": Gender.MALE,
    "female": Gender.FEMALE,
    "ж": Gender.FEMALE,
}


def resolve_gender(value: Optional[str]) -> Gender:
    """Map a free-text token (case-insensitive, trimmed) to a Gender."""
    if value is None:
        raise NullInput("Gender string cannot be None")

    normalized = value.strip().lower()
    if not normalized:
        raise EmptyInput("Gender string cannot be empty")

    gender = GENDER_ALIASES.get(normalized)
    if gender is None:
        raise UnknownValue(f"Unknown gender: {value}")
    return gender
