"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

from __future__ import annotations

from types import MappingProxyType

CSV_SEPARATOR = ";"
CSV_ENCODING = "utf-8-sig"
EXPECTED_FIELDS = 6
# csv.field_size_limit while reading; the module default is 131072.
CSV_FIELD_SIZE_LIMIT = 2**31 - 1
DATE_FORMAT = "%d.%m.%Y"
DATE_PATTERN_HINT = "dd.MM.yyyy"

DEFAULT_CSV_FILE = "foreign_names.csv"
DEFAULT_SAMPLE_SIZE = 10

# Codes L-N are intentionally absent.
DEPARTMENT_NAMES = MappingProxyType(
    {
        "A": "Administration",
        "B": "Finance",
        "C": "IT",
        "D": "HR",
        "E": "Marketing",
        "F": "Sales",
        "G": "Operations",
        "H": "Research",
        "I": "Development",
        "J": "Support",
        "K": "Quality Assurance",
        "O": "Management",
    }
)
UNKNOWN_DEPARTMENT_TEMPLATE = "Department {code}"
