from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping

from ..core.enums import Gender


@dataclass(frozen=True)
class PeopleStatistics:
    total: int
    by_gender: Mapping[Gender, int] = field(default_factory=dict)
    average_salary: Decimal = Decimal(0)
    max_salary: Decimal = Decimal(0)
    min_salary: Decimal = Decimal(0)
    department_count: int = 0

    @property
    def male_count(self) -> int:
        return self.by_gender.get(Gender.MALE, 0)

    @property
    def female_count(self) -> int:
        return self.by_gender.get(Gender.FEMALE, 0)
