from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..common.validators import require_non_empty, require_non_negative, require_present
from ..core.enums import Gender
from ..departments.model import Department


@dataclass(frozen=True)
class Person:
    """Domain entity: one employee row.

    Note: plain immutable data. Construction fails when any attribute is
    missing, the name is blank or the salary is negative.
    """

    person_id: int
    full_name: str
    gender: Gender
    birth_date: date
    department: Department
    salary: Decimal

    def __post_init__(self) -> None:
        require_present(self.person_id, "ID")
        require_non_empty(self.full_name, "Name")
        require_present(self.gender, "Gender")
        require_present(self.birth_date, "Birth date")
        require_present(self.department, "Department")
        require_non_negative(self.salary, "Salary")

    def __str__(self) -> str:
        return (
            f"Person{{id={self.person_id}, name='{self.full_name}', gender={self.gender}, "
            f"birthDate={self.birth_date.isoformat()}, department={self.department}, "
            f"salary={self.salary:.2f}}}"
        )
