from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from ..common.parsers import parse_date, parse_decimal, parse_identifier
from ..core.constants import EXPECTED_FIELDS
from ..core.exceptions import InvalidRecord, RowStructureError, ValidationError
from ..departments.registry import DepartmentCache, DepartmentRegistry
from .gender import resolve_gender
from .model import Person


@dataclass(frozen=True)
class Assembled:
    person: Person


@dataclass(frozen=True)
class Rejected:
    error: InvalidRecord


RowResult = Union[Assembled, Rejected]


class PersonAssembler:
    """Builds one Person per row, or rejects the row as a unit.

    Field order: id, name, gender, birth date, department code, salary.
    No partial Person is ever produced.
    """

    def __init__(self, departments: DepartmentRegistry):
        self._departments = departments

    def assemble(self, fields: Sequence[str], cache: DepartmentCache) -> RowResult:
        raw = tuple(fields)
        try:
            return Assembled(self._build(raw, cache))
        except ValidationError as exc:
            return Rejected(InvalidRecord(raw, cause=exc))

    def _build(self, raw: tuple, cache: DepartmentCache) -> Person:
        if len(raw) != EXPECTED_FIELDS:
            raise RowStructureError(field_count=len(raw), expected=EXPECTED_FIELDS)

        id_text, name, gender_text, birth_text, dept_code, salary_text = raw
        person_id = parse_identifier(id_text)
        gender = resolve_gender(gender_text)
        birth_date = parse_date(birth_text)
        salary = parse_decimal(salary_text)
        department = self._departments.resolve(dept_code, cache)

        return Person(
            person_id=person_id,
            full_name=name.strip() if name is not None else None,
            gender=gender,
            birth_date=birth_date,
            department=department,
            salary=salary,
        )
