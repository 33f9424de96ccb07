from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from ..core.enums import Gender
from ..people.model import Person
from .model import PeopleStatistics


class StatisticsService:
    """Use case: summarize a collection of people in a single pass."""

    def summarize(self, people: Iterable[Person]) -> PeopleStatistics:
        by_gender = {gender: 0 for gender in Gender}
        departments: set[str] = set()
        total = 0
        salary_sum = Decimal(0)
        max_salary: Optional[Decimal] = None
        min_salary: Optional[Decimal] = None

        for p in people:
            total += 1
            by_gender[p.gender] += 1
            departments.add(p.department.dept_name)
            salary_sum += p.salary
            if max_salary is None or p.salary > max_salary:
                max_salary = p.salary
            if min_salary is None or p.salary < min_salary:
                min_salary = p.salary

        if not total:
            return PeopleStatistics(total=0, by_gender=by_gender)

        return PeopleStatistics(
            total=total,
            by_gender=by_gender,
            average_salary=salary_sum / total,
            max_salary=max_salary,
            min_salary=min_salary,
            department_count=len(departments),
        )
