"""Human-readable listings for the CLI."""

from __future__ import annotations

from typing import List, Sequence

from ..people.model import Person
from ..statistics.model import PeopleStatistics

RULE_WIDTH = 80


def render_sample(people: Sequence[Person], limit: int) -> List[str]:
    shown = max(0, min(limit, len(people)))
    lines = [f"Sample data (first {shown} employees):", "-" * RULE_WIDTH]
    lines.extend(str(p) for p in people[:shown])
    if len(people) > shown:
        lines.append(f"... and {len(people) - shown} more employees")
    lines.append("")
    return lines


def render_statistics(stats: PeopleStatistics) -> List[str]:
    if not stats.total:
        return ["No data to display statistics."]

    return [
        "Statistics:",
        "-" * 30,
        f"Gender distribution: Male={stats.male_count}, Female={stats.female_count}",
        (
            f"Salary: Average={stats.average_salary:.2f}, "
            f"Max={stats.max_salary:.2f}, Min={stats.min_salary:.2f}"
        ),
        f"Total departments: {stats.department_count}",
    ]
