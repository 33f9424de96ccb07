from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import require_non_empty, require_present


@dataclass(frozen=True)
class Department:
    """Equal only when both id and name match."""

    dept_id: int
    dept_name: str

    def __post_init__(self) -> None:
        require_present(self.dept_id, "Department id")
        require_non_empty(self.dept_name, "Department name")

    def __str__(self) -> str:
        return f"Department{{id={self.dept_id}, name='{self.dept_name}'}}"
