from __future__ import annotations

import itertools
import threading
from typing import Mapping, MutableMapping, Optional

from ..common.validators import require_present
from ..core.constants import DEPARTMENT_NAMES, UNKNOWN_DEPARTMENT_TEMPLATE
from .model import Department

DepartmentCache = MutableMapping[str, Department]


class DepartmentIdSequence:
    """Monotonically increasing department ids, safe to share between threads."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)


# Process-wide default, so registries built without an explicit sequence never
# hand out the same id twice.
shared_department_ids = DepartmentIdSequence()


class DepartmentRegistry:
    """Resolves department codes to shared Department objects.

    The code table lives for as long as the registry. Ids come from
    `shared_department_ids` unless a sequence is injected.
    The cache is owned by the caller (one per read operation), so repeated
    codes within a read share one Department instance while separate reads
    never share objects.
    """

    def __init__(
        self,
        names: Optional[Mapping[str, str]] = None,
        *,
        sequence: Optional[DepartmentIdSequence] = None,
    ):
        self._names = dict(DEPARTMENT_NAMES if names is None else names)
        self._sequence = sequence or shared_department_ids

    def display_name(self, code: str) -> str:
        code = require_present(code, "Department code").strip()
        return self._names.get(code) or UNKNOWN_DEPARTMENT_TEMPLATE.format(code=code)

    def resolve(self, code: str, cache: DepartmentCache) -> Department:
        name = self.display_name(code)
        department = cache.get(name)
        if department is None:
            department = Department(dept_id=self._sequence.next_id(), dept_name=name)
            cache[name] = department
        return department
