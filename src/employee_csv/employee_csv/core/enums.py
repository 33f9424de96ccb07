from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    """Employee gender. `label` is the display form."""

    MALE = "MALE"
    FEMALE = "FEMALE"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def __str__(self) -> str:
        return self.label
