from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..common.diagnostics import ConsoleDiagnostics, Diagnostics
from ..core.constants import CSV_ENCODING, CSV_FIELD_SIZE_LIMIT, CSV_SEPARATOR, EXPECTED_FIELDS
from ..core.exceptions import IOFailure
from ..departments.registry import DepartmentCache
from ..resources.loader import ResourceLoader
from .assembler import Assembled, PersonAssembler
from .model import Person


@dataclass(frozen=True)
class RowRejection:
    line_number: int
    raw_fields: Tuple[str, ...]
    reason: str


@dataclass(frozen=True)
class ReadOutcome:
    people: Tuple[Person, ...]
    processed: int
    rejections: Tuple[RowRejection, ...]

    @property
    def succeeded(self) -> int:
        return len(self.people)


class PersonCsvReader:
    """Use case: read employees from a semicolon-separated file.

    The first row is a header and is always skipped. A bad data row is
    reported and dropped; it never aborts the run. Only problems with the
    source itself (missing, unreadable) are fatal.
    """

    def __init__(
        self,
        loader: ResourceLoader,
        assembler: PersonAssembler,
        *,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self._loader = loader
        self._assembler = assembler
        self._diagnostics = diagnostics or ConsoleDiagnostics()

    def read_people(self, source: str) -> Tuple[Person, ...]:
        return self.read(source).people

    def read(self, source: str) -> ReadOutcome:
        previous_limit = csv.field_size_limit(CSV_FIELD_SIZE_LIMIT)
        try:
            with self._loader.open(source) as raw, io.TextIOWrapper(
                raw, encoding=CSV_ENCODING, newline=""
            ) as text:
                return self.read_rows(csv.reader(text, delimiter=CSV_SEPARATOR))
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            raise IOFailure(f"Error reading CSV file {source}: {exc}") from exc
        finally:
            csv.field_size_limit(previous_limit)

    def read_rows(self, rows: Iterable[Sequence[str]]) -> ReadOutcome:
        """Same as `read`, for rows that are already split (header included)."""
        outcome = self._consume(rows)
        self._diagnostics.info(
            f"Successfully processed {outcome.succeeded} out of {outcome.processed} lines"
        )
        return outcome

    def _consume(self, rows: Iterable[Sequence[str]]) -> ReadOutcome:
        cache: DepartmentCache = {}
        people: List[Person] = []
        rejections: List[RowRejection] = []
        processed = 0

        for line_number, fields in self._data_rows(rows):
            processed += 1
            if len(fields) < EXPECTED_FIELDS:
                self._diagnostics.warning(
                    f"Skipping line {line_number}: insufficient fields. "
                    f"Expected {EXPECTED_FIELDS}, got {len(fields)}"
                )
                rejections.append(
                    RowRejection(line_number, tuple(fields), f"insufficient fields ({len(fields)})")
                )
                continue

            result = self._assembler.assemble(fields[:EXPECTED_FIELDS], cache)
            if isinstance(result, Assembled):
                people.append(result.person)
                continue

            cause = result.error.cause
            self._diagnostics.warning(
                f"Skipping line {line_number}: {list(fields)}. Error: {cause}"
            )
            rejections.append(RowRejection(line_number, tuple(fields), str(cause)))

        return ReadOutcome(people=tuple(people), processed=processed, rejections=tuple(rejections))

    @staticmethod
    def _data_rows(rows: Iterable[Sequence[str]]) -> Iterator[Tuple[int, Sequence[str]]]:
        for line_number, fields in enumerate(rows, start=1):
            if line_number == 1:
                continue
            yield line_number, list(fields)
