from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from .common.diagnostics import ConsoleDiagnostics, Diagnostics
from .core.constants import DEPARTMENT_NAMES
from .departments.registry import DepartmentIdSequence, DepartmentRegistry, shared_department_ids
from .people.assembler import PersonAssembler
from .people.reader import PersonCsvReader
from .resources.loader import DirectoryResourceLoader, bundled_loader
from .statistics.service import StatisticsService


@dataclass(frozen=True)
class Container:
    loader: DirectoryResourceLoader
    department_ids: DepartmentIdSequence
    department_registry: DepartmentRegistry
    assembler: PersonAssembler
    reader: PersonCsvReader
    statistics_service: StatisticsService


def build_container(
    *,
    data_dir: Optional[Union[str, Path]] = None,
    department_names: Mapping[str, str] = DEPARTMENT_NAMES,
    diagnostics: Optional[Diagnostics] = None,
) -> Container:
    loader = DirectoryResourceLoader(data_dir) if data_dir else bundled_loader()
    department_ids = shared_department_ids
    department_registry = DepartmentRegistry(department_names, sequence=department_ids)
    assembler = PersonAssembler(department_registry)
    reader = PersonCsvReader(loader, assembler, diagnostics=diagnostics or ConsoleDiagnostics())

    return Container(
        loader=loader,
        department_ids=department_ids,
        department_registry=department_registry,
        assembler=assembler,
        reader=reader,
        statistics_service=StatisticsService(),
    )
