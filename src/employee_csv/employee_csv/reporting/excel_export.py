from __future__ import annotations

from pathlib import Path
from typing import Union

import pandas as pd

from ..people.reader import ReadOutcome
from ..statistics.model import PeopleStatistics


def people_frame(outcome: ReadOutcome) -> pd.DataFrame:
    data = []
    for p in outcome.people:
        data.append(
            {
                "ID": p.person_id,
                "Name": p.full_name,
                "Gender": p.gender.label,
                "Birth date": p.birth_date.strftime("%d.%m.%Y"),
                "Department ID": p.department.dept_id,
                "Department": p.department.dept_name,
                "Salary": float(p.salary),
            }
        )
    return pd.DataFrame(data, columns=["ID", "Name", "Gender", "Birth date", "Department ID", "Department", "Salary"])


def summary_frame(outcome: ReadOutcome, stats: PeopleStatistics) -> pd.DataFrame:
    data = [
        ("Rows processed", outcome.processed),
        ("Rows imported", outcome.succeeded),
        ("Rows skipped", len(outcome.rejections)),
        ("Male", stats.male_count),
        ("Female", stats.female_count),
        ("Average salary", round(float(stats.average_salary), 2)),
        ("Max salary", float(stats.max_salary)),
        ("Min salary", float(stats.min_salary)),
        ("Departments", stats.department_count),
    ]
    return pd.DataFrame(data, columns=["Metric", "Value"])


def rejections_frame(outcome: ReadOutcome) -> pd.DataFrame:
    data = [
        {"Line": r.line_number, "Raw": ";".join(r.raw_fields), "Reason": r.reason}
        for r in outcome.rejections
    ]
    return pd.DataFrame(data, columns=["Line", "Raw", "Reason"])


def export_report(path: Union[str, Path], outcome: ReadOutcome, stats: PeopleStatistics) -> Path:
    """Write people, summary and skipped rows into one Excel workbook."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        people_frame(outcome).to_excel(writer, index=False, sheet_name="People")
        summary_frame(outcome, stats).to_excel(writer, index=False, sheet_name="Summary")
        rejections_frame(outcome).to_excel(writer, index=False, sheet_name="Rejected")
    return out
