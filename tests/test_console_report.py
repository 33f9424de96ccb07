from datetime import date
from decimal import Decimal

from src.employee_csv.employee_csv.core.enums import Gender
from src.employee_csv.employee_csv.departments.model import Department
from src.employee_csv.employee_csv.people.model import Person
from src.employee_csv.employee_csv.reporting.console import render_sample, render_statistics
from src.employee_csv.employee_csv.statistics.service import StatisticsService


def make_people(n):
    it = Department(1, "IT")
    return [Person(i, f"P{i}", Gender.MALE, date(1990, 1, 1), it, Decimal(1000 + i)) for i in range(n)]


def test_sample_truncates_with_trailer():
    lines = render_sample(make_people(12), 10)

    assert lines[0] == "Sample data (first 10 employees):"
    assert lines[-2] == "... and 2 more employees"
    assert sum(1 for line in lines if line.startswith("Person{")) == 10


def test_sample_smaller_than_limit():
    lines = render_sample(make_people(2), 10)

    assert lines[0] == "Sample data (first 2 employees):"
    assert not any(line.startswith("...") for line in lines)


def test_statistics_lines():
    stats = StatisticsService().summarize(make_people(2))

    assert render_statistics(stats)[2:] == [
        "Gender distribution: Male=2, Female=0",
        "Salary: Average=1000.50, Max=1001.00, Min=1000.00",
        "Total departments: 1",
    ]


def test_statistics_empty():
    assert render_statistics(StatisticsService().summarize([])) == ["No data to display statistics."]
