from datetime import date
from decimal import Decimal

from src.employee_csv.employee_csv.core.enums import Gender
from src.employee_csv.employee_csv.departments.model import Department
from src.employee_csv.employee_csv.departments.registry import DepartmentRegistry
from src.employee_csv.employee_csv.people.assembler import Assembled, PersonAssembler
from src.employee_csv.employee_csv.people.model import Person
from src.employee_csv.employee_csv.statistics.service import StatisticsService


def person(pid, gender, dept, salary):
    return Person(pid, f"P{pid}", gender, date(1990, 1, 1), dept, Decimal(salary))


def test_empty_collection():
    stats = StatisticsService().summarize([])

    assert stats.total == 0
    assert stats.average_salary == 0
    assert stats.max_salary == 0
    assert stats.min_salary == 0
    assert stats.department_count == 0
    assert stats.male_count == 0 and stats.female_count == 0


def test_known_fixture():
    it, hr, ops = Department(1, "IT"), Department(2, "HR"), Department(3, "Operations")
    people = [
        person(1, Gender.MALE, it, "100"),
        person(2, Gender.FEMALE, hr, "300"),
        person(3, Gender.FEMALE, it, "200.50"),
        person(4, Gender.MALE, ops, "0"),
    ]

    stats = StatisticsService().summarize(people)

    assert stats.total == 4
    assert stats.by_gender == {Gender.MALE: 2, Gender.FEMALE: 2}
    assert stats.max_salary == Decimal("300")
    assert stats.min_salary == Decimal("0")
    assert stats.average_salary == Decimal("150.125")
    assert stats.department_count == 3


def test_departments_counted_by_name():
    # Two reads can produce different objects for the same name.
    people = [
        person(1, Gender.MALE, Department(1, "IT"), "1"),
        person(2, Gender.MALE, Department(9, "IT"), "1"),
    ]

    assert StatisticsService().summarize(people).department_count == 1


def test_accepts_a_generator():
    it = Department(1, "IT")
    stats = StatisticsService().summarize(person(i, Gender.FEMALE, it, "10") for i in range(3))

    assert stats.total == 3
    assert stats.female_count == 3


def test_huge_salary_rows_are_skipped_before_aggregation():
    assembler = PersonAssembler(DepartmentRegistry())
    cache = {}
    rows = [
        ["1", "A", "Male", "01.01.1990", "A", "1e1000000"],
        ["2", "B", "Male", "01.01.1990", "A", "9e999999"],
        ["3", "C", "Female", "01.01.1990", "A", "100"],
    ]
    people = [r.person for r in (assembler.assemble(row, cache) for row in rows) if isinstance(r, Assembled)]

    stats = StatisticsService().summarize(people)

    assert [p.person_id for p in people] == [3]
    assert stats.max_salary == Decimal("100")
