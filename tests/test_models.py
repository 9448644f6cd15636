"""Wire-format tests for api/models.py."""

import json
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from api.models import Employee, EmployeeFilter, EmployeesPage, SortOrder

EMPLOYEE = Employee(
    employee_id=775900,
    assignment_id=648078,
    fio="Могучев Леонид Алексеевич",
    job_name="старший разработчик",
    salary=Decimal("400000"),
    date_from=datetime(2020, 7, 23, tzinfo=timezone.utc),
)


class TestEmployeeJSON:
    def test_wire_shape(self):
        assert json.loads(EMPLOYEE.model_dump_json()) == {
            "employee_id": 775900,
            "assignment_id": 648078,
            "fio": "Могучев Леонид Алексеевич",
            "job_name": "старший разработчик",
            "salary": 400000,
            "date_from": "2020-07-23T00:00:00Z",
        }

    def test_salary_is_a_number(self):
        body = json.loads(EMPLOYEE.model_copy(update={"salary": Decimal("1500.5")}).model_dump_json())
        assert body["salary"] == 1500.5

    def test_null_salary_kept(self):
        body = json.loads(EMPLOYEE.model_copy(update={"salary": None}).model_dump_json())
        assert "salary" in body
        assert body["salary"] is None

    def test_null_date_from_omitted(self):
        body = json.loads(EMPLOYEE.model_copy(update={"date_from": None}).model_dump_json())
        assert "date_from" not in body

    @pytest.mark.parametrize(
        "employee",
        [
            EMPLOYEE,
            EMPLOYEE.model_copy(update={"salary": Decimal("1500.5"), "date_from": None}),
            EMPLOYEE.model_copy(update={"salary": None}),
        ],
    )
    def test_round_trip(self, employee):
        assert Employee.model_validate_json(employee.model_dump_json()) == employee

    def test_immutable(self):
        with pytest.raises(ValidationError):
            EMPLOYEE.fio = "changed"


class TestEmployeesPage:
    def test_wire_shape(self):
        body = json.loads(EmployeesPage(total=1, employees=[EMPLOYEE]).model_dump_json())
        assert body["total"] == 1
        assert body["employees"][0]["employee_id"] == 775900

    def test_empty(self):
        assert json.loads(EmployeesPage(total=0, employees=[]).model_dump_json()) == {
            "total": 0,
            "employees": [],
        }


class TestEmployeeFilter:
    def test_defaults_are_absent(self):
        assert EmployeeFilter().model_dump() == {
            "limit": None,
            "offset": None,
            "fio": None,
            "employee_id": None,
            "assignment_id": None,
            "job_name": None,
            "date_from_sort": None,
            "salary_sort": None,
        }

    def test_sort_order_values(self):
        assert [o.value for o in SortOrder] == ["ASC", "DESC"]

    def test_immutable(self):
        with pytest.raises(ValidationError):
            EmployeeFilter().limit = 5

    @pytest.mark.parametrize("field", ["limit", "offset"])
    def test_pagination_bounds_reject_negative(self, field):
        with pytest.raises(ValidationError):
            EmployeeFilter(**{field: -1})

    def test_pagination_bounds_accept_zero(self):
        f = EmployeeFilter(limit=0, offset=0)
        assert (f.limit, f.offset) == (0, 0)
