"""Pydantic schemas for the employees read API."""
from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    NonNegativeInt,
    SerializerFunctionWrapHandler,
    field_serializer,
    model_serializer,
)


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class EmployeeFilter(BaseModel):
    """Optional search, sort and pagination constraints.

    A field left as None places no constraint on its dimension.
    """

    model_config = ConfigDict(frozen=True)

    limit: NonNegativeInt | None = None
    offset: NonNegativeInt | None = None
    fio: str | None = None
    employee_id: int | None = None
    assignment_id: int | None = None
    job_name: str | None = None
    date_from_sort: SortOrder | None = None
    salary_sort: SortOrder | None = None


class Employee(BaseModel):
    model_config = ConfigDict(frozen=True)

    employee_id: int
    assignment_id: int
    fio: str
    job_name: str
    salary: Decimal | None = None
    date_from: datetime | None = None

    @field_serializer("salary", when_used="json")
    def _salary_as_number(self, salary: Decimal | None) -> float | None:
        return None if salary is None else float(salary)

    @model_serializer(mode="wrap")
    def _omit_empty_date_from(self, handler: SerializerFunctionWrapHandler) -> dict:
        data = handler(self)
        if self.date_from is None:
            data.pop("date_from", None)
        return data


class EmployeesPage(BaseModel):
    total: int
    employees: list[Employee]


class ErrorMessage(BaseModel):
    error: str
