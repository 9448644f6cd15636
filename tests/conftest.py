"""Shared fixtures for the employees API test suite."""

import os
import sys
from datetime import datetime
from decimal import Decimal
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

# Must be set before config.py is imported anywhere.
os.environ.setdefault("EMPLOYEES_RUN_MIGRATIONS", "0")
os.environ.setdefault("EMPLOYEES_LOG_OUTPUT", "vacuum")

from sqlalchemy import create_engine, insert  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from db.schema import employees, metadata, salaries  # noqa: E402


# ── Sample rows ──────────────────────────────────────────────────────

EMPLOYEE_ROWS = [
    {"assignment_id": 10, "employee_id": 1, "fio": "Smith John", "job_name": "Developer"},
    {"assignment_id": 11, "employee_id": 1, "fio": "Smith John", "job_name": "Team Lead"},
    {"assignment_id": 20, "employee_id": 2, "fio": "Jane Doe", "job_name": "Senior Developer"},
    {"assignment_id": 30, "employee_id": 3, "fio": "Ivan Petrov", "job_name": "Accountant"},
]

SALARY_ROWS = [
    {"id": 1, "assignment_id": 10, "salary": Decimal("1000.00"), "date_from": datetime(2020, 1, 1)},
    {"id": 2, "assignment_id": 11, "salary": Decimal("2500.50"), "date_from": datetime(2021, 6, 1)},
    {"id": 3, "assignment_id": 20, "salary": Decimal("3000.00"), "date_from": datetime(2019, 3, 15)},
    {"id": 4, "assignment_id": 30, "salary": None, "date_from": None},
]


# ── In-memory SQLite built from db.schema ────────────────────────────

@pytest.fixture
def sqlite_engine():
    """In-memory SQLite with the employees/salaries tables and sample rows."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(insert(employees), EMPLOYEE_ROWS)
        conn.execute(insert(salaries), SALARY_ROWS)
    yield engine
    engine.dispose()
