"""SQLAlchemy Core table definitions mirroring alembic revision 001.

The query builder composes statements against these tables; the schema itself
is owned by the alembic migrations (tests build it with metadata.create_all).
"""

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Index, Integer, MetaData, Numeric, Table, Text

metadata = MetaData()

# employees: one row per assignment (an employee may hold several).
employees = Table(
    "employees",
    metadata,
    Column("assignment_id", BigInteger, primary_key=True, autoincrement=False),
    Column("employee_id", BigInteger, nullable=False),
    Column("fio", Text, nullable=False),
    Column("job_name", Text, nullable=False),
    Index("ix_employees_employee_id", "employee_id"),
)

# salaries: salary history per assignment.
salaries = Table(
    "salaries",
    metadata,
    Column("id", BigInteger().with_variant(Integer, "sqlite"), primary_key=True),
    Column("assignment_id", BigInteger, ForeignKey("employees.assignment_id"), nullable=False),
    Column("salary", Numeric(14, 2)),
    Column("date_from", DateTime(timezone=True)),
    Index("ix_salaries_assignment_id_date_from", "assignment_id", "date_from"),
)
