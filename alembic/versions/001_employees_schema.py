"""Create the employees and salaries tables.

Creates:
  - employees: one row per assignment (employee_id repeats across assignments)
  - salaries:  salary history per assignment, keyed by date_from
  - 2 indexes backing the employee_id lookup and the assignment join/sort

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""

from alembic import op

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE IF NOT EXISTS employees (
            assignment_id   BIGINT PRIMARY KEY,
            employee_id     BIGINT NOT NULL,
            fio             TEXT NOT NULL,
            job_name        TEXT NOT NULL
        )
    """)

    op.execute("""
        CREATE TABLE IF NOT EXISTS salaries (
            id              BIGSERIAL PRIMARY KEY,
            assignment_id   BIGINT NOT NULL REFERENCES employees (assignment_id),
            salary          NUMERIC(14,2),
            date_from       TIMESTAMPTZ
        )
    """)

    op.execute("CREATE INDEX IF NOT EXISTS ix_employees_employee_id ON employees (employee_id)")
    op.execute(
        "CREATE INDEX IF NOT EXISTS ix_salaries_assignment_id_date_from ON salaries (assignment_id, date_from)"
    )


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS salaries")
    op.execute("DROP TABLE IF EXISTS employees")
