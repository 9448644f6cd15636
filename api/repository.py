"""Employee queries: filter-to-SQL composition and the repository that runs them.

The builder functions are pure and never touch the database; the repository
issues exactly one round trip per operation.
"""

import logging
from abc import ABC, abstractmethod
from types import MappingProxyType

from pydantic import ValidationError
from sqlalchemy import Select, and_, asc, desc, func, select
from sqlalchemy.dialects import postgresql
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from api.errors import RepositoryError
from api.models import Employee, EmployeeFilter, SortOrder
from db.schema import employees, salaries
from logger_config import setup_logger

_FROM = employees.join(salaries, employees.c.assignment_id == salaries.c.assignment_id)

PROJECTION = (
    employees.c.employee_id,
    employees.c.assignment_id,
    employees.c.fio,
    employees.c.job_name,
    salaries.c.salary,
    salaries.c.date_from,
)

_DIRECTIONS = MappingProxyType({SortOrder.ASC: asc, SortOrder.DESC: desc})

# Named paramstyle keeps '%' wildcards undoubled in rendered SQL.
_LOG_DIALECT = postgresql.dialect(paramstyle="named")


def apply_employee_filter(query: Select, f: EmployeeFilter) -> Select:
    """Add the WHERE, ORDER BY, LIMIT and OFFSET clauses `f` asks for."""
    conditions = []
    if f.assignment_id is not None:
        conditions.append(employees.c.assignment_id == f.assignment_id)
    if f.employee_id is not None:
        conditions.append(employees.c.employee_id == f.employee_id)
    if f.fio is not None:
        conditions.append(employees.c.fio.ilike(f"%{f.fio}%"))
    if f.job_name is not None:
        conditions.append(employees.c.job_name.ilike(f"%{f.job_name}%"))
    if conditions:
        query = query.where(and_(*conditions))

    orders = []
    if f.date_from_sort is not None:
        orders.append(_DIRECTIONS[f.date_from_sort](salaries.c.date_from))
    if f.salary_sort is not None:
        orders.append(_DIRECTIONS[f.salary_sort](salaries.c.salary))
    if orders:
        query = query.order_by(*orders)

    if f.limit is not None:
        query = query.limit(f.limit)
    if f.offset is not None:
        query = query.offset(f.offset)
    return query


def count_employees_query(f: EmployeeFilter) -> Select:
    """COUNT over the filter's predicates only; pagination and ordering are dropped."""
    predicates_only = f.model_copy(
        update={"limit": None, "offset": None, "date_from_sort": None, "salary_sort": None}
    )
    query = select(func.count(employees.c.employee_id)).select_from(_FROM)
    return apply_employee_filter(query, predicates_only)


def select_employees_query(f: EmployeeFilter) -> Select:
    return apply_employee_filter(select(*PROJECTION).select_from(_FROM), f)


def compile_query(query: Select, literal_binds: bool = False) -> tuple[str, dict]:
    """Render `query` as Postgres SQL plus its bound parameters."""
    compiled = query.compile(dialect=_LOG_DIALECT, compile_kwargs={"literal_binds": literal_binds})
    return str(compiled), dict(compiled.params)


class EmployeesRepository(ABC):
    """Read access to employee records."""

    @abstractmethod
    def count_employees(self, f: EmployeeFilter) -> int:
        """Number of rows matching the filter's predicates."""

    @abstractmethod
    def get_employees(self, f: EmployeeFilter) -> list[Employee]:
        """Matching rows, ordered and paginated as the filter asks."""


class SQLEmployeesRepository(EmployeesRepository):
    """EmployeesRepository backed by a SQLAlchemy engine (Postgres in production)."""

    def __init__(self, engine: Engine, logger: logging.Logger | None = None) -> None:
        self._engine = engine
        self._log = logger or setup_logger(__name__)

    def _to_sql(self, query: Select, f: EmployeeFilter) -> tuple[str, dict]:
        try:
            return compile_query(query)
        except SQLAlchemyError as exc:
            self._log.error("to sql: %s", exc, extra={"actor": "repository", "filter": f.model_dump()})
            raise RepositoryError("to sql", exc) from exc

    def count_employees(self, f: EmployeeFilter) -> int:
        query = count_employees_query(f)
        sql, args = self._to_sql(query, f)
        context = {"actor": "repository", "func": "count_employees", "filter": f.model_dump(),
                   "query": sql, "query_args": args}

        self._log.debug("count employees", extra=context)
        try:
            with self._engine.connect() as conn:
                count = conn.execute(query).scalar_one()
        except SQLAlchemyError as exc:
            self._log.error("count employees: %s", exc, extra=context)
            raise RepositoryError("count employees", exc) from exc
        return int(count)

    def get_employees(self, f: EmployeeFilter) -> list[Employee]:
        query = select_employees_query(f)
        sql, args = self._to_sql(query, f)
        context = {"actor": "repository", "func": "get_employees", "filter": f.model_dump(),
                   "query": sql, "query_args": args}

        self._log.debug("get employees", extra=context)
        result: list[Employee] = []
        try:
            with self._engine.connect() as conn:
                for row in conn.execute(query):
                    try:
                        result.append(Employee.model_validate(dict(row._mapping)))
                    except ValidationError as exc:
                        self._log.error("scan employee: %s", exc, extra=context)
                        raise RepositoryError("scan employee", exc) from exc
        except SQLAlchemyError as exc:
            self._log.error("get employees: %s", exc, extra=context)
            raise RepositoryError("get employees", exc) from exc
        return result
