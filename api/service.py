"""Employee listing use case: count, then fetch only when something matched."""

import logging
from abc import ABC, abstractmethod

from api.errors import RepositoryError, UsecaseError
from api.models import Employee, EmployeeFilter
from api.repository import EmployeesRepository
from logger_config import setup_logger


class EmployeesUsecase(ABC):
    @abstractmethod
    def get_employees(self, f: EmployeeFilter) -> tuple[int, list[Employee]]:
        """Return (total matching rows, requested page of employees)."""


class EmployeesService(EmployeesUsecase):
    """
    Count-then-fetch over an EmployeesRepository.

    The two queries are independent (no shared snapshot), so under concurrent
    writes `total` may differ from what the fetched page implies.
    """

    def __init__(self, repository: EmployeesRepository, logger: logging.Logger | None = None) -> None:
        self._repository = repository
        self._log = logger or setup_logger(__name__)

    def get_employees(self, f: EmployeeFilter) -> tuple[int, list[Employee]]:
        context = {"actor": "usecase", "func": "get_employees", "filter": f.model_dump()}

        try:
            total = self._repository.count_employees(f)
        except RepositoryError as exc:
            self._log.error("count employees: %s", exc, extra=context)
            raise UsecaseError("count employees", exc) from exc

        if total == 0:
            return 0, []

        try:
            employees = self._repository.get_employees(f)
        except RepositoryError as exc:
            self._log.error("get employees: %s", exc, extra=context)
            raise UsecaseError("get employees", exc) from exc

        return total, employees
