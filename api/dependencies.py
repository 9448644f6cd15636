"""FastAPI dependency providers."""
from functools import lru_cache

from api.repository import SQLEmployeesRepository
from api.service import EmployeesService, EmployeesUsecase
from db.database import get_engine
from logger_config import setup_logger


@lru_cache(maxsize=1)
def get_employees_service() -> EmployeesUsecase:
    repository = SQLEmployeesRepository(get_engine(), setup_logger("api.repository"))
    return EmployeesService(repository, setup_logger("api.service"))
