"""Read-only employee endpoints."""
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from api.dependencies import get_employees_service
from api.filters import parse_employee_filter, parse_signed
from api.errors import FilterError
from api.models import Employee, EmployeeFilter, EmployeesPage, ErrorMessage
from api.service import EmployeesUsecase
from logger_config import setup_logger

router = APIRouter()

logger = setup_logger("api.routers.employees")

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorMessage},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorMessage},
}


def _first_values(request: Request) -> dict[str, str]:
    """Collapse repeated query parameters to their first value."""
    params = request.query_params
    return {key: params.getlist(key)[0] for key in params.keys()}


@router.get("", response_model=EmployeesPage, responses=_ERROR_RESPONSES)
def list_employees(request: Request, service: EmployeesUsecase = Depends(get_employees_service)):
    f = parse_employee_filter(_first_values(request))
    logger.debug("get employees", extra={"handler": "list_employees", "filter": f.model_dump()})

    total, employees = service.get_employees(f)
    return EmployeesPage(total=total, employees=employees)


@router.get(
    "/{employee_id}",
    response_model=Employee,
    responses={**_ERROR_RESPONSES, status.HTTP_404_NOT_FOUND: {"description": "Empty object"}},
)
def get_employee(employee_id: str, service: EmployeesUsecase = Depends(get_employees_service)):
    try:
        emp_id = parse_signed(employee_id)
    except ValueError as exc:
        raise FilterError("employee_id", str(exc)) from exc

    _, employees = service.get_employees(EmployeeFilter(employee_id=emp_id))
    if not employees:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={})
    return employees[0]
