"""Service error hierarchy and its translation to the JSON error envelope."""

from fastapi import Request, status
from fastapi.responses import JSONResponse

INTERNAL_ERROR = "internal error"


class EmployeesError(Exception):
    """Base exception for service-layer errors."""

    def __init__(self, message: str = INTERNAL_ERROR) -> None:
        super().__init__(message)
        self.message = message


class FilterError(EmployeesError):
    """Raised when a recognized query parameter has a malformed value."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


class OperationError(EmployeesError):
    """Raised when a named operation fails; the cause text is appended."""

    def __init__(self, operation: str, cause: BaseException | None = None) -> None:
        super().__init__(operation if cause is None else f"{operation}: {cause}")
        self.operation = operation


class RepositoryError(OperationError):
    """Raised on query construction, execution or row mapping failures."""


class UsecaseError(OperationError):
    """Raised when a repository call made by the use case fails."""


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def filter_error_handler(request: Request, exc: FilterError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def operation_error_handler(request: Request, exc: OperationError) -> JSONResponse:
    # Detail was already logged where it happened; SQL must not reach the client.
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
