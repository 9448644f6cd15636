"""FastAPI application entrypoint: Employees read API."""
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from fastapi import FastAPI, Request, status  # noqa: E402 (must follow .env loading)
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from api.errors import (  # noqa: E402
    INTERNAL_ERROR,
    FilterError,
    OperationError,
    error_response,
    filter_error_handler,
    operation_error_handler,
)
from api.routers import employees, health  # noqa: E402
from config import API_BASE_PATH, API_VERSION, CORS_ORIGINS, RUN_MIGRATIONS  # noqa: E402
from db.database import run_migrations  # noqa: E402
from logger_config import setup_logger  # noqa: E402

logger = setup_logger("api.startup")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if RUN_MIGRATIONS:
        run_migrations()
    else:
        logger.info("EMPLOYEES_RUN_MIGRATIONS disabled, schema left as is")
    logger.info("Employees API %s started", API_VERSION)
    yield
    logger.info("stop service")


app = FastAPI(title="Employees API", version=API_VERSION, lifespan=lifespan)

app.add_exception_handler(FilterError, filter_error_handler)
app.add_exception_handler(OperationError, operation_error_handler)


@app.middleware("http")
async def recover_middleware(request: Request, call_next):
    """Turn any unhandled exception into a logged 500 with the error envelope."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception("recover", extra={"url": request.url.path})
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


# Added last so it wraps recover_middleware and 500s still carry CORS headers.
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "HEAD", "OPTIONS"],
    allow_headers=["Content-Type", "X-Content-Type-Options", "X-Csrf-Token"],
    allow_credentials=True,
)

app.include_router(health.router)
app.include_router(employees.router, prefix=f"{API_BASE_PATH}/employees", tags=["employees"])
