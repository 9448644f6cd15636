"""SQLAlchemy engine and alembic bootstrap for the employees database.

Usage:
    from db.database import get_engine, check_db, run_migrations

    run_migrations()               # alembic upgrade head (no-op when current)
    engine = get_engine()          # process-wide pooled engine
    status = check_db()            # "connected" | "error"
"""

from functools import lru_cache

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from config import (
    ALEMBIC_INI_PATH,
    ALEMBIC_SCRIPT_PATH,
    DATABASE_URL,
    DB_MAX_CONN_LIFETIME,
    DB_MAX_IDLE_CONN,
    DB_MAX_OPEN_CONN,
    DB_STATEMENT_TIMEOUT_MS,
)
from logger_config import setup_logger

logger = setup_logger("db.database")


def engine_options(
    max_open: int = DB_MAX_OPEN_CONN,
    max_idle: int = DB_MAX_IDLE_CONN,
    max_lifetime: int = DB_MAX_CONN_LIFETIME,
    statement_timeout_ms: int = DB_STATEMENT_TIMEOUT_MS,
) -> dict:
    """Translate open/idle/lifetime pool limits into create_engine() kwargs.

    The pool keeps at most `max_idle` connections and opens up to `max_open`
    in total; zero values leave the SQLAlchemy defaults in place.
    """
    options: dict = {"pool_pre_ping": True}
    if max_idle > 0:
        options["pool_size"] = max_idle
    if max_open > 0:
        options["max_overflow"] = max(max_open - options.get("pool_size", 5), 0)
    if max_lifetime > 0:
        options["pool_recycle"] = max_lifetime
    if statement_timeout_ms > 0:
        options["connect_args"] = {"options": f"-c statement_timeout={statement_timeout_ms}"}
    return options


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Return the process-wide engine pointed at DATABASE_URL."""
    return create_engine(DATABASE_URL, **engine_options())


def check_db() -> str:
    """Return connection status string for health checks and logging."""
    try:
        with get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
        return "connected"
    except Exception as exc:
        logger.warning("database check failed: %s", exc)
        return "error"


def alembic_config(database_url: str = DATABASE_URL) -> Config:
    """Build an alembic Config bound to this project's migration scripts."""
    cfg = Config(str(ALEMBIC_INI_PATH))
    cfg.set_main_option("script_location", str(ALEMBIC_SCRIPT_PATH))
    # ConfigParser interpolation: a literal '%' (URL-encoded passwords) must be doubled.
    cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    # Keep the service's logging setup; env.py skips fileConfig when False.
    cfg.attributes["configure_logger"] = False
    return cfg


def run_migrations(database_url: str = DATABASE_URL) -> None:
    """Apply all pending migrations (alembic upgrade head)."""
    logger.info("Applying database migrations")
    command.upgrade(alembic_config(database_url), "head")
    logger.info("Database schema is up to date")
