"""Run the employees API under uvicorn.

Usage:
    python -m api                      # EMPLOYEES_API_HOST:EMPLOYEES_API_PORT
    python -m api --port 9000          # override the port
    python -m api --skip-migrations    # do not run alembic upgrade at startup
"""

import argparse
import os

import uvicorn

import config


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Employees read API")
    parser.add_argument("--host", default=config.API_HOST, help="bind address")
    parser.add_argument("--port", type=int, default=config.API_PORT, help="bind port")
    parser.add_argument("--workers", type=int, default=1, help="uvicorn worker processes")
    parser.add_argument("--skip-migrations", action="store_true", help="leave the schema untouched")
    args = parser.parse_args(argv)

    if args.skip_migrations:
        # env var for spawned workers, module attribute for this process
        os.environ["EMPLOYEES_RUN_MIGRATIONS"] = "0"
        config.RUN_MIGRATIONS = False

    uvicorn.run("api.main:app", host=args.host, port=args.port, workers=args.workers)


if __name__ == "__main__":
    main()
