"""Entry point for the Employee Directory API.

This script builds the application, which loads the employee document
once, and serves it with Uvicorn.  If the document cannot be read or
parsed the process logs the error and exits with status 1 instead of
serving an empty or partial directory.

Configuration such as the document location, bind address and log
level is read from environment variables (``EMPLOYEE_SOURCE``,
``HOST``, ``PORT``, ``LOG_LEVEL``; see
``employee_directory_api/app/core/config.py``).

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from employee_directory_api.app.core.config import settings
from employee_directory_api.app.main import create_app
from employee_directory_api.app.services.record_source import RecordSourceError


async def serve(app) -> None:
    """Serve ``app`` with Uvicorn on the configured host and port."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


def main() -> int:
    try:
        app = create_app(settings)
    except RecordSourceError as exc:
        logging.getLogger(__name__).error("Refusing to start, employee catalog unavailable (%s): %s", exc.kind, exc.message)
        return 1
    asyncio.run(serve(app))
    return 0


if __name__ == "__main__":
    try:
        exit_code = main()
    except KeyboardInterrupt:
        exit_code = 0
    sys.exit(exit_code)
