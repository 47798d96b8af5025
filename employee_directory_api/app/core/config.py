"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts out of the box against the employee document bundled
with the package.  Values are read when a ``Settings`` instance is
created, which lets tests build their own instances after patching the
environment.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Employee document shipped with the package.
DEFAULT_EMPLOYEE_SOURCE = str(Path(__file__).resolve().parent.parent / "data" / "employees.xml")


def _env(name: str, default: str):
    return field(default_factory=lambda: os.getenv(name, default))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = _env("PROJECT_NAME", "Employee Directory API")
    api_version: str = _env("API_VERSION", "1.0.0")
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"})
    log_level: str = _env("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs go to the console only.
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Prefix under which the employee routes are mounted, e.g.
    # ``/rest/employees``.
    api_prefix: str = _env("API_PREFIX", "/rest")

    # Location of the employee XML document.  Either a filesystem path
    # or an ``http(s)://`` URL.  The document is read exactly once when
    # the application is created.
    employee_source: str = _env("EMPLOYEE_SOURCE", DEFAULT_EMPLOYEE_SOURCE)

    # Timeout in seconds used when ``employee_source`` is a URL.
    source_timeout: float = field(default_factory=lambda: float(os.getenv("SOURCE_TIMEOUT", "10")))

    host: str = _env("HOST", "0.0.0.0")
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8080")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  ``create_app`` accepts an
# explicit ``Settings`` instance when a different configuration is needed.
settings = Settings()
