import logging
from pathlib import Path

import pytest

from employee_directory_api.app.core.config import DEFAULT_EMPLOYEE_SOURCE, Settings
from employee_directory_api.app.core.logging_config import setup_logging


def test_defaults(monkeypatch):
    for name in ("PROJECT_NAME", "API_PREFIX", "EMPLOYEE_SOURCE", "DEBUG", "PORT", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.project_name == "Employee Directory API"
    assert settings.api_prefix == "/rest"
    assert settings.employee_source == DEFAULT_EMPLOYEE_SOURCE
    assert settings.debug is False
    assert settings.port == 8080
    assert settings.log_file is None
    assert Path(DEFAULT_EMPLOYEE_SOURCE).is_file()


def test_values_are_read_from_environment(monkeypatch):
    monkeypatch.setenv("EMPLOYEE_SOURCE", "https://example.com/employees.xml")
    monkeypatch.setenv("API_PREFIX", "/api/v1")
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("SOURCE_TIMEOUT", "2.5")
    monkeypatch.setenv("PORT", "9000")

    settings = Settings()

    assert settings.employee_source == "https://example.com/employees.xml"
    assert settings.api_prefix == "/api/v1"
    assert settings.debug is True
    assert settings.source_timeout == 2.5
    assert settings.port == 9000


def test_setup_logging_leaves_configured_root_alone():
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        before = list(root.handlers)
        setup_logging("DEBUG")
        assert root.handlers == before
    finally:
        root.removeHandler(handler)


@pytest.mark.parametrize("level", ["NOPE", "basic_format"])
def test_setup_logging_unknown_level_falls_back_to_info(monkeypatch, level):
    root = logging.getLogger()
    previous_level = root.level
    monkeypatch.setattr(root, "handlers", [])
    root.setLevel(logging.WARNING)
    try:
        setup_logging(level)

        assert root.level == logging.INFO
        assert len(root.handlers) == 1
    finally:
        root.setLevel(previous_level)
