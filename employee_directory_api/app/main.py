"""
Main entrypoint for the Employee Directory API.

This module assembles the FastAPI application: it sets up logging,
builds the employee catalog and includes the versioned routers.  The
catalog is loaded before the application object is returned, so a
served application always has a complete catalog; if the employee
document cannot be read, ``create_app`` raises and nothing is served.

Run it with uvicorn's factory mode, e.g.::

    uvicorn employee_directory_api.app.main:create_app --factory

or through ``run.py`` at the project root.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.endpoints import health
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.catalog_service import EmployeeCatalog, load_catalog

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[EmployeeCatalog] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    catalog : Optional[EmployeeCatalog]
        A prebuilt catalog.  When omitted, the catalog is loaded from
        ``settings.employee_source``.

    Returns
    -------
    FastAPI
        A configured FastAPI instance with ``app.state.catalog`` set.

    Raises
    ------
    RecordSourceError
        If the catalog has to be loaded and the employee document is
        unreadable or malformed.
    """
    settings = settings or default_settings
    # Initialise logging before loading the catalog so ingestion is logged.
    setup_logging(settings.log_level, settings.log_file)

    if catalog is None:
        catalog = load_catalog(settings.employee_source, timeout=settings.source_timeout)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description="Read-only employee directory: list employees, filter them by department "
        "and group them by department.",
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.catalog = catalog

    app.include_router(health.router, tags=["health"])
    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.info("Serving %d employees under %s", len(catalog), settings.api_prefix)
    return app
