"""
FastAPI dependencies shared by the API routers.

The catalog is built once by ``create_app`` and attached to
``app.state``; handlers receive it through :func:`get_catalog` instead
of importing a module-level instance.
"""

from fastapi import Request

from employee_directory_api.app.services.catalog_service import EmployeeCatalog


def get_catalog(request: Request) -> EmployeeCatalog:
    return request.app.state.catalog
