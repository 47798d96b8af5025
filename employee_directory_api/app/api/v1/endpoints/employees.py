"""
Employee directory endpoints for API v1.

These routes are a thin mapping from query-string parameters to the
catalog queries:

* ``GET /employees`` lists every employee.
* ``GET /employees?department=<name>`` lists the employees of one
  department.  An empty or unknown department yields an empty list,
  never an error.
* ``GET /employees/groupby/department`` groups employees by department.

All responses are JSON arrays.  The endpoints are read-only and require
no authentication.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from employee_directory_api.app.dependencies import get_catalog
from employee_directory_api.app.schemas.employee import DepartmentEmployees
from employee_directory_api.app.services.catalog_service import EmployeeCatalog

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[str])
async def list_employees(
    department: Optional[str] = Query(
        None,
        description="Department to filter by (case-insensitive).  Omit to list every employee.",
    ),
    catalog: EmployeeCatalog = Depends(get_catalog),
) -> List[str]:
    """Return employee full names ordered by first and last name.

    Without ``department`` every employee is returned.  When the
    parameter is present, even with an empty value, only members of that
    department are returned.
    """
    if department is None:
        logger.info("Handling request for all employees")
        return catalog.list_all()
    logger.info("Handling request for employees in department '%s'", department)
    return catalog.list_by_department(department)


@router.get("/groupby/department", response_model=List[DepartmentEmployees])
async def group_by_department(catalog: EmployeeCatalog = Depends(get_catalog)) -> List[DepartmentEmployees]:
    """Return every department with the names of its members."""
    logger.info("Handling request for employees grouped by department")
    return catalog.group_by_department()
