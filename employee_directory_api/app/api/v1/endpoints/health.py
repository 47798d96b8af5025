"""
Health check endpoint.

Reports that the service is running together with the number of
employees in the loaded catalog.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from employee_directory_api.app.dependencies import get_catalog
from employee_directory_api.app.services.catalog_service import EmployeeCatalog

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def read_root(request: Request, catalog: EmployeeCatalog = Depends(get_catalog)) -> Dict[str, Any]:
    return {"service": request.app.title, "status": "running", "employees": len(catalog)}
