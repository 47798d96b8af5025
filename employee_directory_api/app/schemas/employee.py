"""
Pydantic schemas for employee records and directory responses.

``EmployeeRecord`` is the raw, unvalidated shape of one ``<employee>``
entry of the source document; blank names and blank departments are
allowed here and cleaned up by the normalizer.  ``DepartmentEmployees``
is the response item of the group-by-department endpoint.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class EmployeeRecord(BaseModel):
    """Raw employee record as supplied by the record source."""

    name: Optional[str] = Field(None, examples=["Dale Miller"])
    departments: List[Optional[str]] = Field(default_factory=list, examples=[["finance", "packaging"]])

    @field_validator("departments", mode="before")
    @classmethod
    def missing_departments_as_empty(cls, v):
        if v is None:
            return []
        return v


class DepartmentEmployees(BaseModel):
    """A department together with the sorted full names of its members."""

    department: str = Field(..., examples=["finance"])
    employees: List[str] = Field(default_factory=list, examples=[["Dale Miller", "Michael Smith"]])

    model_config = {
        "frozen": True,
    }
