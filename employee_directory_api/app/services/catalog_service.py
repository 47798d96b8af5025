"""
Service layer for the employee catalog.

The catalog is built once from a sequence of raw employee records and
is read-only afterwards.  Records sharing the same full name are merged
into a single employee whose departments are the union of all of them;
the first record seen decides how the name is split into first and last
name.  Records without a usable name are skipped.

Three queries are exposed to the API layer:

* :meth:`EmployeeCatalog.list_all` returns every full name.
* :meth:`EmployeeCatalog.list_by_department` filters by department,
  case-insensitively.
* :meth:`EmployeeCatalog.group_by_department` returns one group per
  department.

Every list of names is ordered by first name then last name, compared
case-insensitively.  Queries never mutate the catalog, so a single
instance can serve any number of concurrent requests.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

import requests
from pydantic import ValidationError

from employee_directory_api.app.models.employee import Employee
from employee_directory_api.app.schemas.employee import DepartmentEmployees, EmployeeRecord
from employee_directory_api.app.services.normalizer import normalize_record
from employee_directory_api.app.services.record_source import read_records

logger = logging.getLogger(__name__)

RawRecord = Union[EmployeeRecord, Mapping[str, Any]]


def employee_sort_key(employee: Employee) -> Tuple[str, str]:
    """Case-insensitive ordering key: first name, then last name."""
    return employee.first_name.casefold(), employee.last_name.casefold()


class EmployeeCatalog:
    """Frozen, deduplicated collection of employees."""

    def __init__(self, employees: Iterable[Employee]) -> None:
        # Sorted once; ``sorted`` is stable so ties keep insertion order.
        self._employees: Tuple[Employee, ...] = tuple(sorted(employees, key=employee_sort_key))

    @classmethod
    def from_records(cls, records: Iterable[RawRecord]) -> "EmployeeCatalog":
        """Build a catalog from raw records, merging by full name.

        ``records`` is consumed exactly once, in order.  Plain mappings
        are accepted as well and validated into :class:`EmployeeRecord`;
        mappings that fail validation are skipped like nameless records.
        """
        merged: Dict[str, Tuple[str, str, set]] = {}
        total = 0
        skipped = 0
        for record in records:
            total += 1
            if not isinstance(record, EmployeeRecord):
                try:
                    record = EmployeeRecord.model_validate(record)
                except ValidationError as exc:
                    skipped += 1
                    logger.warning("Skipping invalid employee record #%d: %s", total, exc.errors())
                    continue
            normalized = normalize_record(record)
            if normalized is None:
                skipped += 1
                logger.debug("Skipping employee record #%d without a name", total)
                continue
            entry = merged.get(normalized.full_name)
            if entry is None:
                entry = (normalized.first_name, normalized.last_name, set())
                merged[normalized.full_name] = entry
            entry[2].update(normalized.departments)

        if total == 0:
            logger.warning("No employee records discovered in source")

        catalog = cls(
            Employee(first_name=first, last_name=last, departments=frozenset(departments))
            for first, last, departments in merged.values()
        )
        logger.info(
            "Parsed %d unique employees across %d records (%d skipped)",
            len(catalog),
            total,
            skipped,
        )
        return catalog

    @property
    def employees(self) -> Tuple[Employee, ...]:
        """All employees in roster order."""
        return self._employees

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees)

    def list_all(self) -> List[str]:
        """Return the full names of all employees in roster order."""
        logger.debug("Listing all employees without department filtering")
        return [employee.full_name for employee in self._employees]

    def list_by_department(self, department: Optional[str]) -> List[str]:
        """Return the full names of employees in ``department``.

        Matching ignores case and surrounding whitespace.  A missing or
        blank department matches nobody, and so does an unknown one.
        """
        if department is None or not department.strip():
            logger.debug("No department provided, returning empty list")
            return []
        normalized = department.strip().lower()
        logger.debug("Listing employees for department '%s'", normalized)
        return [
            employee.full_name
            for employee in self._employees
            if any(name.lower() == normalized for name in employee.departments)
        ]

    def group_by_department(self) -> List[DepartmentEmployees]:
        """Group employees by department.

        Departments are ordered case-insensitively.  Spellings that
        differ only by case form one group, shown with the spelling met
        first in roster order.  Members are in roster order.
        """
        groups: Dict[str, Tuple[str, List[str]]] = {}
        for employee in self._employees:
            for department in sorted(employee.departments):
                key = department.lower()
                group = groups.get(key)
                if group is None:
                    group = (department, [])
                    groups[key] = group
                members = group[1]
                if not members or members[-1] != employee.full_name:
                    members.append(employee.full_name)
        logger.debug("Grouping employees across %d departments", len(groups))
        ordered = sorted(groups.values(), key=lambda group: (group[0].casefold(), group[0]))
        return [DepartmentEmployees(department=name, employees=members) for name, members in ordered]


def load_catalog(
    source: str,
    timeout: float = 10,
    session: Optional[requests.Session] = None,
) -> EmployeeCatalog:
    """Read the employee document at ``source`` and build the catalog.

    Raises
    ------
    RecordSourceError
        If the document cannot be retrieved or is not valid XML.  No
        catalog is produced in that case.
    """
    logger.info("Loading employee records from %s", source)
    catalog = EmployeeCatalog.from_records(read_records(source, timeout=timeout, session=session))
    logger.info("Loaded %d unique employee records", len(catalog))
    return catalog
