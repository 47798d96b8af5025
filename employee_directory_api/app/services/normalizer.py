"""
Normalization of raw employee records.

Raw records come straight from the source document and may carry a
missing or blank name, or blank department entries.  This module turns
one raw record into a first/last name split and a cleaned set of
departments.  A record without a usable name is rejected by returning
``None``; the catalog simply leaves it out.  Nothing here raises for bad
data.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Tuple

from employee_directory_api.app.schemas.employee import EmployeeRecord


@dataclass(frozen=True)
class NormalizedRecord:
    first_name: str
    last_name: str
    departments: FrozenSet[str]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


def split_name(name: Optional[str]) -> Optional[Tuple[str, str]]:
    """Split a raw name into ``(first_name, last_name)``.

    The name is trimmed and split on the first run of whitespace.  The
    last name is everything after it and is empty for single-token
    names.  Returns ``None`` when the name is missing or blank.
    """
    if name is None:
        return None
    parts = name.strip().split(None, 1)
    if not parts:
        return None
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def clean_departments(departments: Optional[Iterable[Optional[str]]]) -> FrozenSet[str]:
    """Return the trimmed, non-blank department names as a set.

    Matching is exact after trimming, so ``"IT"`` and ``"it"`` are kept
    as two entries.
    """
    if not departments:
        return frozenset()
    cleaned = set()
    for department in departments:
        if department is None:
            continue
        value = department.strip()
        if value:
            cleaned.add(value)
    return frozenset(cleaned)


def normalize_record(record: EmployeeRecord) -> Optional[NormalizedRecord]:
    """Normalize one raw record, or return ``None`` if it has no name."""
    names = split_name(record.name)
    if names is None:
        return None
    first_name, last_name = names
    return NormalizedRecord(
        first_name=first_name,
        last_name=last_name,
        departments=clean_departments(record.departments),
    )
