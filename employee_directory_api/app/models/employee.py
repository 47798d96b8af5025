"""
In-memory employee entity.

An ``Employee`` is identified by its full name: two instances compare
equal (and hash equally) exactly when their ``full_name`` strings are
equal.  The remaining fields do not take part in comparison.  Instances
are frozen; departments are collected by the catalog during ingestion
and passed in once, already cleaned.
"""

from dataclasses import dataclass, field
from typing import FrozenSet


@dataclass(frozen=True)
class Employee:
    """One deduplicated person of the directory."""

    first_name: str = field(compare=False)
    last_name: str = field(compare=False)
    departments: FrozenSet[str] = field(default_factory=frozenset, compare=False)
    full_name: str = field(init=False)

    def __post_init__(self) -> None:
        if not self.first_name:
            raise ValueError("first_name must not be empty")
        # Literal concatenation; a single-token name keeps the trailing space.
        object.__setattr__(self, "full_name", f"{self.first_name} {self.last_name}")
        object.__setattr__(self, "departments", frozenset(self.departments))
