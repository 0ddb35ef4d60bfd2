"""
Org Audit Kernel: Organization Model v1.0

Accumulate employees in arrival order, then finalize into a validated,
read-only tree rooted at the single root employee.

Lifecycle:
  1. add(employee)   - duplicate ids and a second root hard fail
  2. finalize()      - missing root, dangling manager ids and cycles hard fail
  3. queries         - read-only; the model never changes again

Rebuilding means creating a new Organization, never mutating this one.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .domain_types import Employee
from .errors import DuplicateIdentifierError, MultipleRootsError
from .graph import build_reports_map
from .invariants import validate_structure

logger = logging.getLogger(__name__)

_NO_REPORTS: Tuple[Employee, ...] = ()


class Organization:
    """
    Arena of employees keyed by id plus a manager -> reports index.

    Direct reports keep arrival order so every walk over the model
    is reproducible.
    """

    def __init__(self) -> None:
        self._employees: Dict[str, Employee] = {}
        self._root_id: Optional[str] = None
        self._reports: Mapping[str, Tuple[Employee, ...]] = MappingProxyType({})
        self._finalized: bool = False

    @classmethod
    def from_employees(cls, employees: Iterable[Employee]) -> "Organization":
        """Add every employee in order, then finalize."""
        org = cls()
        for emp in employees:
            org.add(emp)
        org.finalize()
        return org

    # -- Building -----------------------------------------------------------

    def add(self, employee: Employee) -> None:
        if self._finalized:
            raise RuntimeError("Organization is finalized; build a new one instead")
        if employee.id in self._employees:
            raise DuplicateIdentifierError(employee.id)
        if employee.is_root:
            if self._root_id is not None:
                raise MultipleRootsError(self._root_id, employee.id)
            self._root_id = employee.id
        self._employees[employee.id] = employee

    def finalize(self) -> "Organization":
        """
        Validate the accumulated structure and build the report index.
        Idempotent: a second call returns immediately.
        """
        if self._finalized:
            return self

        validate_structure(self._employees, self._root_id)

        reports: Dict[str, Tuple[Employee, ...]] = {
            manager_id: tuple(self._employees[rid] for rid in report_ids)
            for manager_id, report_ids in build_reports_map(
                self._employees.values()
            ).items()
        }
        self._reports = MappingProxyType(reports)
        self._finalized = True

        logger.debug(
            "Finalized organization: %d employees, %d managers, root=%s",
            len(self._employees), len(self._reports), self._root_id,
        )
        return self

    # -- Queries ------------------------------------------------------------

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    def employee(self, employee_id: str) -> Optional[Employee]:
        """Return the employee or None. Absence is not an error here."""
        self._require_finalized()
        return self._employees.get(employee_id)

    def direct_reports(self, employee_id: str) -> Tuple[Employee, ...]:
        self._require_finalized()
        return self._reports.get(employee_id, _NO_REPORTS)

    def is_manager(self, employee_id: str) -> bool:
        self._require_finalized()
        return employee_id in self._reports

    def root(self) -> Employee:
        self._require_finalized()
        return self._employees[self._root_id]

    def employees(self) -> Tuple[Employee, ...]:
        """All employees in arrival order."""
        self._require_finalized()
        return tuple(self._employees.values())

    def managers(self) -> Tuple[Employee, ...]:
        """Employees with at least one direct report, in arrival order."""
        self._require_finalized()
        return tuple(e for e in self._employees.values() if e.id in self._reports)

    def reports_map(self) -> Mapping[str, Tuple[str, ...]]:
        """Read-only manager id -> report ids adjacency."""
        self._require_finalized()
        return MappingProxyType({
            mid: tuple(e.id for e in reports)
            for mid, reports in self._reports.items()
        })

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._employees

    def __repr__(self) -> str:
        state = "finalized" if self._finalized else "building"
        return (
            f"<Organization {state} employees={len(self._employees)} "
            f"root={self._root_id!r}>"
        )

    # -- Internals ----------------------------------------------------------

    def _require_finalized(self) -> None:
        if not self._finalized:
            raise RuntimeError("Organization not finalized: call finalize() first")
