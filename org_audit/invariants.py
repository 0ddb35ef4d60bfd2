"""
Org Audit Kernel: Structural Invariant Checks v1.0

Hard-fail validation run once by Organization.finalize().
Every check raises an OrgDataError subclass on failure.
"""

from __future__ import annotations

from typing import Mapping, Optional

from .domain_types import Employee
from .errors import (
    CyclicReportingStructureError,
    MissingRootError,
    UnknownManagerError,
)
from .graph import find_reporting_cycle


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate_structure(
    employees: Mapping[str, Employee], root_id: Optional[str],
) -> None:
    """
    Run all structural checks on a fully accumulated employee set.
    Raises on the first failure.
    """
    _check_root_present(root_id)
    _check_manager_refs(employees)
    _check_no_cycles(employees, root_id)


# ---------------------------------------------------------------------------
# Individual checks (private)
# ---------------------------------------------------------------------------

def _check_root_present(root_id: Optional[str]) -> None:
    """Exactly one root. A second root is already rejected by add()."""
    if root_id is None:
        raise MissingRootError()


def _check_manager_refs(employees: Mapping[str, Employee]) -> None:
    """Every non-root manager_id must resolve to a known employee."""
    for emp in employees.values():
        if emp.manager_id is not None and emp.manager_id not in employees:
            raise UnknownManagerError(emp.id, emp.manager_id)


def _check_no_cycles(employees: Mapping[str, Employee], root_id: str) -> None:
    """Every employee must reach the root by following manager_id."""
    cycle = find_reporting_cycle(employees, root_id)
    if cycle:
        raise CyclicReportingStructureError(cycle[0], cycle)
