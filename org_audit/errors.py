"""
Org Audit Kernel: Error Taxonomy v1.0

Every error is fatal to the load or traversal that raised it.
Each carries the offending identifier(s) so callers can build
an actionable message.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple


# ══════════════════════════════════════════════════════════════
# Exception Hierarchy
# ══════════════════════════════════════════════════════════════

class OrgDataError(Exception):
    """Base exception for all organizational data errors."""

    def __init__(self, rule: str, detail: str) -> None:
        self.rule = rule
        self.detail = detail
        super().__init__(f"[ORG:{rule}] {detail}")


class RecordParseError(OrgDataError):
    """A single raw record could not be turned into an Employee."""


class MalformedRecordError(RecordParseError):
    """Record does not split into exactly the expected number of fields."""

    def __init__(
        self, line: str, field_count: int, line_number: Optional[int] = None,
    ) -> None:
        self.line = line
        self.field_count = field_count
        self.line_number = line_number
        where = f" at line {line_number}" if line_number is not None else ""
        super().__init__(
            "malformed_record",
            f"Invalid CSV line{where}: expected 5 fields, got "
            f"{field_count}: {line!r}",
        )


class InvalidSalaryError(RecordParseError):
    """Salary field is not a finite, non-negative number."""

    def __init__(
        self, employee_id: str, raw_value: str, line_number: Optional[int] = None,
    ) -> None:
        self.employee_id = employee_id
        self.raw_value = raw_value
        self.line_number = line_number
        super().__init__(
            "invalid_salary",
            f"Invalid salary for employee {employee_id}: {raw_value!r}",
        )


class DuplicateIdentifierError(OrgDataError):
    def __init__(self, employee_id: str) -> None:
        self.employee_id = employee_id
        super().__init__(
            "duplicate_identifier",
            f"Employee ID {employee_id!r} appears more than once",
        )


class MultipleRootsError(OrgDataError):
    def __init__(self, first_root_id: str, second_root_id: str) -> None:
        self.first_root_id = first_root_id
        self.second_root_id = second_root_id
        super().__init__(
            "multiple_roots",
            f"Multiple CEOs found: {first_root_id} and {second_root_id}",
        )


class MissingRootError(OrgDataError):
    def __init__(self) -> None:
        super().__init__("missing_root", "No CEO found in the data")


class UnknownManagerError(OrgDataError):
    def __init__(self, employee_id: str, manager_id: str) -> None:
        self.employee_id = employee_id
        self.manager_id = manager_id
        super().__init__(
            "unknown_manager",
            f"Employee {employee_id} has invalid manager ID: {manager_id}",
        )


class CyclicReportingStructureError(OrgDataError):
    """A chain of managers revisits an employee without reaching the root."""

    def __init__(self, employee_id: str, cycle: Sequence[str] = ()) -> None:
        self.employee_id = employee_id
        self.cycle: Tuple[str, ...] = tuple(cycle)
        path = f": {' -> '.join(self.cycle)}" if self.cycle else ""
        super().__init__(
            "cyclic_reporting",
            f"Circular reference detected in reporting chain for "
            f"employee {employee_id}{path}",
        )


