"""
Org Audit Kernel: Core Domain Types v1.0

Pure data. No behaviour beyond derived read-only properties.
All types are frozen; a finalized organization never changes.

────────────────────────────────────────────────
DOMAIN GLOSSARY
────────────────────────────────────────────────

Root:
    The employee with no manager. Top of the organization.

Direct report:
    An employee whose manager_id equals a given employee's id.

Chain:
    Ordered sequence from an employee up through each successive
    manager to the root, inclusive of both ends.

Finding:
    A single reported policy violation (salary or reporting line).

────────────────────────────────────────────────
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .constants import MAX_MANAGERS_BETWEEN, MAX_SALARY_RATIO, MIN_SALARY_RATIO


# ── Core Domain Types ─────────────────────────────────────────

@dataclass(frozen=True)
class Employee:
    """A single employee record. Identity is the id."""

    id: str
    first_name: str
    last_name: str
    salary: float
    manager_id: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_root(self) -> bool:
        return self.manager_id is None

    def __str__(self) -> str:
        return (
            f"{self.first_name} {self.last_name} "
            f"(ID: {self.id}, Salary: {self.salary:.2f})"
        )


@dataclass(frozen=True)
class AuditPolicy:
    """
    Policy thresholds shared by both auditors.

    min/max_salary_ratio: multipliers applied to the direct-report average.
    max_managers_between: longest permitted line of managers strictly
    between an employee and the root.
    """

    min_salary_ratio: float = MIN_SALARY_RATIO
    max_salary_ratio: float = MAX_SALARY_RATIO
    max_managers_between: int = MAX_MANAGERS_BETWEEN

    def __post_init__(self) -> None:
        if self.min_salary_ratio <= 0 or self.max_salary_ratio <= 0:
            raise ValueError(
                f"Salary ratios must be positive, got "
                f"{self.min_salary_ratio!r}..{self.max_salary_ratio!r}"
            )
        if self.min_salary_ratio > self.max_salary_ratio:
            raise ValueError(
                f"min_salary_ratio {self.min_salary_ratio!r} exceeds "
                f"max_salary_ratio {self.max_salary_ratio!r}"
            )
        if self.max_managers_between < 0:
            raise ValueError(
                f"max_managers_between must be >= 0, got "
                f"{self.max_managers_between!r}"
            )


# ── Findings ──────────────────────────────────────────────────

@dataclass(frozen=True)
class UnderpaidManager:
    """Manager earning less than min_salary_ratio x direct-report average."""

    manager: Employee
    average_report_salary: float
    lower_bound: float
    upper_bound: float
    deviation: float

    @property
    def too_low(self) -> bool:
        return True

    @property
    def expected_salary(self) -> float:
        return self.lower_bound

    def __str__(self) -> str:
        return (
            f"{self.manager.full_name} earns less than they should by "
            f"{self.deviation:.2f} (current: {self.manager.salary:.2f}, "
            f"avg subordinate: {self.average_report_salary:.2f}, "
            f"expected minimum: {self.lower_bound:.2f})"
        )


@dataclass(frozen=True)
class OverpaidManager:
    """Manager earning more than max_salary_ratio x direct-report average."""

    manager: Employee
    average_report_salary: float
    lower_bound: float
    upper_bound: float
    deviation: float

    @property
    def too_low(self) -> bool:
        return False

    @property
    def expected_salary(self) -> float:
        return self.upper_bound

    def __str__(self) -> str:
        return (
            f"{self.manager.full_name} earns more than they should by "
            f"{self.deviation:.2f} (current: {self.manager.salary:.2f}, "
            f"avg subordinate: {self.average_report_salary:.2f}, "
            f"expected maximum: {self.upper_bound:.2f})"
        )


SalaryFinding = Union[UnderpaidManager, OverpaidManager]


@dataclass(frozen=True)
class ReportingLineFinding:
    """
    Employee whose line to the root is too long.

    chain runs from the employee itself up to and including the root.
    managers_between excludes both ends of the chain.
    """

    employee: Employee
    managers_between: int
    excess: int
    chain: Tuple[Employee, ...]

    def chain_names(self) -> str:
        return " -> ".join(e.full_name for e in self.chain)

    def __str__(self) -> str:
        return (
            f"{self.employee.full_name} has a reporting line that is too long "
            f"by {self.excess} level(s) ({self.managers_between} managers "
            f"between employee and CEO, maximum is "
            f"{self.managers_between - self.excess})\n"
            f"  Reporting chain: {self.chain_names()}"
        )
