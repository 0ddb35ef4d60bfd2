"""
Org Audit Kernel: Compensation Auditor v1.0

A manager should earn between min_salary_ratio and max_salary_ratio
times the average salary of their DIRECT reports. Indirect reports
never enter the average. Both bounds are inclusive.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .domain_types import (
    AuditPolicy,
    Employee,
    OverpaidManager,
    SalaryFinding,
    UnderpaidManager,
)
from .organization import Organization


def audit_salaries(
    org: Organization, policy: Optional[AuditPolicy] = None,
) -> Tuple[SalaryFinding, ...]:
    """Return one finding per out-of-band manager, in arrival order."""
    policy = policy or AuditPolicy()
    findings: List[SalaryFinding] = []
    for emp in org.employees():
        if not org.is_manager(emp.id):
            continue
        finding = check_manager_salary(emp, org.direct_reports(emp.id), policy)
        if finding is not None:
            findings.append(finding)
    return tuple(findings)


def check_manager_salary(
    manager: Employee,
    reports: Sequence[Employee],
    policy: AuditPolicy,
) -> Optional[SalaryFinding]:
    if not reports:
        return None

    average = average_salary(reports)
    lower = average * policy.min_salary_ratio
    upper = average * policy.max_salary_ratio

    if manager.salary < lower:
        return UnderpaidManager(
            manager=manager,
            average_report_salary=average,
            lower_bound=lower,
            upper_bound=upper,
            deviation=lower - manager.salary,
        )
    if manager.salary > upper:
        return OverpaidManager(
            manager=manager,
            average_report_salary=average,
            lower_bound=lower,
            upper_bound=upper,
            deviation=manager.salary - upper,
        )
    return None


def average_salary(employees: Sequence[Employee]) -> float:
    """Arithmetic mean. 0.0 for an empty sequence."""
    if not employees:
        return 0.0
    return sum(e.salary for e in employees) / len(employees)


def split_findings(
    findings: Sequence[SalaryFinding],
) -> Tuple[Tuple[UnderpaidManager, ...], Tuple[OverpaidManager, ...]]:
    """Partition findings into (underpaid, overpaid), order preserved."""
    underpaid = tuple(f for f in findings if isinstance(f, UnderpaidManager))
    overpaid = tuple(f for f in findings if isinstance(f, OverpaidManager))
    return underpaid, overpaid
