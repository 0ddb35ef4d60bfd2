"""
Org Audit Kernel: Reporting Line Auditor v1.0

Counts the managers strictly between an employee and the root:

    chain = [employee, m1, m2, ..., root]
    managers_between = len(chain) - 2

An employee reporting directly to the root has 0 managers between.
More than max_managers_between is a finding. The root is never checked.

The chain walk guards itself against cycles even though finalize()
already rejected them.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .constants import MAX_CHAIN_HOPS
from .domain_types import AuditPolicy, Employee, ReportingLineFinding
from .graph import walk_chain
from .organization import Organization


def audit_reporting_lines(
    org: Organization,
    policy: Optional[AuditPolicy] = None,
    max_hops: int = MAX_CHAIN_HOPS,
) -> Tuple[ReportingLineFinding, ...]:
    """Return one finding per over-long reporting line, in arrival order."""
    policy = policy or AuditPolicy()
    findings: List[ReportingLineFinding] = []
    for emp in org.employees():
        if emp.is_root:
            continue
        chain = walk_chain(emp, org.employee, max_hops)
        between = len(chain) - 2
        if between > policy.max_managers_between:
            findings.append(ReportingLineFinding(
                employee=emp,
                managers_between=between,
                excess=between - policy.max_managers_between,
                chain=tuple(chain),
            ))
    return tuple(findings)


def reporting_chain(
    org: Organization, employee_id: str, max_hops: int = MAX_CHAIN_HOPS,
) -> Tuple[Employee, ...]:
    """Chain from employee_id up to the root, inclusive."""
    emp = org.employee(employee_id)
    if emp is None:
        raise KeyError(employee_id)
    return tuple(walk_chain(emp, org.employee, max_hops))


def managers_between(
    org: Organization, employee_id: str, max_hops: int = MAX_CHAIN_HOPS,
) -> int:
    """Managers strictly between employee_id and the root. 0 for the root."""
    chain = reporting_chain(org, employee_id, max_hops)
    return max(len(chain) - 2, 0)
