"""
Org Audit Kernel: Diagnostics v1.0

Summary counts of a finalized organization for the report footer.
"""

from __future__ import annotations

from .graph import compute_levels
from .organization import Organization


def compute_diagnostics(org: Organization) -> dict:
    """
    Return a diagnostic dict summarising the organization shape.
    max_managers_between uses the same counting rule as the
    reporting line auditor (root and employee excluded).
    """
    root = org.root()
    reports = org.reports_map()
    levels = compute_levels(reports, root.id)
    deepest = max(levels.values())
    span_counts = [len(r) for r in reports.values()]

    warnings: list[str] = []

    single = sorted(mid for mid, r in reports.items() if len(r) == 1)
    if single:
        warnings.append(
            f"{len(single)} manager(s) with a single direct report: "
            f"{', '.join(single)}"
        )
    zero_paid = sorted(e.id for e in org.employees() if e.salary == 0)
    if zero_paid:
        warnings.append(
            f"{len(zero_paid)} employee(s) with zero salary: "
            f"{', '.join(zero_paid)}"
        )

    return {
        "employee_count": len(org),
        "manager_count": len(reports),
        "root_id": root.id,
        "max_managers_between": max(deepest - 1, 0),
        "average_span": (
            round(sum(span_counts) / len(span_counts), 2) if span_counts else 0.0
        ),
        "total_payroll": round(sum(e.salary for e in org.employees()), 2),
        "warnings": warnings,
    }
