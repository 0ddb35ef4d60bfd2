# file: org_cli/observability.py
"""
Observability: in-process metrics collection.

No external dependencies. Timing via perf_counter, counts from the
last audit result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from org_audit.salary_audit import split_findings

if TYPE_CHECKING:
    from .session import AuditSession


@dataclass(frozen=True)
class AuditMetrics:
    """Snapshot of observable audit metrics."""

    load_latency_ms: float
    audit_latency_ms: float
    employee_count: int
    manager_count: int
    underpaid_count: int
    overpaid_count: int
    long_reporting_line_count: int


def collect_metrics(session: "AuditSession") -> AuditMetrics:
    """
    Collect metrics from a session that has completed run().
    """
    result = session.last_result
    if result is None:
        raise RuntimeError("No audit has run yet: call run() first")

    underpaid, overpaid = split_findings(result.salary_findings)
    return AuditMetrics(
        load_latency_ms=round(session.load_latency_ms, 2),
        audit_latency_ms=round(session.audit_latency_ms, 2),
        employee_count=result.diagnostics["employee_count"],
        manager_count=result.diagnostics["manager_count"],
        underpaid_count=len(underpaid),
        overpaid_count=len(overpaid),
        long_reporting_line_count=len(result.reporting_line_findings),
    )
