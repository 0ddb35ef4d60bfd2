# file: org_cli/session.py
"""
Audit Session: orchestrates loader + auditors + metrics.

Order:
  1. load_file / load_lines  - build a fresh Organization (may raise)
  2. swap it in              - only if step 1 succeeded
  3. run()                   - both auditors over the finalized model

A reload never mutates the current model; a failed reload leaves the
previous one in place.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from org_audit.diagnostics import compute_diagnostics
from org_audit.domain_types import AuditPolicy, ReportingLineFinding, SalaryFinding
from org_audit.loader import load_file, load_lines
from org_audit.organization import Organization
from org_audit.reporting_line_audit import audit_reporting_lines
from org_audit.salary_audit import audit_salaries

from .observability import AuditMetrics, collect_metrics
from .settings import AuditSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuditResult:
    """Immutable outcome of one audit run, handed to the report renderer."""

    organization: Organization
    salary_findings: Tuple[SalaryFinding, ...]
    reporting_line_findings: Tuple[ReportingLineFinding, ...]
    diagnostics: dict


class AuditSession:
    def __init__(self, settings: Optional[AuditSettings] = None) -> None:
        self._settings = settings or AuditSettings()
        self._policy = self._settings.to_policy()
        self._org: Optional[Organization] = None
        self._last_result: Optional[AuditResult] = None
        self.load_latency_ms: float = 0.0
        self.audit_latency_ms: float = 0.0

    # -- Properties ---------------------------------------------------------

    @property
    def settings(self) -> AuditSettings:
        return self._settings

    @property
    def policy(self) -> AuditPolicy:
        return self._policy

    @property
    def organization(self) -> Organization:
        if self._org is None:
            raise RuntimeError("No organization loaded: call load_file() first")
        return self._org

    @property
    def last_result(self) -> Optional[AuditResult]:
        return self._last_result

    # -- Loading ------------------------------------------------------------

    def load_file(self, path: str) -> Organization:
        start = time.perf_counter()
        org = load_file(path, self._settings.delimiter)
        self._swap(org, start)
        return org

    def load_lines(self, lines: Iterable[str]) -> Organization:
        start = time.perf_counter()
        org = load_lines(lines, self._settings.delimiter)
        self._swap(org, start)
        return org

    def _swap(self, org: Organization, started: float) -> None:
        self.load_latency_ms = (time.perf_counter() - started) * 1000.0
        self._org = org
        self._last_result = None

    # -- Auditing -----------------------------------------------------------

    def run(self) -> AuditResult:
        org = self.organization
        start = time.perf_counter()
        salary_findings = audit_salaries(org, self._policy)
        line_findings = audit_reporting_lines(org, self._policy)
        diagnostics = compute_diagnostics(org)
        self.audit_latency_ms = (time.perf_counter() - start) * 1000.0

        logger.info(
            "Audit complete: %d salary finding(s), %d reporting line finding(s)",
            len(salary_findings), len(line_findings),
        )
        self._last_result = AuditResult(
            organization=org,
            salary_findings=salary_findings,
            reporting_line_findings=line_findings,
            diagnostics=diagnostics,
        )
        return self._last_result

    def get_metrics(self) -> AuditMetrics:
        return collect_metrics(self)
