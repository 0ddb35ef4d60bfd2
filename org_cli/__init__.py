# file: org_cli/__init__.py
"""
Org Audit Runtime v1.0

Settings, session orchestration, metrics and the console report
around the Org Audit Kernel.
"""

from .settings import AuditSettings, load_settings
from .session import AuditSession, AuditResult
from .observability import AuditMetrics, collect_metrics
from .report import render_report
from .main import main

__all__ = [
    "AuditSettings",
    "load_settings",
    "AuditSession",
    "AuditResult",
    "AuditMetrics",
    "collect_metrics",
    "render_report",
    "main",
]
