# file: org_cli/report.py
"""
Console report renderer.

Consumes an AuditResult and returns plain text. No I/O here;
the caller decides where the text goes.
"""

from __future__ import annotations

from typing import List

from org_audit.domain_types import AuditPolicy
from org_audit.salary_audit import split_findings

from .session import AuditResult

WIDTH = 80


def _percent_above(ratio: float) -> str:
    return f"{(ratio - 1) * 100:g}%"


def render_report(result: AuditResult, policy: AuditPolicy) -> str:
    lines: List[str] = []
    lines.append("=" * WIDTH)
    lines.append("ORGANIZATIONAL STRUCTURE ANALYSIS")
    lines.append("=" * WIDTH)
    lines.append("")

    lines.extend(render_salary_section(result, policy))
    lines.append("")
    lines.extend(render_reporting_line_section(result, policy))
    lines.append("")
    lines.extend(render_summary_section(result))

    lines.append("")
    lines.append("=" * WIDTH)
    lines.append("ANALYSIS COMPLETE")
    lines.append("=" * WIDTH)
    return "\n".join(lines)


def render_salary_section(result: AuditResult, policy: AuditPolicy) -> List[str]:
    lines = ["SALARY ANALYSIS", "-" * WIDTH]
    findings = result.salary_findings

    if not findings:
        lines.append(
            "✓ All manager salaries are within acceptable range "
            f"({_percent_above(policy.min_salary_ratio)}-"
            f"{_percent_above(policy.max_salary_ratio)} above average)."
        )
        return lines

    underpaid, overpaid = split_findings(findings)
    if underpaid:
        lines.append("\nManagers earning LESS than they should:")
        lines.append("")
        lines.extend(f"  • {f}" for f in underpaid)
    if overpaid:
        lines.append("\nManagers earning MORE than they should:")
        lines.append("")
        lines.extend(f"  • {f}" for f in overpaid)

    lines.append("")
    lines.append(
        f"Total issues found: {len(findings)} "
        f"({len(underpaid)} underpaid, {len(overpaid)} overpaid)"
    )
    return lines


def render_reporting_line_section(
    result: AuditResult, policy: AuditPolicy,
) -> List[str]:
    lines = ["REPORTING LINE ANALYSIS", "-" * WIDTH]
    findings = result.reporting_line_findings

    if not findings:
        lines.append(
            "✓ All employees have acceptable reporting line length "
            f"(max {policy.max_managers_between} managers)."
        )
        return lines

    lines.append("\nEmployees with reporting lines that are TOO LONG:")
    lines.append("")
    for f in findings:
        lines.append(f"  • {f}")
        lines.append("")
    lines.append(f"Total issues found: {len(findings)}")
    return lines


def render_summary_section(result: AuditResult) -> List[str]:
    diag = result.diagnostics
    lines = ["SUMMARY", "-" * WIDTH]
    lines.append(f"Employees analyzed:        {diag['employee_count']}")
    lines.append(f"Managers:                  {diag['manager_count']}")
    lines.append(f"Deepest reporting line:    {diag['max_managers_between']} manager(s)")
    lines.append(f"Average span of control:   {diag['average_span']:.2f}")
    lines.append(f"Total payroll:             {diag['total_payroll']:.2f}")
    for warning in diag["warnings"]:
        lines.append(f"  ! {warning}")
    return lines
