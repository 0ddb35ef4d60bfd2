"""
Org Audit Kernel v1.0
Deterministic, in-memory organizational model plus two policy auditors:
manager salary band and reporting line length.
"""

from .domain_types import (
    Employee, AuditPolicy, UnderpaidManager, OverpaidManager,
    SalaryFinding, ReportingLineFinding,
)
from .errors import (
    OrgDataError,
    RecordParseError,
    MalformedRecordError,
    InvalidSalaryError,
    DuplicateIdentifierError,
    MultipleRootsError,
    MissingRootError,
    UnknownManagerError,
    CyclicReportingStructureError,
)
from .records import parse_record, parse_salary
from .organization import Organization
from .loader import load_lines, load_file
from .salary_audit import audit_salaries, average_salary, split_findings
from .reporting_line_audit import (
    audit_reporting_lines,
    reporting_chain,
    managers_between,
)
from .diagnostics import compute_diagnostics
from .constants import (
    MIN_SALARY_RATIO,
    MAX_SALARY_RATIO,
    MAX_MANAGERS_BETWEEN,
    MAX_CHAIN_HOPS,
    DEFAULT_DELIMITER,
)

__all__ = [
    "Employee",
    "AuditPolicy",
    "UnderpaidManager",
    "OverpaidManager",
    "SalaryFinding",
    "ReportingLineFinding",
    "OrgDataError",
    "RecordParseError",
    "MalformedRecordError",
    "InvalidSalaryError",
    "DuplicateIdentifierError",
    "MultipleRootsError",
    "MissingRootError",
    "UnknownManagerError",
    "CyclicReportingStructureError",
    "parse_record",
    "parse_salary",
    "Organization",
    "load_lines",
    "load_file",
    "audit_salaries",
    "average_salary",
    "split_findings",
    "audit_reporting_lines",
    "reporting_chain",
    "managers_between",
    "compute_diagnostics",
    "MIN_SALARY_RATIO",
    "MAX_SALARY_RATIO",
    "MAX_MANAGERS_BETWEEN",
    "MAX_CHAIN_HOPS",
    "DEFAULT_DELIMITER",
]
