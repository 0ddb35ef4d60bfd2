"""
Org Audit Kernel: Policy Constants (Default Values)

All magic numbers live here as module-level defaults.
Runtime values are injected via AuditPolicy (see domain_types.py).
"""

# --- Compensation Band ---
# A manager should earn 20%..50% more than the average of their direct reports.
MIN_SALARY_RATIO: float = 1.20
MAX_SALARY_RATIO: float = 1.50

# --- Reporting Line ---
# More than this many managers between an employee and the root is flagged.
MAX_MANAGERS_BETWEEN: int = 4

# Upper bound on hops when walking a chain of command.
MAX_CHAIN_HOPS: int = 1000

# --- Input Format ---
DEFAULT_DELIMITER: str = ","
RECORD_FIELD_COUNT: int = 5
