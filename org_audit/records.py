"""
Org Audit Kernel: Record Parser v1.0

Turns one raw delimited record into a validated Employee.
Pure function of its input. Hard fail on any malformed field.

Record layout (header excluded):
    Id,firstName,lastName,salary,managerId
An empty managerId marks the root.
"""

from __future__ import annotations

import math
from typing import Optional

from .constants import DEFAULT_DELIMITER, RECORD_FIELD_COUNT
from .domain_types import Employee
from .errors import InvalidSalaryError, MalformedRecordError


def parse_record(
    line: str,
    delimiter: str = DEFAULT_DELIMITER,
    line_number: Optional[int] = None,
) -> Employee:
    """
    Parse a single record. str.split keeps trailing empty fields, so a
    root row ending in the delimiter still yields 5 fields.
    """
    text = line.rstrip("\r\n")
    parts = text.split(delimiter)
    if len(parts) != RECORD_FIELD_COUNT:
        raise MalformedRecordError(text, len(parts), line_number)

    emp_id, first_name, last_name, raw_salary, manager_id = (
        p.strip() for p in parts
    )
    salary = parse_salary(emp_id, raw_salary, line_number)

    return Employee(
        id=emp_id,
        first_name=first_name,
        last_name=last_name,
        salary=salary,
        manager_id=manager_id or None,
    )


def parse_salary(
    employee_id: str, raw_value: str, line_number: Optional[int] = None,
) -> float:
    """Finite, non-negative real. Hard fail otherwise."""
    text = raw_value.strip()
    # float() also accepts "1_000", which is not a salary.
    if "_" in text:
        raise InvalidSalaryError(employee_id, raw_value, line_number)
    try:
        value = float(text)
    except ValueError:
        raise InvalidSalaryError(employee_id, raw_value, line_number) from None
    if not math.isfinite(value) or value < 0:
        raise InvalidSalaryError(employee_id, raw_value, line_number)
    return value
