# file: org_cli/main.py
"""
Command-line entry point.

Usage: org-audit <path-to-csv-file> [options]

Exit 0 on success, 1 on unreadable file, invalid data or invalid
configuration. Errors go to stderr, the report to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from org_audit.errors import OrgDataError

from .report import render_report
from .session import AuditSession
from .settings import load_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="org-audit",
        description=(
            "Check manager salaries against their direct reports and "
            "flag reporting lines that are too long."
        ),
    )
    parser.add_argument("path", help="CSV file: Id,firstName,lastName,salary,managerId")
    parser.add_argument("--delimiter", default=None, help="field delimiter (default ',')")
    parser.add_argument(
        "--min-ratio", dest="min_salary_ratio", type=float, default=None,
        help="lowest allowed manager salary / direct-report average (default 1.20)",
    )
    parser.add_argument(
        "--max-ratio", dest="max_salary_ratio", type=float, default=None,
        help="highest allowed manager salary / direct-report average (default 1.50)",
    )
    parser.add_argument(
        "--max-managers", dest="max_managers_between", type=int, default=None,
        help="most managers allowed between an employee and the CEO (default 4)",
    )
    parser.add_argument("--env-file", default=".env", help="optional .env file with ORG_AUDIT_* values")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(
            env_file=args.env_file,
            delimiter=args.delimiter,
            min_salary_ratio=args.min_salary_ratio,
            max_salary_ratio=args.max_salary_ratio,
            max_managers_between=args.max_managers_between,
            log_level="DEBUG" if args.verbose else None,
        )
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    session = AuditSession(settings)
    try:
        session.load_file(args.path)
        result = session.run()
    except OSError as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return 1
    except OrgDataError as exc:
        print(f"Invalid data: {exc}", file=sys.stderr)
        return 1

    print(render_report(result, session.policy))
    logging.getLogger(__name__).debug("Metrics: %s", session.get_metrics())
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
