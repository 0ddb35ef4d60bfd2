"""
Org Audit Kernel: Loader v1.0

Feeds raw lines through the record parser into a fresh Organization.

Rules:
  - First line is a header and is discarded.
  - Blank (whitespace-only) lines are skipped.
  - Any parse or structural error aborts the whole load.
"""

from __future__ import annotations

import logging
import pathlib
from typing import Iterable, Union

from .constants import DEFAULT_DELIMITER
from .organization import Organization
from .records import parse_record

logger = logging.getLogger(__name__)


def load_lines(
    lines: Iterable[str],
    delimiter: str = DEFAULT_DELIMITER,
    skip_header: bool = True,
) -> Organization:
    """Parse every data line, add it, and return the finalized model."""
    org = Organization()
    for line_number, line in enumerate(lines, start=1):
        if skip_header and line_number == 1:
            continue
        if not line.strip():
            continue
        org.add(parse_record(line, delimiter, line_number))
    org.finalize()
    logger.info("Loaded %d employees (root=%s)", len(org), org.root().id)
    return org


def load_file(
    path: Union[str, pathlib.Path],
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = "utf-8-sig",
) -> Organization:
    """Read a delimited text file and load it. OSError propagates."""
    path = pathlib.Path(path)
    logger.debug("Reading employee records from %s", path)
    with open(path, "r", encoding=encoding, newline="") as f:
        return load_lines(f, delimiter)
