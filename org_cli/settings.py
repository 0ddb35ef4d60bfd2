# file: org_cli/settings.py
"""
Audit Settings: environment + .env + CLI overrides.

Precedence (highest first):
  1. explicit overrides (command-line flags)
  2. ORG_AUDIT_* environment variables
  3. values from a .env file (never overrides the real environment)
  4. kernel defaults (org_audit.constants)
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

from dotenv import dotenv_values
from pydantic import BaseModel, Field, field_validator, model_validator

from org_audit.constants import (
    DEFAULT_DELIMITER,
    MAX_MANAGERS_BETWEEN,
    MAX_SALARY_RATIO,
    MIN_SALARY_RATIO,
)
from org_audit.domain_types import AuditPolicy

ENV_PREFIX = "ORG_AUDIT_"

_ENV_FIELDS = (
    "min_salary_ratio",
    "max_salary_ratio",
    "max_managers_between",
    "delimiter",
    "log_level",
)


class AuditSettings(BaseModel):
    min_salary_ratio: float = Field(default=MIN_SALARY_RATIO, gt=0)
    max_salary_ratio: float = Field(default=MAX_SALARY_RATIO, gt=0)
    max_managers_between: int = Field(default=MAX_MANAGERS_BETWEEN, ge=0)
    delimiter: str = DEFAULT_DELIMITER
    log_level: str = "WARNING"

    @field_validator("delimiter")
    @classmethod
    def _single_char_delimiter(cls, value: str) -> str:
        if len(value) != 1 or value in "\r\n":
            raise ValueError(f"delimiter must be one non-newline character, got {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @model_validator(mode="after")
    def _ordered_band(self) -> "AuditSettings":
        if self.min_salary_ratio > self.max_salary_ratio:
            raise ValueError(
                f"min_salary_ratio ({self.min_salary_ratio}) must not exceed "
                f"max_salary_ratio ({self.max_salary_ratio})"
            )
        return self

    def to_policy(self) -> AuditPolicy:
        return AuditPolicy(
            min_salary_ratio=self.min_salary_ratio,
            max_salary_ratio=self.max_salary_ratio,
            max_managers_between=self.max_managers_between,
        )


def load_settings(
    env_file: Optional[str] = None,
    environ: Optional[Dict[str, str]] = None,
    **overrides: Any,
) -> AuditSettings:
    """
    Build validated settings. Overrides whose value is None are ignored,
    so argparse defaults of None fall through to the environment.
    Raises pydantic.ValidationError on invalid values.
    """
    env: Dict[str, Any] = {}
    if env_file is not None and os.path.exists(env_file):
        env.update(dotenv_values(env_file))
    env.update(os.environ if environ is None else environ)

    values: Dict[str, Any] = {}
    for name in _ENV_FIELDS:
        raw = env.get(ENV_PREFIX + name.upper())
        if raw is not None and raw != "":
            values[name] = raw

    values.update({k: v for k, v in overrides.items() if v is not None})
    return AuditSettings(**values)
