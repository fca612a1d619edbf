"""
Error model for the CLI and config layer.

The translation and clause functions are total and never raise; these types
carry config and input failures from `sqltranslate` commands to a stable
error code and process exit code.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional


class ExitCode(int, Enum):
    OK = 0
    CONFIG_INVALID = 10
    INPUT_ERROR = 20
    INTERNAL_ERROR = 50


@dataclass(frozen=True)
class TranslateProblem:
    code: str                 # stable machine code, e.g. "SQLT_CONFIG_NOT_FOUND"
    category: str             # "config" | "input" | "internal"
    message: str              # short human message
    details: Dict[str, Any]   # structured details for debugging
    remediation: Optional[str] = None  # actionable next step


class TranslateException(Exception):
    def __init__(
        self,
        problem: TranslateProblem,
        exit_code: ExitCode,
        *,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(problem.message)
        self.problem = problem
        self.exit_code = exit_code
        self.__cause__ = cause


def problem_to_dict(p: TranslateProblem) -> Dict[str, Any]:
    d = asdict(p)
    if d.get("remediation") is None:
        d.pop("remediation", None)
    return d
