"""Diagnostic reporting for breakpoint configuration problems.

Configuration mistakes (unknown breakpoint names, descending tables, values
that cannot be converted) never abort stylesheet generation. They are logged
as warnings and appended to a ``DiagnosticLog`` so callers and tests can
inspect what degraded without parsing log output.

The log is append-only; entries are never removed or reordered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

__all__ = [
    "Diagnostic",
    "DiagnosticLog",
    "NON_ASCENDING",
    "INCOMPARABLE",
    "UNKNOWN_BREAKPOINT",
    "NON_NUMERIC",
    "ONLY_REQUIRES_NAME",
    "UNSUPPORTED_UNIT",
    "report",
]

_logger = logging.getLogger(__name__)

NON_ASCENDING = "non-ascending"
INCOMPARABLE = "incomparable"
UNKNOWN_BREAKPOINT = "unknown-breakpoint"
NON_NUMERIC = "non-numeric"
ONLY_REQUIRES_NAME = "only-requires-name"
UNSUPPORTED_UNIT = "unsupported-unit"


@dataclass(frozen=True)
class Diagnostic:
    code: str
    message: str
    subject: str = ""

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class DiagnosticLog:
    """Append-only collection of reported diagnostics."""

    def __init__(self) -> None:
        self._entries: List[Diagnostic] = []

    def report(self, code: str, message: str, subject: object = "") -> Diagnostic:
        diag = Diagnostic(code=code, message=message, subject=str(subject))
        self._entries.append(diag)
        _logger.warning("%s", diag)
        return diag

    def entries(self) -> List[Diagnostic]:
        return list(self._entries)

    def codes(self) -> List[str]:
        return [d.code for d in self._entries]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


def report(
    log: Optional[DiagnosticLog], code: str, message: str, subject: object = ""
) -> Diagnostic:
    """Report through ``log`` when given, otherwise only emit the warning."""
    if log is not None:
        return log.report(code, message, subject)
    diag = Diagnostic(code=code, message=message, subject=str(subject))
    _logger.warning("%s", diag)
    return diag
