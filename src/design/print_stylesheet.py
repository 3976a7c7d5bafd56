"""Print visibility toggles.

Generates the fixed, breakpoint-independent utility classes that show or hide
elements when a page is printed:

- ``<prefix>visible-print-block`` / ``-inline`` / ``-inline-block``: hidden on
  screen, displayed with the matching ``display`` value in print.
- ``<prefix>hidden-print``: hidden in print only.

Deterministic output string for easy snapshot testing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .scoping import media_block

__all__ = ["PRINT_DISPLAYS", "PrintStylesheetMeta", "display_rule", "print_identifiers", "build_print_stylesheet"]

PRINT_DISPLAYS: Tuple[str, ...] = ("block", "inline", "inline-block")

_DISPLAY_RULE_TEMPLATE = ".{ident} {{\n  display: {display} !important;\n}}\n"


@dataclass(frozen=True)
class PrintStylesheetMeta:
    lines: int
    identifiers: Tuple[str, ...]


def display_rule(ident: str, display: str) -> str:
    return _DISPLAY_RULE_TEMPLATE.format(ident=ident, display=display)


def print_identifiers(prefix: str = "") -> List[str]:
    idents = [f"{prefix}visible-print-{display}" for display in PRINT_DISPLAYS]
    idents.append(f"{prefix}hidden-print")
    return idents


def build_print_stylesheet(prefix: str = "") -> tuple[str, PrintStylesheetMeta]:
    """Build the print toggle stylesheet and metadata.

    Returns
    -------
    (stylesheet, meta) tuple where stylesheet is a deterministic string.
    """
    parts: List[str] = []
    for display in PRINT_DISPLAYS:
        ident = f"{prefix}visible-print-{display}"
        parts.append(display_rule(ident, "none"))
        parts.append(media_block("print", display_rule(ident, display)))
    parts.append(media_block("print", display_rule(f"{prefix}hidden-print", "none")))
    stylesheet = "\n".join(parts)
    meta = PrintStylesheetMeta(
        lines=len(stylesheet.strip().splitlines()),
        identifiers=tuple(print_identifiers(prefix)),
    )
    return stylesheet, meta
