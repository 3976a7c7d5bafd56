"""Conditional scope emission.

This is the only module that writes ``@media`` block syntax. Query synthesis
returns bare condition expressions; wrapping them is kept separate so both
halves can be tested on their own.
"""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .media_query import MediaQuery

__all__ = ["INDENT", "media_block", "wrap_condition", "with_breakpoint"]

INDENT = "  "


def media_block(prelude: str, content: str, indent: str = INDENT) -> str:
    """Nest ``content`` one level inside ``@media <prelude> { ... }``."""
    body = textwrap.indent(content.strip("\n"), indent)
    return f"@media {prelude} {{\n{body}\n}}\n"


def _alternatives(condition: str) -> List[str]:
    return [part.strip() for part in condition.split(",") if part.strip()]


def wrap_condition(condition: str, content: str, media_type: Optional[str] = "screen") -> str:
    """Guard ``content`` with ``<media_type> and <condition>``.

    An empty condition returns ``content`` untouched. Comma separated
    alternatives (e.g. the retina condition) each get the media type.
    """
    if not condition:
        return content
    alternatives = _alternatives(condition)
    if media_type:
        prelude = ", ".join(f"{media_type} and {alt}" for alt in alternatives)
    else:
        prelude = ", ".join(alternatives)
    return media_block(prelude, content)


def with_breakpoint(query: "MediaQuery", value: Any, direction: Any, content: str) -> str:
    return wrap_condition(query.condition(value, direction), content)
