"""Responsive breakpoint table, validation and neighbour resolution.

A breakpoint table is an ordered mapping from a semantic name to the minimum
viewport width at which that breakpoint starts. The table is built once per
process and never mutated afterwards; all query synthesis reads from it.

Table Rules
-----------
 - The first entry must be exactly zero (the *zero breakpoint*). Every
   ``down`` / ``only`` ceiling is derived from neighbour lookups anchored on it,
   so a non-zero first entry aborts construction.
 - Names are unique.
 - Minimum widths ascend strictly. Violations (and pairs whose units cannot be
   compared, e.g. ``%`` against ``px``) are reported as diagnostics but do not
   stop construction.

Width comparisons are inclusive on the lower bound and exclusive on the upper
bound except the final, open-ended breakpoint.

Default Scale
-------------
 - xs: 0
 - sm: 544px
 - md: 768px
 - lg: 992px
 - xl: 1200px
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .diagnostics import INCOMPARABLE, NON_ASCENDING, Diagnostic, DiagnosticLog, report
from .units import (
    Dimension,
    DimensionError,
    DimensionLike,
    comparable,
    px_to_em,
    to_em,
    to_px,
)

__all__ = [
    "Breakpoint",
    "BreakpointTable",
    "BreakpointConfigError",
    "DEFAULT_BREAKPOINTS",
    "assert_ascending",
    "next_name",
    "prev_name",
    "next_min_width",
    "max_width",
    "classify_width",
]


DEFAULT_BREAKPOINTS: Tuple[Tuple[str, str], ...] = (
    ("xs", "0"),
    ("sm", "544px"),
    ("md", "768px"),
    ("lg", "992px"),
    ("xl", "1200px"),
)


class BreakpointConfigError(ValueError):
    """Raised when a breakpoint table cannot anchor query math at all."""


@dataclass(frozen=True)
class Breakpoint:
    """Named breakpoint definition.

    Attributes
    ----------
    name: str
        Semantic identifier (xs|sm|md|...).
    min_width: Dimension
        Inclusive lower boundary.
    """

    name: str
    min_width: Dimension


class BreakpointTable:
    """Immutable ordered breakpoint table.

    Parameters
    ----------
    entries: mapping of name -> width, or an iterable of ``(name, width)`` pairs.
        Mapping order is table order.
    diagnostics: optional log receiving ordering warnings.
    """

    def __init__(
        self,
        entries: Union[Mapping[str, DimensionLike], Iterable[Tuple[str, DimensionLike]]],
        diagnostics: Optional[DiagnosticLog] = None,
    ) -> None:
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        breakpoints: List[Breakpoint] = []
        index: dict[str, int] = {}
        for name, width in pairs:
            if name in index:
                raise BreakpointConfigError(f"Duplicate breakpoint name: {name}")
            try:
                dim = Dimension.parse(width)
            except DimensionError as exc:
                raise BreakpointConfigError(f"Breakpoint '{name}' has invalid width {width!r}") from exc
            index[name] = len(breakpoints)
            breakpoints.append(Breakpoint(name=name, min_width=dim))
        self._breakpoints: Tuple[Breakpoint, ...] = tuple(breakpoints)
        self._index = index
        self.warnings: Tuple[Diagnostic, ...] = tuple(assert_ascending(self._breakpoints, diagnostics))

    @classmethod
    def default(cls, diagnostics: Optional[DiagnosticLog] = None) -> "BreakpointTable":
        return cls(DEFAULT_BREAKPOINTS, diagnostics)

    # Lookup -----------------------------------------------------------
    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[Breakpoint]:
        return iter(self._breakpoints)

    def __len__(self) -> int:
        return len(self._breakpoints)

    def names(self) -> List[str]:
        return [bp.name for bp in self._breakpoints]

    def get(self, name: str) -> Breakpoint:
        idx = self._index.get(name)
        if idx is None:
            raise KeyError(f"Unknown breakpoint: {name}")
        return self._breakpoints[idx]

    def first(self) -> Breakpoint:
        return self._breakpoints[0]

    def last(self) -> Breakpoint:
        return self._breakpoints[-1]

    # Neighbours -------------------------------------------------------
    def _offset(self, name: str, step: int) -> Optional[Breakpoint]:
        idx = self._index.get(name)
        if idx is None:
            return None
        target = idx + step
        if 0 <= target < len(self._breakpoints):
            return self._breakpoints[target]
        return None

    def next_name(self, name: str) -> Optional[str]:
        bp = self._offset(name, 1)
        return bp.name if bp else None

    def prev_name(self, name: str) -> Optional[str]:
        bp = self._offset(name, -1)
        return bp.name if bp else None

    def next_min_width(self, name: str) -> Optional[Dimension]:
        bp = self._offset(name, 1)
        return bp.min_width if bp else None

    def max_width(self, name: str) -> Optional[Dimension]:
        """Exclusive ceiling of ``name`` in em (successor start minus 1px), None for the last entry."""
        upper = self.next_min_width(name)
        if upper is None:
            return None
        return to_em(upper) - px_to_em(1)

    def __repr__(self) -> str:
        body = ", ".join(f"{bp.name}={bp.min_width}" for bp in self._breakpoints)
        return f"BreakpointTable({body})"


def _as_breakpoints(
    table: Union[BreakpointTable, Sequence[Breakpoint], Mapping[str, DimensionLike]]
) -> List[Breakpoint]:
    if isinstance(table, Mapping):
        breakpoints = []
        for name, width in table.items():
            try:
                breakpoints.append(Breakpoint(name, Dimension.parse(width)))
            except DimensionError as exc:
                raise BreakpointConfigError(f"Breakpoint '{name}' has invalid width {width!r}") from exc
        return breakpoints
    return list(table)


def assert_ascending(
    table: Union[BreakpointTable, Sequence[Breakpoint], Mapping[str, DimensionLike]],
    diagnostics: Optional[DiagnosticLog] = None,
) -> List[Diagnostic]:
    """Validate table ordering.

    Returns the diagnostics reported, one per offending adjacent pair. Raises
    ``BreakpointConfigError`` when the table is empty or does not start at zero.
    """
    breakpoints = _as_breakpoints(table)
    if not breakpoints:
        raise BreakpointConfigError("Breakpoint table is empty")
    first = breakpoints[0]
    if not first.min_width.is_zero():
        raise BreakpointConfigError(
            f"First breakpoint '{first.name}' must start at 0, got {first.min_width}"
        )
    found: List[Diagnostic] = []
    for prev, cur in zip(breakpoints, breakpoints[1:]):
        if not comparable(prev.min_width, cur.min_width):
            found.append(
                report(
                    diagnostics,
                    INCOMPARABLE,
                    f"Breakpoints '{prev.name}' ({prev.min_width}) and '{cur.name}' "
                    f"({cur.min_width}) have incomparable units",
                    cur.name,
                )
            )
        elif cur.min_width.value <= prev.min_width.value:
            found.append(
                report(
                    diagnostics,
                    NON_ASCENDING,
                    f"Breakpoint '{cur.name}' ({cur.min_width}) must be greater than "
                    f"'{prev.name}' ({prev.min_width})",
                    cur.name,
                )
            )
    return found


def next_name(table: BreakpointTable, name: str) -> Optional[str]:
    return table.next_name(name)


def prev_name(table: BreakpointTable, name: str) -> Optional[str]:
    return table.prev_name(name)


def next_min_width(table: BreakpointTable, name: str) -> Optional[Dimension]:
    return table.next_min_width(name)


def max_width(table: BreakpointTable, name: str) -> Optional[Dimension]:
    return table.max_width(name)


def classify_width(table: BreakpointTable, width: DimensionLike) -> Breakpoint:
    """Return the Breakpoint whose range contains ``width`` (pixels unless a unit is given)."""
    px = to_px(width)
    if px < 0:
        raise ValueError("Width must be non-negative")
    current = table.first()
    for bp in table:
        if to_px(bp.min_width) <= px:
            current = bp
        else:
            break
    return current
