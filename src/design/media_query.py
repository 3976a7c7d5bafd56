"""Media query condition synthesis.

``MediaQuery`` turns a breakpoint reference into the bare condition expression
used inside an ``@media screen and ...`` guard. Inputs are parsed once at the
boundary into a tagged ``QueryTarget`` plus a ``Direction``; everything after
that works on the parsed variant.

Directions
----------
 - ``up``   : widths at or above the breakpoint (``min-width``)
 - ``down`` : widths at or below the breakpoint's range (``max-width``). For a
   named breakpoint the ceiling is the next breakpoint's start minus 1px; a
   raw width is used as the ceiling directly.
 - ``only`` : the named breakpoint's own range (``min-width`` and
   ``max-width``). Raw widths have no range and are rejected.

An empty string means "no guard needed": the content applies everywhere.
Invalid input is reported through the diagnostic log and degrades to the
empty condition instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Union

from .diagnostics import (
    NON_NUMERIC,
    ONLY_REQUIRES_NAME,
    UNKNOWN_BREAKPOINT,
    DiagnosticLog,
)
from .responsive import BreakpointTable
from .scoping import wrap_condition
from .units import Dimension, DimensionError, Unit, px_to_em, to_em, to_px

if TYPE_CHECKING:  # pragma: no cover
    from .loader import BreakpointConfig

__all__ = [
    "Direction",
    "Orientation",
    "OrientationTarget",
    "RetinaTarget",
    "NamedTarget",
    "WidthTarget",
    "InvalidTarget",
    "QueryTarget",
    "BreakpointQuery",
    "QueryBounds",
    "MediaQuery",
    "RETINA_CONDITION",
    "parse_query",
]

_logger = logging.getLogger(__name__)

RETINA_CONDITION = "(-webkit-min-device-pixel-ratio: 2), (min-resolution: 192dpi)"


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    ONLY = "only"

    @classmethod
    def coerce(cls, value: Any) -> "Direction":
        """Map ``value`` to a Direction; anything unrecognised means ``up``."""
        if isinstance(value, Direction):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.UP


class Orientation(str, Enum):
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"


@dataclass(frozen=True)
class OrientationTarget:
    orientation: Orientation


@dataclass(frozen=True)
class RetinaTarget:
    pass


@dataclass(frozen=True)
class NamedTarget:
    name: str


@dataclass(frozen=True)
class WidthTarget:
    width: Dimension
    # string token as written at the call site; may still name a breakpoint
    raw: Optional[str] = field(default=None, compare=False)


@dataclass(frozen=True)
class InvalidTarget:
    raw: Any


QueryTarget = Union[OrientationTarget, RetinaTarget, NamedTarget, WidthTarget, InvalidTarget]


@dataclass(frozen=True)
class BreakpointQuery:
    target: QueryTarget
    direction: Direction = Direction.UP


@dataclass(frozen=True)
class QueryBounds:
    """Resolved width bounds in em; ``upper`` is inclusive. Both None = unconditional."""

    lower: Optional[Dimension] = None
    upper: Optional[Dimension] = None

    def is_unconditional(self) -> bool:
        return self.lower is None and self.upper is None


def _parse_target(value: Any) -> QueryTarget:
    if isinstance(value, Dimension):
        return WidthTarget(value)
    if isinstance(value, bool):
        return InvalidTarget(value)
    if isinstance(value, (int, float)):
        try:
            return WidthTarget(Dimension.parse(value))
        except DimensionError:
            return InvalidTarget(value)
    if isinstance(value, str):
        token = value.strip()
        lowered = token.lower()
        if lowered in (Orientation.LANDSCAPE.value, Orientation.PORTRAIT.value):
            return OrientationTarget(Orientation(lowered))
        if lowered == "retina":
            return RetinaTarget()
        try:
            return WidthTarget(Dimension.parse(token), raw=token)
        except DimensionError:
            return NamedTarget(token)
    return InvalidTarget(value)


def parse_query(value: Any, direction: Any = None) -> BreakpointQuery:
    """Parse a call-site token into a ``BreakpointQuery``.

    Accepts a breakpoint name, a width (number, ``Dimension`` or ``"320px"``),
    a ``(value, direction)`` pair, or one of ``landscape`` / ``portrait`` /
    ``retina``. An explicit ``direction`` argument wins over a pair's.
    """
    if isinstance(value, BreakpointQuery):
        if direction is None:
            return value
        return BreakpointQuery(value.target, Direction.coerce(direction))
    if isinstance(value, (tuple, list)):
        if len(value) == 2:
            value, pair_direction = value
            if direction is None:
                direction = pair_direction
        else:
            return BreakpointQuery(InvalidTarget(tuple(value)), Direction.coerce(direction))
    return BreakpointQuery(_parse_target(value), Direction.coerce(direction))


class MediaQuery:
    """Query synthesizer bound to one breakpoint table.

    Construct once per process and pass the instance to every call site.
    """

    def __init__(
        self,
        config: Union["BreakpointConfig", BreakpointTable, None] = None,
        diagnostics: Optional[DiagnosticLog] = None,
    ) -> None:
        if config is None:
            config = BreakpointTable.default(diagnostics)
        if isinstance(config, BreakpointTable):
            self.table = config
            self.prefix = ""
        else:
            self.table = config.table
            self.prefix = config.prefix
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()

    # Resolution -------------------------------------------------------
    def _em(self, width: Dimension) -> Optional[Dimension]:
        converted = to_em(width, self.diagnostics)
        if isinstance(converted, Dimension) and converted.unit is Unit.EM:
            return converted
        return None

    def bounds(self, value: Any, direction: Any = None) -> QueryBounds:
        """Resolve a width query to em bounds (raises for orientation/retina targets)."""
        query = parse_query(value, direction)
        target = query.target
        if isinstance(target, (OrientationTarget, RetinaTarget)):
            raise ValueError(f"{target} has no width bounds")
        return self._resolve(target, query.direction)

    def _resolve(self, target: QueryTarget, direction: Direction) -> QueryBounds:
        if isinstance(target, WidthTarget) and target.raw is not None and target.raw in self.table:
            target = NamedTarget(target.raw)
        ceiling_source: Optional[Dimension] = None
        if isinstance(target, NamedTarget):
            named = True
            if target.name in self.table:
                lower = self.table.get(target.name).min_width
                if direction in (Direction.DOWN, Direction.ONLY):
                    ceiling_source = self.table.next_min_width(target.name)
            else:
                self.diagnostics.report(
                    UNKNOWN_BREAKPOINT,
                    f"Breakpoint '{target.name}' does not exist; "
                    f"expected one of {', '.join(self.table.names())}",
                    target.name,
                )
                lower = Dimension(0)
        elif isinstance(target, WidthTarget):
            named = False
            lower = target.width
        else:
            self.diagnostics.report(
                NON_NUMERIC, f"{getattr(target, 'raw', target)!r} is not a breakpoint or width", target
            )
            return QueryBounds()

        lower_em = self._em(lower)
        if lower_em is None:
            return QueryBounds()
        ceiling: Optional[Dimension] = None
        if ceiling_source is not None:
            upper_em = self._em(ceiling_source)
            if upper_em is None:
                return QueryBounds()
            ceiling = upper_em - px_to_em(1)

        if lower_em.is_zero() and direction is Direction.UP:
            return QueryBounds()
        if direction is Direction.ONLY:
            if not named:
                self.diagnostics.report(
                    ONLY_REQUIRES_NAME,
                    f"Direction 'only' needs a breakpoint name, got width {lower}",
                    lower,
                )
                return QueryBounds()
            return QueryBounds(lower=None if lower_em.is_zero() else lower_em, upper=ceiling)
        if direction is Direction.DOWN:
            if named:
                return QueryBounds(upper=ceiling)
            return QueryBounds(upper=lower_em)
        return QueryBounds(lower=lower_em)

    # Public API -------------------------------------------------------
    def condition(self, value: Any, direction: Any = None) -> str:
        """Return the condition expression for ``value``/``direction`` ("" = unconditional)."""
        query = parse_query(value, direction)
        target = query.target
        if isinstance(target, OrientationTarget):
            return f"(orientation: {target.orientation.value})"
        if isinstance(target, RetinaTarget):
            return RETINA_CONDITION
        bounds = self._resolve(target, query.direction)
        clauses = []
        if bounds.lower is not None:
            clauses.append(f"(min-width: {bounds.lower})")
        if bounds.upper is not None:
            clauses.append(f"(max-width: {bounds.upper})")
        result = " and ".join(clauses)
        _logger.debug("media query %r %s -> %r", value, query.direction.value, result)
        return result

    synthesize = condition

    def wrap(self, value: Any, direction: Any, content: str) -> str:
        """Guard ``content`` with the synthesized condition (unwrapped when unconditional)."""
        return wrap_condition(self.condition(value, direction), content)

    def applies(self, value: Any, direction: Any, width: Any) -> bool:
        """Plain-conditional form: does a viewport ``width`` (px by default) satisfy the query?"""
        bounds = self.bounds(value, direction)
        px = to_px(width)
        if bounds.lower is not None and px < to_px(bounds.lower):
            return False
        if bounds.upper is not None and px > to_px(bounds.upper):
            return False
        return True
