"""Unit normalization for breakpoint widths.

Breakpoint thresholds arrive as pixels, rems, ems, percentages or bare
numbers. Media queries are always emitted in ``em`` so that user zoom and
root font size changes scale the breakpoints consistently. Conversion is a
two-step path: px (or unitless) -> rem against a base font size, then the
rem magnitude is relabelled as em. The base-font logic therefore lives in
exactly one place (``to_rem``).

Rules
-----
 - ``strip_unit`` returns the bare magnitude for every unit, unitless included.
 - ``to_rem`` passes rem through untouched, except exact zero which becomes a
   unitless ``0`` (comparable against anything).
 - A percentage base converts as ``percent / 100 * 16px``; a rem base as
   ``value * 16px``.
 - Non-numeric input is reported and echoed back unchanged.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from config import settings

from .diagnostics import NON_NUMERIC, UNSUPPORTED_UNIT, DiagnosticLog, report

__all__ = [
    "Unit",
    "Dimension",
    "DimensionError",
    "DimensionLike",
    "format_number",
    "comparable",
    "strip_unit",
    "to_rem",
    "to_em",
    "px_to_em",
    "to_px",
]


class DimensionError(ValueError):
    """Raised when a value cannot be interpreted as a dimension."""


class Unit(str, Enum):
    PX = "px"
    REM = "rem"
    EM = "em"
    PERCENT = "%"
    NONE = ""


_DIMENSION_RE = re.compile(r"^\s*(-?(?:\d+(?:\.\d*)?|\.\d+))\s*(px|rem|em|%)?\s*$", re.IGNORECASE)


def format_number(value: float, precision: int = settings.OUTPUT_PRECISION) -> str:
    """Render ``value`` with at most ``precision`` decimals and no trailing zeros."""
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


@dataclass(frozen=True)
class Dimension:
    """Numeric magnitude tagged with a unit."""

    value: float
    unit: Unit = Unit.NONE

    @classmethod
    def parse(cls, token: Any) -> "Dimension":
        if isinstance(token, Dimension):
            return token
        if isinstance(token, bool):
            raise DimensionError(f"Not a dimension: {token!r}")
        if isinstance(token, (int, float)):
            if not math.isfinite(token):
                raise DimensionError(f"Not a finite dimension: {token!r}")
            return cls(float(token))
        if isinstance(token, str):
            match = _DIMENSION_RE.match(token)
            if match:
                return cls(float(match.group(1)), Unit((match.group(2) or "").lower()))
        raise DimensionError(f"Not a dimension: {token!r}")

    def is_zero(self) -> bool:
        return self.value == 0

    def relabel(self, unit: Unit) -> "Dimension":
        return Dimension(self.value, unit)

    def __sub__(self, other: "Dimension") -> "Dimension":
        if not comparable(self, other):
            raise DimensionError(f"Incompatible units: {self} - {other}")
        unit = self.unit if self.unit is not Unit.NONE else other.unit
        return Dimension(self.value - other.value, unit)

    def __str__(self) -> str:
        if self.is_zero() and self.unit is Unit.NONE:
            return "0"
        return f"{format_number(self.value)}{self.unit.value}"


DimensionLike = Union[Dimension, int, float, str]


def comparable(a: Dimension, b: Dimension) -> bool:
    """Return True when ``a`` and ``b`` can be ordered against each other.

    Equal units compare; a unitless side or an exact zero compares with anything.
    """
    if a.unit is b.unit:
        return True
    if Unit.NONE in (a.unit, b.unit):
        return True
    return a.is_zero() or b.is_zero()


def _coerce(value: Any, diagnostics: Optional[DiagnosticLog]) -> Optional[Dimension]:
    try:
        return Dimension.parse(value)
    except DimensionError:
        report(diagnostics, NON_NUMERIC, f"{value!r} is not a number", value)
        return None


def strip_unit(dimension: DimensionLike) -> float:
    return Dimension.parse(dimension).value


def _base_px(base: Optional[DimensionLike]) -> float:
    dim = Dimension.parse(settings.BASE_FONT_SIZE if base is None else base)
    if dim.unit is Unit.PERCENT:
        px = dim.value / 100 * settings.ROOT_FONT_SIZE_PX
    elif dim.unit in (Unit.REM, Unit.EM):
        px = dim.value * settings.ROOT_FONT_SIZE_PX
    else:
        px = dim.value
    if px == 0:
        raise DimensionError(f"Base font size must be non-zero, got {dim}")
    return px


def to_rem(
    dimension: Any,
    base: Optional[DimensionLike] = None,
    diagnostics: Optional[DiagnosticLog] = None,
) -> Any:
    """Convert ``dimension`` to rem relative to ``base`` (default: configured base font size)."""
    dim = _coerce(dimension, diagnostics)
    if dim is None:
        return dimension
    if dim.unit is Unit.REM:
        return Dimension(0) if dim.is_zero() else dim
    return Dimension(dim.value / _base_px(base), Unit.REM)


def to_em(dimension: Any, diagnostics: Optional[DiagnosticLog] = None) -> Any:
    """Convert ``dimension`` to em (px and unitless go through ``to_rem`` at 16px)."""
    dim = _coerce(dimension, diagnostics)
    if dim is None:
        return dimension
    if dim.unit in (Unit.PX, Unit.NONE):
        rem = to_rem(dim, Dimension(settings.ROOT_FONT_SIZE_PX, Unit.PX), diagnostics)
        return rem.relabel(Unit.EM)
    if dim.unit in (Unit.REM, Unit.EM):
        return dim.relabel(Unit.EM)
    report(diagnostics, UNSUPPORTED_UNIT, f"Cannot convert {dim} to em", dim)
    return dimension


def px_to_em(px: float) -> Dimension:
    return Dimension(px / settings.ROOT_FONT_SIZE_PX, Unit.EM)


def to_px(dimension: DimensionLike) -> float:
    """Return the pixel magnitude of ``dimension`` at the root font size."""
    dim = Dimension.parse(dimension)
    if dim.unit in (Unit.REM, Unit.EM):
        return dim.value * settings.ROOT_FONT_SIZE_PX
    if dim.unit is Unit.PERCENT:
        raise DimensionError(f"Cannot express {dim} in pixels")
    return dim.value
