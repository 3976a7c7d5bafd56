"""Device and breakpoint visibility presets.

Mechanical templating over the query synthesizer. Three rule families:

Device toggles
    For each device preset (name, width, height, vendor append) the classes
    ``<prefix><name>``, ``<prefix><name>-landscape`` and
    ``<prefix><name>-portrait`` are hidden by default and shown inside a
    ``min-device-width`` / ``max-device-width`` guard (plus orientation for the
    two variants). These use fixed device conditions, not breakpoint math.
Breakpoint toggles
    ``<prefix>hidden-<name>-below`` hides below the breakpoint's start (the
    predecessor's ``down`` range; none for the zero breakpoint).
    ``<prefix>hidden-<name>-above`` hides from the breakpoint up
    (unconditional for the zero breakpoint).
Print toggles
    See ``print_stylesheet``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from .diagnostics import DiagnosticLog
from .media_query import Direction, MediaQuery, Orientation
from .print_stylesheet import build_print_stylesheet, display_rule
from .scoping import media_block, wrap_condition
from .units import Dimension

if TYPE_CHECKING:  # pragma: no cover
    from .loader import BreakpointConfig

__all__ = [
    "DevicePreset",
    "StylesheetMeta",
    "device_rules",
    "breakpoint_rules",
    "build_stylesheet",
]

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DevicePreset:
    name: str
    width: Dimension
    height: Dimension
    vendor_append: str = ""

    def condition(self, orientation: Optional[Orientation] = None) -> str:
        clauses = [f"(min-device-width: {self.width})", f"(max-device-width: {self.height})"]
        if orientation is not None:
            clauses.append(f"(orientation: {orientation.value})")
        condition = " and ".join(clauses)
        if self.vendor_append:
            condition = f"{condition} {self.vendor_append.strip()}"
        return condition

    def variants(self, prefix: str = "") -> List[Tuple[str, str]]:
        """Return ``(identifier, condition)`` for the base, landscape and portrait toggles."""
        ident = f"{prefix}{self.name}"
        return [
            (ident, self.condition()),
            (f"{ident}-landscape", self.condition(Orientation.LANDSCAPE)),
            (f"{ident}-portrait", self.condition(Orientation.PORTRAIT)),
        ]


@dataclass(frozen=True)
class StylesheetMeta:
    rules: int
    identifiers: Tuple[str, ...]
    devices: int
    breakpoints: int


def device_rules(devices: Iterable[DevicePreset], prefix: str = "") -> List[Tuple[str, str]]:
    """Return ``(identifier, css)`` pairs for every device toggle."""
    rules: List[Tuple[str, str]] = []
    for device in devices:
        for ident, condition in device.variants(prefix):
            css = display_rule(ident, "none") + "\n" + media_block(
                f"only screen and {condition}", display_rule(ident, "block")
            )
            rules.append((ident, css))
    return rules


def breakpoint_rules(mq: MediaQuery, prefix: str = "") -> List[Tuple[str, str]]:
    """Return ``(identifier, css)`` pairs for the hidden-below / hidden-above toggles."""
    rules: List[Tuple[str, str]] = []
    for bp in mq.table:
        previous = mq.table.prev_name(bp.name)
        if previous is not None:
            ident = f"{prefix}hidden-{bp.name}-below"
            condition = mq.condition(previous, Direction.DOWN)
            rules.append((ident, wrap_condition(condition, display_rule(ident, "none"))))
        ident = f"{prefix}hidden-{bp.name}-above"
        condition = mq.condition(bp.name, Direction.UP)
        rules.append((ident, wrap_condition(condition, display_rule(ident, "none"))))
    return rules


def build_stylesheet(
    config: "BreakpointConfig", diagnostics: Optional[DiagnosticLog] = None
) -> tuple[str, StylesheetMeta]:
    """Render every visibility toggle for ``config`` as one deterministic stylesheet."""
    mq = config.media_query(diagnostics)
    device = device_rules(config.devices, config.prefix)
    breakpoint = breakpoint_rules(mq, config.prefix)
    print_css, print_meta = build_print_stylesheet(config.prefix)
    parts = [css for _, css in device] + [css for _, css in breakpoint] + [print_css]
    stylesheet = "\n".join(parts)
    identifiers = tuple(ident for ident, _ in device + breakpoint) + print_meta.identifiers
    meta = StylesheetMeta(
        rules=len(identifiers),
        identifiers=identifiers,
        devices=len(config.devices),
        breakpoints=len(mq.table),
    )
    _logger.info(
        "Built stylesheet: %d toggles (%d devices, %d breakpoints)",
        meta.rules,
        meta.devices,
        meta.breakpoints,
    )
    return stylesheet, meta
