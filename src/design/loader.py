"""Breakpoint configuration loading.

Responsibilities:
- Load the breakpoint table, base font size, identifier prefix and device
  table from JSON into a frozen ``BreakpointConfig``.
- Validate structure up front; table ordering problems are reported as
  diagnostics by ``BreakpointTable`` itself.

``baseFontSize`` from the JSON file only applies to ``BreakpointConfig.rem``.
Module-level ``units.to_rem`` calls without an explicit base keep using
``settings.BASE_FONT_SIZE``; media queries are always computed against the
16px root and ignore both.

Usage:
    from design import load_config
    config = load_config()
    mq = config.media_query()
    mq.condition("md")  # '(min-width: 48em)'
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from config import settings

from .diagnostics import DiagnosticLog
from .media_query import MediaQuery
from .presets import DevicePreset
from .responsive import BreakpointTable
from .units import Dimension, DimensionError, DimensionLike, to_rem

_logger = logging.getLogger(__name__)


class ConfigValidationError(RuntimeError):
    """Raised when required configuration fields are missing or malformed."""


@dataclass(frozen=True)
class BreakpointConfig:
    table: BreakpointTable
    base_font_size: Dimension = field(default_factory=lambda: Dimension.parse(settings.BASE_FONT_SIZE))
    prefix: str = settings.DEFAULT_PREFIX
    devices: Tuple[DevicePreset, ...] = ()

    def media_query(self, diagnostics: Optional[DiagnosticLog] = None) -> MediaQuery:
        return MediaQuery(self, diagnostics)

    def rem(self, value: DimensionLike, diagnostics: Optional[DiagnosticLog] = None) -> Any:
        """Convert ``value`` to rem against this configuration's base font size."""
        return to_rem(value, self.base_font_size, diagnostics)

    def with_prefix(self, prefix: str) -> "BreakpointConfig":
        return BreakpointConfig(
            table=self.table,
            base_font_size=self.base_font_size,
            prefix=prefix,
            devices=self.devices,
        )


def load_config(
    path: str | Path | None = None, diagnostics: Optional[DiagnosticLog] = None
) -> BreakpointConfig:
    """Load breakpoint configuration from JSON.

    Parameters
    ----------
    path: optional explicit path override (defaults to ``settings.BREAKPOINT_CONFIG``).
    diagnostics: optional log receiving table ordering warnings.
    """
    config_path = Path(path) if path else settings.BREAKPOINT_CONFIG
    if not config_path.exists():
        raise FileNotFoundError(f"Breakpoint config file not found: {config_path}")
    with config_path.open("r", encoding="utf-8") as f:
        try:
            data: Dict[str, Any] = json.load(f)
        except json.JSONDecodeError as exc:
            raise ConfigValidationError(f"Invalid JSON in {config_path}: {exc}") from exc
    _logger.debug("Loaded breakpoint config from %s", config_path)
    return config_from_mapping(data, diagnostics)


def config_from_mapping(
    data: Mapping[str, Any], diagnostics: Optional[DiagnosticLog] = None
) -> BreakpointConfig:
    _validate_config(data)
    table = BreakpointTable(data["breakpoints"], diagnostics)
    try:
        base = Dimension.parse(data.get("baseFontSize", settings.BASE_FONT_SIZE))
    except DimensionError as exc:
        raise ConfigValidationError(f"baseFontSize is not a dimension: {exc}") from exc
    devices = []
    for name, spec in data.get("devices", {}).items():
        try:
            devices.append(
                DevicePreset(
                    name=name,
                    width=Dimension.parse(spec["width"]),
                    height=Dimension.parse(spec["height"]),
                    vendor_append=spec.get("vendorAppend", ""),
                )
            )
        except DimensionError as exc:
            raise ConfigValidationError(f"Device '{name}' has an invalid dimension: {exc}") from exc
    return BreakpointConfig(
        table=table,
        base_font_size=base,
        prefix=data.get("prefix", settings.DEFAULT_PREFIX),
        devices=tuple(devices),
    )


def _validate_config(data: Mapping[str, Any]) -> None:
    if not isinstance(data, Mapping):
        raise ConfigValidationError("Breakpoint config must be a JSON object")
    if "breakpoints" not in data:
        raise ConfigValidationError("Missing top-level group: breakpoints")
    if not isinstance(data["breakpoints"], Mapping):
        raise ConfigValidationError("breakpoints must be a mapping of name -> width")
    prefix = data.get("prefix", "")
    if not isinstance(prefix, str):
        raise ConfigValidationError("prefix must be a string")
    devices = data.get("devices", {})
    if not isinstance(devices, Mapping):
        raise ConfigValidationError("devices must be a mapping of name -> dimensions")
    for name, spec in devices.items():
        if not isinstance(spec, Mapping):
            raise ConfigValidationError(f"Device '{name}' must be a mapping")
        for key in ("width", "height"):
            if key not in spec:
                raise ConfigValidationError(f"Device '{name}' missing '{key}'")
        if not isinstance(spec.get("vendorAppend", ""), str):
            raise ConfigValidationError(f"Device '{name}' vendorAppend must be a string")


__all__ = ["BreakpointConfig", "ConfigValidationError", "load_config", "config_from_mapping"]
