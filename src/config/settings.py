"""Global configuration and constants for breakpoint query generation."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

# Browser default root font size; all px <-> rem/em math is anchored on it.
ROOT_FONT_SIZE_PX: Final = 16
# Base font size used by to_rem when the caller supplies none (px, % or rem).
BASE_FONT_SIZE: Final = os.environ.get("BREAKPOINTS_BASE_FONT_SIZE", "100%")
# Identifier prefix prepended to generated utility classes.
DEFAULT_PREFIX: Final = os.environ.get("BREAKPOINTS_PREFIX", "")
# Decimal places kept when rendering dimensions (matches Sass default precision).
OUTPUT_PRECISION: Final = 5

DEFAULT_CONFIG_PATH: Final = Path(__file__).resolve().parent.parent / "design" / "breakpoints.json"
BREAKPOINT_CONFIG: Final = Path(
    os.environ.get("BREAKPOINTS_CONFIG_PATH", str(DEFAULT_CONFIG_PATH))
)
