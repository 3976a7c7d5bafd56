"""Breakpoint media-query package.

Contains the breakpoint table, unit normalizer, query synthesizer, scope
wrapper, configuration loader and the visibility preset generators.
"""

from .diagnostics import Diagnostic, DiagnosticLog  # noqa: F401
from .units import (  # noqa: F401
    Dimension,
    DimensionError,
    Unit,
    strip_unit,
    to_rem,
    to_em,
    to_px,
)
from .responsive import (  # noqa: F401
    Breakpoint,
    BreakpointTable,
    BreakpointConfigError,
    assert_ascending,
    next_name,
    prev_name,
    next_min_width,
    max_width,
    classify_width,
)
from .media_query import (  # noqa: F401
    Direction,
    BreakpointQuery,
    MediaQuery,
    parse_query,
)
from .scoping import wrap_condition, with_breakpoint  # noqa: F401
from .presets import DevicePreset, build_stylesheet  # noqa: F401
from .print_stylesheet import build_print_stylesheet  # noqa: F401
from .loader import (  # noqa: F401
    BreakpointConfig,
    ConfigValidationError,
    load_config,
    config_from_mapping,
)
