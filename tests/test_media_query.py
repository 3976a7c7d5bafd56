"""Tests for media query condition synthesis."""

import pytest

from design.diagnostics import DiagnosticLog
from design.media_query import (
    RETINA_CONDITION,
    BreakpointQuery,
    Direction,
    InvalidTarget,
    MediaQuery,
    NamedTarget,
    OrientationTarget,
    RetinaTarget,
    WidthTarget,
    parse_query,
)
from design.responsive import BreakpointTable
from design.units import Dimension, Unit


@pytest.fixture
def mq():
    return MediaQuery(BreakpointTable({"xs": 0, "sm": "544px", "md": "768px", "lg": "992px"}))


def test_parse_query_variants():
    assert parse_query("md") == BreakpointQuery(NamedTarget("md"), Direction.UP)
    assert parse_query(("md", "down")) == BreakpointQuery(NamedTarget("md"), Direction.DOWN)
    assert parse_query(["sm", "ONLY"]).direction is Direction.ONLY
    assert parse_query(320).target == WidthTarget(Dimension(320.0))
    assert parse_query("48em").target == WidthTarget(Dimension(48.0, Unit.EM))
    assert isinstance(parse_query("Landscape").target, OrientationTarget)
    assert isinstance(parse_query("retina").target, RetinaTarget)
    assert isinstance(parse_query(None).target, InvalidTarget)
    assert isinstance(parse_query(("a", "b", "c")).target, InvalidTarget)


def test_explicit_direction_overrides_pair():
    assert parse_query(("md", "down"), "only").direction is Direction.ONLY


def test_unknown_direction_means_up():
    assert Direction.coerce("sideways") is Direction.UP
    assert Direction.coerce(None) is Direction.UP


def test_zero_breakpoint_up_is_unconditional(mq):
    assert mq.condition("xs") == ""
    assert mq.condition("xs", "up") == ""
    assert mq.condition(0) == ""


def test_named_up(mq):
    assert mq.condition("md") == "(min-width: 48em)"
    assert mq.condition("sm", Direction.UP) == "(min-width: 34em)"


def test_named_down_uses_next_breakpoint_minus_one_pixel(mq):
    assert mq.condition("sm", "down") == "(max-width: 47.9375em)"
    assert mq.condition(("md", "down")) == "(max-width: 61.9375em)"
    assert mq.condition("xs", "down") == "(max-width: 33.9375em)"


def test_named_only_combines_bounds(mq):
    assert mq.condition("sm", "only") == "(min-width: 34em) and (max-width: 47.9375em)"


def test_only_on_zero_breakpoint_has_no_leading_and(mq):
    assert mq.condition("xs", "only") == "(max-width: 33.9375em)"


def test_largest_breakpoint(mq):
    assert mq.condition("lg", "down") == ""
    assert mq.condition("lg", "only") == "(min-width: 62em)"


def test_only_on_single_zero_breakpoint_table():
    single = MediaQuery(BreakpointTable({"all": 0}))
    assert single.condition("all", "only") == ""


def test_numeric_widths(mq):
    assert mq.condition(320) == "(min-width: 20em)"
    assert mq.condition("320px", "up") == "(min-width: 20em)"
    assert mq.condition("30em") == "(min-width: 30em)"
    assert mq.condition("2rem") == "(min-width: 2em)"
    assert mq.condition(320, "down") == "(max-width: 20em)"


def test_numeric_only_is_reported(mq):
    assert mq.condition(320, "only") == ""
    assert mq.diagnostics.codes() == ["only-requires-name"]


def test_orientation_and_retina_ignore_direction(mq):
    for direction in ("up", "down", "only", None):
        assert mq.condition("landscape", direction) == "(orientation: landscape)"
        assert mq.condition("portrait", direction) == "(orientation: portrait)"
        assert mq.condition("retina", direction) == RETINA_CONDITION


def test_unknown_name_degrades_to_unconditional():
    log = DiagnosticLog()
    mq = MediaQuery(BreakpointTable.default(), log)
    assert mq.condition("mega") == ""
    assert mq.condition("mega", "down") == ""
    assert mq.condition("mega", "only") == ""
    assert log.codes() == ["unknown-breakpoint"] * 3
    # other queries are unaffected
    assert mq.condition("md") == "(min-width: 48em)"


def test_percent_width_reported(mq):
    assert mq.condition("50%") == ""
    assert mq.diagnostics.codes() == ["unsupported-unit"]


def test_invalid_value_reported(mq):
    assert mq.condition(None) == ""
    assert mq.condition(True) == ""
    assert mq.diagnostics.codes() == ["non-numeric", "non-numeric"]


def test_synthesize_alias(mq):
    assert mq.synthesize("md", "up") == mq.condition("md")


def test_applies_only_ranges(mq):
    assert mq.applies("sm", "only", 544)
    assert mq.applies("sm", "only", 767)
    assert not mq.applies("sm", "only", 543)
    assert not mq.applies("sm", "only", 768)
    assert mq.applies("xs", "up", 0)
    assert mq.applies("md", "down", 991)
    assert not mq.applies("md", "down", 992)
    assert mq.applies(320, "down", "20em")


def test_only_ranges_neither_overlap_nor_gap(mq):
    names = mq.table.names()
    for width in range(0, 1400):
        matching = [n for n in names if mq.applies(n, "only", width)]
        assert len(matching) == 1, (width, matching)


def test_applies_rejects_non_width_targets(mq):
    with pytest.raises(ValueError):
        mq.applies("landscape", None, 800)
    with pytest.raises(ValueError):
        mq.bounds("retina")


def test_default_table_used_when_no_config():
    assert MediaQuery().condition("xl") == "(min-width: 75em)"


@pytest.mark.parametrize("bad", [float("nan"), float("inf")])
def test_non_finite_width_degrades_to_unconditional(mq, bad):
    assert mq.condition(bad) == ""
    assert mq.condition(bad, "down") == ""
    assert mq.diagnostics.codes() == ["non-numeric", "non-numeric"]


def test_numeric_looking_names_resolve_from_table():
    log = DiagnosticLog()
    numeric = MediaQuery(BreakpointTable({"0": 0, "600": "37.5em", "900": "56.25em"}), log)
    assert numeric.condition("600", "only") == "(min-width: 37.5em) and (max-width: 56.1875em)"
    assert numeric.condition("600", "down") == "(max-width: 56.1875em)"
    assert numeric.condition("0", "only") == "(max-width: 37.4375em)"
    assert log.codes() == []
    # widths that are not table names still work as raw widths
    assert numeric.condition("640px") == "(min-width: 40em)"
    assert numeric.condition(600, "only") == ""
    assert log.codes() == ["only-requires-name"]
