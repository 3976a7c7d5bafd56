"""Tests for breakpoint configuration loading."""

import json
from pathlib import Path

import pytest

from design import BreakpointConfigError, ConfigValidationError, DiagnosticLog, load_config
from design.loader import BreakpointConfig, config_from_mapping
from design.units import Dimension, Unit


def _write(tmp_path: Path, data) -> Path:
    p = tmp_path / "breakpoints.json"
    p.write_text(json.dumps(data), encoding="utf-8")
    return p


def test_load_config_default():
    config = load_config()
    assert isinstance(config, BreakpointConfig)
    assert config.table.names() == ["xs", "sm", "md", "lg", "xl"]
    assert config.base_font_size == Dimension(100, Unit.PERCENT)
    assert len(config.devices) == 7
    assert config.devices[0].name == "iphone-4"


def test_media_query_from_config():
    mq = load_config().media_query()
    assert mq.condition("md") == "(min-width: 48em)"


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.json")


def test_custom_config(tmp_path: Path):
    path = _write(
        tmp_path,
        {
            "baseFontSize": "20px",
            "prefix": "bp-",
            "breakpoints": {"small": 0, "large": "960px"},
            "devices": {"tablet": {"width": "600px", "height": "960px"}},
        },
    )
    config = load_config(path)
    assert config.prefix == "bp-"
    assert config.devices[0].vendor_append == ""
    assert config.rem("40px") == Dimension(2.0, Unit.REM)
    assert config.media_query().condition("small", "down") == "(max-width: 59.9375em)"


def test_ordering_warnings_collected(tmp_path: Path):
    log = DiagnosticLog()
    path = _write(tmp_path, {"breakpoints": {"xs": 0, "sm": "800px", "md": "700px"}})
    config = load_config(path, log)
    assert log.codes() == ["non-ascending"]
    assert len(config.table) == 3


def test_non_zero_first_breakpoint_aborts():
    with pytest.raises(BreakpointConfigError):
        config_from_mapping({"breakpoints": {"sm": "544px"}})


@pytest.mark.parametrize(
    "bad",
    [
        {},
        {"breakpoints": ["xs", 0]},
        {"breakpoints": {"xs": 0}, "prefix": 3},
        {"breakpoints": {"xs": 0}, "devices": []},
        {"breakpoints": {"xs": 0}, "devices": {"phone": {"width": "320px"}}},
        {"breakpoints": {"xs": 0}, "devices": {"phone": {"width": "320px", "height": "tall"}}},
        {"breakpoints": {"xs": 0}, "baseFontSize": "large"},
    ],
)
def test_validation_errors(bad):
    with pytest.raises(ConfigValidationError):
        config_from_mapping(bad)


def test_malformed_json_raises_validation_error(tmp_path: Path):
    p = tmp_path / "broken.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigValidationError):
        load_config(p)


def test_base_font_size_only_applies_to_config_rem():
    config = config_from_mapping({"baseFontSize": "200%", "breakpoints": {"xs": 0, "md": "768px"}})
    # 200% of 16px = 32px
    assert config.rem("64px") == Dimension(2.0, Unit.REM)
    # media queries stay anchored on the 16px root
    assert config.media_query().condition("md") == "(min-width: 48em)"
