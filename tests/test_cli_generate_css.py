"""Tests for the generate_css CLI."""

import json
from pathlib import Path

import pytest

from cli.generate_css import main


def test_query_output(capsys):
    assert main(["--query", "md", "--query", "sm:only", "--query", "320px:down"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "md\t(min-width: 48em)",
        "sm:only\t(min-width: 34em) and (max-width: 47.9375em)",
        "320px:down\t(max-width: 20em)",
    ]


def test_stylesheet_to_stdout(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert ".hidden-md-above" in out
    assert "@media print {" in out


def test_stylesheet_to_file_with_prefix(tmp_path: Path, capsys):
    target = tmp_path / "dist" / "visibility.css"
    assert main(["--output", str(target), "--prefix", "u-"]) == 0
    css = target.read_text(encoding="utf-8")
    assert ".u-hidden-sm-below" in css
    assert "Stylesheet written" in capsys.readouterr().out


def test_strict_mode_fails_on_diagnostics():
    assert main(["--query", "mega"]) == 0
    assert main(["--strict", "--query", "mega"]) == 1


def test_bad_config_exits_with_usage_error(tmp_path: Path):
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"breakpoints": {"sm": "544px"}}), encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(bad)])
    assert exc.value.code == 2
    with pytest.raises(SystemExit):
        main(["--config", str(tmp_path / "missing.json")])


def test_malformed_json_config_exits_with_usage_error(tmp_path: Path):
    bad = tmp_path / "broken.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(bad)])
    assert exc.value.code == 2
