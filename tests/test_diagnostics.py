"""Tests for the append-only diagnostic log."""

import logging

from design.diagnostics import NON_NUMERIC, UNKNOWN_BREAKPOINT, Diagnostic, DiagnosticLog, report


def test_report_appends_in_order(caplog):
    log = DiagnosticLog()
    with caplog.at_level(logging.WARNING, logger="design.diagnostics"):
        first = log.report(UNKNOWN_BREAKPOINT, "Breakpoint 'mega' does not exist", "mega")
        log.report(NON_NUMERIC, "'wide' is not a number", "wide")
    assert isinstance(first, Diagnostic)
    assert log.codes() == [UNKNOWN_BREAKPOINT, NON_NUMERIC]
    assert len(log) == 2
    assert [d.subject for d in log] == ["mega", "wide"]
    assert "[unknown-breakpoint] Breakpoint 'mega' does not exist" in caplog.text


def test_entries_is_a_copy():
    log = DiagnosticLog()
    log.report(NON_NUMERIC, "x")
    log.entries().clear()
    assert len(log) == 1


def test_report_without_log_only_warns(caplog):
    with caplog.at_level(logging.WARNING):
        diag = report(None, NON_NUMERIC, "'abc' is not a number", "abc")
    assert diag.code == NON_NUMERIC
    assert "non-numeric" in caplog.text
