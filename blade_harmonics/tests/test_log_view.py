"""Tests for the HTML log panel."""

import ipywidgets as w

from blade_harmonics.gui.log_view import HtmlLog


def test_empty_log_renders_placeholder():
    log = HtmlLog()
    assert log.entries == []
    assert "Log is empty." in log.widget.value
    assert log.panel is log.widget


def test_titled_log_has_panel():
    log = HtmlLog(title="Log")
    assert isinstance(log.panel, w.VBox)
    assert log.widget in log.panel.children


def test_consecutive_duplicates_are_coalesced():
    log = HtmlLog()
    for _ in range(3):
        log.info("B=3, Δψ=0.00, N=360, subtract_mean=False")
    log.warning("WARNING: x")
    log.info("B=3, Δψ=0.00, N=360, subtract_mean=False")
    assert [c for _, _, c in log.entries] == [3, 1, 1]
    assert "(x3)" in log.widget.value


def test_history_is_bounded():
    log = HtmlLog(max_entries=5)
    for i in range(12):
        log.info(f"line {i}")
    msgs = [m for _, m, _ in log.entries]
    assert msgs == [f"line {i}" for i in range(7, 12)]


def test_write_classifies_each_line():
    log = HtmlLog()
    log.write("ERROR: boom\nWARNING: careful\n<b>plain</b>")
    assert log.entries == [("error", "ERROR: boom", 1), ("warning", "WARNING: careful", 1), ("info", "plain", 1)]
    assert "#b00020" in log.widget.value


def test_messages_are_html_escaped():
    log = HtmlLog()
    log.info("a < b & c")
    assert "a &lt; b &amp; c" in log.widget.value


def test_output_proxy_captures_print():
    log = HtmlLog()
    with log.output_proxy():
        print("recomputed")
        print("ERROR: bad input")
    assert log.entries == [("info", "recomputed", 1), ("error", "ERROR: bad input", 1)]


def test_output_proxy_clear_output_clears_log():
    log = HtmlLog()
    log.info("x")
    log.output_proxy().clear_output(wait=True)
    assert log.entries == []
