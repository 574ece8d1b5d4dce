#!/usr/bin/env python3
"""
Tests for the console logger.
"""

import io

from PSO_ENGINE.Logs import logger


class FakeTerminal(io.StringIO):
    def isatty(self):
        return True


def test_log_line_format(capsys):
    logger.log_info("hello swarm", "PSO")
    out = capsys.readouterr().out
    assert "[PSO         ] hello swarm" in out
    assert "\033[" not in out  # captured stdout is not a terminal


def test_debug_only_when_enabled(capsys, monkeypatch):
    monkeypatch.setattr(logger, "DEBUG", False)
    logger.log_debug("hidden", "PSO")
    assert capsys.readouterr().out == ""

    logger.set_debug(True)
    logger.log_debug("visible", "PSO")
    assert "visible" in capsys.readouterr().out


def test_color_on_terminal(monkeypatch):
    monkeypatch.setattr(logger, "ENABLE_COLOR", True)
    stream = FakeTerminal()
    logger.log("warned", "PSO", "warning", stream=stream)
    assert logger.Colors.BOLD_YELLOW + "warned" + logger.Colors.RESET in stream.getvalue()

    logger.set_color(False)
    stream = FakeTerminal()
    logger.log("plain", "PSO", "warning", stream=stream)
    assert "\033[" not in stream.getvalue()
