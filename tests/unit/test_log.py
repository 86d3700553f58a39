# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

from statuschecker import log
from statuschecker.log import resolve_log_level, setup_logging


def test_log_level_env_read_at_call_time(monkeypatch):
    monkeypatch.setenv("STATUSCHECKER_LOG_LEVEL", "debug")
    assert resolve_log_level() == logging.DEBUG
    monkeypatch.setenv("STATUSCHECKER_LOG_LEVEL", "ERROR")
    assert resolve_log_level() == logging.ERROR


def test_log_level_explicit_wins_and_unknown_falls_back(monkeypatch):
    monkeypatch.setenv("STATUSCHECKER_LOG_LEVEL", "ERROR")
    assert resolve_log_level("info") == logging.INFO
    assert resolve_log_level("chatty") == logging.WARNING
    monkeypatch.delenv("STATUSCHECKER_LOG_LEVEL")
    assert resolve_log_level() == logging.WARNING


def test_setup_logging_passes_resolved_level(monkeypatch):
    captured = {}
    monkeypatch.setattr(log.logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    monkeypatch.setenv("STATUSCHECKER_LOG_LEVEL", "INFO")
    setup_logging()
    assert captured["level"] == logging.INFO
    assert captured["format"] == log.LOG_FORMAT
