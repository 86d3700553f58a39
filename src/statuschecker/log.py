# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for statuschecker."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(threadName)s %(name)s: %(message)s"


def resolve_log_level(level: str | None = None) -> int:
    """Explicit level, else STATUSCHECKER_LOG_LEVEL (read at call time), else WARNING."""
    name = (level or os.getenv("STATUSCHECKER_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT)


__all__ = ["resolve_log_level", "setup_logging"]
