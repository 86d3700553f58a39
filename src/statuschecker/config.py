# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for statuschecker."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"statuschecker/{__version__}"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class CheckerSettings:
    """Run and HTTP client defaults."""

    workers: int = 4
    timeout: float = 5.0
    retries: int = 0
    backoff_delay: float = 0.1
    backoff_factor: float = 1.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    output_path: str = "status.json"

    @classmethod
    def from_env(cls) -> "CheckerSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            workers=_int_env("STATUSCHECKER_WORKERS", cls.workers),
            timeout=_float_env("STATUSCHECKER_TIMEOUT", cls.timeout),
            retries=_int_env("STATUSCHECKER_RETRIES", cls.retries),
            backoff_delay=_float_env("STATUSCHECKER_BACKOFF_DELAY", cls.backoff_delay),
            backoff_factor=_float_env("STATUSCHECKER_BACKOFF_FACTOR", cls.backoff_factor),
            user_agent=os.getenv("STATUSCHECKER_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("STATUSCHECKER_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("STATUSCHECKER_VERIFY_SSL", cls.verify_ssl),
            output_path=os.getenv("STATUSCHECKER_OUTPUT", cls.output_path),
        )


def load_settings() -> CheckerSettings:
    """Load settings from environment with sensible defaults."""
    return CheckerSettings.from_env()
