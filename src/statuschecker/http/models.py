# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across statuschecker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..config import CheckerSettings
from ..errors import NON_RETRYABLE, ErrorCategory

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    timeout: float | None = None
    allow_redirects: bool | None = None


@dataclass
class HttpResponse:
    """
    Normalized HTTP response.

    `ok` means an HTTP response was received at all; the status code is not
    interpreted. Transport-level failures carry `ok=False` and no status code.
    """

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    error_category: ErrorCategory | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def retryable(self) -> bool:
        if self.ok or self.status_code is not None:
            return False
        return self.error_category not in NON_RETRYABLE


@dataclass
class RetryConfig:
    """Retry policy for HTTP requests."""

    max_attempts: int = 1
    backoff_factor: float = 1.0
    initial_delay: float = 0.1

    @classmethod
    def from_retries(cls, retries: int, *, initial_delay: float = 0.1, backoff_factor: float = 1.0) -> RetryConfig:
        """`retries` counts additional attempts after the first one."""
        return cls(
            max_attempts=max(0, retries) + 1,
            backoff_factor=backoff_factor,
            initial_delay=initial_delay,
        )

    @classmethod
    def from_settings(cls, settings: CheckerSettings) -> RetryConfig:
        """Build a retry config from the shared CheckerSettings."""
        return cls.from_retries(
            settings.retries,
            initial_delay=settings.backoff_delay,
            backoff_factor=settings.backoff_factor,
        )
