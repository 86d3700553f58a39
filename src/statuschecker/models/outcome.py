# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe outcome models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Union

from ..errors import ErrorCategory


@dataclass(frozen=True)
class Success:
    """An HTTP response was received. Any status code counts, 4xx/5xx included."""

    status_code: int

    def __post_init__(self) -> None:
        if not 100 <= self.status_code <= 599:
            raise ValueError(f"HTTP status code out of range: {self.status_code}")


@dataclass(frozen=True)
class Failure:
    """No HTTP response could be obtained."""

    error: str
    category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR


ProbeStatus = Union[Success, Failure]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ProbeOutcome:
    """Final classified result of one probe (all attempts) against one URL."""

    url: str
    status: ProbeStatus
    elapsed: float = 0.0
    observed_at: datetime | None = None
    attempts: int = 0

    def __post_init__(self) -> None:
        if self.elapsed < 0:
            object.__setattr__(self, "elapsed", 0.0)
        if self.observed_at is None:
            object.__setattr__(self, "observed_at", utcnow())

    @property
    def ok(self) -> bool:
        return isinstance(self.status, Success)

    @property
    def status_code(self) -> int | None:
        return self.status.status_code if isinstance(self.status, Success) else None

    @property
    def error(self) -> str | None:
        return self.status.error if isinstance(self.status, Failure) else None

    @property
    def category(self) -> ErrorCategory | None:
        return self.status.category if isinstance(self.status, Failure) else None

    @property
    def elapsed_ms(self) -> int:
        return int(self.elapsed * 1000)

    def to_dict(self) -> dict[str, Any]:
        """Report record: url, ok, status (code or error text), time_ms, timestamp."""
        data: dict[str, Any] = {
            "url": self.url,
            "ok": self.ok,
            "status": self.status_code if self.ok else self.error,
            "time_ms": self.elapsed_ms,
            "timestamp": self.observed_at.isoformat() if self.observed_at else None,
            "attempts": self.attempts,
        }
        if not self.ok and self.category is not None:
            data["error_category"] = self.category.value
        return data


__all__ = ["Failure", "ProbeOutcome", "ProbeStatus", "Success", "utcnow"]
