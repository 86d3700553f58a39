# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Run configuration model."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..config import CheckerSettings
from ..errors import ConfigurationError


@dataclass(frozen=True)
class RunConfig:
    """
    Parameters shared by every probe in a run.

    - `worker_count`: number of concurrent workers (>= 1).
    - `timeout_per_attempt`: seconds allowed for each HTTP attempt (> 0).
    - `retry_count`: additional attempts after the first on transport failure (>= 0).
    - `backoff_delay`: seconds to wait between attempts.
    - `backoff_factor`: delay multiplier per retry; 1.0 keeps the delay constant.
    """

    worker_count: int = 4
    timeout_per_attempt: float = 5.0
    retry_count: int = 0
    backoff_delay: float = 0.1
    backoff_factor: float = 1.0

    def validate(self) -> RunConfig:
        if isinstance(self.worker_count, bool) or not isinstance(self.worker_count, int) or self.worker_count < 1:
            raise ConfigurationError(f"worker_count must be a positive integer, got {self.worker_count!r}")
        if isinstance(self.timeout_per_attempt, bool) or not (self.timeout_per_attempt > 0) or not math.isfinite(self.timeout_per_attempt):
            raise ConfigurationError(f"timeout_per_attempt must be a positive finite number, got {self.timeout_per_attempt!r}")
        if isinstance(self.retry_count, bool) or not isinstance(self.retry_count, int) or self.retry_count < 0:
            raise ConfigurationError(f"retry_count must be a non-negative integer, got {self.retry_count!r}")
        if not (self.backoff_delay >= 0) or not math.isfinite(self.backoff_delay):
            raise ConfigurationError(f"backoff_delay must be a non-negative finite number, got {self.backoff_delay!r}")
        if not (self.backoff_factor >= 1) or not math.isfinite(self.backoff_factor):
            raise ConfigurationError(f"backoff_factor must be a finite number >= 1, got {self.backoff_factor!r}")
        return self

    @classmethod
    def from_settings(cls, settings: CheckerSettings) -> RunConfig:
        return cls(
            worker_count=settings.workers,
            timeout_per_attempt=settings.timeout,
            retry_count=settings.retries,
            backoff_delay=settings.backoff_delay,
            backoff_factor=settings.backoff_factor,
        )
