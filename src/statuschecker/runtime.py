# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level statuschecker facade."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from .config import CheckerSettings, load_settings
from .http.client import ClientFactory, default_client_factory
from .models import ProbeOutcome, RunConfig
from .sweep.pool import ProbeFn
from .sweep.result_sink import OutcomeCallback
from .sweep.runner import SweepRunner


class StatusChecker:
    """
    Convenience wrapper that wires settings, the HTTP client factory and the sweep runner.

    Explicit keyword overrides win over environment-backed settings.
    """

    def __init__(
        self,
        settings: CheckerSettings | None = None,
        *,
        client_factory: ClientFactory | None = None,
        probe_fn: ProbeFn | None = None,
    ):
        self.settings = settings or load_settings()
        self.client_factory = client_factory or default_client_factory(self.settings)
        self.probe_fn = probe_fn

    def run_config(
        self,
        *,
        workers: int | None = None,
        timeout: float | None = None,
        retries: int | None = None,
    ) -> RunConfig:
        config = RunConfig.from_settings(self.settings)
        overrides = {
            "worker_count": workers,
            "timeout_per_attempt": timeout,
            "retry_count": retries,
        }
        filtered = {key: value for key, value in overrides.items() if value is not None}
        return replace(config, **filtered) if filtered else config

    def check(
        self,
        urls: Sequence[str],
        *,
        workers: int | None = None,
        timeout: float | None = None,
        retries: int | None = None,
        on_outcome: OutcomeCallback | None = None,
    ) -> list[ProbeOutcome]:
        config = self.run_config(workers=workers, timeout=timeout, retries=retries)
        runner = SweepRunner(
            config,
            probe_fn=self.probe_fn,
            client_factory=self.client_factory,
            on_outcome=on_outcome,
        )
        return runner.run(urls)
