# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Run a full sweep: fan targets out to the worker pool and collect one outcome per target."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from ..errors import ConfigurationError, CoordinationError
from ..http.client import ClientFactory
from ..models.outcome import ProbeOutcome
from ..models.run import RunConfig
from ..probe import make_probe_fn
from .pool import ProbeFn, WorkerPool
from .result_sink import OutcomeCallback, ResultSink
from .work_queue import WorkQueue

logger = logging.getLogger(__name__)


class SweepRunner:
    """Coordinates queue, pool and sink for one blocking, one-shot run."""

    def __init__(
        self,
        config: RunConfig,
        *,
        probe_fn: ProbeFn | None = None,
        client_factory: ClientFactory | None = None,
        on_outcome: OutcomeCallback | None = None,
    ):
        self.config = config.validate()
        self.probe_fn = probe_fn or make_probe_fn(self.config, client_factory)
        self.on_outcome = on_outcome

    def run(self, targets: Sequence[str]) -> list[ProbeOutcome]:
        """
        Probe every target and return the outcomes in arrival order.

        Returns only once each target has produced exactly one outcome.
        Callers should correlate outcomes to inputs by `url`, not position.
        """
        targets = list(targets)
        if not targets:
            raise ConfigurationError("No URLs provided")

        work_queue: WorkQueue[str] = WorkQueue()
        sink = ResultSink(on_outcome=self.on_outcome)
        pool = WorkerPool(self.config.worker_count, work_queue, sink, self.probe_fn)

        started = time.monotonic()
        logger.info(
            "probing %d URL(s) with %d worker(s), timeout=%ss, retries=%d",
            len(targets),
            self.config.worker_count,
            self.config.timeout_per_attempt,
            self.config.retry_count,
        )
        pool.start()
        try:
            for target in targets:
                work_queue.put(target)
        finally:
            work_queue.close()
        pool.join()
        sink.close()
        outcomes = sink.drain()

        if len(outcomes) != len(targets):
            raise CoordinationError(f"expected {len(targets)} outcome(s), collected {len(outcomes)}")

        failures = sum(1 for outcome in outcomes if not outcome.ok)
        logger.info(
            "sweep finished in %.2fs: %d reachable, %d failed",
            time.monotonic() - started,
            len(outcomes) - failures,
            failures,
        )
        return outcomes


def run_sweep(
    targets: Sequence[str],
    config: RunConfig,
    *,
    probe_fn: ProbeFn | None = None,
    client_factory: ClientFactory | None = None,
    on_outcome: OutcomeCallback | None = None,
) -> list[ProbeOutcome]:
    """Validate `config`, probe every target in parallel and return one outcome per target."""
    if not targets:
        raise ConfigurationError("No URLs provided")
    runner = SweepRunner(config, probe_fn=probe_fn, client_factory=client_factory, on_outcome=on_outcome)
    return runner.run(targets)
