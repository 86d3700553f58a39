# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fixed-size pool of worker threads draining a WorkQueue into a ResultSink."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

from ..errors import CoordinationError, ErrorCategory
from ..models.outcome import Failure, ProbeOutcome, utcnow
from .result_sink import ResultSink
from .work_queue import WorkQueue

logger = logging.getLogger(__name__)

ProbeFn = Callable[[str], ProbeOutcome]


class WorkerPool:
    """
    Symmetric workers pulling targets FIFO from a shared queue.

    Each worker runs until the queue is closed and empty. An exception raised
    by `probe_fn` is turned into a Failure outcome for that target, so no
    target is dropped and the remaining workers keep draining.
    """

    def __init__(self, worker_count: int, work_queue: WorkQueue[str], sink: ResultSink, probe_fn: ProbeFn):
        if worker_count < 1:
            raise CoordinationError(f"worker_count must be >= 1, got {worker_count}")
        self.worker_count = worker_count
        self.work_queue = work_queue
        self.sink = sink
        self.probe_fn = probe_fn
        self._threads: list[threading.Thread] = []
        self._errors: list[Exception] = []
        self._errors_lock = threading.Lock()

    def start(self) -> None:
        if self._threads:
            raise CoordinationError("WorkerPool already started")
        for index in range(self.worker_count):
            thread = threading.Thread(
                target=self._work,
                name=f"statuschecker-worker-{index + 1}",
                daemon=True,
            )
            self._threads.append(thread)
            thread.start()
        logger.debug("started %d worker(s)", self.worker_count)

    def join(self) -> None:
        """Block until every worker has terminated; re-raise a coordination failure if one occurred."""
        for thread in self._threads:
            thread.join()
        with self._errors_lock:
            errors = list(self._errors)
        if errors:
            raise CoordinationError(f"{len(errors)} worker(s) aborted: {errors[0]!r}") from errors[0]

    @property
    def alive(self) -> int:
        return sum(1 for thread in self._threads if thread.is_alive())

    def _work(self) -> None:
        processed = 0
        try:
            for target in self.work_queue:
                self.sink.put(self._probe(target))
                processed += 1
        except Exception as exc:  # noqa: BLE001
            # Queue or sink invariants are broken; surface it through join().
            logger.exception("worker aborted after %d target(s)", processed)
            with self._errors_lock:
                self._errors.append(exc)
            return
        logger.debug("worker finished after %d target(s)", processed)

    def _probe(self, target: str) -> ProbeOutcome:
        start = time.monotonic()
        try:
            return self.probe_fn(target)
        except Exception as exc:  # noqa: BLE001
            logger.exception("probe crashed for %s", target)
            return ProbeOutcome(
                url=target,
                status=Failure(f"{type(exc).__name__}: {exc}", ErrorCategory.INTERNAL_ERROR),
                elapsed=time.monotonic() - start,
                observed_at=utcnow(),
            )
