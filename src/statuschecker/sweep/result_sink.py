# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fan-in collector for probe outcomes."""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable

from ..errors import CoordinationError
from ..models.outcome import ProbeOutcome

logger = logging.getLogger(__name__)

OutcomeCallback = Callable[[ProbeOutcome], None]


class ResultSink:
    """
    Thread-safe outcome collector backed by a SimpleQueue channel.

    Workers `put()` concurrently; the coordinator `close()`s the sink once the
    pool has terminated and then `drain()`s it. Arrival order is preserved,
    so each worker's own outcomes stay in the order it produced them.
    """

    def __init__(self, on_outcome: OutcomeCallback | None = None):
        self._channel: queue.SimpleQueue[ProbeOutcome] = queue.SimpleQueue()
        self._on_outcome = on_outcome
        self._lock = threading.Lock()
        self._closed = False
        self._received = 0
        self._drained: list[ProbeOutcome] | None = None

    def put(self, outcome: ProbeOutcome) -> None:
        with self._lock:
            if self._closed:
                raise CoordinationError(f"outcome for {outcome.url} arrived after the sink was closed")
            self._received += 1
            self._channel.put(outcome)
        if self._on_outcome is not None:
            try:
                self._on_outcome(outcome)
            except Exception:  # noqa: BLE001
                logger.exception("outcome callback failed for %s", outcome.url)

    def close(self) -> None:
        with self._lock:
            self._closed = True

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def drain(self) -> list[ProbeOutcome]:
        """Return every collected outcome. Only valid after close()."""
        with self._lock:
            if not self._closed:
                raise CoordinationError("ResultSink.drain() called before close()")
            if self._drained is None:
                drained: list[ProbeOutcome] = []
                while True:
                    try:
                        drained.append(self._channel.get_nowait())
                    except queue.Empty:
                        break
                if len(drained) != self._received:
                    raise CoordinationError(f"sink lost outcomes: received {self._received}, drained {len(drained)}")
                self._drained = drained
            return list(self._drained)

    def __len__(self) -> int:
        with self._lock:
            return self._received
