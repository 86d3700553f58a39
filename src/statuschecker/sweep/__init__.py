# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Sweep orchestration exports."""

from .pool import WorkerPool
from .result_sink import ResultSink
from .runner import SweepRunner, run_sweep
from .work_queue import WorkQueue

__all__ = ["ResultSink", "SweepRunner", "WorkQueue", "WorkerPool", "run_sweep"]
