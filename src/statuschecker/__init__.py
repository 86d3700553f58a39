# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
statuschecker package entrypoint.

Parallel, one-shot HTTP reachability sweep: every URL is fetched once (with
bounded retries on transport failures) by a fixed pool of worker threads, and
exactly one ProbeOutcome is returned per input URL. HTTP behavior is
abstracted behind an injectable client interface.
"""

from .config import CheckerSettings, load_settings
from .errors import ConfigurationError, CoordinationError, ErrorCategory, StatusCheckerError
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    RetryConfig,
    StubHttpClient,
    create_default_http_client,
)
from .inputs import load_urls
from .log import setup_logging
from .models import Failure, ProbeOutcome, RunConfig, Success
from .probe import probe
from .report import format_outcome, write_json_report
from .runtime import StatusChecker
from .sweep import ResultSink, SweepRunner, WorkerPool, WorkQueue, run_sweep
from .version import __version__

__all__ = [
    "CheckerSettings",
    "ConfigurationError",
    "CoordinationError",
    "ErrorCategory",
    "Failure",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "ProbeOutcome",
    "ResultSink",
    "RetryConfig",
    "RunConfig",
    "StatusChecker",
    "StatusCheckerError",
    "StubHttpClient",
    "Success",
    "SweepRunner",
    "WorkQueue",
    "WorkerPool",
    "create_default_http_client",
    "format_outcome",
    "load_settings",
    "load_urls",
    "probe",
    "run_sweep",
    "setup_logging",
    "write_json_report",
    "__version__",
]
