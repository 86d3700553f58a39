# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for statuschecker."""

from ..http.models import Headers, HttpRequest, HttpResponse, RetryConfig
from .outcome import Failure, ProbeOutcome, ProbeStatus, Success
from .run import RunConfig

__all__ = [
    "Failure",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeOutcome",
    "ProbeStatus",
    "RetryConfig",
    "RunConfig",
    "Success",
]
