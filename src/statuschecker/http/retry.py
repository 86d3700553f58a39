# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Retry helper for HttpClient implementations."""

from __future__ import annotations

import time

from ..config import load_settings
from ..errors import categorize_exception
from .client import HttpClient
from .models import HttpRequest, HttpResponse, RetryConfig


def build_default_retry_config() -> RetryConfig:
    """Create a RetryConfig from environment-backed CheckerSettings."""
    return RetryConfig.from_settings(load_settings())


def send_with_retries(
    client: HttpClient,
    request: HttpRequest,
    *,
    retry_config: RetryConfig | None = None,
) -> HttpResponse:
    """
    Execute a request with bounded retry/backoff semantics.

    Only transport-level failures (no status code) are retried. Any received
    status, 5xx included, is returned as-is. `meta["attempts"]` records how
    many requests were issued.
    """
    cfg = retry_config or build_default_retry_config()
    max_attempts = max(1, cfg.max_attempts)

    attempt = 0
    delay = cfg.initial_delay
    response = HttpResponse(ok=False, error_message="No attempt made")

    while attempt < max_attempts:
        try:
            response = client.request(request)
        except Exception as exc:  # noqa: BLE001
            response = HttpResponse(
                ok=False,
                error_message=str(exc) or exc.__class__.__name__,
                error_type=exc.__class__.__name__,
                error_category=categorize_exception(exc),
            )
        attempt += 1

        if not response.retryable:
            break
        if attempt >= max_attempts:
            response.meta["retry_exhausted"] = True
            break
        if delay > 0:
            time.sleep(delay)
        delay *= cfg.backoff_factor

    response.meta["attempts"] = attempt
    return response
