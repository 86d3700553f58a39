# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Single-URL probe: one GET attempt sequence with per-attempt timeout and bounded retries.

A probe never raises for per-URL problems. Anything short of a received HTTP
response becomes a `Failure` outcome; any received status code, 4xx and 5xx
included, is a `Success`. Whether a status is "healthy" is left to whoever
reads the report.
"""

from __future__ import annotations

import logging
import time

from .errors import ErrorCategory
from .http.client import ClientFactory, default_client_factory
from .http.models import HttpRequest, RetryConfig
from .http.retry import send_with_retries
from .models.outcome import Failure, ProbeOutcome, Success, utcnow
from .models.run import RunConfig

logger = logging.getLogger(__name__)

DEFAULT_BACKOFF_DELAY = 0.1


def probe(
    url: str,
    timeout: float,
    max_retries: int,
    *,
    client_factory: ClientFactory | None = None,
    backoff_delay: float = DEFAULT_BACKOFF_DELAY,
    backoff_factor: float = 1.0,
) -> ProbeOutcome:
    """
    GET `url`, retrying transport failures up to `max_retries` extra times.

    `elapsed` spans the first attempt through the last, backoff included.
    If the client cannot be built, the outcome is a `Failure` with zero
    attempts and no retry is consumed.
    """
    factory = client_factory or default_client_factory()
    start = time.monotonic()

    try:
        client = factory(timeout)
    except Exception as exc:  # noqa: BLE001
        logger.debug("client construction failed for %s: %r", url, exc)
        return ProbeOutcome(
            url=url,
            status=Failure(f"Failed to create client: {exc}", ErrorCategory.CLIENT_ERROR),
            elapsed=time.monotonic() - start,
            observed_at=utcnow(),
            attempts=0,
        )

    retry_config = RetryConfig.from_retries(max_retries, initial_delay=backoff_delay, backoff_factor=backoff_factor)
    try:
        response = send_with_retries(client, HttpRequest(url=url, timeout=timeout), retry_config=retry_config)
    finally:
        client.close()
    elapsed = time.monotonic() - start
    attempts = int(response.meta.get("attempts", 1))

    if response.ok and response.status_code is not None and 100 <= response.status_code <= 599:
        status: Success | Failure = Success(response.status_code)
    elif response.ok:
        status = Failure(f"Invalid HTTP status code: {response.status_code}", ErrorCategory.UNKNOWN_ERROR)
    else:
        status = Failure(
            response.error_message or "Unknown transport failure",
            response.error_category or ErrorCategory.UNKNOWN_ERROR,
        )
    logger.debug("probed %s in %.3fs over %d attempt(s): %s", url, elapsed, attempts, status)
    return ProbeOutcome(url=url, status=status, elapsed=elapsed, observed_at=utcnow(), attempts=attempts)


def make_probe_fn(config: RunConfig, client_factory: ClientFactory | None = None):
    """Bind a RunConfig (and optional client factory) into a `probe_fn(url) -> ProbeOutcome`."""
    factory = client_factory or default_client_factory()

    def probe_fn(url: str) -> ProbeOutcome:
        return probe(
            url,
            config.timeout_per_attempt,
            config.retry_count,
            client_factory=factory,
            backoff_delay=config.backoff_delay,
            backoff_factor=config.backoff_factor,
        )

    return probe_fn


__all__ = ["DEFAULT_BACKOFF_DELAY", "make_probe_fn", "probe"]
