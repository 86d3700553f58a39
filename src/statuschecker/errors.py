# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum

import httpx


class StatusCheckerError(Exception):
    """Base class for run-level failures surfaced to the caller."""


class ConfigurationError(StatusCheckerError):
    """Invalid run configuration or empty input; raised before any probing starts."""


class CoordinationError(StatusCheckerError):
    """A broken queue/sink/pool invariant. Fatal to the run."""


class QueueClosedError(CoordinationError):
    """Raised when enqueueing onto a closed WorkQueue."""


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    SSL_ERROR = "SSL_ERROR"
    INVALID_URL = "INVALID_URL"
    CLIENT_ERROR = "CLIENT_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


# Failures that cannot succeed on a retry.
NON_RETRYABLE = frozenset({ErrorCategory.INVALID_URL, ErrorCategory.CLIENT_ERROR})


def _root_cause(exc: BaseException) -> BaseException:
    seen: set[int] = set()
    current = exc
    while current.__cause__ is not None and id(current) not in seen:
        seen.add(id(current))
        current = current.__cause__
    return current


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return ErrorCategory.INVALID_URL

    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    root = _root_cause(exc)
    if isinstance(root, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(root, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(root, (TimeoutError, socket.timeout)):
        return ErrorCategory.TIMEOUT

    if isinstance(root, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Request timed out",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.INVALID_URL: "Malformed or unsupported URL",
        ErrorCategory.CLIENT_ERROR: "HTTP client could not be created",
        ErrorCategory.INTERNAL_ERROR: "Internal error while probing",
        ErrorCategory.UNKNOWN_ERROR: "Network error during probe",
    }
    if category is None:
        return mapping[ErrorCategory.UNKNOWN_ERROR]
    return mapping.get(category, mapping[ErrorCategory.UNKNOWN_ERROR])


__all__ = [
    "ConfigurationError",
    "CoordinationError",
    "ErrorCategory",
    "NON_RETRYABLE",
    "QueueClosedError",
    "StatusCheckerError",
    "categorize_exception",
    "error_category_to_reason",
]
