# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client abstraction and factory."""

from collections.abc import Callable
from dataclasses import replace
from typing import Protocol

from ..config import CheckerSettings, load_settings
from .models import HttpRequest, HttpResponse


class HttpClient(Protocol):
    """Minimal protocol for issuing HTTP requests."""

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


# Builds a client for a given per-attempt timeout (seconds).
ClientFactory = Callable[[float], HttpClient]


def create_default_http_client(settings: CheckerSettings | None = None) -> HttpClient:
    """Factory for the default httpx-backed client."""
    from .httpx_client import HttpxClient

    return HttpxClient(settings or load_settings())


def default_client_factory(settings: CheckerSettings | None = None) -> ClientFactory:
    """Return a ClientFactory that builds httpx clients from `settings` with the requested timeout."""
    base = settings or load_settings()

    def factory(timeout: float) -> HttpClient:
        return create_default_http_client(replace(base, timeout=timeout))

    return factory
