# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process HttpClient implementations."""

from __future__ import annotations

import threading
from dataclasses import replace

from ..errors import categorize_exception
from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests and dry runs.

    A stubbed value may be an HttpResponse (returned as a fresh copy) or an
    exception instance (converted to a transport failure). Safe to share
    across worker threads.
    """

    def __init__(self, responses: dict[str, HttpResponse | Exception] | None = None):
        self._responses = dict(responses or {})
        self._lock = threading.Lock()
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse | Exception) -> None:
        with self._lock:
            self._responses[url] = response

    def calls_for(self, url: str) -> int:
        with self._lock:
            return sum(1 for request in self.requests if request.url == url)

    def request(self, request: HttpRequest) -> HttpResponse:
        with self._lock:
            self.requests.append(request)
            stubbed = self._responses.get(request.url)
        if stubbed is None:
            return HttpResponse(ok=False, status_code=None, error_message="No stubbed response configured")
        if isinstance(stubbed, Exception):
            return HttpResponse(
                ok=False,
                error_message=str(stubbed) or type(stubbed).__name__,
                error_type=type(stubbed).__name__,
                error_category=categorize_exception(stubbed),
            )
        return replace(stubbed, headers=dict(stubbed.headers), meta=dict(stubbed.meta))

    def close(self) -> None:
        self.closed = True
