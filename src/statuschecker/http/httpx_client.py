# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging

import httpx

from ..config import CheckerSettings, load_settings
from ..errors import categorize_exception
from .client import HttpClient
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper. Bodies are never read; only the status line matters."""

    def __init__(self, settings: CheckerSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_settings()
        if not (self.settings.timeout > 0):
            raise ValueError(f"timeout must be positive, got {self.settings.timeout!r}")
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)
        timeout = request.timeout if request.timeout is not None else self.settings.timeout
        follow_redirects = request.allow_redirects if request.allow_redirects is not None else self.settings.allow_redirects

        try:
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                timeout=timeout,
                follow_redirects=follow_redirects,
            ) as resp:
                return HttpResponse(
                    ok=True,
                    status_code=resp.status_code,
                    headers=dict(resp.headers),
                    url=str(resp.url),
                )
        except Exception as exc:  # noqa: BLE001
            logger.debug("request to %s failed: %r", request.url, exc)
            return HttpResponse(
                ok=False,
                error_message=str(exc) or type(exc).__name__,
                error_type=type(exc).__name__,
                error_category=categorize_exception(exc),
            )

    def close(self) -> None:
        self._client.close()
