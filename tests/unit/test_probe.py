# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import time
from datetime import datetime

import httpx
import pytest

from statuschecker.config import CheckerSettings
from statuschecker.errors import ErrorCategory
from statuschecker.http import HttpxClient, StubHttpClient
from statuschecker.http.models import HttpRequest, HttpResponse
from statuschecker.models import Failure, RunConfig, Success
from statuschecker.probe import make_probe_fn, probe


class SlowTimeoutClient:
    """Consumes the full per-attempt timeout, then reports a transport timeout."""

    def __init__(self, timeout):
        self.timeout = timeout
        self.calls = 0
        self.closed = False

    def request(self, request: HttpRequest) -> HttpResponse:  # noqa: ARG002
        self.calls += 1
        time.sleep(self.timeout)
        return HttpResponse(ok=False, error_message="timed out", error_category=ErrorCategory.TIMEOUT)

    def close(self) -> None:
        self.closed = True


def _factory_for(client):
    built = []

    def factory(timeout):
        built.append(timeout)
        return client

    factory.built = built
    return factory


def test_probe_reports_server_error_as_success(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda _: None)
    stub = StubHttpClient({"http://err.test": HttpResponse(ok=True, status_code=500)})
    outcome = probe("http://err.test", 1.0, 3, client_factory=_factory_for(stub))
    assert outcome.status == Success(500)
    assert outcome.ok is True
    assert outcome.attempts == 1
    assert stub.calls_for("http://err.test") == 1
    assert stub.closed is True


@pytest.mark.parametrize("retries", [0, 1, 3])
def test_probe_attempts_retries_plus_one_on_transport_failure(monkeypatch, retries):
    monkeypatch.setattr(time, "sleep", lambda _: None)
    stub = StubHttpClient({"http://down.test": httpx.ConnectError("connection refused")})
    outcome = probe("http://down.test", 1.0, retries, client_factory=_factory_for(stub))
    assert isinstance(outcome.status, Failure)
    assert outcome.status.category == ErrorCategory.CONNECTION_ERROR
    assert "connection refused" in outcome.error
    assert outcome.attempts == retries + 1
    assert stub.calls_for("http://down.test") == retries + 1


def test_probe_recovers_after_transient_failure(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda _: None)

    class FlakyClient:
        def __init__(self):
            self.calls = 0

        def request(self, request: HttpRequest) -> HttpResponse:  # noqa: ARG002
            self.calls += 1
            if self.calls < 3:
                return HttpResponse(ok=False, error_message="reset", error_category=ErrorCategory.CONNECTION_ERROR)
            return HttpResponse(ok=True, status_code=200)

        def close(self) -> None:
            pass

    outcome = probe("http://flaky.test", 1.0, 5, client_factory=_factory_for(FlakyClient()))
    assert outcome.status == Success(200)
    assert outcome.attempts == 3


def test_probe_client_construction_failure_is_immediate():
    def broken_factory(timeout):
        raise ValueError(f"bad timeout {timeout}")

    outcome = probe("http://any.test", 1.0, 5, client_factory=broken_factory)
    assert isinstance(outcome.status, Failure)
    assert outcome.status.category == ErrorCategory.CLIENT_ERROR
    assert "Failed to create client" in outcome.error
    assert outcome.attempts == 0


def test_probe_invalid_url_does_not_consume_retries(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda _: None)
    stub = StubHttpClient({"not a url": httpx.InvalidURL("Invalid URL")})
    outcome = probe("not a url", 1.0, 4, client_factory=_factory_for(stub))
    assert outcome.category == ErrorCategory.INVALID_URL
    assert outcome.attempts == 1


def test_probe_elapsed_covers_timeouts_and_backoff():
    timeout, backoff = 0.05, 0.02
    client = SlowTimeoutClient(timeout)
    outcome = probe("http://slow.test", timeout, 1, client_factory=_factory_for(client), backoff_delay=backoff)
    assert client.calls == 2
    assert outcome.ok is False
    assert outcome.elapsed >= 2 * timeout + backoff
    assert isinstance(outcome.observed_at, datetime)
    assert outcome.observed_at.tzinfo is not None


def test_probe_passes_timeout_to_factory(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda _: None)
    stub = StubHttpClient({"http://ok.test": HttpResponse(ok=True, status_code=200)})
    factory = _factory_for(stub)
    probe("http://ok.test", 2.5, 0, client_factory=factory)
    assert factory.built == [2.5]
    assert stub.requests[0].timeout == 2.5


def test_probe_with_httpx_mock_transport():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "ok.test":
            return httpx.Response(204)
        raise httpx.ConnectTimeout("timed out", request=request)

    def factory(timeout):
        return HttpxClient(
            CheckerSettings(timeout=timeout),
            client=httpx.Client(transport=httpx.MockTransport(handler), timeout=timeout),
        )

    ok = probe("http://ok.test/", 1.0, 2, client_factory=factory, backoff_delay=0)
    down = probe("http://down.test/", 1.0, 2, client_factory=factory, backoff_delay=0)

    assert ok.status == Success(204)
    assert down.category == ErrorCategory.TIMEOUT
    assert down.attempts == 3


def test_make_probe_fn_binds_run_config(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda _: None)
    stub = StubHttpClient({"http://down.test": httpx.ConnectError("refused")})
    probe_fn = make_probe_fn(RunConfig(worker_count=1, timeout_per_attempt=0.5, retry_count=2), _factory_for(stub))
    outcome = probe_fn("http://down.test")
    assert outcome.url == "http://down.test"
    assert outcome.attempts == 3
    assert {request.timeout for request in stub.requests} == {0.5}


def _redirecting_factory(allow_redirects):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "http://moved.test/new"})
        return httpx.Response(200)

    def factory(timeout):
        settings = CheckerSettings(timeout=timeout, allow_redirects=allow_redirects)
        return HttpxClient(settings, client=httpx.Client(transport=httpx.MockTransport(handler)))

    return factory


def test_probe_reports_redirect_status_when_redirects_disabled():
    outcome = probe("http://moved.test/old", 1.0, 0, client_factory=_redirecting_factory(False))
    assert outcome.status == Success(301)


def test_probe_follows_redirects_when_enabled():
    outcome = probe("http://moved.test/old", 1.0, 0, client_factory=_redirecting_factory(True))
    assert outcome.status == Success(200)
