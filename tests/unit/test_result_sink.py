# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import threading

import pytest

from statuschecker.errors import CoordinationError
from statuschecker.models import ProbeOutcome, Success
from statuschecker.sweep import ResultSink


def _outcome(url):
    return ProbeOutcome(url=url, status=Success(200), elapsed=0.01)


def test_concurrent_puts_are_all_collected_in_per_worker_order():
    sink = ResultSink()

    def produce(worker):
        for n in range(250):
            sink.put(_outcome(f"http://w{worker}/{n}"))

    threads = [threading.Thread(target=produce, args=(worker,)) for worker in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    sink.close()
    outcomes = sink.drain()

    assert len(outcomes) == 2000
    assert len(sink) == 2000
    assert len({outcome.url for outcome in outcomes}) == 2000
    for worker in range(8):
        mine = [int(o.url.rsplit("/", 1)[1]) for o in outcomes if o.url.startswith(f"http://w{worker}/")]
        assert mine == list(range(250))


def test_drain_requires_close():
    sink = ResultSink()
    sink.put(_outcome("http://a"))
    with pytest.raises(CoordinationError):
        sink.drain()


def test_put_after_close_raises():
    sink = ResultSink()
    sink.close()
    with pytest.raises(CoordinationError):
        sink.put(_outcome("http://late"))


def test_drain_is_repeatable():
    sink = ResultSink()
    sink.put(_outcome("http://a"))
    sink.put(_outcome("http://b"))
    sink.close()
    first = sink.drain()
    assert [o.url for o in first] == ["http://a", "http://b"]
    assert sink.drain() == first


def test_callback_failures_do_not_lose_outcomes():
    seen = []

    def callback(outcome):
        seen.append(outcome.url)
        raise RuntimeError("printer broke")

    sink = ResultSink(on_outcome=callback)
    sink.put(_outcome("http://a"))
    sink.put(_outcome("http://b"))
    sink.close()
    assert [o.url for o in sink.drain()] == ["http://a", "http://b"]
    assert seen == ["http://a", "http://b"]
