"""Tests for viewer run scheduling."""

from gui.run_queue import RunQueue


def test_idle_submit_starts_immediately():
    queue = RunQueue()
    assert queue.submit("A")
    assert queue.running == "A"
    assert queue.busy


def test_newest_waiting_request_wins():
    queue = RunQueue()
    queue.submit("A")
    assert not queue.submit("B")
    assert not queue.submit("C")
    assert queue.finish() == "C"
    assert queue.finish() is None
    assert not queue.busy


def test_resubmitting_latest_keeps_newest_drop():
    # A is shown, B was dropped and is running, then display options change
    queue = RunQueue()
    queue.submit("B")
    request = queue.latest(fallback="A")
    assert request == "B"
    queue.submit(request)
    assert queue.finish() == "B"
    assert queue.finish() is None


def test_latest_prefers_waiting_request():
    queue = RunQueue()
    queue.submit("B")
    queue.submit("C")
    assert queue.latest(fallback="A") == "C"


def test_latest_falls_back_when_idle():
    queue = RunQueue()
    assert queue.latest(fallback="A") == "A"
    assert queue.latest() is None
