"""
Unit tests for bounded waits on session futures.
"""

from concurrent.futures import Future

from mwclient.src.network.bounded import WaitStatus, wait_bounded


def test_completed_future():
    future = Future()
    future.set_result([1, 2])

    outcome = wait_bounded(future, 1.0)

    assert outcome.status == WaitStatus.COMPLETED
    assert outcome.value == [1, 2]
    assert outcome.value_or([]) == [1, 2]


def test_pending_future_times_out():
    outcome = wait_bounded(Future(), 0.01)

    assert outcome.status == WaitStatus.TIMED_OUT
    assert outcome.value_or([]) == []


def test_failed_future_keeps_error():
    future = Future()
    error = RuntimeError("socket gone")
    future.set_exception(error)

    outcome = wait_bounded(future, 1.0)

    assert outcome.status == WaitStatus.FAILED
    assert outcome.error is error
    assert not outcome.completed


def test_cancelled_future():
    future = Future()
    future.cancel()

    outcome = wait_bounded(future, 1.0)

    assert outcome.status == WaitStatus.CANCELLED
