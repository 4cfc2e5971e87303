"""Tests for the concurrent fetch helper."""

import threading

import pytest

from src.utils.concurrency import fetch_concurrently


def test_results_keep_call_order() -> None:
    assert fetch_concurrently(lambda: "sales", lambda: "expenses") == (
        "sales",
        "expenses",
    )


def test_calls_run_in_parallel() -> None:
    barrier = threading.Barrier(2, timeout=5)

    def wait_for_peer() -> bool:
        barrier.wait()
        return True

    assert fetch_concurrently(wait_for_peer, wait_for_peer, max_workers=2) == (
        True,
        True,
    )


def test_failure_is_raised_after_all_calls_finish() -> None:
    finished = []

    def fail() -> None:
        raise RuntimeError("store down")

    def succeed() -> str:
        finished.append("ok")
        return "ok"

    with pytest.raises(RuntimeError, match="store down"):
        fetch_concurrently(fail, succeed)
    assert finished == ["ok"]


def test_no_calls_returns_empty_tuple() -> None:
    assert fetch_concurrently() == ()


def test_rejects_non_positive_workers() -> None:
    with pytest.raises(ValueError):
        fetch_concurrently(lambda: 1, max_workers=0)
