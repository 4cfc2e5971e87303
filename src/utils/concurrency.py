"""Run a handful of independent reads concurrently and join on all of them."""

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any


def fetch_concurrently(
    *calls: Callable[[], Any],
    max_workers: int = 2,
) -> tuple[Any, ...]:
    """Execute zero-argument callables concurrently and return their results.

    Results keep the order of ``calls``. The first failure is re-raised once
    every call has settled, so callers never see a partial result.

    Args:
        calls: Zero-argument callables to run.
        max_workers: Thread pool size.

    Returns:
        tuple: Results in the order the callables were given.
    """
    if not isinstance(max_workers, int) or max_workers < 1:
        raise ValueError("max_workers must be a positive integer")
    if not calls:
        return ()
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(call) for call in calls]
    # Leaving the context manager waits for every future.
    return tuple(future.result() for future in futures)


__all__ = ["fetch_concurrently"]
