"""Explicitly owned worker pool for data-parallel interval work."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Sequence, TypeVar

from .errors import ConfigurationError


logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def _chunk_bounds(n_items: int, n_chunks: int) -> list[tuple[int, int]]:
    """Split ``range(n_items)`` into at most ``n_chunks`` contiguous slices."""
    n_chunks = max(1, min(n_chunks, n_items))
    base, extra = divmod(n_items, n_chunks)
    bounds = []
    start = 0
    for k in range(n_chunks):
        stop = start + base + (1 if k < extra else 0)
        bounds.append((start, stop))
        start = stop
    return bounds


class WorkerPool:
    """
    Fixed-size thread pool created once and reused across iterations.

    ``map_ordered`` is the only synchronisation point: it blocks until every
    chunk finished and returns results in the original item order.
    """

    def __init__(self, threads: int) -> None:
        if threads < 1:
            raise ConfigurationError(f"threads must be at least 1, got {threads}")
        self.threads = int(threads)
        self._executor: ThreadPoolExecutor | None = ThreadPoolExecutor(
            max_workers=self.threads,
            thread_name_prefix="trainsim",
        )
        logger.debug("worker pool started with %d threads", self.threads)

    def map_ordered(self, fn: Callable[[T], R], items: Sequence[T]) -> list[R]:
        if self._executor is None:
            raise RuntimeError("worker pool is closed")
        if not items:
            return []

        def _run_chunk(bounds: tuple[int, int]) -> list[R]:
            start, stop = bounds
            return [fn(items[i]) for i in range(start, stop)]

        futures = [
            self._executor.submit(_run_chunk, bounds)
            for bounds in _chunk_bounds(len(items), self.threads)
        ]

        out: list[R] = []
        for fut in futures:
            out.extend(fut.result())
        return out

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
            logger.debug("worker pool closed")

    @property
    def closed(self) -> bool:
        return self._executor is None

    def __enter__(self) -> "WorkerPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["WorkerPool"]
