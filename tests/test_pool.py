"""Tests for the explicitly owned worker pool."""

import threading

import pytest

from trainsim.errors import ConfigurationError
from trainsim.pool import WorkerPool, _chunk_bounds


def test_chunk_bounds_cover_range_contiguously() -> None:
    bounds = _chunk_bounds(10, 3)

    assert bounds == [(0, 4), (4, 7), (7, 10)]
    assert _chunk_bounds(2, 8) == [(0, 1), (1, 2)]


def test_map_ordered_preserves_item_order() -> None:
    items = list(range(1, 101))

    with WorkerPool(4) as pool:
        out = pool.map_ordered(lambda x: x * x, items)

    assert out == [x * x for x in items]


def test_map_ordered_accepts_ranges_and_empty_input() -> None:
    with WorkerPool(3) as pool:
        assert pool.map_ordered(lambda s: s - 1, range(1, 6)) == [0, 1, 2, 3, 4]
        assert pool.map_ordered(lambda s: s, []) == []


def test_work_runs_on_pool_threads() -> None:
    with WorkerPool(2) as pool:
        names = pool.map_ordered(lambda _: threading.current_thread().name, range(4))

    assert all(name.startswith("trainsim") for name in names)


def test_independent_pools_coexist() -> None:
    with WorkerPool(2) as a, WorkerPool(3) as b:
        assert a.map_ordered(str, [1, 2]) == ["1", "2"]
        assert b.map_ordered(str, [3, 4, 5]) == ["3", "4", "5"]


def test_closed_pool_rejects_work() -> None:
    pool = WorkerPool(2)
    pool.close()

    with pytest.raises(RuntimeError):
        pool.map_ordered(str, [1])


def test_worker_errors_propagate() -> None:
    def boom(x: int) -> int:
        raise ValueError(f"bad item {x}")

    with WorkerPool(2) as pool:
        with pytest.raises(ValueError):
            pool.map_ordered(boom, [1, 2, 3])


@pytest.mark.parametrize("threads", [0, -2])
def test_invalid_thread_count(threads: int) -> None:
    with pytest.raises(ConfigurationError):
        WorkerPool(threads)
