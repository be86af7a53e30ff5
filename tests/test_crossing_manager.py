import itertools
import logging
import threading
from concurrent.futures import Future

import pytest

from ppi_refine.crossing import CrossingManager, HomologySearchJob, noisy_or
from ppi_refine.crossing import manager as crossing_manager
from ppi_refine.utils import pools
from ppi_refine.utils.pools import create_pool, shutdown_pool, wait_for_result

PRECISION = 1e-6


@pytest.mark.parametrize(
    ("p", "q"), list(itertools.product([0.0, 0.1, 0.4, 0.5, 0.99, 1.0], repeat=2))
)
def test_noisy_or_bounds(p, q):
    combined = noisy_or(p, q)
    assert max(p, q) - 1e-12 <= combined <= 1.0 + 1e-12
    assert combined == pytest.approx(1 - (1 - p) * (1 - q))


def test_cross_trivial(trivial_graph):
    updates = CrossingManager(n_cores=2, max_depth=10000).cross(trivial_graph)

    assert [u.edge_id for u in updates] == [1, 2, 3]
    weights = {e.edge_id: e.weight for e in trivial_graph.interactions()}
    assert weights[1] == pytest.approx(0.626738176, abs=PRECISION)
    assert weights[2] == pytest.approx(0.6678784, abs=PRECISION)
    assert weights[3] == pytest.approx(0.626738176, abs=PRECISION)
    # homology graph is left alone
    assert all(e.weight == 0.8 for e in trivial_graph.homologies())


def test_cross_reads_snapshot_weights(trivial_graph):
    # every job must see the initial 0.4 even though others finish first
    updates = CrossingManager(n_cores=4, max_depth=10000).cross(trivial_graph)
    assert all(u.initial_weight == 0.4 for u in updates)


def test_cross_is_order_independent(random_graph):
    serial = random_graph.copy()
    parallel = random_graph.copy()
    CrossingManager(n_cores=1, max_depth=3).cross(serial)
    CrossingManager(n_cores=4, max_depth=3).cross(parallel)
    assert [e.weight for e in serial.interactions()] == [e.weight for e in parallel.interactions()]


def test_failed_job_leaves_edge_unchanged(trivial_graph, monkeypatch, caplog):
    class FailingJob(HomologySearchJob):
        def __call__(self):
            if self.root.edge_id == 2:
                raise ArithmeticError("boom")
            return super().__call__()

    monkeypatch.setattr(crossing_manager, "HomologySearchJob", FailingJob)
    with caplog.at_level(logging.ERROR):
        updates = CrossingManager(n_cores=2, max_depth=10000).cross(trivial_graph)

    assert [u.edge_id for u in updates] == [1, 3]
    assert trivial_graph.find_interaction(2, 4).weight == 0.4
    assert trivial_graph.find_interaction(1, 3).weight == pytest.approx(0.626738176, abs=PRECISION)
    assert "interaction 2" in caplog.text


def test_empty_graph():
    from ppi_refine.graph import DualGraph

    assert CrossingManager(n_cores=1, max_depth=2).cross(DualGraph()) == []


def test_negative_depth_rejected():
    with pytest.raises(ValueError):
        CrossingManager(n_cores=1, max_depth=-1)


class InterruptedOnceFuture:
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def result(self):
        self.calls += 1
        if self.calls == 1:
            raise InterruptedError
        return self.value

    def done(self):
        return self.calls > 1


def test_wait_retries_after_interruption(caplog):
    future = InterruptedOnceFuture("ok")
    with caplog.at_level(logging.WARNING):
        assert wait_for_result(future, "test job") == "ok"
    assert future.calls == 2
    assert "Retrying" in caplog.text


def test_wait_propagates_job_errors():
    future: Future = Future()
    future.set_exception(InterruptedError("raised by the job"))
    with pytest.raises(InterruptedError):
        wait_for_result(future, "test job")

    future = Future()
    future.set_exception(ValueError("bad"))
    with pytest.raises(ValueError):
        wait_for_result(future, "test job")


def test_pool_shutdown_leaves_no_threads():
    pool = create_pool(3, "test")
    futures = [pool.submit(pow, 2, i) for i in range(10)]
    assert [f.result() for f in futures] == [2**i for i in range(10)]
    assert shutdown_pool(pool) == 0


def test_pool_shutdown_cancels_queued_work_and_warns(monkeypatch, caplog):
    monkeypatch.setattr(pools, "SHUTDOWN_GRACE_PERIOD", 0.1)
    started = threading.Event()
    release = threading.Event()

    def blocking_job():
        started.set()
        release.wait(timeout=10)

    pool = create_pool(1, "blocked")
    running = pool.submit(blocking_job)
    queued = pool.submit(pow, 2, 3)
    assert started.wait(timeout=5)
    assert [t.name for t in pool.workers()] == [f"{pool.name}_0"]

    try:
        with caplog.at_level(logging.WARNING):
            assert shutdown_pool(pool) == 1
        assert queued.cancelled()
        assert "lingering" in caplog.text
        assert pool.name in caplog.text
    finally:
        release.set()
    running.result(timeout=5)


def test_pool_needs_a_worker():
    with pytest.raises(ValueError):
        create_pool(0, "test")
