"""Worker pool helpers shared by the crossing and merging managers."""

import itertools
import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Seconds to wait for idle workers to exit after shutdown
SHUTDOWN_GRACE_PERIOD = 1.0

_pool_ids = itertools.count(1)


class NamedThreadPool(ThreadPoolExecutor):
    """Thread pool whose worker threads are named ``<name>_<index>``."""

    def __init__(self, max_workers: int, name: str) -> None:
        super().__init__(max_workers=max_workers, thread_name_prefix=name)
        self.name = name

    def workers(self) -> list[threading.Thread]:
        return [t for t in threading.enumerate() if t.name.startswith(f"{self.name}_")]


def create_pool(n_cores: int, name: str) -> NamedThreadPool:
    """Create a fixed-size worker pool whose threads are named after ``name``."""
    if n_cores < 1:
        raise ValueError(f"Need at least one worker, got {n_cores}")
    return NamedThreadPool(n_cores, f"{name}-{next(_pool_ids)}")


def wait_for_result(future: Future[T], description: str) -> T:
    """Block until ``future`` has a result, retrying if the wait is interrupted.

    Errors raised by the job itself propagate unchanged, including an
    ``InterruptedError`` raised from inside the job.
    """
    while True:
        try:
            return future.result()
        except InterruptedError:
            if future.done() and isinstance(future.exception(), InterruptedError):
                raise
            logger.warning(f"Interrupted while waiting for {description}. Retrying.")


def shutdown_pool(pool: NamedThreadPool) -> int:
    """Cancel pending work and release the pool without blocking on stragglers.

    Returns:
        Number of worker threads still alive after the grace period
    """
    pool.shutdown(wait=False, cancel_futures=True)

    deadline = time.monotonic() + SHUTDOWN_GRACE_PERIOD
    workers = pool.workers()
    for thread in workers:
        thread.join(timeout=max(deadline - time.monotonic(), 0))

    lingering = sum(1 for t in workers if t.is_alive())
    if lingering:
        logger.warning(f"There are {lingering} lingering threads in pool {pool.name}. Continuing anyway.")
    return lingering
