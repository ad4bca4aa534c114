"""Bounded work queues with a finish-and-wait barrier."""
from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

__all__ = ["WorkQueue", "InlineWorkQueue", "PooledWorkQueue", "make_work_queue"]

Task = Callable[[], object]


class WorkQueue(ABC):
    """
    Executes file tasks and waits for them at a barrier.

    ``execute`` hands over one task; ``finish_work`` blocks until every task
    has completed or failed and re-raises the first failure. A queue is used
    for one batch of work (one n-gram order) and is not reusable after
    ``finish_work``.
    """

    @abstractmethod
    def execute(self, task: Task) -> None:
        """Hand over one task."""

    @abstractmethod
    def finish_work(self) -> None:
        """Wait for every task; re-raise the first failure."""


class InlineWorkQueue(WorkQueue):
    """Runs every task immediately on the calling thread, in submission order."""

    def __init__(self) -> None:
        self._error: Optional[BaseException] = None

    def execute(self, task: Task) -> None:
        if self._error is not None:
            logger.debug("Skipping task after earlier failure: %r", task)
            return
        try:
            task()
        except Exception as exc:
            self._error = exc

    def finish_work(self) -> None:
        if self._error is not None:
            raise self._error


class PooledWorkQueue(WorkQueue):
    """
    Runs tasks on a thread pool of ``num_workers`` threads.

    The first task to fail records its exception and cancels every task that
    has not started yet; tasks already running finish normally.
    """

    def __init__(self, num_workers: int, *, thread_name_prefix: str = "ngl:loader") -> None:
        if num_workers < 1:
            raise ValueError(f"num_workers must be positive, got {num_workers}")
        self.num_workers = num_workers
        self._executor = ThreadPoolExecutor(
            max_workers=num_workers, thread_name_prefix=thread_name_prefix
        )
        self._futures: List[Future] = []
        self._lock = threading.Lock()
        self._error: Optional[BaseException] = None

    def execute(self, task: Task) -> None:
        # Check, submit and record under one hold so _on_done cancels every queued task
        with self._lock:
            if self._error is not None:
                logger.debug("Skipping task after earlier failure: %r", task)
                return
            fut = self._executor.submit(task)
            self._futures.append(fut)
        fut.add_done_callback(self._on_done)

    def _on_done(self, fut: Future) -> None:
        if fut.cancelled():
            return
        exc = fut.exception()
        if exc is None:
            return
        with self._lock:
            if self._error is not None:
                return
            self._error = exc
            pending = list(self._futures)
        logger.error("Task failed, cancelling queued tasks: %s", exc)
        for other in pending:
            other.cancel()

    def finish_work(self) -> None:
        try:
            with self._lock:
                futures = list(self._futures)
            wait(futures)
        finally:
            self._executor.shutdown(wait=True)
        if self._error is not None:
            raise self._error


def make_work_queue(num_workers: int) -> WorkQueue:
    """Return an inline queue for 0 workers, a pooled queue otherwise."""
    if num_workers < 0:
        raise ValueError(f"num_workers must be non-negative, got {num_workers}")
    if num_workers == 0:
        return InlineWorkQueue()
    return PooledWorkQueue(num_workers)
