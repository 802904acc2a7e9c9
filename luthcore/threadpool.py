"""A fixed-size pool of worker threads returning futures."""

from __future__ import annotations

import os
import threading
from collections import deque
from concurrent.futures import Future
from typing import Callable, TypeVar

T = TypeVar("T")


class ThreadPool:
    """Runs submitted callables on a fixed set of worker threads."""

    def __init__(self, threads=None):
        if threads is None:
            threads = os.cpu_count() or 1
        if threads < 1:
            raise ValueError("a thread pool needs at least one thread")
        self._lock = threading.Lock()
        self._work_available = threading.Condition(self._lock)
        self._all_done = threading.Condition(self._lock)
        self._tasks: deque[tuple[Callable[[], object], Future]] = deque()
        self._terminate = False
        self._pending = 0
        self._workers = [
            threading.Thread(target=self._work_loop, daemon=True) for _ in range(threads)
        ]
        for worker in self._workers:
            worker.start()

    def submit(self, task: Callable[[], T]) -> "Future[T]":
        """Queue ``task`` and return a future for its result."""
        future: Future = Future()
        with self._lock:
            if self._terminate:
                raise RuntimeError("cannot submit to a thread pool that has been shut down")
            self._tasks.append((task, future))
            self._pending += 1
            self._work_available.notify()
        return future

    def wait_for_all(self) -> None:
        """Block until every submitted task has finished."""
        with self._lock:
            self._all_done.wait_for(lambda: self._pending == 0)

    def shutdown(self) -> None:
        """Finish queued tasks, then stop and join the workers."""
        with self._lock:
            self._terminate = True
            self._work_available.notify_all()
        for worker in self._workers:
            if worker is not threading.current_thread():
                worker.join()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def _work_loop(self) -> None:
        while True:
            with self._lock:
                self._work_available.wait_for(lambda: self._tasks or self._terminate)
                if self._terminate and not self._tasks:
                    return
                task, future = self._tasks.popleft()

            if future.set_running_or_notify_cancel():
                try:
                    result = task()
                except BaseException as exc:
                    future.set_exception(exc)
                else:
                    future.set_result(result)

            with self._lock:
                self._pending -= 1
                if self._pending == 0:
                    self._all_done.notify_all()