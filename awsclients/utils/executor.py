"""
A thread pool of daemon worker threads, used as the shared executor for asynchronous client operations.

Unlike ``concurrent.futures.ThreadPoolExecutor``, the workers do not keep the interpreter alive at exit, so a client
that is never closed does not block shutdown of the application using it.
"""
import itertools
import logging
import queue
import threading
import time
from concurrent.futures import Executor, Future
from typing import Callable, NamedTuple, Optional, ParamSpec, TypeVar

LOG = logging.getLogger(__name__)

_P = ParamSpec("_P")
_T = TypeVar("_T")


class _Task(NamedTuple):
    future: Future
    fn: Callable
    args: tuple
    kwargs: dict


_SHUTDOWN = _Task(None, None, None, None)
"""Sentinel which makes a worker exit. Every exiting worker puts it back for its siblings."""


class DaemonThreadPool(Executor):
    """
    Executor that runs submitted callables on at most ``max_workers`` daemon threads. Threads are started lazily when
    no worker is idle, and tasks are taken from a single FIFO queue.
    """

    _counter = itertools.count().__next__

    def __init__(self, max_workers: int, thread_name_prefix: str = ""):
        if max_workers <= 0:
            raise ValueError("max_workers must be greater than 0")
        self._max_workers = max_workers
        self._thread_name_prefix = thread_name_prefix or f"DaemonThreadPool-{self._counter()}"
        self._tasks: queue.Queue[_Task] = queue.Queue()
        self._idle = threading.Semaphore(0)
        self._shutdown = False
        self._lock = threading.Lock()
        self._threads: list[threading.Thread] = []

    @property
    def max_workers(self) -> int:
        return self._max_workers

    def submit(self, fn: Callable[_P, _T], /, *args: _P.args, **kwargs: _P.kwargs) -> Future[_T]:
        with self._lock:
            if self._shutdown:
                raise RuntimeError("cannot schedule new tasks after shutdown")

            future = Future()
            self._tasks.put(_Task(future, fn, args, kwargs))
            self._maybe_start_worker()
            return future

    def shutdown(
        self, wait: bool = True, *, cancel_futures: bool = False, timeout: float = None
    ) -> None:
        with self._lock:
            self._shutdown = True
            if cancel_futures:
                while True:
                    try:
                        task = self._tasks.get_nowait()
                    except queue.Empty:
                        break
                    if task.future is not None:
                        task.future.cancel()
            self._tasks.put_nowait(_SHUTDOWN)

        if wait:
            self.join(timeout)

    def join(self, timeout: Optional[float] = None):
        """
        Wait for all worker threads to return.

        :param timeout: the max time to wait for all threads together
        """
        deadline = time.monotonic() + timeout if timeout else None
        for thread in list(self._threads):
            remaining = None if deadline is None else max(deadline - time.monotonic(), 0)
            thread.join(timeout=remaining)

    def _maybe_start_worker(self) -> None:
        # an idle worker will pick up the task
        if self._idle.acquire(timeout=0):
            return

        if len(self._threads) >= self._max_workers:
            return

        thread = threading.Thread(
            target=self._work,
            name=f"{self._thread_name_prefix}_{len(self._threads)}",
            daemon=True,
        )
        thread.start()
        self._threads.append(thread)

    def _work(self) -> None:
        try:
            while True:
                task = self._tasks.get(block=True)
                if task is _SHUTDOWN:
                    self._tasks.put(_SHUTDOWN)
                    return

                _run_task(task)
                del task
                self._idle.release()
        except BaseException:
            LOG.exception("Exception in thread pool worker")


def _run_task(task: _Task) -> None:
    if not task.future.set_running_or_notify_cancel():
        return

    try:
        result = task.fn(*task.args, **task.kwargs)
    except BaseException as e:
        task.future.set_exception(e)
    else:
        task.future.set_result(result)


_default_executor: Optional[DaemonThreadPool] = None
_default_executor_lock = threading.Lock()


def get_default_executor() -> DaemonThreadPool:
    """
    Returns the process-wide executor shared by all clients which are not configured with their own executor. It is
    created on first use, with ``config.MAX_WORKERS`` threads.
    """
    global _default_executor

    with _default_executor_lock:
        if _default_executor is None:
            from awsclients import config

            _default_executor = DaemonThreadPool(
                config.MAX_WORKERS, thread_name_prefix="awsclients"
            )
        return _default_executor
