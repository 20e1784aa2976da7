import threading
import time

import pytest

from awsclients.utils.executor import DaemonThreadPool, get_default_executor


@pytest.fixture
def pool():
    pool = DaemonThreadPool(max_workers=2, thread_name_prefix="test-pool")
    yield pool
    pool.shutdown(wait=True, timeout=5)


def test_submit(pool):
    assert pool.submit(lambda a, b: a + b, 1, b=2).result(timeout=5) == 3


def test_submit_exception(pool):
    def _fail():
        raise ValueError("oh no")

    future = pool.submit(_fail)

    with pytest.raises(ValueError):
        future.result(timeout=5)


def test_workers_are_daemon_threads(pool):
    thread = pool.submit(threading.current_thread).result(timeout=5)

    assert thread.daemon
    assert thread.name.startswith("test-pool_")


def test_max_workers(pool):
    barrier = threading.Barrier(2, timeout=5)
    names = set()

    def _task():
        names.add(threading.current_thread().name)
        barrier.wait()

    futures = [pool.submit(_task) for _ in range(4)]
    for future in futures:
        future.result(timeout=10)

    assert pool.max_workers == 2
    assert len(names) == 2


def test_submit_after_shutdown():
    pool = DaemonThreadPool(max_workers=1)
    pool.shutdown()

    with pytest.raises(RuntimeError):
        pool.submit(time.sleep, 0)


def test_shutdown_cancels_pending_futures():
    pool = DaemonThreadPool(max_workers=1)
    started = threading.Event()
    release = threading.Event()

    def _block():
        started.set()
        release.wait(5)

    running = pool.submit(_block)
    started.wait(5)
    pending = pool.submit(time.sleep, 0)

    pool.shutdown(wait=False, cancel_futures=True)
    release.set()
    pool.join(timeout=5)

    assert running.done()
    assert pending.cancelled()


def test_invalid_max_workers():
    with pytest.raises(ValueError):
        DaemonThreadPool(max_workers=0)


def test_default_executor_is_shared():
    assert get_default_executor() is get_default_executor()
