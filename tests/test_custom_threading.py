import threading

import pytest

from utils.custom_threading import CompletionBarrier, ThreadExecutor


def test_wait_returns_immediately_with_nothing_pending():
    barrier = CompletionBarrier()

    assert barrier.wait(timeout=0.1) is True
    assert barrier.pending == 0


def test_wait_times_out_while_work_is_pending():
    barrier = CompletionBarrier()
    barrier.add()

    assert barrier.wait(timeout=0.05) is False
    assert barrier.pending == 1


def test_done_below_zero_raises():
    with pytest.raises(ValueError):
        CompletionBarrier().done()


def test_wait_blocks_until_every_worker_is_done():
    barrier = CompletionBarrier()
    release = threading.Event()
    finished = []
    lock = threading.Lock()

    def work(n):
        release.wait(timeout=5)
        with lock:
            finished.append(n)
        barrier.done()

    executor = ThreadExecutor(max_workers=5)
    for n in range(5):
        barrier.add()
        executor.submit(work, n)

    assert barrier.wait(timeout=0.05) is False
    release.set()
    assert barrier.wait(timeout=5) is True
    assert sorted(finished) == [0, 1, 2, 3, 4]
    executor.shutdown()
