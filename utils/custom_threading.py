"""
Script contains functions for threading
"""

import threading
from concurrent import futures


class CompletionBarrier:
    """
    Counter of outstanding units of work.

    ``add`` registers work before it is started, ``done`` is called once by
    each unit when it finishes, and ``wait`` blocks until the count is zero.
    """

    def __init__(self):
        self._condition = threading.Condition()
        self._pending = 0

    @property
    def pending(self) -> int:
        with self._condition:
            return self._pending

    def add(self, delta: int = 1) -> None:
        with self._condition:
            if self._pending + delta < 0:
                raise ValueError("CompletionBarrier: negative pending count")
            self._pending += delta
            if self._pending == 0:
                self._condition.notify_all()

    def done(self) -> None:
        self.add(-1)

    def wait(self, timeout=None) -> bool:
        """Block until every registered unit is done. Returns False on timeout."""
        with self._condition:
            return self._condition.wait_for(lambda: self._pending == 0, timeout=timeout)


class ThreadExecutor:
    """
    Class to handle threading
    """
    def __init__(self, max_workers=None):
        self.executor = futures.ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="fetch"
        )

    def __del__(self):
        self.executor.shutdown(wait=False)

    def submit(self, fn, *args, **kwargs):
        return self.executor.submit(fn, *args, **kwargs)

    def shutdown(self, wait=True):
        self.executor.shutdown(wait=wait)
