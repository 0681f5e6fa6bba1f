"""Running tasks in threads with bounded concurrency."""

import os
import queue
import threading

MIN_NUM_WORKERS = 2

_CLOSED = object()


class Waiter:
    """Tracks tasks and collects the exceptions they raise."""

    def __init__(self):
        self._pending = 0
        self._cond = threading.Condition()
        self._errors = queue.Queue()
        self._closed = False

    def _add(self):
        with self._cond:
            if self._closed:
                raise RuntimeError("waiter is already closed")
            self._pending += 1

    def _done(self):
        with self._cond:
            self._pending -= 1
            self._cond.notify_all()

    def wait(self):
        """Block until every task has finished, then close the error stream."""
        with self._cond:
            if self._closed:
                raise RuntimeError("waiter is already closed")
            self._cond.wait_for(lambda: self._pending == 0)
            self._closed = True
        self._errors.put(_CLOSED)

    def errors(self):
        """Yield task exceptions as they arrive, until wait() has returned."""
        while (item := self._errors.get()) is not _CLOSED:
            yield item
        self._errors.put(_CLOSED)


class Manager:
    """Runs tasks in threads, at most ``workercount`` at a time (never fewer than two).

    A negative ``workercount`` means that many workers per CPU.
    """

    def __init__(self, workercount):
        if workercount < 0:
            workercount = (os.cpu_count() or 1) * -workercount
        self.workercount = max(workercount, MIN_NUM_WORKERS)
        self._slots = threading.Semaphore(self.workercount)
        self._active = 0
        self._cond = threading.Condition()
        self._closed = False

    def run(self, task, waiter):
        """Start ``task`` once a slot is free; its exception goes to ``waiter``."""
        if self._closed:
            raise RuntimeError("manager is closed")
        waiter._add()
        self._slots.acquire()
        with self._cond:
            self._active += 1

        def worker():
            try:
                task()
            except Exception as exc:
                waiter._errors.put(exc)
            finally:
                with self._cond:
                    self._active -= 1
                    self._cond.notify_all()
                self._slots.release()
                waiter._done()

        threading.Thread(target=worker, daemon=True).start()

    def close(self):
        """Wait for every running task to finish and refuse further tasks."""
        with self._cond:
            self._cond.wait_for(lambda: self._active == 0)
            self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()