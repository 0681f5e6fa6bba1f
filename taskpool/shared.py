"""A process-wide task manager."""

import contextlib

from taskpool.fdlimit import raise_limit
from taskpool.manager import Manager

_manager = None


def _current():
    if _manager is None:
        raise RuntimeError("shared manager is not initialised; call init() first")
    return _manager


def init(workercount):
    """Try to raise the open-files limit and create the shared manager."""
    global _manager
    with contextlib.suppress(OSError, ValueError):
        raise_limit()
    _manager = Manager(workercount)


def close():
    """Wait for the shared manager's tasks to finish and close it."""
    _current().close()


def run(task, waiter):
    """Run ``task`` on the shared manager."""
    _current().run(task, waiter)