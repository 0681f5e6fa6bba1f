# taskpool

A small library for running tasks on background threads. It caps how many
tasks run at the same time and collects the exceptions they raise.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Concepts

- **`Manager`** (in `taskpool.manager`) caps the number of tasks running at
  once. `Manager(workercount)` takes a count of workers. A negative count is
  read as a multiple of the number of CPUs, so `-2` means twice the CPU count.
  The count is never below 2; the value in use is available as
  `manager.workercount`.
- **`Waiter`** (in `taskpool.manager`) tracks a set of tasks that were started
  through a manager and collects the exceptions they raise.
- A **task** is any callable that takes no arguments. A task fails by raising
  an `Exception`; the exception is handed to the task's waiter.

## Usage

```python
from taskpool.manager import Manager, Waiter

def work(n):
    def task():
        if n % 3 == 0:
            raise ValueError(f"bad item {n}")
    return task

with Manager(4) as manager:
    waiter = Waiter()
    for n in range(10):
        manager.run(work(n), waiter)
    waiter.wait()
    errors = list(waiter.errors())

print(errors)
```

- `Manager.run(task, waiter)` blocks while every worker slot is busy, then
  starts the task on a new thread. It raises `RuntimeError` once the manager
  has been closed.
- `Waiter.wait()` blocks until every task of that waiter has finished and then
  ends the stream of exceptions. A waiter can be waited on only once; calling
  `wait()` again, or starting another task with it afterwards, raises
  `RuntimeError`.
- `Waiter.errors()` is a generator of the exceptions raised by the waiter's
  tasks, in the order they were raised. Exceptions are kept until they are
  read, so it can be read while the tasks run (from another thread) or after
  `wait()` has returned. It stops once `wait()` has returned and everything
  collected has been yielded.
- `Manager.close()` waits for all tasks the manager started to finish and
  refuses further tasks. Using the manager as a context manager calls
  `close()` on exit.

### Shared manager

`taskpool.shared` keeps one manager for the whole process:

```python
from taskpool import shared
from taskpool.manager import Waiter

shared.init(8)          # also tries to raise the open-file limit
waiter = Waiter()
shared.run(lambda: None, waiter)
waiter.wait()
shared.close()
```

`shared.init(workercount)` replaces any earlier shared manager. It ignores
failures to raise the open-file limit. `shared.run` and `shared.close` raise
`RuntimeError` if `init` has not been called.

### Open-file limit

`taskpool.fdlimit.raise_limit()` raises the soft limit on open files to 1024
when it is lower than that and the hard limit is at least 1024 (or
unlimited). It leaves the limits alone otherwise, and does nothing on
platforms without the `resource` module.