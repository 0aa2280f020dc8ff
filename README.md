# threadlab

A collection of small concurrency demonstrations built on Python threads:
atomic integers with fixed-width wrap-around, interior mutability cells,
mutexes and shared handles, memory-ordering scenarios, parking and
condition variables, and a spin lock with a guard that releases on exit.

## Running the demo

Installing the package provides one command:

    threadlab

With no arguments it runs both spin-lock scenarios. Names can be given
to run only some of them:

    threadlab spin-lock
    threadlab spin-lock-without-lifetime

In each scenario two threads push values into a shared list behind a
`SpinLock`, and the command checks that each thread's pushes end up
together and in order, raising `AssertionError` if they do not. An
unknown name is reported as a usage error.

## Using the modules

### Atomics (`threadlab.atomics`)

`AtomicInt(value, bits, signed)` holds an integer of a given bit width,
signed or unsigned, with `load`, `store`, `swap`, `fetch_add` and
`compare_exchange`. `fetch_add` wraps around the way a fixed-width
machine integer does; `store`, `swap` and `compare_exchange` raise
`ValueError` for a value that does not fit.

```python
from threadlab.atomics import AtomicInt, CompareExchangeError

counter = AtomicInt(0, 32, True)
previous = counter.fetch_add(23)   # returns 0
counter.load()                     # 23

top = AtomicInt(2**31 - 1, 32, True)
top.fetch_add(1)
top.load()                         # -2147483648

try:
    counter.compare_exchange(0, 1)
except CompareExchangeError as err:
    err.actual                     # 23, the value actually found
```

Other functions in the module:

- `allocate_new_id()` hands out increasing ids from a process-wide
  counter and raises `OverflowError` once 1000 ids have been given out.
- `get_x()` computes a value (42) once and caches it;
  `lazy_initialization()` prints and returns it.
- `fetch_add()` returns the previous value, the new value and the
  wrapped result of adding 1 to the largest 32-bit signed integer.
- `stop_flag(lines, interval)` runs a background worker until the
  command `stop` is read from `lines` (standard input by default);
  `help` lists the commands.
- `progress_reporting(steps, interval)` and
  `multiple_thread_progress_report(workers, items_per_worker, delay)`
  print the progress of worker threads through a shared counter and
  return the number of steps or items completed.

### Interior mutability (`threadlab.interior_mutability`)

`Cell` holds a value that can be read with `get`, replaced with `set`,
or swapped with `replace`. `RefCell` hands out borrows through
`borrow()` and `borrow_mut()`; any number of shared borrows may be
held at once, but a mutable borrow raises `BorrowError` if any other
borrow is outstanding. A borrow used as a context manager yields the
value and is released on exit; its `value` property can be assigned
only through a mutable borrow.

```python
from threadlab.interior_mutability import RefCell

cell = RefCell([])
with cell.borrow_mut() as items:
    items.append(1)
```

`pointer_things`, `cell_function`, `ref_cell_function` and
`interior_mutability` print and return what they observe.

### Spin lock (`threadlab.spin_lock`)

```python
from threadlab.spin_lock import SpinLock

lock = SpinLock([])
with lock.lock() as guard:
    guard.value.append(1)
```

`SpinLock.lock()` spins until the lock is free and returns a `Guard`.
The guarded value is reached through `Guard.value`. Using the guard as a
context manager releases the lock on exit; `Guard.release()` releases it
explicitly, after which `value` raises `RuntimeError`.
`SpinLock.unlock()` releases the lock directly. `spin_lock_test()` and
`spin_lock_without_lifetime()` are the scenarios the command runs; each
returns the resulting list.

### Locks and threads (`threadlab.lock`)

- `mutex_function(threads, increments)` has several threads increment a
  counter behind a mutex and returns the total (1000 by default).
- `spawn_thread(path)` starts three threads, one of which reads the file
  at `path` (`test.txt` by default), and returns the text it read.
- `thread_fn()` prints and returns the current thread's identifier.
- `scoped_thread()` shares a list with two threads.
- `reference_counting()` shares a tuple between two threads through
  counted handles and returns the count left once both have finished.

### Memory ordering (`threadlab.memory_ordering`)

- `spawn_and_join()` returns the value a spawned thread saw (1 or 2)
  and the value after joining (3).
- `release_and_acquire()` waits for a flag set by another thread and
  returns the data published before it (44).
- `sequentially_consistent_ordering()` lets two threads race to append
  `!` and returns the result; at most one ever does.

### Parking and condition variables (`threadlab.parking_and_condition_variables`)

`parking(count, interval)` and `condition_variables(count, interval)`
run a producer and a consumer over a shared queue, waking the consumer
through an event or by notifying a condition variable. They produce
`count` items (`condition_variables` queues each one twice) and return
the items consumed in order. With `count=None` they produce forever.