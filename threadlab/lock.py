"""Mutex-guarded counters, plain and scoped threads, and shared reference counting."""

from __future__ import annotations

import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from os import PathLike
from typing import Any, Generic, TypeVar

from threadlab.atomics import AtomicInt

T = TypeVar("T")


def mutex_function(threads: int = 10, increments: int = 100) -> int:
    """Increment a shared counter under a mutex from several threads; return the total."""
    mutex = threading.Lock()
    value = 0

    def work() -> None:
        nonlocal value
        with mutex:
            for _ in range(increments):
                value += 1

    workers = [threading.Thread(target=work) for _ in range(threads)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()

    with mutex:
        final = value
    print(f"Final value of the mutex guarded value: {final}")
    if final != threads * increments:
        raise AssertionError(f"expected {threads * increments}, got {final}")
    return final


def thread_fn() -> int:
    """Greet from the current thread and return its identifier."""
    print("Hello form the thread!")
    ident = threading.get_ident()
    print(f"Thread ID: {ident}")
    return ident


def spawn_thread(path: str | PathLike[str] = "test.txt") -> str:
    """Start three threads, one of which reads ``path``; return the text it read."""
    handle = open(path, "rb")
    i = 0
    numbers = [1, 2, 3, 4, 5]

    def first(i: int = i) -> None:
        print(f"Thread 1: {threading.get_ident()}")
        print("Static I: 0")
        print(f"Val i: {i}")
        i += 1
        print(f"Val i after increment: {i}")

    def third() -> str:
        with handle:
            text = handle.read().decode("utf-8")
        print(f"The file read: {text}")
        print(*numbers)
        print(len(numbers))
        return text

    try:
        with ThreadPoolExecutor(max_workers=3) as pool:
            t1 = pool.submit(first)
            t2 = pool.submit(thread_fn)
            t3 = pool.submit(third)
            print("Hello, from Main!")
            t1.result()
            t2.result()
            text = t3.result()
    finally:
        handle.close()

    print(f"\nTry i: {i}")
    return text


def scoped_thread() -> None:
    """Share a list with two threads that both finish before returning."""
    print("Scoped One Heh.")
    numbers = [1, 2, 3, 4]

    workers = [
        threading.Thread(target=lambda: print(*numbers)),
        threading.Thread(target=lambda: print(f"Length: {len(numbers)}")),
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()


class _Arc(Generic[T]):
    """A shared handle with an explicit strong count; leaving its context drops it."""

    def __init__(self, value: T, counter: AtomicInt | None = None) -> None:
        self.value = value
        self._count = counter if counter is not None else AtomicInt(1, bits=64, signed=False)

    @property
    def strong_count(self) -> int:
        return self._count.load()

    def clone(self) -> _Arc[T]:
        self._count.fetch_add(1)
        return _Arc(self.value, self._count)

    def drop(self) -> None:
        self._count.fetch_add(-1)

    def __enter__(self) -> _Arc[T]:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.drop()


def reference_counting() -> int:
    """Share an array between threads through counted handles; return the final count."""
    arc_shared = _Arc((1, 2, 3, 4, 5))
    arc_cloned = arc_shared.clone()

    def cloned_worker() -> None:
        with arc_cloned:
            print(f"Reference count cloned: {arc_cloned.strong_count}")
            print(f"arc_cloned = {list(arc_cloned.value)}", file=sys.stderr)

    inner = arc_shared.clone()

    def shared_worker() -> None:
        with inner:
            print(f"Reference count shared inner: {inner.strong_count}")
            print(f"arc_shared = {list(inner.value)}", file=sys.stderr)

    workers = [threading.Thread(target=cloned_worker), threading.Thread(target=shared_worker)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()

    count = arc_shared.strong_count
    print(f"Reference count outer: {count}")
    return count