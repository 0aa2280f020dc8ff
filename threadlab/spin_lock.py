"""A spin lock guarding a value, released through a guard object."""

from __future__ import annotations

import threading
import time
from typing import Any, Generic, TypeVar

from threadlab.atomics import AtomicInt

T = TypeVar("T")


class SpinLock(Generic[T]):
    """A lock that busy-waits on an atomic flag and protects a single value."""

    def __init__(self, value: T) -> None:
        self._locked = AtomicInt(0, bits=8, signed=False)
        self._value = value

    def lock(self) -> Guard[T]:
        """Spin until the lock is acquired and return a guard for the value."""
        while self._locked.swap(1):
            time.sleep(0)
        return Guard(self)

    def unlock(self) -> None:
        """Release the lock; any guard obtained earlier must no longer be used."""
        self._locked.store(0)


class Guard(Generic[T]):
    """Access to a locked SpinLock's value; releases the lock when done."""

    def __init__(self, lock: SpinLock[T]) -> None:
        self._lock = lock
        self._held = True

    @property
    def value(self) -> T:
        if not self._held:
            raise RuntimeError("guard already released")
        return self._lock._value

    @value.setter
    def value(self, new: T) -> None:
        if not self._held:
            raise RuntimeError("guard already released")
        self._lock._value = new

    def release(self) -> None:
        """Release the lock; further calls do nothing."""
        if self._held:
            self._held = False
            self._lock.unlock()

    def __enter__(self) -> Guard[T]:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.release()

    def __del__(self) -> None:
        if getattr(self, "_held", False):
            self.release()


def _run_pair(lock: SpinLock[list], second: tuple[int, ...]) -> list:
    def push_one() -> None:
        with lock.lock() as guard:
            guard.value.append(1)

    def push_rest() -> None:
        with lock.lock() as guard:
            for item in second:
                guard.value.append(item)

    threads = [threading.Thread(target=push_one), threading.Thread(target=push_rest)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    with lock.lock() as guard:
        result = list(guard.value)
    print(f"g.as_slice() = {result}")
    return result


def spin_lock_test() -> list:
    """Push from two threads under a spin lock; the pushes never interleave."""
    result = _run_pair(SpinLock([]), (2, 3))
    if result not in ([1, 2, 3], [2, 3, 1]):
        raise AssertionError(f"unexpected order {result}")
    return result


def spin_lock_without_lifetime() -> list:
    """Same as spin_lock_test with a different pair of pushes."""
    result = _run_pair(SpinLock([]), (2, 2))
    if result not in ([1, 2, 2], [2, 2, 1]):
        raise AssertionError(f"unexpected order {result}")
    return result