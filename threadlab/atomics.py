"""Atomic integers and small demonstrations of stop flags, progress counters and ID allocation."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Iterable


class CompareExchangeError(Exception):
    """Raised when a compare-exchange finds a value other than the expected one."""

    def __init__(self, actual: int) -> None:
        super().__init__(f"compare_exchange failed, current value is {actual}")
        self.actual = actual


class AtomicInt:
    """A fixed-width integer whose operations are atomic and whose additions wrap."""

    def __init__(self, value: int = 0, bits: int = 64, signed: bool = True) -> None:
        if bits <= 0:
            raise ValueError("bits must be positive")
        self._bits = bits
        self._signed = signed
        self._mask = (1 << bits) - 1
        if signed:
            self._min = -(1 << (bits - 1))
            self._max = (1 << (bits - 1)) - 1
        else:
            self._min = 0
            self._max = self._mask
        self._lock = threading.Lock()
        self._value = self._checked(value)

    def _checked(self, value: int) -> int:
        if not self._min <= value <= self._max:
            raise ValueError(
                f"{value} does not fit in a {'signed' if self._signed else 'unsigned'} "
                f"{self._bits}-bit integer"
            )
        return value

    def _wrap(self, value: int) -> int:
        value &= self._mask
        if self._signed and value > self._max:
            value -= 1 << self._bits
        return value

    def load(self) -> int:
        """Return the current value."""
        with self._lock:
            return self._value

    def store(self, value: int) -> None:
        """Replace the current value."""
        value = self._checked(value)
        with self._lock:
            self._value = value

    def swap(self, value: int) -> int:
        """Replace the current value and return the previous one."""
        value = self._checked(value)
        with self._lock:
            previous, self._value = self._value, value
            return previous

    def fetch_add(self, delta: int) -> int:
        """Add ``delta`` with wrap-around and return the previous value."""
        with self._lock:
            previous = self._value
            self._value = self._wrap(previous + delta)
            return previous

    def compare_exchange(self, current: int, new: int) -> int:
        """Store ``new`` if the value equals ``current``; return the previous value.

        Raises CompareExchangeError carrying the actual value otherwise.
        """
        new = self._checked(new)
        with self._lock:
            if self._value != current:
                raise CompareExchangeError(self._value)
            self._value = new
            return current

    def __repr__(self) -> str:
        return f"AtomicInt({self.load()}, bits={self._bits}, signed={self._signed})"


def stop_flag(lines: Iterable[str] | None = None, interval: float = 1.0) -> None:
    """Run a background worker until the command ``stop`` is read."""
    stop = AtomicInt(0, bits=8, signed=False)

    def background() -> None:
        while not stop.load():
            print("Doing some work and going to sleep for 1 sec.")
            time.sleep(interval)

    worker = threading.Thread(target=background)
    worker.start()
    try:
        for raw in sys.stdin if lines is None else lines:
            command = raw.rstrip("\r\n")
            if command == "help":
                print("Available commands: help, stop")
            elif command == "stop":
                break
            else:
                print("Unknown command")
    finally:
        stop.store(1)
        worker.join()


def progress_reporting(steps: int = 10, interval: float = 1.0) -> int:
    """Report the progress of a background worker until it finishes; return the steps done."""
    num_done = AtomicInt(0, bits=64, signed=False)

    def work() -> None:
        for i in range(steps):
            print(f"Putting thread to sleep {i}")
            time.sleep(interval)
            num_done.store(i + 1)

    worker = threading.Thread(target=work)
    worker.start()
    while (n := num_done.load()) != steps:
        print(f"Working: {n} / 100")
        time.sleep(interval * 1.1)
    worker.join()
    print("Huh, I'm Done.")
    return num_done.load()


_X = AtomicInt(0, bits=64, signed=False)


def _calculate_x() -> int:
    time.sleep(0.5)
    return 42


def get_x() -> int:
    """Return the lazily computed value, computing it on first use."""
    x = _X.load()
    if x == 0:
        x = _calculate_x()
        _X.store(x)
    return x


def lazy_initialization() -> int:
    """Print the lazily initialised value and return it."""
    x = get_x()
    print(x)
    return x


def fetch_add() -> tuple[int, int, int]:
    """Show fetch_add semantics: previous value, new value, and 32-bit wrap-around."""
    a = AtomicInt(0, bits=32, signed=True)
    b = a.fetch_add(23)
    c = a.load()
    at_max = AtomicInt((1 << 31) - 1, bits=32, signed=True)
    at_max.fetch_add(1)
    wrapped = at_max.load()
    return b, c, wrapped


def _process_item(item: int, delay: float) -> None:
    print(f"Processing item {item}")
    time.sleep(delay)


def multiple_thread_progress_report(
    workers: int = 4, items_per_worker: int = 25, delay: float = 0.5
) -> int:
    """Process items on several threads while a reporter prints progress; return the count."""
    total = workers * items_per_worker
    num_done = AtomicInt(0, bits=64, signed=False)
    report_interval = max(delay * 2, 0.001)

    def reporter() -> None:
        while True:
            n = num_done.load()
            print(f"Progress: {n}%")
            if n == total:
                break
            time.sleep(report_interval)

    def worker(index: int) -> None:
        for i in range(items_per_worker):
            _process_item(index * items_per_worker + i, delay)
            num_done.fetch_add(1)

    threads = [threading.Thread(target=reporter)]
    threads += [threading.Thread(target=worker, args=(w,)) for w in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return num_done.load()


_NEXT_ID = AtomicInt(0, bits=32, signed=False)


def allocate_new_id() -> int:
    """Allocate the next ID atomically; raise OverflowError once 1000 IDs are used."""
    current = _NEXT_ID.load()
    while True:
        if current >= 1000:
            raise OverflowError("too many IDs allocated")
        try:
            return _NEXT_ID.compare_exchange(current, current + 1)
        except CompareExchangeError as err:
            current = err.actual