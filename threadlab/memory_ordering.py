"""Happens-before through spawn and join, release/acquire, and sequential consistency."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

from threadlab.atomics import AtomicInt

_X = AtomicInt(0, bits=32, signed=True)
_DATA = AtomicInt(0, bits=32, signed=True)
_FLAG = AtomicInt(0, bits=8, signed=False)
_A = AtomicInt(0, bits=8, signed=False)
_B = AtomicInt(0, bits=8, signed=False)


def _observe_x() -> int:
    x = _X.load()
    if x not in (1, 2):
        raise AssertionError(f"thread saw X = {x}")
    return x


def spawn_and_join() -> tuple[int, int]:
    """Return the value a spawned thread saw (1 or 2) and the value after joining (3)."""
    _X.store(1)
    with ThreadPoolExecutor(max_workers=1) as pool:
        future = pool.submit(_observe_x)
        _X.store(2)
        observed = future.result()
    _X.store(3)
    return observed, _X.load()


def release_and_acquire() -> int:
    """Publish data behind a flag and wait for the flag; return the data seen."""
    _DATA.store(0)
    _FLAG.store(0)

    def publisher() -> None:
        _DATA.store(44)
        _FLAG.store(1)

    worker = threading.Thread(target=publisher)
    worker.start()
    while not _FLAG.load():
        time.sleep(0.1)
        print("Waiting on the flag...")

    data = _DATA.load()
    worker.join()
    if data != 44:
        raise AssertionError(f"expected 44, got {data}")
    return data


def sequentially_consistent_ordering() -> str:
    """Let two threads race to append '!'; at most one ever does. Return the string."""
    _A.store(0)
    _B.store(0)
    pushed: list[str] = []

    def first() -> None:
        _A.store(1)
        if not _B.load():
            pushed.append("!")

    def second() -> None:
        _B.store(1)
        if not _A.load():
            pushed.append("!")

    workers = [threading.Thread(target=first), threading.Thread(target=second)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return "".join(pushed)