"""Producer/consumer queues woken by thread parking or by a condition variable."""

from __future__ import annotations

import itertools
import sys
import threading
import time
from collections import deque
from collections.abc import Iterator


def _items(count: int | None) -> Iterator[int]:
    if count is None:
        return itertools.count()
    if count < 0:
        raise ValueError("count must not be negative")
    return iter(range(count))


def parking(count: int | None = None, interval: float = 1.0) -> list[int]:
    """Produce ``count`` items (forever if None) for a consumer that parks when idle.

    Returns the items the consumer took, in order.
    """
    items = _items(count)
    queue: deque[int] = deque()
    queue_lock = threading.Lock()
    token = threading.Event()
    done = threading.Event()
    consumed: list[int] = []

    def consumer() -> None:
        while True:
            finished = done.is_set()
            with queue_lock:
                item = queue.popleft() if queue else None
            if item is not None:
                print(f"item = {item}", file=sys.stderr)
                consumed.append(item)
                continue
            if finished:
                return
            print("Parking Thread.")
            token.wait()
            token.clear()

    worker = threading.Thread(target=consumer)
    worker.start()
    try:
        for i in items:
            print(f"Producing item {i}")
            with queue_lock:
                queue.append(i)
            token.set()
            time.sleep(interval)
    finally:
        done.set()
        token.set()
        worker.join()
    return consumed


def condition_variables(count: int | None = None, interval: float = 1.0) -> list[int]:
    """Produce each of ``count`` items twice (forever if None) behind a condition variable.

    Returns the items the consumer took, in order.
    """
    items = _items(count)
    queue: deque[int] = deque()
    not_empty = threading.Condition()
    done = False
    consumed: list[int] = []

    def consumer() -> None:
        with not_empty:
            while True:
                if queue:
                    item = queue.popleft()
                    print(f"item = {item}", file=sys.stderr)
                    consumed.append(item)
                elif done:
                    return
                else:
                    not_empty.wait()

    worker = threading.Thread(target=consumer)
    worker.start()
    try:
        for i in items:
            with not_empty:
                queue.extend((i, i))
                not_empty.notify()
            time.sleep(interval)
    finally:
        with not_empty:
            done = True
            not_empty.notify_all()
        worker.join()
    return consumed