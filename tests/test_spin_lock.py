import threading

import pytest

from threadlab.spin_lock import (
    Guard,
    SpinLock,
    spin_lock_test,
    spin_lock_without_lifetime,
)


def test_guard_gives_value_and_releases():
    lock = SpinLock([])
    guard = lock.lock()
    guard.value.append(1)
    guard.release()
    with lock.lock() as again:
        assert again.value == [1]


def test_guard_assignment_replaces_value():
    lock = SpinLock(0)
    with lock.lock() as guard:
        guard.value = 5
    with lock.lock() as guard:
        assert guard.value == 5


def test_released_guard_rejects_access():
    lock = SpinLock(0)
    guard = lock.lock()
    guard.release()
    with pytest.raises(RuntimeError):
        guard.value
    with pytest.raises(RuntimeError):
        guard.value = 1
    with lock.lock() as fresh:
        assert fresh.value == 0


def test_unlock_frees_lock():
    lock = SpinLock("a")
    guard = lock.lock()
    assert isinstance(guard, Guard)
    lock.unlock()
    with lock.lock() as second:
        assert second.value == "a"


def test_lock_blocks_until_release():
    lock = SpinLock([])
    guard = lock.lock()
    started = threading.Event()

    def contender():
        started.set()
        with lock.lock() as g:
            g.value.append("second")

    t = threading.Thread(target=contender)
    t.start()
    started.wait()
    guard.value.append("first")
    guard.release()
    t.join()
    with lock.lock() as g:
        assert g.value == ["first", "second"]


def test_mutual_exclusion_counter():
    lock = SpinLock(0)

    def work():
        for _ in range(200):
            with lock.lock() as g:
                g.value = g.value + 1

    threads = [threading.Thread(target=work) for _ in range(5)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    with lock.lock() as g:
        assert g.value == 5 * 200


def test_spin_lock_test_orders():
    assert spin_lock_test() in ([1, 2, 3], [2, 3, 1])


def test_spin_lock_without_lifetime_orders():
    assert spin_lock_without_lifetime() in ([1, 2, 2], [2, 2, 1])