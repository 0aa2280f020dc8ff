from threadlab.memory_ordering import (
    release_and_acquire,
    sequentially_consistent_ordering,
    spawn_and_join,
)


def test_spawn_and_join_observed_value():
    observed, final = spawn_and_join()
    assert observed in (1, 2)
    assert final == 3


def test_spawn_and_join_repeatable():
    for _ in range(20):
        observed, final = spawn_and_join()
        assert observed in (1, 2)
        assert final == 3


def test_release_and_acquire_sees_data():
    assert release_and_acquire() == 44


def test_release_and_acquire_twice():
    assert [release_and_acquire(), release_and_acquire()] == [44, 44]


def test_sequentially_consistent_ordering_never_both():
    for _ in range(50):
        result = sequentially_consistent_ordering()
        assert result in ("", "!")
        assert len(result) <= 1