import threading

import pytest

from threadlab.lock import (
    mutex_function,
    reference_counting,
    scoped_thread,
    spawn_thread,
    thread_fn,
)


def test_mutex_function_default_total():
    assert mutex_function() == 1000


def test_mutex_function_custom_sizes():
    threads, increments = 3, 7
    assert mutex_function(threads=threads, increments=increments) == threads * increments


def test_mutex_function_prints_final(capsys):
    total = mutex_function(threads=2, increments=5)
    out = capsys.readouterr().out
    assert f"guarded value: {total}" in out


def test_spawn_thread_reads_file(tmp_path, capsys):
    path = tmp_path / "test.txt"
    path.write_text("hello", encoding="utf-8")
    assert spawn_thread(path) == "hello"
    out = capsys.readouterr().out
    assert "The file read: hello" in out
    assert "1 2 3 4 5" in out
    assert "Hello, from Main!" in out
    assert "Try i: 0" in out


def test_spawn_thread_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        spawn_thread(tmp_path / "absent.txt")


def test_thread_fn_reports_own_identifier(capsys):
    ident = thread_fn()
    out = capsys.readouterr().out
    assert f"Thread ID: {ident}" in out
    assert "Hello form the thread!" in out


def test_thread_fn_in_other_thread_returns_that_threads_ident():
    seen = []
    worker = threading.Thread(target=lambda: seen.append(thread_fn()))
    worker.start()
    worker.join()
    assert seen == [worker.ident]


def test_scoped_thread_output(capsys):
    scoped_thread()
    out = capsys.readouterr().out
    assert "Scoped One Heh." in out
    assert "1 2 3 4" in out
    assert "Length: 4" in out


def test_reference_counting_returns_to_one(capsys):
    assert reference_counting() == 1
    captured = capsys.readouterr()
    assert "Reference count outer: 1" in captured.out
    assert "[1, 2, 3, 4, 5]" in captured.err