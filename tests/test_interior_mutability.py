import pytest

from threadlab.interior_mutability import (
    BorrowError,
    Cell,
    RefCell,
    cell_function,
    interior_mutability,
    pointer_things,
    ref_cell_function,
)


def test_cell_get_set_replace():
    c = Cell(1)
    c.set(5)
    assert c.get() == 5
    assert c.replace(8) == 5
    assert c.get() == 8


def test_cell_function_distinct_cells(capsys):
    a, b = Cell(0), Cell(1)
    before, after = cell_function(a, b)
    assert before == after == 0
    assert b.get() == 2
    assert "Other outcome for the cell fucntion." in capsys.readouterr().out


def test_cell_function_same_cell(capsys):
    a = Cell(0)
    before, after = cell_function(a, a)
    assert after == before + 1
    assert "Before does not equal after." in capsys.readouterr().out


def test_pointer_things(capsys):
    b = Cell(2)
    assert pointer_things(1, b) == (1, 1)
    assert b.get() == 3
    assert "Expected outcome for the pointer function." in capsys.readouterr().out


def test_multiple_shared_borrows_allowed():
    rc = RefCell([4])
    first = rc.borrow()
    second = rc.borrow()
    assert first.value is second.value
    first.release()
    second.release()


def test_mutable_borrow_conflicts():
    rc = RefCell([])
    shared = rc.borrow()
    with pytest.raises(BorrowError):
        rc.borrow_mut()
    shared.release()
    with rc.borrow_mut() as items:
        items.append(2)
        with pytest.raises(BorrowError):
            rc.borrow_mut()
        with pytest.raises(BorrowError):
            rc.borrow()
    with rc.borrow() as items:
        assert items == [2]


def test_released_borrow_cannot_be_used():
    rc = RefCell([])
    guard = rc.borrow_mut()
    guard.value = [1]
    guard.release()
    with pytest.raises(BorrowError):
        guard.value
    with rc.borrow() as items:
        assert items == [1]


def test_shared_borrow_cannot_assign():
    rc = RefCell(0)
    guard = rc.borrow()
    with pytest.raises(BorrowError):
        guard.value = 1
    assert guard.value == 0
    guard.release()
    with rc.borrow() as value:
        assert value == 0


def test_ref_cell_function_releases_borrows(capsys):
    rc = RefCell([])
    assert ref_cell_function(rc) == ([], [])
    assert "Before: []\nAfter: []\n" in capsys.readouterr().out
    with rc.borrow_mut() as items:
        items.append(1)
    with rc.borrow() as items:
        assert items == [1]


def test_interior_mutability_runs_all(capsys):
    interior_mutability()
    out = capsys.readouterr().out
    assert "Expected outcome for the pointer function." in out
    assert "Other outcome for the cell fucntion." in out
    assert "After: []" in out