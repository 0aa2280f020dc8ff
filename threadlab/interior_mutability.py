"""Single-threaded interior mutability: a copy cell and a borrow-checked cell."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Cell(Generic[T]):
    """A mutable slot whose value is read by copy and replaced whole."""

    def __init__(self, value: T) -> None:
        self._value = value

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value

    def replace(self, value: T) -> T:
        """Store ``value`` and return the old one."""
        old, self._value = self._value, value
        return old


class BorrowError(RuntimeError):
    """Raised when a borrow conflicts with an outstanding one."""


class _Borrow(Generic[T]):
    def __init__(self, cell: RefCell[T], mutable: bool) -> None:
        self._cell = cell
        self._mutable = mutable
        self._active = True

    @property
    def value(self) -> T:
        if not self._active:
            raise BorrowError("borrow already released")
        return self._cell._value

    @value.setter
    def value(self, new: T) -> None:
        if not self._active:
            raise BorrowError("borrow already released")
        if not self._mutable:
            raise BorrowError("cannot assign through a shared borrow")
        self._cell._value = new

    def release(self) -> None:
        if self._active:
            self._active = False
            self._cell._end_borrow(self._mutable)

    def __enter__(self) -> T:
        return self.value

    def __exit__(self, *exc: Any) -> None:
        self.release()

    def __del__(self) -> None:
        if getattr(self, "_active", False):
            self.release()


class RefCell(Generic[T]):
    """A cell allowing many shared borrows or one mutable borrow at a time."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._state = 0  # >0 shared borrows, -1 mutable borrow

    def borrow(self) -> _Borrow[T]:
        if self._state < 0:
            raise BorrowError("already mutably borrowed")
        self._state += 1
        return _Borrow(self, mutable=False)

    def borrow_mut(self) -> _Borrow[T]:
        if self._state != 0:
            raise BorrowError("already borrowed")
        self._state = -1
        return _Borrow(self, mutable=True)

    def _end_borrow(self, mutable: bool) -> None:
        self._state = 0 if mutable else self._state - 1


def pointer_things(a: int, b: Cell[int]) -> tuple[int, int]:
    """Read a plain value around a mutation of another slot; return both reads."""
    before = a
    b.set(b.get() + 1)
    after = a
    if before != after:
        print("This should never happen.")
    else:
        print("Expected outcome for the pointer function.")
    return before, after


def cell_function(a: Cell[int], b: Cell[int]) -> tuple[int, int]:
    """Read ``a`` around an increment of ``b``; they differ only if both are the same cell."""
    before = a.get()
    b.set(b.get() + 1)
    after = a.get()
    print(f"Before: {before}, After: {after}")
    if before != after:
        print("Before does not equal after.")
    else:
        print("Other outcome for the cell fucntion.")
    return before, after


def ref_cell_function(a: RefCell[list]) -> tuple[list, list]:
    """Take two shared borrows at once and print them."""
    with a.borrow() as before, a.borrow() as after:
        print(f"Before: {before!r}\nAfter: {after!r}\n")
        return list(before), list(after)


def interior_mutability() -> None:
    """Run the pointer, cell and ref-cell demonstrations."""
    pointer_things(1, Cell(2))
    cell_function(Cell(0), Cell(1))
    ref_cell_function(RefCell([]))