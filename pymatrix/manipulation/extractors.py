"""
Row/column extractors and their normalisation to explicit index lists.

An extractor describes which rows (or columns) of a matrix to pick. A
pair of extractors is repeatedly rewritten into simpler forms until both
are explicit position lists (Pos), validating the pair before each step:

    All            -> Pos([0, ..., size-1])
    Range(f, s, t) -> PosCyc([f, f+s, ..., t])      (t inclusive)
    PosCyc(p)      -> Pos(p mod size)
    TakeLast(n)    -> Drop(size - n)
    DropLast(n)    -> Take(size - n)
    Take(n)        -> Pos([0, ..., n-1])
    Drop(n)        -> Pos([n, ..., size-1])

Kinds are rewritten in the order listed; within a kind the row extractor
goes first.
"""

from dataclasses import dataclass
from typing import Any, Sequence, Union

from pymatrix.core.exceptions import IndexOutOfBoundsError


def _out_of_bounds(extractor: 'Extractor', size: int, axis: str) -> IndexOutOfBoundsError:
    return IndexOutOfBoundsError(
        f"{axis}: {extractor!r} out of bounds for size {size}",
        index=extractor,
        size=size,
    )


@dataclass(frozen=True)
class All:
    """Every row (or column)."""

    def check(self, size: int, axis: str) -> None:
        pass

    def rewrite(self, size: int) -> 'Extractor':
        return Pos(tuple(range(size)))


@dataclass(frozen=True)
class Range:
    """
    Inclusive arithmetic progression start, start+stride, ..., stop.

    A negative stride walks backwards; a stride pointing away from stop
    yields no positions.
    """
    start: int
    stride: int
    stop: int

    def check(self, size: int, axis: str) -> None:
        if (self.start < 0 or self.stop >= size or self.start >= size
                or self.stop < 0 or self.stride == 0):
            raise _out_of_bounds(self, size, axis)

    def rewrite(self, size: int) -> 'Extractor':
        end = self.stop + 1 if self.stride > 0 else self.stop - 1
        return PosCyc(tuple(range(self.start, end, self.stride)))


@dataclass(frozen=True)
class Pos:
    """Explicit positions, each in [0, size)."""
    indices: tuple[int, ...]

    def __init__(self, indices: Sequence[int]):
        object.__setattr__(self, 'indices', tuple(int(i) for i in indices))

    def check(self, size: int, axis: str) -> None:
        if len(self.indices) == 0 or any(i < 0 or i >= size for i in self.indices):
            raise _out_of_bounds(self, size, axis)

    def rewrite(self, size: int) -> 'Extractor':
        return self


@dataclass(frozen=True)
class PosCyc:
    """Positions taken modulo the axis size, so -1 is the last one."""
    indices: tuple[int, ...]

    def __init__(self, indices: Sequence[int]):
        object.__setattr__(self, 'indices', tuple(int(i) for i in indices))

    def check(self, size: int, axis: str) -> None:
        pass

    def rewrite(self, size: int) -> 'Extractor':
        return Pos(i % size for i in self.indices)


@dataclass(frozen=True)
class Take:
    """The first n positions."""
    n: int

    def check(self, size: int, axis: str) -> None:
        if self.n < 0 or self.n >= size:
            raise _out_of_bounds(self, size, axis)

    def rewrite(self, size: int) -> 'Extractor':
        return Pos(range(self.n))


@dataclass(frozen=True)
class TakeLast:
    """The last n positions."""
    n: int

    def check(self, size: int, axis: str) -> None:
        pass

    def rewrite(self, size: int) -> 'Extractor':
        return Drop(size - self.n)


@dataclass(frozen=True)
class Drop:
    """Everything after the first n positions."""
    n: int

    def check(self, size: int, axis: str) -> None:
        if self.n < 0 or self.n >= size:
            raise _out_of_bounds(self, size, axis)

    def rewrite(self, size: int) -> 'Extractor':
        return Pos(range(self.n, size))


@dataclass(frozen=True)
class DropLast:
    """Everything before the last n positions."""
    n: int

    def check(self, size: int, axis: str) -> None:
        pass

    def rewrite(self, size: int) -> 'Extractor':
        return Take(size - self.n)


@dataclass(frozen=True)
class _SlicePositions:
    """A Python slice, expanded once the axis size is known."""
    selection: slice

    def check(self, size: int, axis: str) -> None:
        pass

    def rewrite(self, size: int) -> 'Extractor':
        return Pos(range(*self.selection.indices(size)))


Extractor = Union[All, Range, Pos, PosCyc, Take, TakeLast, Drop, DropLast]

# Kinds in the order they are rewritten
_REWRITE_ORDER = (_SlicePositions, All, Range, PosCyc, TakeLast, DropLast, Take, Drop)


def resolve(
    row_extractor: Extractor,
    col_extractor: Extractor,
    rows: int,
    cols: int
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Normalise an extractor pair to explicit row and column positions.

    Args:
        row_extractor: Extractor applied to rows
        col_extractor: Extractor applied to columns
        rows: Number of rows of the source matrix
        cols: Number of columns of the source matrix

    Returns:
        (row positions, column positions), both non-empty and in bounds

    Raises:
        IndexOutOfBoundsError: If any intermediate or final extractor is
            out of bounds
    """
    er, ec = row_extractor, col_extractor
    while True:
        er.check(rows, 'rows')
        ec.check(cols, 'cols')

        if isinstance(er, Pos) and isinstance(ec, Pos):
            return er.indices, ec.indices

        for kind in _REWRITE_ORDER:
            if isinstance(er, kind):
                er = er.rewrite(rows)
                break
            if isinstance(ec, kind):
                ec = ec.rewrite(cols)
                break


def as_extractor(selector: Any) -> Extractor:
    """
    Convert an index selector to an Extractor.

    Extractors pass through, an integer selects one position, a Python
    slice selects its positions (slice(None) selects everything).
    """
    if isinstance(selector, (All, Range, Pos, PosCyc, Take, TakeLast, Drop, DropLast)):
        return selector
    if isinstance(selector, slice):
        if selector == slice(None):
            return All()
        return _SlicePositions(selector)
    if isinstance(selector, bool):
        raise TypeError("boolean is not a valid matrix index")
    try:
        return Pos([selector.__index__()])
    except AttributeError:
        raise TypeError(
            f"matrix indices must be integers, slices or extractors, not {type(selector).__name__}"
        ) from None

