"""Lazy sequence combinators.

Every combinator is a pull-based iterator: nothing is read from the
wrapped sequence until the caller asks for the next element, and each
object owns the state it scans.
"""

from itertools import islice
from typing import Any, Generic, Iterable, Iterator, Sized, TypeVar

from yearcal.mixins import SequenceMixin
from yearcal.validation import require_non_empty, require_positive

T = TypeVar("T")


class Seq(SequenceMixin, Generic[T]):
    """Thin wrapper giving any iterable the fluent combinator methods.

    Example:
        seq([[1, 2], [], [3]]).chain_all().join(",")  # "1,2,3"
    """

    def __init__(self, inner: Iterable[T]) -> None:
        self._inner = iter(inner)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return next(self._inner)

    def __repr__(self) -> str:
        return f"Seq({self._inner!r})"


def seq(inner: Iterable[T]) -> Seq[T]:
    """Wrap an iterable in a Seq."""
    return Seq(inner)


class Chunk(SequenceMixin, Generic[T]):
    """Iterator of tuples, each holding up to `size` elements of `inner`.

    Elements are drained eagerly one chunk at a time, so a chunk is a
    finite buffer that can be iterated any number of times. Iteration
    stops as soon as a drain comes back empty.
    """

    def __init__(self, inner: Iterable[T], size: int) -> None:
        require_positive("chunk size", size)
        self._inner = iter(inner)
        self._size = size

    def __iter__(self) -> "Chunk[T]":
        return self

    def __next__(self) -> tuple[T, ...]:
        result = tuple(islice(self._inner, self._size))
        if not result:
            raise StopIteration
        return result

    def __repr__(self) -> str:
        return f"Chunk(size={self._size})"


class Interleave(SequenceMixin, Generic[T]):
    """Round-robin over a fixed collection of sequences.

    The outer sequence is collected eagerly, so it must be finite and
    non-empty. Each pull reads one element from the sequence under the
    cursor and moves the cursor to the next slot, wrapping around.

    When the sequence under the cursor is exhausted the pull ends
    iteration, but the cursor still advances: an exhausted slot is a
    gap, never skipped over. Calling ``next()`` again resumes at the
    following slot. With equal-length inputs (the `transpose` case)
    this simply stops after the last full round.
    """

    def __init__(self, inner: Iterable[Iterable[T]]) -> None:
        self._inner = [iter(sequence) for sequence in inner]
        require_non_empty("interleave", self._inner)
        self._index = 0

    def __iter__(self) -> "Interleave[T]":
        return self

    def __next__(self) -> T:
        current = self._inner[self._index]
        self._index = (self._index + 1) % len(self._inner)
        return next(current)

    def __len__(self) -> int:
        """Number of interleaved sequences."""
        return len(self._inner)

    def __repr__(self) -> str:
        return f"Interleave(sequences={len(self._inner)}, index={self._index})"


class ChainAll(SequenceMixin, Generic[T]):
    """Flatten a sequence of sequences, lazily and in order.

    Empty inner sequences are skipped without producing anything.
    """

    def __init__(self, outer: Iterable[Iterable[T]]) -> None:
        self._outer = iter(outer)
        self._current: Iterator[T] | None = None

    def __iter__(self) -> "ChainAll[T]":
        return self

    def __next__(self) -> T:
        while True:
            if self._current is None:
                # Raises StopIteration once the outer sequence runs out
                self._current = iter(next(self._outer))
            try:
                return next(self._current)
            except StopIteration:
                self._current = None

    def __repr__(self) -> str:
        return f"ChainAll(active={self._current is not None})"


def chunk(inner: Iterable[T], size: int) -> Chunk[T]:
    """Split `inner` into tuples of `size` elements (the last may be shorter).

    Raises:
        PreconditionError: If size is not positive
    """
    return Chunk(inner, size)


def interleave(inner: Iterable[Iterable[T]]) -> Interleave[T]:
    """Alternate elements from each sequence in `inner`.

    Raises:
        PreconditionError: If `inner` holds no sequences
    """
    return Interleave(inner)


def transpose(outer: Iterable[Iterable[T]]) -> Chunk[T]:
    """Transpose a finite sequence of rows into a sequence of column tuples.

    Rows of unequal length follow the Interleave gap rule: output stops
    at the first exhausted row.

    Args:
        outer: Finite sequence of rows. Materialised into a list when it
            does not know its own length.

    Returns:
        Chunk yielding one tuple per column.
    """
    if not isinstance(outer, Sized):
        outer = list(outer)
    return Chunk(Interleave(outer), len(outer))


def chain_all(outer: Iterable[Iterable[T]]) -> ChainAll[T]:
    """Chain every sequence in `outer` into one sequence."""
    return ChainAll(outer)


def join(inner: Iterable[Any], separator: str) -> str:
    """Join the string form of every element with `separator` between them."""
    return separator.join(str(item) for item in inner)
