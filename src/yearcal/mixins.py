"""Mixin classes for shared sequence functionality."""

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from yearcal.iterators import ChainAll, Chunk, Interleave, Seq


class SequenceMixin:
    """Mixin providing fluent combinator methods for iterable sequences.

    Any class defining ``__iter__`` gains these methods, so pipelines
    can be written left to right:

        dates(2015).by_month().map(layout_month).chunk(3)
    """

    def map(self, func: Callable[[Any], Any]) -> "Seq":
        """Lazily apply func to every element.

        Args:
            func: Function called once per element, in order.

        Returns:
            Seq over the mapped elements.
        """
        from yearcal.iterators import Seq

        return Seq(map(func, self))

    def chunk(self, size: int) -> "Chunk":
        """Group elements into tuples of up to `size` elements.

        Args:
            size: Maximum number of elements per chunk. Must be positive.

        Returns:
            Chunk yielding tuples; the last one may be shorter.
        """
        from yearcal.iterators import Chunk

        return Chunk(self, size)

    def interleave(self) -> "Interleave":
        """Alternate elements from every inner sequence, round-robin.

        Returns:
            Interleave over the collected inner sequences.
        """
        from yearcal.iterators import Interleave

        return Interleave(self)

    def transpose(self) -> "Chunk":
        """Turn a finite sequence of rows into a sequence of columns.

        Returns:
            Chunk of tuples, one per column.
        """
        from yearcal.iterators import transpose

        return transpose(self)

    def chain_all(self) -> "ChainAll":
        """Flatten a sequence of sequences into one sequence.

        Returns:
            ChainAll over every element of every inner sequence.
        """
        from yearcal.iterators import ChainAll

        return ChainAll(self)

    def join(self, separator: str) -> str:
        """Consume the sequence into a string.

        Args:
            separator: Inserted between consecutive elements.

        Returns:
            The joined string, empty for an empty sequence.
        """
        from yearcal.iterators import join

        return join(self, separator)

    def to_list(self) -> list:
        """Consume the sequence into a list."""
        return list(self)
