"""
Slide module for seqslide.

This module provides the Slide iterator, which walks a sequence and yields each
element together with a view of everything that follows it, and the SuffixView
class used for that trailing view.
"""

import operator
from collections import abc
from typing import Any, Iterator, List, Optional, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")


class SuffixView(Sequence[T]):
    """
    Read-only view of the contiguous range ``sequence[start:stop]``.

    The view references the original sequence instead of copying it, so
    creating one costs the same for a list of ten items as for a list of ten
    million. The bounds are fixed when the view is created and clamped into
    ``[0, len(sequence)]``.

    Slicing a SuffixView with a step of 1 returns another SuffixView over the
    same sequence. Any other step builds a list.
    """

    __slots__ = ("_sequence", "_start", "_stop")

    def __init__(self, sequence: Sequence[T], start: int = 0, stop: Optional[int] = None) -> None:
        """
        Initialize the view.

        Args:
            sequence: The sequence to view
            start: Index of the first element in the view
            stop: Index one past the last element (defaults to the sequence length)
        """
        length = len(sequence)
        stop = length if stop is None else min(max(stop, 0), length)
        self._sequence = sequence
        self._start = min(max(start, 0), stop)
        self._stop = stop

    @property
    def start(self) -> int:
        """Index of the first viewed element in the underlying sequence."""
        return self._start

    @property
    def stop(self) -> int:
        """Index one past the last viewed element in the underlying sequence."""
        return self._stop

    def __len__(self) -> int:
        return self._stop - self._start

    def __getitem__(self, index: Union[int, slice]) -> Union[T, "SuffixView[T]", List[T]]:
        length = self._stop - self._start

        if isinstance(index, slice):
            start, stop, step = index.indices(length)
            if step == 1:
                return SuffixView(self._sequence, self._start + start, self._start + max(start, stop))
            return [self._sequence[self._start + i] for i in range(start, stop, step)]

        try:
            index = operator.index(index)
        except TypeError:
            raise TypeError(
                f"{type(self).__name__} indices must be integers or slices, "
                f"not {type(index).__name__}"
            ) from None

        if index < 0:
            index += length
        if not 0 <= index < length:
            raise IndexError(f"{type(self).__name__} index out of range")
        return self._sequence[self._start + index]

    def __iter__(self) -> Iterator[T]:
        sequence = self._sequence
        for i in range(self._start, self._stop):
            yield sequence[i]

    def __eq__(self, other: Any) -> bool:
        # Element-wise, like list == list, but against any sequence type
        if not isinstance(other, abc.Sequence):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def to_list(self) -> List[T]:
        """Return a copy of the viewed elements as a new list."""
        return list(self)


class Slide(Iterator[Tuple[T, Optional[SuffixView[T]]]]):
    """
    Iterator yielding each element of a sequence with the elements after it.

    Every item is a pair ``(element, suffix)``. ``suffix`` is a SuffixView of
    all elements strictly after ``element``, or None for the last element. A
    suffix that is not None always holds at least one element, so
    ``suffix[0]`` is safe once the None check has passed.

    A Slide is single-use: once exhausted it keeps raising StopIteration.
    Build a new one with ``slide()`` to traverse again.

    The sequence must not be modified while the Slide is in use. The length is
    re-read on every step, so a sequence that shrinks ends the traversal early
    instead of raising IndexError; the items produced after any modification
    are otherwise unspecified.

    Example:
        >>> for x, rest in Slide([1, 2, 3]):
        ...     if rest is not None:
        ...         print(x + rest[0])
        3
        5
    """

    __slots__ = ("_sequence", "_pos", "_done")

    def __init__(self, sequence: Sequence[T]) -> None:
        """
        Initialize the Slide with the cursor on the first element.

        Args:
            sequence: The sequence to traverse
        """
        self._sequence = sequence
        self._pos = 0
        self._done = False

    def __iter__(self) -> "Slide[T]":
        return self

    def __next__(self) -> Tuple[T, Optional[SuffixView[T]]]:
        if self._done:
            raise StopIteration

        length = len(self._sequence)
        if self._pos >= length:
            self._done = True
            raise StopIteration

        item = self._sequence[self._pos]
        self._pos += 1

        if self._pos < length:
            return item, SuffixView(self._sequence, self._pos, length)
        return item, None

    @property
    def position(self) -> int:
        """Index of the next element to produce."""
        return self._pos

    @property
    def remaining(self) -> int:
        """Number of items left to produce."""
        if self._done:
            return 0
        return max(len(self._sequence) - self._pos, 0)

    @property
    def exhausted(self) -> bool:
        """True once there is nothing left to produce."""
        return self.remaining == 0

    def __length_hint__(self) -> int:
        return self.remaining

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self._pos}, remaining={self.remaining})"
