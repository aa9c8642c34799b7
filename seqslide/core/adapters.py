"""
Adapter module for seqslide.

This module provides the ``slide`` entry point, which builds a Slide over any
read-only sequence, together with the Slider protocol for types that produce
their own Slide.
"""

from collections import abc
from functools import singledispatch
from typing import Any, Protocol, Sequence, TypeVar, runtime_checkable

from seqslide.core.slide import Slide

T = TypeVar("T")

# Sequences that cannot change after construction never need a snapshot copy
_IMMUTABLE_SEQUENCES = (tuple, str, bytes, range)


@runtime_checkable
class Slider(Protocol):
    """
    Protocol for types that can produce a Slide over themselves.

    Example:
        >>> items = SlideList([1, 2, 3])
        >>> isinstance(items, Slider)
        True
        >>> [x for x, _ in items.slide()]
        [1, 2, 3]
    """

    def slide(self) -> Slide[Any]:
        """Return a new Slide positioned on the first element."""
        ...


class SlideList(list):
    """A growable list that can produce a Slide over itself."""

    __slots__ = ()

    def slide(self) -> Slide[Any]:
        """Return a new Slide over this list."""
        return Slide(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list.__repr__(self)})"


class SlideTuple(tuple):
    """A fixed-size tuple that can produce a Slide over itself."""

    __slots__ = ()

    def slide(self) -> Slide[Any]:
        """Return a new Slide over this tuple."""
        return Slide(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({tuple.__repr__(self)})"


@singledispatch
def slide(sequence: Any, *, snapshot: bool = False) -> Slide[Any]:
    """
    Create a Slide over a sequence.

    The Slide references the sequence directly; no elements are copied unless
    ``snapshot`` is set. The sequence must not be modified while the Slide is
    in use.

    Args:
        sequence: Any ``collections.abc.Sequence`` (list, tuple, str, bytes,
            range, memoryview, ...) or an object implementing Slider
        snapshot: Copy the elements into a tuple first, so later changes to
            ``sequence`` do not affect the traversal

    Returns:
        A Slide with its cursor on the first element

    Raises:
        TypeError: If ``sequence`` is neither a sequence nor a Slider, if
            ``snapshot`` is requested for a Slider that is not a sequence, or
            if a memoryview is not one-dimensional

    Examples:
        >>> [(x, rest) for x, rest in slide([1, 2])]
        [(1, SuffixView([2])), (2, None)]
        >>> list(slide(""))
        []
    """
    if isinstance(sequence, Slider):
        if snapshot:
            raise TypeError(
                f"snapshot requires a sequence, got {type(sequence).__name__}"
            )
        return sequence.slide()
    raise TypeError(
        f"slide() requires an indexable sequence, got {type(sequence).__name__}"
    )


@slide.register(abc.Sequence)
def _slide_sequence(sequence: Sequence[T], *, snapshot: bool = False) -> Slide[T]:
    if not snapshot and isinstance(sequence, Slider):
        return sequence.slide()
    if snapshot and not isinstance(sequence, _IMMUTABLE_SEQUENCES):
        sequence = tuple(sequence)
    return Slide(sequence)


@slide.register(memoryview)
def _slide_memoryview(sequence: memoryview, *, snapshot: bool = False) -> Slide[Any]:
    if sequence.ndim != 1:
        raise TypeError(
            f"slide() requires a one-dimensional memoryview, got ndim={sequence.ndim}"
        )
    if snapshot:
        return Slide(tuple(sequence))
    # Shares the buffer; only the view is read-only
    return Slide(sequence.toreadonly())
