"""
Iteration utilities for seqslide.

This module provides traversal helpers built on top of Slide for the common
cases of looking at the next item or a bounded window of following items.
"""

from collections import abc
from typing import Any, Iterable, Iterator, Optional, Sequence, Tuple, TypeVar

from seqslide.core.adapters import slide
from seqslide.core.slide import SuffixView

T = TypeVar("T")

_MISSING = object()


def pair_iter(iterable: Iterable[Any]) -> Iterator[Tuple[Any, Optional[Any]]]:
    """
    Iterate through pairs of items from an iterable, where the second item
    is None for the last item.

    Args:
        iterable: The input sequence or iterator

    Yields:
        Pairs of (current_item, next_item) where next_item is None for the last item

    Examples:
        >>> list(pair_iter([1, 2, 3]))
        [(1, 2), (2, 3), (3, None)]
    """
    # Sequences go through slide() and never build a new list
    if isinstance(iterable, abc.Sequence):
        for item, rest in slide(iterable):
            yield item, (rest[0] if rest is not None else None)
        return

    it = iter(iterable)
    prev = next(it, _MISSING)
    if prev is _MISSING:
        return
    for current in it:
        yield prev, current
        prev = current
    yield prev, None


def lookahead(sequence: Sequence[T], size: int) -> Iterator[Tuple[T, Optional[SuffixView[T]]]]:
    """
    Iterate through a sequence with a bounded window of the following items.

    Args:
        sequence: The sequence to traverse
        size: Maximum number of following items in each window

    Yields:
        Pairs of (item, window) where window holds up to ``size`` items after
        ``item``, or None for the last item

    Raises:
        ValueError: If size is not a positive integer

    Examples:
        >>> [(x, w.to_list() if w else None) for x, w in lookahead("abcd", 2)]
        [('a', ['b', 'c']), ('b', ['c', 'd']), ('c', ['d']), ('d', None)]
    """
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise ValueError(f"size must be a positive integer, got {size!r}")
    return _windows(slide(sequence), size)


def _windows(
    view: Iterator[Tuple[T, Optional[SuffixView[T]]]], size: int
) -> Iterator[Tuple[T, Optional[SuffixView[T]]]]:
    for item, rest in view:
        yield item, (rest[:size] if rest is not None else None)
