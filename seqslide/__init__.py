"""
seqslide is a Python library for traversing a sequence while looking at everything
that comes after the current element.

Each step yields the element together with a read-only view of the remaining
elements, or None once the last element is reached. The view never copies the
underlying sequence.

Example:
    >>> from seqslide import slide
    >>> for x, rest in slide([1, 2, 3]):
    ...     if rest is not None:
    ...         print(x, rest[0])
    1 2
    2 3
"""

from seqslide._version import __version__

# Core classes
from seqslide.core.adapters import Slider, SlideList, SlideTuple, slide
from seqslide.core.slide import Slide, SuffixView

# Utilities
from seqslide.utils.iteration import lookahead, pair_iter

__all__ = [
    "__version__",
    "Slide",
    "SuffixView",
    "Slider",
    "SlideList",
    "SlideTuple",
    "slide",
    "pair_iter",
    "lookahead",
]
