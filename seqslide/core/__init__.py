"""Core traversal classes for seqslide."""

from seqslide.core.adapters import Slider, SlideList, SlideTuple, slide
from seqslide.core.slide import Slide, SuffixView

__all__ = ["Slide", "SuffixView", "Slider", "SlideList", "SlideTuple", "slide"]
