"""Pytest configuration for seqslide tests."""

from typing import List

import pytest

from seqslide import SlideList, SlideTuple


@pytest.fixture
def ten_items() -> List[int]:
    """Return the integers 1 through 10."""
    return list(range(1, 11))


@pytest.fixture
def words() -> List[str]:
    """Return a short list of words."""
    return ["the", "quick", "brown", "fox"]


@pytest.fixture
def slide_list(ten_items) -> SlideList:
    """Return a SlideList holding 1 through 10."""
    return SlideList(ten_items)


@pytest.fixture
def slide_tuple(ten_items) -> SlideTuple:
    """Return a SlideTuple holding 1 through 10."""
    return SlideTuple(ten_items)
