"""Concrete test cases for half-open interval arithmetic."""

import pytest

from software_reference.interval import (
    Interval,
    contains_exclusive,
    contains_inclusive,
    length,
    merge,
    overlap,
    overlaps,
    subtract,
    touches,
    validate,
)


def test_validate():
    assert validate((3, 5)) == Interval(3, 5)
    assert validate((4, 4)) == Interval(4, 4)
    with pytest.raises(ValueError):
        validate((5, 3))


def test_length():
    assert length((2, 3)) == 1
    assert length(Interval(-4, 6)) == 10
    assert length((7, 7)) == 0


def test_overlaps_half_open():
    """Sharing only an endpoint is not an overlap."""
    assert overlaps((0, 10), (5, 15))
    assert overlaps((5, 15), (0, 10))
    assert overlaps((0, 10), (2, 3))
    assert not overlaps((0, 10), (10, 20))
    assert not overlaps((10, 20), (0, 10))
    assert not overlaps((0, 5), (7, 9))


def test_contains():
    assert contains_inclusive((0, 10), (0, 10))
    assert contains_inclusive((0, 10), (2, 10))
    assert not contains_inclusive((0, 10), (2, 11))

    assert contains_exclusive((0, 10), (2, 8))
    assert not contains_exclusive((0, 10), (0, 8))
    assert not contains_exclusive((0, 10), (0, 10))


def test_touches():
    assert touches((0, 5), (5, 9))
    assert touches((5, 9), (0, 5))
    assert not touches((0, 5), (6, 9))
    assert not touches((0, 5), (3, 9))


def test_merge():
    assert merge((0, 5), (5, 9)) == (0, 9)
    assert merge((0, 5), (3, 9)) == (0, 9)
    assert merge((0, 10), (3, 4)) == (0, 10)
    with pytest.raises(ValueError):
        merge((0, 5), (6, 9))


def test_overlap():
    assert overlap((0, 10), (5, 15)) == (5, 10)
    assert overlap((0, 10), (2, 3)) == (2, 3)
    with pytest.raises(ValueError):
        overlap((0, 5), (5, 9))


def test_subtract_center():
    assert subtract((0, 10), (4, 6)) == [(0, 4), (6, 10)]


def test_subtract_everything():
    assert subtract((0, 10), (0, 10)) == []
    assert subtract((2, 8), (0, 10)) == []


def test_subtract_left_and_right():
    assert subtract((10, 20), (5, 15)) == [(15, 20)]
    assert subtract((10, 20), (10, 15)) == [(15, 20)]
    assert subtract((10, 20), (15, 25)) == [(10, 15)]
    assert subtract((17, 21), (20, 21)) == [(17, 20)]


def test_subtract_disjoint_raises():
    with pytest.raises(ValueError):
        subtract((0, 5), (5, 10))
