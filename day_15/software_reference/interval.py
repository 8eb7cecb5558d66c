"""
Interval Arithmetic - Half-Open Integer Ranges

Pure functions over (low, high) pairs describing the integers
low, low + 1, ..., high - 1. A value equal to high is never part of
the interval, and low == high describes the empty interval.

All functions accept either Interval instances or plain tuples.
"""

from typing import List, NamedTuple, Tuple


class Interval(NamedTuple):
    """Half-open integer range [low, high)."""

    low: int
    high: int


def validate(a: Tuple[int, int]) -> Interval:
    """
    Check that a pair of bounds forms a well-formed interval.

    Args:
        a: (low, high) pair

    Returns:
        Interval: the same bounds as an Interval

    Raises:
        ValueError: if low > high
    """
    low, high = a
    if low > high:
        raise ValueError(f"Malformed interval: low {low} > high {high}")
    return Interval(low, high)


def length(a: Tuple[int, int]) -> int:
    return a[1] - a[0]


def overlaps(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    """True if a and b share at least one integer."""
    return a[0] < b[1] and b[0] < a[1]


def contains_inclusive(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    """True if a covers all of b. Identical ranges count as contained."""
    return a[0] <= b[0] and a[1] >= b[1]


def contains_exclusive(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    """True if a is strictly wider than b on both sides."""
    return a[0] < b[0] and a[1] > b[1]


def touches(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    """True if one interval ends exactly where the other begins."""
    return a[0] == b[1] or b[0] == a[1]


def merge(a: Tuple[int, int], b: Tuple[int, int]) -> Interval:
    """
    Combine two overlapping or touching intervals into one.

    Raises:
        ValueError: if a and b are separated by a gap
    """
    if not (overlaps(a, b) or touches(a, b)):
        raise ValueError(f"Cannot merge separated intervals {tuple(a)} and {tuple(b)}")
    return Interval(min(a[0], b[0]), max(a[1], b[1]))


def overlap(a: Tuple[int, int], b: Tuple[int, int]) -> Interval:
    """Intersection of two overlapping intervals."""
    if not overlaps(a, b):
        raise ValueError(f"Intervals {tuple(a)} and {tuple(b)} do not overlap")
    return Interval(max(a[0], b[0]), min(a[1], b[1]))


def subtract(a: Tuple[int, int], cut: Tuple[int, int]) -> List[Interval]:
    """
    Remove cut from a, returning what is left of a.

    Args:
        a: Interval to cut from
        cut: Interval to remove, must overlap a

    Returns:
        list: 0, 1 or 2 non-empty Intervals, ordered by position

    Raises:
        ValueError: if a and cut do not overlap
    """
    if not overlaps(a, cut):
        raise ValueError(f"Intervals {tuple(a)} and {tuple(cut)} do not overlap")

    if contains_inclusive(cut, a):
        return []

    if contains_exclusive(a, cut):
        return [Interval(a[0], cut[0]), Interval(cut[1], a[1])]

    # Cut trims the left side
    if a[1] > cut[1]:
        return [Interval(cut[1], a[1])]

    # Cut trims the right side
    if a[0] < cut[0]:
        return [Interval(a[0], cut[0])]

    raise AssertionError(f"Unreachable subtract state: {tuple(a)} - {tuple(cut)}")
