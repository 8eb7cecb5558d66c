"""
RangeSet - Coalescing Set of Half-Open Integer Intervals

Stores the union of many, possibly overlapping, integer intervals as one
flat, strictly increasing list of boundaries:

    [low0, high0, low1, high1, ...]

Even offsets hold interval starts (included), odd offsets hold interval
ends (excluded). After every insert or remove the stored intervals are
sorted, non-overlapping and non-touching, so the set always holds the
normalized union of everything inserted minus everything removed.

Every operation starts from RangeSet.classify(), a single binary search
that describes how a value relates to the stored boundaries.
"""

from bisect import bisect_left
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

from software_reference.interval import (
    Interval,
    contains_inclusive,
    length,
    merge,
    overlaps,
    subtract,
    validate,
)


class Position(NamedTuple):
    """
    Where a value sits relative to the stored boundaries.

    Attributes:
        raw_index: Index of the exact match, or the number of boundaries
                   strictly smaller than the value
        matched: True if the value equals a stored boundary
        covered: True if the value belongs to a stored interval
        interval_start_index: Even index starting the interval the value is
                              inside of, or nearest to from the left
    """

    raw_index: int
    matched: bool
    covered: bool
    interval_start_index: int


class RangeSet:
    """Normalized union of half-open integer intervals."""

    def __init__(self, ranges: Iterable[Tuple[int, int]] = ()):
        self._bounds: List[int] = []
        for r in ranges:
            self.insert(r)

    def classify(self, value: int) -> Position:
        """Relate value to the stored boundaries with one binary search."""
        index = bisect_left(self._bounds, value)
        matched = index < len(self._bounds) and self._bounds[index] == value
        is_low = index % 2 == 0

        # Exact hit on a low is included, exact hit on a high is not.
        # Without a hit, an odd count of smaller boundaries means we are
        # past a low and before its high.
        covered = (matched and is_low) or (not matched and not is_low)

        return Position(
            raw_index=index,
            matched=matched,
            covered=covered,
            interval_start_index=index if is_low else index - 1,
        )

    # =================================================================
    # INSERT
    # =================================================================

    def insert(self, new_range: Tuple[int, int]):
        """
        Add every integer of new_range to the set.

        Overlapping and touching intervals are merged. Inserting an empty
        range, or one already covered, leaves the set unchanged.

        Args:
            new_range: (low, high) half-open interval

        Raises:
            ValueError: if low > high
        """
        low, high = validate(new_range)
        if low == high:
            return

        bounds = self._bounds
        left = self.classify(low)
        right = self.classify(high)

        # Empty set, or every stored boundary lies before low
        if not bounds or left.raw_index >= len(bounds):
            bounds.extend((low, high))
            return

        # Ends strictly before the first stored interval
        if left.raw_index == 0 and right.raw_index == 0 and not right.covered:
            bounds[0:0] = [low, high]
            return

        start = left.interval_start_index
        span = right.interval_start_index - start

        if span == 0:
            self._insert_within_slot(start, left, right, low, high)
        elif span == 2:
            self._insert_across_gap(start, right, low, high)
        else:
            self._insert_by_merging(Interval(low, high))

    def _insert_within_slot(self, start: int, left: Position, right: Position,
                            low: int, high: int):
        """Both ends fall into the same stored interval or the gap before it."""
        bounds = self._bounds

        if left.raw_index == start:
            # low is in the gap before the slot or exactly on its start
            if right.raw_index == start:
                if right.matched:
                    # Ends exactly where the slot begins
                    bounds[start] = low
                else:
                    bounds[start:start] = [low, high]
                return

            # high lands inside the slot or on its end
            if not left.matched:
                bounds[start] = low
            return

        if left.raw_index == start + 1 and right.raw_index == start + 1:
            # Strictly inside the slot, nothing to do
            return

        raise AssertionError(
            f"Unexpected slot shape for {(low, high)}: {left}, {right}")

    def _insert_across_gap(self, start: int, right: Position, low: int, high: int):
        """
        high lies one interval further right than low.

        The slot at start is always absorbed. The slot after it is absorbed
        only when high reaches it, otherwise only the boundaries move.
        """
        bounds = self._bounds
        bounds[start] = min(low, bounds[start])

        if right.raw_index == start + 2 and not right.matched:
            # high stops in the gap after the slot, or past the last slot
            bounds[start + 1] = high
        else:
            # high touches or enters the next slot, drop the gap between them
            del bounds[start + 1:start + 3]

    def _insert_by_merging(self, new_range: Interval):
        """Pull out every overlapped interval, fold them together, insert again."""
        merged = new_range
        for index, low, high in reversed(self.overlapping_ranges(new_range)):
            del self._bounds[index:index + 2]
            merged = merge(merged, (low, high))

        self.insert(merged)

    # =================================================================
    # REMOVE
    # =================================================================

    def remove(self, cut: Tuple[int, int]):
        """
        Remove every integer of cut from the set.

        Args:
            cut: (low, high) half-open interval

        Raises:
            ValueError: if low > high
        """
        low, high = validate(cut)
        if low == high:
            return

        left = self.classify(low)
        if left.raw_index == len(self._bounds):
            # Nothing stored at or after cut
            return

        right = self.classify(high)
        start = left.interval_start_index

        if start == right.interval_start_index:
            self._remove_within_slot(start, Interval(low, high))
        else:
            self._remove_by_scanning(Interval(low, high))

    def _remove_within_slot(self, start: int, cut: Interval):
        bounds = self._bounds
        slot = Interval(bounds[start], bounds[start + 1])

        if not overlaps(slot, cut):
            return

        if contains_inclusive(cut, slot):
            del bounds[start:start + 2]
        elif cut.low <= slot.low:
            # Trim the left side
            bounds[start] = cut.high
        elif cut.high >= slot.high:
            # Trim the right side
            bounds[start + 1] = cut.low
        else:
            # Split in two
            left_piece, right_piece = subtract(slot, cut)
            bounds[start + 1] = left_piece.high
            self.insert(right_piece)

    def _remove_by_scanning(self, cut: Interval):
        remainders = []
        for index, low, high in reversed(self.overlapping_ranges(cut)):
            del self._bounds[index:index + 2]
            remainders.extend(subtract((low, high), cut))

        for piece in remainders:
            self.insert(piece)

    # =================================================================
    # QUERIES
    # =================================================================

    def overlapping_ranges(self, query: Tuple[int, int]) -> List[Tuple[int, int, int]]:
        """
        Find the stored intervals sharing at least one integer with query.

        Args:
            query: (low, high) half-open interval

        Returns:
            list: (index, low, high) tuples in order, where index is the
                  position of the interval's low boundary in storage
        """
        low, high = validate(query)
        left = self.classify(low)
        right = self.classify(high)
        bounds = self._bounds

        found = []
        index = left.interval_start_index
        while index < right.raw_index and index + 1 < len(bounds):
            stored = (bounds[index], bounds[index + 1])
            if overlaps(stored, (low, high)):
                found.append((index, stored[0], stored[1]))
            index += 2

        return found

    def is_in_range(self, value: int) -> bool:
        return self.classify(value).covered

    def iter_ranges(self) -> Iterator[Interval]:
        """Yield stored intervals in ascending order."""
        index = 0
        while index + 1 < len(self._bounds):
            yield Interval(self._bounds[index], self._bounds[index + 1])
            index += 2

    def size(self) -> int:
        """Total count of integers covered by the set."""
        return sum(length(r) for r in self.iter_ranges())

    def bounds(self) -> Optional[Interval]:
        if self._bounds:
            return Interval(self._bounds[0], self._bounds[-1])
        return None

    def boundaries(self) -> List[int]:
        """Copy of the flat boundary list."""
        return list(self._bounds)

    def copy(self) -> "RangeSet":
        snapshot = RangeSet()
        snapshot._bounds = list(self._bounds)
        return snapshot

    def __len__(self):
        return len(self._bounds) // 2

    def __contains__(self, value):
        return self.is_in_range(value)

    # list() on this creates a copy of every interval
    def __iter__(self):
        return self.iter_ranges()

    def __eq__(self, other):
        if isinstance(other, RangeSet):
            return self._bounds == other._bounds
        return NotImplemented

    def __repr__(self):
        return f"RangeSet({[tuple(r) for r in self.iter_ranges()]})"
