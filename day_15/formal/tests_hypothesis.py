"""
Property-based tests for the RangeSet interval set using Hypothesis.

Replays random insert/remove histories against both the RangeSet and a
naive model holding every covered integer in a Python set, and checks the
storage invariants after every single operation.
"""

import pytest
from hypothesis import given, strategies as st, settings
from hypothesis.strategies import lists, integers, sampled_from

from software_reference.interval import Interval, length, subtract, overlaps
from software_reference.range_set import RangeSet


LOW_LIMIT = -40
HIGH_LIMIT = 40


# Strategy for generating well-formed half-open intervals (low <= high)
@st.composite
def valid_interval(draw, max_length=25):
    """Generate an interval where low <= high, possibly empty."""
    low = draw(integers(min_value=LOW_LIMIT, max_value=HIGH_LIMIT))
    high = draw(integers(min_value=low, max_value=low + max_length))
    return Interval(low, high)


operations_strategy = lists(
    st.tuples(sampled_from(["insert", "remove"]), valid_interval()),
    min_size=0, max_size=40,
)

intervals_strategy = lists(valid_interval(), min_size=0, max_size=30)


def interval_to_set(interval):
    """Convert a half-open interval to the set of integers it covers."""
    return set(range(interval[0], interval[1]))


def check_invariants(rs):
    """Storage must be strictly increasing, of even length, with gaps between intervals."""
    bounds = rs.boundaries()
    assert len(bounds) % 2 == 0, f"Odd boundary count: {bounds}"
    for i in range(len(bounds) - 1):
        assert bounds[i] < bounds[i + 1], f"Boundaries not strictly increasing: {bounds}"


def replay(operations):
    """Apply operations to a RangeSet and to the naive model in lockstep."""
    rs = RangeSet()
    model = set()
    for op, interval in operations:
        if op == "insert":
            rs.insert(interval)
            model |= interval_to_set(interval)
        else:
            rs.remove(interval)
            model -= interval_to_set(interval)
        check_invariants(rs)
    return rs, model


# Property 1: Membership matches the naive model after any history
@given(operations_strategy)
@settings(max_examples=1000)
def test_membership_matches_model(operations):
    """
    Property: is_in_range(v) is True exactly for integers the model holds.
    """
    rs, model = replay(operations)

    for v in range(LOW_LIMIT - 5, HIGH_LIMIT + 30):
        assert rs.is_in_range(v) == (v in model), \
            f"Membership mismatch at {v}: set={rs}, model={sorted(model)}"


# Property 2: size() counts exactly the covered integers
@given(operations_strategy)
@settings(max_examples=500)
def test_size_matches_model(operations):
    """
    Property: size() equals the number of integers in the model.
    """
    rs, model = replay(operations)
    assert rs.size() == len(model), \
        f"Size mismatch: calculated={rs.size()}, actual={len(model)}"


# Property 3: Stored intervals never overlap or touch
@given(operations_strategy)
def test_stored_intervals_normalized(operations):
    """
    Property: consecutive stored intervals are separated by a gap, and none is empty.
    """
    rs, _ = replay(operations)
    ranges = list(rs.iter_ranges())

    for r in ranges:
        assert length(r) > 0, f"Empty interval stored: {ranges}"
    for a, b in zip(ranges, ranges[1:]):
        assert a.high < b.low, f"Overlapping or touching intervals: {ranges}"


# Property 4: Idempotence of insert
@given(intervals_strategy, valid_interval())
def test_insert_idempotence(intervals, interval):
    """
    Property: inserting the same interval twice equals inserting it once.
    """
    rs = RangeSet(intervals)
    rs.insert(interval)
    once = rs.boundaries()

    rs.insert(interval)
    assert rs.boundaries() == once, f"Not idempotent: first={once}, second={rs.boundaries()}"
    assert len(rs) == len(once) // 2


# Property 5: Insert then remove into an empty set returns to empty
@given(valid_interval())
def test_insert_then_remove_empties(interval):
    """
    Property: remove(a) undoes insert(a) on an empty set.
    """
    rs = RangeSet()
    rs.insert(interval)
    rs.remove(interval)

    assert len(rs) == 0
    assert rs.size() == 0


# Property 6: size() never exceeds the sum of inserted lengths
@given(intervals_strategy)
def test_size_bounded_by_inserted_lengths(intervals):
    """
    Property: 0 <= size() <= sum of lengths of the distinct inserted intervals.
    """
    rs = RangeSet(intervals)
    assert 0 <= rs.size() <= sum(length(r) for r in set(intervals))


# Property 7: Touching intervals merge into one
@given(integers(min_value=-1000, max_value=1000),
       integers(min_value=1, max_value=50),
       integers(min_value=1, max_value=50))
def test_touching_inserts_merge(low, first_length, second_length):
    """
    Property: a.high == b.low leaves a single stored interval.
    """
    middle = low + first_length
    rs = RangeSet()
    rs.insert((low, middle))
    rs.insert((middle, middle + second_length))

    assert len(rs) == 1
    assert list(rs.iter_ranges()) == [(low, middle + second_length)]


# Property 8: Order independence - result is the same regardless of insert order
@given(intervals_strategy)
def test_insert_order_independence(intervals):
    """
    Property: the normalized union does not depend on insertion order.
    """
    forward = RangeSet(intervals)
    backward = RangeSet(reversed(intervals))

    assert forward == backward, f"Order dependent: forward={forward}, reversed={backward}"


# Property 9: overlapping_ranges reports exactly the overlapping stored intervals
@given(intervals_strategy, valid_interval())
def test_overlapping_ranges_complete(intervals, query):
    """
    Property: overlapping_ranges agrees with a linear scan of iter_ranges.
    """
    rs = RangeSet(intervals)
    bounds = rs.boundaries()

    expected = [r for r in rs.iter_ranges() if overlaps(r, query)]
    found = rs.overlapping_ranges(query)

    assert [(low, high) for _, low, high in found] == expected
    for index, low, high in found:
        assert bounds[index:index + 2] == [low, high]


# Property 10: subtract leaves only integers outside the cut
@given(valid_interval(), valid_interval())
def test_subtract_matches_set_difference(a, cut):
    """
    Property: subtract(a, cut) covers a minus cut, with non-empty pieces.
    """
    if not overlaps(a, cut):
        with pytest.raises(ValueError):
            subtract(a, cut)
        return

    pieces = subtract(a, cut)
    covered = set()
    for piece in pieces:
        assert length(piece) > 0
        covered |= interval_to_set(piece)

    assert covered == interval_to_set(a) - interval_to_set(cut)


if __name__ == "__main__":
    # Run pytest
    pytest.main([__file__, "-v", "--tb=short"])
