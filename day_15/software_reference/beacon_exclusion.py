#!/usr/bin/env python3
"""
Beacon Exclusion Zone - Sensor Coverage per Row

Each sensor reports the closest beacon by Manhattan distance, so no other
beacon can exist within that radius.

Part One: count positions on one row where a beacon cannot be present.
Part Two: find the only free position within [0, search_max] on both axes
and report its tuning frequency.

Algorithm:
    A sensor's diamond crosses a row as one horizontal span. Part one
    inserts the spans into a RangeSet and counts its size. Part two starts
    each row with the whole search area free and removes every span; the
    first row with anything left holds the distress beacon.
"""

import re
import sys
import time
from typing import Iterable, List, NamedTuple, Optional, Tuple

from software_reference.interval import Interval
from software_reference.range_set import RangeSet

ROW_PART_ONE = 2000000
SEARCH_MAX_PART_TWO = 4000000
TUNING_MULTIPLIER = 4000000

NUMBER_PATTERN = re.compile(r"-?\d+")


class Sensor(NamedTuple):
    x: int
    y: int
    beacon_x: int
    beacon_y: int

    @property
    def radius(self) -> int:
        return abs(self.x - self.beacon_x) + abs(self.y - self.beacon_y)

    def span_on_row(self, row: int) -> Optional[Interval]:
        """
        Positions on row within this sensor's radius.

        Returns:
            Interval: half-open [low, high) span, or None if row is out of reach
        """
        reach = self.radius - abs(self.y - row)
        if reach < 0:
            return None
        return Interval(self.x - reach, self.x + reach + 1)


def parse_sensors(text: str) -> List[Sensor]:
    """
    Parse sensor reports.

    Format: "Sensor at x=2, y=18: closest beacon is at x=-2, y=15" per line.
    Lines without exactly four numbers are skipped.
    """
    sensors = []
    for line in text.splitlines():
        numbers = NUMBER_PATTERN.findall(line)
        if len(numbers) == 4:
            sensors.append(Sensor(*(int(n) for n in numbers)))
    return sensors


def read_input(filename):
    """
    Read input file containing sensor reports.

    Args:
        filename: Path to input file

    Returns:
        list: Sensor tuples in file order
    """
    with open(filename) as f:
        return parse_sensors(f.read())


def row_coverage(sensors: Iterable[Sensor], row: int) -> RangeSet:
    covered = RangeSet()
    for sensor in sensors:
        span = sensor.span_on_row(row)
        if span is not None:
            covered.insert(span)
    return covered


def count_excluded_positions(sensors: List[Sensor], row: int) -> int:
    """
    Count positions on row where a beacon cannot be present.

    Args:
        sensors: Parsed sensor reports
        row: y coordinate to inspect

    Returns:
        int: covered positions minus known beacons sitting on them
    """
    covered = row_coverage(sensors, row)

    beacons = {(s.beacon_x, s.beacon_y) for s in sensors}
    beacons_on_row = sum(1 for x, y in beacons if y == row and covered.is_in_range(x))

    return covered.size() - beacons_on_row


def find_distress_beacon(sensors: List[Sensor], search_max: int) -> Optional[Tuple[int, int]]:
    """
    Find the one position in the search area no sensor can see.

    Args:
        sensors: Parsed sensor reports
        search_max: Largest coordinate on either axis (inclusive)

    Returns:
        tuple: (x, y) of the first free position, or None if every row is covered

    Time Complexity: O(search_max * sensors) interval operations
    """
    for y in range(search_max + 1):
        free = RangeSet([(0, search_max + 1)])
        for sensor in sensors:
            span = sensor.span_on_row(y)
            if span is not None:
                free.remove(span)
            if not len(free):
                break

        if len(free):
            return next(free.iter_ranges()).low, y

    return None


def tuning_frequency(x: int, y: int) -> int:
    return x * TUNING_MULTIPLIER + y


def main():
    """Command-line interface for the beacon exclusion solver."""
    import argparse

    parser = argparse.ArgumentParser(
        description='Count excluded beacon positions and locate the distress beacon'
    )
    parser.add_argument('input_file', nargs='?', type=argparse.FileType('r'),
                        default=sys.stdin,
                        help='Input file with sensor reports (default: stdin)')
    parser.add_argument('--row', type=int, default=ROW_PART_ONE,
                        help=f'Row inspected by part one (default: {ROW_PART_ONE})')
    parser.add_argument('--search-max', type=int, default=SEARCH_MAX_PART_TWO,
                        help=f'Search area limit for part two (default: {SEARCH_MAX_PART_TWO})')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Print progress and timing to stderr')
    args = parser.parse_args()

    sensors = parse_sensors(args.input_file.read())

    if not sensors:
        print("Error: No sensor reports found", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Loaded {len(sensors)} sensors", file=sys.stderr)
        covered = row_coverage(sensors, args.row)
        print(f"  Row {args.row}: {len(covered)} merged spans, "
              f"{covered.size()} positions", file=sys.stderr)

    start_time = time.time()
    part_one = count_excluded_positions(sensors, args.row)
    print(part_one)

    found = find_distress_beacon(sensors, args.search_max)
    elapsed = time.time() - start_time

    if found is None:
        print(f"Error: No free position within 0..{args.search_max}", file=sys.stderr)
        return 1

    print(tuning_frequency(*found))

    if args.verbose:
        print(f"\nDistress beacon at x={found[0]}, y={found[1]}", file=sys.stderr)
        print(f"  Time: {elapsed:.3f}s", file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
