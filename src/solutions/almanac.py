"""
Day 5: If You Give A Seed A Fertilizer.

Seeds are pushed through a chain of range maps. Part 2 treats the seed list
as (start, length) pairs and maps whole intervals, splitting them at range
boundaries, so the cost depends on the number of ranges rather than the
number of seeds.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, TextIO, Tuple

from ..core.solution import Solutions
from ..core.utils import read_lines, words, parse_int


# Half-open interval [start, end)
Interval = Tuple[int, int]


@dataclass(frozen=True)
class MapRange:
    destination_start: int
    source_start: int
    length: int

    @property
    def source_end(self) -> int:
        return self.source_start + self.length

    @property
    def offset(self) -> int:
        return self.destination_start - self.source_start

    def contains(self, value: int) -> bool:
        return self.source_start <= value < self.source_end


@dataclass
class RangeMap:
    """One ``<source>-to-<destination> map`` section"""
    source: str
    destination: str
    ranges: List[MapRange] = field(default_factory=list)

    def map(self, value: int) -> int:
        """Map a value; values outside every range pass through unchanged."""
        for r in self.ranges:
            if r.contains(value):
                return value + r.offset
        return value

    def map_interval(self, interval: Interval) -> List[Interval]:
        """
        Map an interval, splitting it wherever it crosses a range boundary.

        The first range containing a value wins, matching ``map``. Pieces not
        covered by any range pass through unchanged.
        """
        pending = [interval]
        mapped: List[Interval] = []

        for r in self.ranges:
            remaining = []
            for start, end in pending:
                lo = max(start, r.source_start)
                hi = min(end, r.source_end)
                if lo >= hi:
                    remaining.append((start, end))
                    continue
                mapped.append((lo + r.offset, hi + r.offset))
                if start < lo:
                    remaining.append((start, lo))
                if hi < end:
                    remaining.append((hi, end))
            pending = remaining

        return mapped + pending


@dataclass
class Almanac:
    seeds: List[int]
    maps: List[RangeMap]

    @classmethod
    def parse(cls, lines: Iterable[str]) -> 'Almanac':
        """
        Parse the seed list followed by blank-line separated map sections.

        Raises:
            ValueError: If the input is malformed
        """
        it = iter(lines)
        seeds_line = next(it, None)
        if seeds_line is None or not seeds_line.startswith('seeds:'):
            raise ValueError("Unable to read seeds line")
        seeds = [parse_int(s, "seed") for s in words(seeds_line[len('seeds:'):])]

        maps: List[RangeMap] = []
        current: Optional[RangeMap] = None
        for line in it:
            if not line.strip():
                current = None
                continue

            if line.endswith(' map:'):
                name = line[:-len(' map:')]
                source, sep, destination = name.partition('-to-')
                if not sep:
                    raise ValueError(f"Unable to parse map header: {line!r}")
                current = RangeMap(source, destination)
                maps.append(current)
                continue

            if current is None:
                raise ValueError(f"Range outside of a map section: {line!r}")

            fields = words(line)
            if len(fields) != 3:
                raise ValueError(f"Unable to parse range in {current.source}-to-{current.destination} map: {line!r}")
            destination_start, source_start, length = (
                parse_int(f, "range value") for f in fields
            )
            current.ranges.append(MapRange(destination_start, source_start, length))

        return cls(seeds, maps)

    def seed_intervals(self) -> List[Interval]:
        """
        Seed values read as (start, length) pairs.

        Raises:
            ValueError: If there is an odd number of seed values
        """
        if len(self.seeds) % 2:
            raise ValueError("Seed ranges must come in (start, length) pairs")
        pairs = iter(self.seeds)
        return [(start, start + length) for start, length in zip(pairs, pairs) if length > 0]

    def location(self, seed: int) -> int:
        value = seed
        for range_map in self.maps:
            value = range_map.map(value)
        return value

    def location_intervals(self, intervals: Iterable[Interval]) -> List[Interval]:
        current = list(intervals)
        for range_map in self.maps:
            current = [piece for interval in current for piece in range_map.map_interval(interval)]
        return current

    def lowest_location(self) -> int:
        if not self.seeds:
            raise ValueError("No location found")
        return min(self.location(seed) for seed in self.seeds)

    def lowest_location_for_ranges(self) -> int:
        starts = [start for start, _ in self.location_intervals(self.seed_intervals())]
        if not starts:
            raise ValueError("No location found")
        return min(starts)


class AlmanacSolution(Solutions):

    day = 5
    title = "If You Give A Seed A Fertilizer"

    def part1(self, stream: TextIO) -> str:
        almanac = Almanac.parse(read_lines(stream))
        self.logger.debug(f"Parsed {len(almanac.seeds)} seeds and {len(almanac.maps)} maps")
        return str(almanac.lowest_location())

    def part2(self, stream: TextIO) -> str:
        almanac = Almanac.parse(read_lines(stream))
        return str(almanac.lowest_location_for_ranges())
