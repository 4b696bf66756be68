"""
Day 6: Wait For It.
"""

from dataclasses import dataclass
from typing import List, TextIO, Tuple
import math

from ..core.solution import Solutions
from ..core.utils import read_lines, words, parse_int


@dataclass(frozen=True)
class Race:
    time_ms: int
    record_distance_mm: int


def hold_time_bounds(race_time_ms: int, record_distance_mm: int) -> Tuple[int, int]:
    """
    Shortest and longest button hold, in ms, that beats the record.

    Holding for h ms in a race of T ms travels h * (T - h) mm, so the winning
    holds lie strictly between the roots of h^2 - T*h + d = 0. The roots are
    located with an integer square root and nudged onto the exact boundary.
    If nothing beats the record the returned lower bound exceeds the upper.
    """
    t, d = race_time_ms, record_distance_mm
    discriminant = t * t - 4 * d
    if discriminant < 0:
        return 1, 0

    lower = max((t - math.isqrt(discriminant)) // 2, 0)
    while lower > 0 and (lower - 1) * (t - lower + 1) > d:
        lower -= 1
    while lower <= t - lower and lower * (t - lower) <= d:
        lower += 1

    return lower, t - lower


def ways_to_win(race: Race) -> int:
    lower, upper = hold_time_bounds(race.time_ms, race.record_distance_mm)
    return max(upper - lower + 1, 0)


def _read_rows(stream: TextIO) -> Tuple[List[str], List[str]]:
    lines = read_lines(stream, skip_blank=True)
    time_line = next(lines, None)
    distance_line = next(lines, None)
    if time_line is None or not time_line.startswith('Time:'):
        raise ValueError("Unable to read times")
    if distance_line is None or not distance_line.startswith('Distance:'):
        raise ValueError("Unable to read distances")
    return words(time_line)[1:], words(distance_line)[1:]


def parse_races(stream: TextIO) -> List[Race]:
    """One race per column of the two input rows"""
    times, distances = _read_rows(stream)
    if len(times) != len(distances):
        raise ValueError(f"Found {len(times)} times but {len(distances)} distances")
    return [
        Race(parse_int(time, "time"), parse_int(distance, "distance"))
        for time, distance in zip(times, distances)
    ]


def parse_single_race(stream: TextIO) -> Race:
    """One race whose numbers are each row's digits run together"""
    times, distances = _read_rows(stream)
    return Race(parse_int(''.join(times), "time"), parse_int(''.join(distances), "distance"))


class BoatRaceSolution(Solutions):

    day = 6
    title = "Wait For It"

    def part1(self, stream: TextIO) -> str:
        races = parse_races(stream)
        return str(math.prod(ways_to_win(race) for race in races))

    def part2(self, stream: TextIO) -> str:
        race = parse_single_race(stream)
        lower, upper = hold_time_bounds(race.time_ms, race.record_distance_mm)
        self.logger.debug(f"Winning holds for {race}: {lower}..{upper} ms")
        return str(ways_to_win(race))
