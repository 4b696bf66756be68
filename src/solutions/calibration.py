"""
Day 1: Trebuchet calibration values.
"""

from typing import Dict, Iterable, Optional, TextIO

from ..core.solution import Solutions
from ..core.utils import read_lines


DIGITS: Dict[str, int] = {str(d): d for d in range(10)}

SPELLED_DIGITS: Dict[str, int] = {
    **DIGITS,
    'one': 1,
    'two': 2,
    'three': 3,
    'four': 4,
    'five': 5,
    'six': 6,
    'seven': 7,
    'eight': 8,
    'nine': 9,
}


def digit_at(line: str, index: int, table: Dict[str, int]) -> Optional[int]:
    """Digit whose spelling starts at ``index``, if any"""
    for token, value in table.items():
        if line.startswith(token, index):
            return value
    return None


def first_digit(line: str, table: Dict[str, int]) -> Optional[int]:
    for index in range(len(line)):
        digit = digit_at(line, index, table)
        if digit is not None:
            return digit
    return None


def last_digit(line: str, table: Dict[str, int]) -> Optional[int]:
    for index in reversed(range(len(line))):
        digit = digit_at(line, index, table)
        if digit is not None:
            return digit
    return None


def calibration_value(line: str, table: Dict[str, int]) -> int:
    """
    Two-digit value made of the first and last digit of a line.

    Spellings are matched at every position independently, so overlapping
    words such as ``twone`` yield 2 first and 1 last.
    """
    first = first_digit(line, table)
    if first is None:
        raise ValueError(f"No digits in input line: {line!r}")

    last = last_digit(line, table)
    return first * 10 + last


def sum_calibration_values(lines: Iterable[str], table: Dict[str, int]) -> int:
    return sum(calibration_value(line, table) for line in lines)


class CalibrationSolution(Solutions):
    """Recover calibration values hidden in each line of the document."""

    day = 1
    title = "Trebuchet?!"

    def part1(self, stream: TextIO) -> str:
        return str(sum_calibration_values(read_lines(stream, skip_blank=True), DIGITS))

    def part2(self, stream: TextIO) -> str:
        return str(sum_calibration_values(read_lines(stream, skip_blank=True), SPELLED_DIGITS))
