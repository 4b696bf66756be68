"""
Day 3: Gear Ratios.

The engine schematic is stored as an index arena: parsed numbers live in a
flat ordered list with an explicit span each, and every grid cell holds
either the index of the number covering it or a negative tile marker.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Set, TextIO
import numpy as np

from ..core.solution import Solutions
from ..core.utils import read_lines


# Tile markers; non-negative cells are indices into Schematic.numbers
EMPTY = -1
GEAR = -2
SYMBOL = -3

DIGIT_CHARS = frozenset('0123456789')


@dataclass(frozen=True)
class NumberSpan:
    """A number on the schematic and the cells it covers"""
    value: int
    row: int
    start: int
    length: int

    @property
    def end(self) -> int:
        """Column one past the last digit"""
        return self.start + self.length


@dataclass
class Schematic:
    """Engine schematic grid"""
    grid: np.ndarray
    numbers: List[NumberSpan] = field(default_factory=list)

    @property
    def height(self) -> int:
        return self.grid.shape[0]

    @property
    def width(self) -> int:
        return self.grid.shape[1]

    @classmethod
    def parse(cls, lines: Iterable[str]) -> 'Schematic':
        """
        Build a schematic from its text rows.

        Raises:
            ValueError: If rows differ in length
        """
        rows = list(lines)
        width = len(rows[0]) if rows else 0
        grid = np.full((len(rows), width), EMPTY, dtype=np.int64)
        numbers: List[NumberSpan] = []

        for row, line in enumerate(rows):
            if len(line) != width:
                raise ValueError(
                    f"Row {row} has length {len(line)}, expected {width}"
                )

            col = 0
            while col < width:
                char = line[col]
                if char in DIGIT_CHARS:
                    start = col
                    while col < width and line[col] in DIGIT_CHARS:
                        col += 1
                    grid[row, start:col] = len(numbers)
                    numbers.append(NumberSpan(int(line[start:col]), row, start, col - start))
                    continue

                if char == '*':
                    grid[row, col] = GEAR
                elif char != '.':
                    grid[row, col] = SYMBOL
                col += 1

        return cls(grid, numbers)

    def neighbourhood(self, row: int, start: int, end: int) -> np.ndarray:
        """Cells within one step of the columns [start, end) on a row"""
        return self.grid[
            max(row - 1, 0):min(row + 2, self.height),
            max(start - 1, 0):min(end + 1, self.width)
        ]

    def is_part_number(self, number: NumberSpan) -> bool:
        """Whether any symbol, gears included, touches the number"""
        window = self.neighbourhood(number.row, number.start, number.end)
        return bool((window <= GEAR).any())

    def adjacent_numbers(self, row: int, col: int) -> Set[int]:
        """Indices of the distinct numbers touching a cell"""
        window = self.neighbourhood(row, col, col + 1)
        return {int(index) for index in window[window >= 0]}

    def gear_ratios(self) -> List[int]:
        """Products of the two numbers around each gear touching exactly two"""
        ratios = []
        for row, col in np.argwhere(self.grid == GEAR):
            indices = self.adjacent_numbers(int(row), int(col))
            if len(indices) != 2:
                continue
            first, second = (self.numbers[i].value for i in sorted(indices))
            ratios.append(first * second)
        return ratios


class GearRatiosSolution(Solutions):

    day = 3
    title = "Gear Ratios"

    def part1(self, stream: TextIO) -> str:
        schematic = Schematic.parse(read_lines(stream, skip_blank=True))
        total = sum(
            number.value for number in schematic.numbers
            if schematic.is_part_number(number)
        )
        self.logger.debug(f"Schematic {schematic.width}x{schematic.height} "
                          f"with {len(schematic.numbers)} numbers")
        return str(total)

    def part2(self, stream: TextIO) -> str:
        schematic = Schematic.parse(read_lines(stream, skip_blank=True))
        return str(sum(schematic.gear_ratios()))
