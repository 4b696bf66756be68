"""
Day 2: Cube Conundrum.
"""

from dataclasses import dataclass, field
from typing import List, TextIO

from ..core.solution import Solutions
from ..core.utils import read_lines, parse_int


COLORS = ('red', 'green', 'blue')

# Bag contents queried in part 1
BAG_LIMITS = {'red': 12, 'green': 13, 'blue': 14}


@dataclass
class Pick:
    """One handful of cubes revealed from the bag"""
    red: int = 0
    green: int = 0
    blue: int = 0


@dataclass
class Game:
    """A game and every handful revealed during it"""
    id: int
    picks: List[Pick] = field(default_factory=list)

    @classmethod
    def parse(cls, line: str) -> 'Game':
        """
        Parse a line such as ``Game 3: 8 green, 6 blue; 5 red``.

        Raises:
            ValueError: If the line is malformed or names an unknown color
        """
        id_part, sep, data_part = line.partition(': ')
        if not sep:
            raise ValueError(f"Unable to read data part: {line!r}")
        if not id_part.startswith('Game '):
            raise ValueError(f"Unable to read ID part: {line!r}")

        game = cls(id=parse_int(id_part[len('Game '):], "game ID"))

        for hand in data_part.split('; '):
            pick = Pick()
            for cube in hand.split(', '):
                amount, _, color = cube.partition(' ')
                count = parse_int(amount, "cube amount")
                if color not in COLORS:
                    raise ValueError(f"Invalid color {color!r} in game {game.id}")
                setattr(pick, color, getattr(pick, color) + count)
            game.picks.append(pick)

        return game

    def is_possible(self) -> bool:
        """Whether every pick fits within the part 1 bag"""
        return all(
            pick.red <= BAG_LIMITS['red']
            and pick.green <= BAG_LIMITS['green']
            and pick.blue <= BAG_LIMITS['blue']
            for pick in self.picks
        )

    def power(self) -> int:
        """Product of the fewest cubes of each color that make the game possible"""
        red = max((pick.red for pick in self.picks), default=0)
        green = max((pick.green for pick in self.picks), default=0)
        blue = max((pick.blue for pick in self.picks), default=0)
        return red * green * blue


class CubeGameSolution(Solutions):

    day = 2
    title = "Cube Conundrum"

    def part1(self, stream: TextIO) -> str:
        total = 0
        for line in read_lines(stream, skip_blank=True):
            game = Game.parse(line)
            if game.is_possible():
                total += game.id
        return str(total)

    def part2(self, stream: TextIO) -> str:
        return str(sum(Game.parse(line).power() for line in read_lines(stream, skip_blank=True)))
