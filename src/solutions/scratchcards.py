"""
Day 4: Scratchcards.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, TextIO
import re

from ..core.solution import Solutions
from ..core.utils import read_lines, parse_int


CARD_PATTERN = re.compile(r'^Card +(\d+) *: *(.*?) *\| *(.*?) *$', re.ASCII)
WHITESPACE = re.compile(r' +')


@dataclass
class Card:
    id: int
    numbers: List[int]
    winning_numbers: List[int]

    @classmethod
    def parse(cls, line: str) -> 'Card':
        """
        Parse a line such as ``Card  1: 41 48 83 | 83 86  6 31``.

        Raises:
            ValueError: If the line is malformed
        """
        match = CARD_PATTERN.match(line)
        if not match:
            raise ValueError(f"Unable to parse card: {line!r}")

        card_id, numbers, winning = match.groups()
        return cls(
            id=int(card_id),
            numbers=[parse_int(n, "card number") for n in WHITESPACE.split(numbers) if n],
            winning_numbers=[parse_int(n, "winning number") for n in WHITESPACE.split(winning) if n],
        )

    def count_matches(self) -> int:
        winning = set(self.winning_numbers)
        return sum(1 for number in self.numbers if number in winning)

    def points(self) -> int:
        matches = self.count_matches()
        return 1 << (matches - 1) if matches else 0


def count_copies(cards: List[Card]) -> Dict[int, int]:
    """
    Copies held of each card after cascading the wins.

    Each card starts with one copy; every copy of a card with m matches wins
    one copy of each of the next m cards.
    """
    copies: Dict[int, int] = defaultdict(lambda: 1)
    for card in cards:
        held = copies[card.id]
        for offset in range(1, card.count_matches() + 1):
            copies[card.id + offset] += held
    return {card.id: copies[card.id] for card in cards}


class ScratchcardsSolution(Solutions):

    day = 4
    title = "Scratchcards"

    def part1(self, stream: TextIO) -> str:
        return str(sum(Card.parse(line).points() for line in read_lines(stream, skip_blank=True)))

    def part2(self, stream: TextIO) -> str:
        cards = [Card.parse(line) for line in read_lines(stream, skip_blank=True)]
        return str(sum(count_copies(cards).values()))
