"""
Day 7: Camel Cards.
"""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, TextIO, Tuple

from ..core.solution import Solutions
from ..core.utils import read_lines, parse_int


CARD_VALUES = {
    'A': 14,
    'K': 13,
    'Q': 12,
    'J': 11,
    'T': 10,
    **{str(d): d for d in range(2, 10)},
}

JOKER = 0  # jokers sort below every other card
HAND_SIZE = 5


class HandType(IntEnum):
    """Hand types, weakest first"""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIRS = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


def classify(cards: Tuple[int, ...]) -> HandType:
    """
    Type of a hand, with jokers counted as whatever card helps most.

    Adding every joker to the largest group always yields the strongest type.
    """
    counts = sorted(Counter(c for c in cards if c != JOKER).values(), reverse=True)
    jokers = len(cards) - sum(counts)
    if not counts:
        counts = [0]
    counts[0] += jokers

    if counts[0] == 5:
        return HandType.FIVE_OF_A_KIND
    if counts[0] == 4:
        return HandType.FOUR_OF_A_KIND
    if counts[0] == 3:
        return HandType.FULL_HOUSE if counts[1] == 2 else HandType.THREE_OF_A_KIND
    if counts[0] == 2:
        return HandType.TWO_PAIRS if counts[1] == 2 else HandType.ONE_PAIR
    return HandType.HIGH_CARD


@dataclass(frozen=True)
class Hand:
    cards: Tuple[int, ...]

    @classmethod
    def parse(cls, s: str, jokers: bool = False) -> 'Hand':
        """
        Parse a five card hand such as ``KTJJT``.

        With ``jokers`` set, ``J`` is read as a joker instead of a jack.

        Raises:
            ValueError: On a wrong hand size or an invalid card
        """
        if len(s) != HAND_SIZE:
            raise ValueError(f"Hand must have {HAND_SIZE} cards: {s!r}")
        cards = []
        for char in s:
            if char not in CARD_VALUES:
                raise ValueError(f"Invalid card {char!r} in hand {s!r}")
            cards.append(JOKER if jokers and char == 'J' else CARD_VALUES[char])
        return cls(tuple(cards))

    @property
    def hand_type(self) -> HandType:
        return classify(self.cards)

    def sort_key(self) -> Tuple[HandType, Tuple[int, ...]]:
        return self.hand_type, self.cards


@dataclass(frozen=True)
class Round:
    hand: Hand
    bid: int

    @classmethod
    def parse(cls, line: str, jokers: bool = False) -> 'Round':
        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"Unable to read hand and bid: {line!r}")
        return cls(Hand.parse(fields[0], jokers), parse_int(fields[1], "bid"))


def total_winnings(rounds: Iterable[Round]) -> int:
    """Sum of bid times rank, the weakest hand ranking 1"""
    ranked = sorted(rounds, key=lambda r: r.hand.sort_key())
    return sum(rank * r.bid for rank, r in enumerate(ranked, start=1))


class CamelCardsSolution(Solutions):

    day = 7
    title = "Camel Cards"

    def _rounds(self, stream: TextIO, jokers: bool) -> List[Round]:
        return [Round.parse(line, jokers) for line in read_lines(stream, skip_blank=True)]

    def part1(self, stream: TextIO) -> str:
        return str(total_winnings(self._rounds(stream, jokers=False)))

    def part2(self, stream: TextIO) -> str:
        return str(total_winnings(self._rounds(stream, jokers=True)))
