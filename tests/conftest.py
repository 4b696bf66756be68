"""
Pytest configuration and shared fixtures for the puzzle solutions.
"""

import io
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def input_dir(tmp_path: Path) -> Path:
    """Empty puzzle input directory."""
    directory = tmp_path / "puzzle-input"
    directory.mkdir()
    return directory


@pytest.fixture
def write_input(input_dir: Path) -> Callable[[int, str], Path]:
    """Write the input file for a day and return its path."""

    def _write(day: int, text: str) -> Path:
        path = input_dir / f"day{day}"
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def stream() -> Callable[[str], io.StringIO]:
    """Build an in-memory input stream from text."""

    def _stream(text: str) -> io.StringIO:
        return io.StringIO(text)

    return _stream


# Example inputs published with each puzzle
EXAMPLES = {
    1: (
        "1abc2\n"
        "pqr3stu8vwx\n"
        "a1b2c3d4e5f\n"
        "treb7uchet\n"
    ),
    2: (
        "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green\n"
        "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue\n"
        "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red\n"
        "Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red\n"
        "Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green\n"
    ),
    3: (
        "467..114..\n"
        "...*......\n"
        "..35..633.\n"
        "......#...\n"
        "617*......\n"
        ".....+.58.\n"
        "..592.....\n"
        "......755.\n"
        "...$.*....\n"
        ".664.598..\n"
    ),
    4: (
        "Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53\n"
        "Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19\n"
        "Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1\n"
        "Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83\n"
        "Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36\n"
        "Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11\n"
    ),
    5: (
        "seeds: 79 14 55 13\n"
        "\n"
        "seed-to-soil map:\n"
        "50 98 2\n"
        "52 50 48\n"
        "\n"
        "soil-to-fertilizer map:\n"
        "0 15 37\n"
        "37 52 2\n"
        "39 0 15\n"
        "\n"
        "fertilizer-to-water map:\n"
        "49 53 8\n"
        "0 11 42\n"
        "42 0 7\n"
        "57 7 4\n"
        "\n"
        "water-to-light map:\n"
        "88 18 7\n"
        "18 25 70\n"
        "\n"
        "light-to-temperature map:\n"
        "45 77 23\n"
        "81 45 19\n"
        "68 64 13\n"
        "\n"
        "temperature-to-humidity map:\n"
        "0 69 1\n"
        "1 0 69\n"
        "\n"
        "humidity-to-location map:\n"
        "60 56 37\n"
        "56 93 4\n"
    ),
    6: (
        "Time:      7  15   30\n"
        "Distance:  9  40  200\n"
    ),
    7: (
        "32T3K 765\n"
        "T55J5 684\n"
        "KK677 28\n"
        "KTJJT 220\n"
        "QQQJA 483\n"
    ),
}

# Day 1 part 2 has its own example
CALIBRATION_SPELLED_EXAMPLE = (
    "two1nine\n"
    "eightwothree\n"
    "abcone2threexyz\n"
    "xtwone3four\n"
    "4nineeightseven2\n"
    "zoneight234\n"
    "7pqrstsixteen\n"
)

ANSWERS = {
    1: ("142", "142"),
    2: ("8", "2286"),
    3: ("4361", "467835"),
    4: ("13", "30"),
    5: ("35", "46"),
    6: ("288", "71503"),
    7: ("6440", "5905"),
}


@pytest.fixture
def example_input() -> Callable[[int], str]:
    """Published example input for a day."""
    return EXAMPLES.__getitem__


@pytest.fixture
def example_answers() -> Callable[[int], tuple]:
    """Expected (part 1, part 2) answers for the example input of a day."""
    return ANSWERS.__getitem__


@pytest.fixture
def spelled_calibration_input() -> str:
    return CALIBRATION_SPELLED_EXAMPLE
