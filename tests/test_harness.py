"""
Tests for the solution harness.

Tests cover:
- Registry dispatch and unknown days
- One fresh input stream per part, part 1 first
- Missing input reported before any puzzle logic runs
- Deterministic repeated runs
"""

import io
from pathlib import Path
from typing import List, TextIO

import pytest

from src.core import solution as solution_module
from src.core.solution import Solutions, SolutionConfig, DayResult
from src.core.utils import input_path, read_input, read_lines, words, parse_int
from src.solutions import SOLUTION_REGISTRY, available_days, get_solution


class RecordingSolution(Solutions):
    """Solution that records every stream it receives."""

    day = 1
    title = "Recording"

    def __init__(self, config=None):
        super().__init__(config)
        self.calls: List[str] = []
        self.streams: List[TextIO] = []

    def part1(self, stream: TextIO) -> str:
        self.calls.append("part1")
        self.streams.append(stream)
        return str(len(stream.read()))

    def part2(self, stream: TextIO) -> str:
        self.calls.append("part2")
        self.streams.append(stream)
        return str(sum(1 for _ in stream))


class TestRegistry:
    """Test the fixed registry of days."""

    def test_days_one_to_seven_registered(self) -> None:
        """Days 1 through 7 are available."""
        assert available_days() == [1, 2, 3, 4, 5, 6, 7]

    def test_registry_keys_match_class_days(self) -> None:
        """Every registered class reports its own day number."""
        for day, solution_class in SOLUTION_REGISTRY.items():
            assert solution_class.day == day

    @pytest.mark.parametrize("day", [0, 8, 25, -1])
    def test_unknown_day_not_found(self, day: int) -> None:
        """Unregistered days raise a not found error."""
        with pytest.raises(ValueError, match="Day not found"):
            get_solution(day)

    def test_unknown_day_does_not_read_input(self, monkeypatch) -> None:
        """Dispatch failure happens before any input is opened."""
        opened = []
        monkeypatch.setattr(solution_module, "read_input",
                            lambda *args: opened.append(args))

        with pytest.raises(ValueError):
            get_solution(99)

        assert opened == []

    def test_fresh_instance_per_lookup(self) -> None:
        """Each lookup returns a new solution object."""
        assert get_solution(1) is not get_solution(1)

    def test_config_passed_through(self, input_dir: Path) -> None:
        """The run configuration reaches the solution."""
        config = SolutionConfig(input_dir=input_dir)
        assert get_solution(3, config).config is config


class TestRun:
    """Test Solutions.run."""

    def test_two_answers_in_order(self, write_input, input_dir: Path) -> None:
        """Part 1 runs before part 2 and both answers are strings."""
        write_input(1, "ab\ncd\n")
        solution = RecordingSolution(SolutionConfig(input_dir=input_dir))

        result = solution.run()

        assert isinstance(result, DayResult)
        assert solution.calls == ["part1", "part2"]
        assert result.part1 == "6"
        assert result.part2 == "2"

    def test_each_part_gets_fresh_stream(self, write_input, input_dir: Path) -> None:
        """Part 2 sees the whole input even though part 1 consumed its stream."""
        write_input(1, "ab\ncd\n")
        solution = RecordingSolution(SolutionConfig(input_dir=input_dir))

        solution.run()

        first, second = solution.streams
        assert first is not second
        assert first.closed and second.closed

    def test_input_opened_once_per_part(self, monkeypatch) -> None:
        """The input is re-opened rather than rewound."""
        opened = []

        def fake_read_input(day, input_dir):
            opened.append(day)
            return io.StringIO("x\n")

        monkeypatch.setattr(solution_module, "read_input", fake_read_input)

        RecordingSolution().run()

        assert opened == [1, 1]

    def test_missing_input_before_puzzle_logic(self, input_dir: Path) -> None:
        """A missing file fails without calling either part."""
        solution = RecordingSolution(SolutionConfig(input_dir=input_dir))

        with pytest.raises(FileNotFoundError, match="day1"):
            solution.run()

        assert solution.calls == []

    def test_result_metadata(self, write_input, input_dir: Path) -> None:
        """Result carries the day, title and timings."""
        write_input(1, "a\n")
        result = RecordingSolution(SolutionConfig(input_dir=input_dir)).run()

        assert result.day == 1
        assert result.title == "Recording"
        assert result.part1_time >= 0.0
        assert result.part2_time >= 0.0
        assert result.to_dict()["part1"] == "2"

    @pytest.mark.parametrize("day", [1, 2, 3, 4, 5, 6, 7])
    def test_repeated_runs_identical(self, day: int, write_input, input_dir: Path,
                                     example_input) -> None:
        """Two runs over the same input give identical answers."""
        write_input(day, example_input(day))
        config = SolutionConfig(input_dir=input_dir)

        first = get_solution(day, config).run()
        second = get_solution(day, config).run()

        assert (first.part1, first.part2) == (second.part1, second.part2)


class TestUtils:
    """Test input helpers."""

    def test_input_path(self, tmp_path: Path) -> None:
        assert input_path(4, tmp_path) == tmp_path / "day4"

    def test_read_input_missing(self, input_dir: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Input file not found"):
            read_input(2, input_dir)

    def test_read_input_returns_new_stream(self, write_input, input_dir: Path) -> None:
        write_input(2, "hello\n")
        with read_input(2, input_dir) as first, read_input(2, input_dir) as second:
            assert first is not second
            assert first.read() == second.read() == "hello\n"

    def test_read_lines_strips_terminators(self) -> None:
        lines = list(read_lines(io.StringIO("a\r\nb\n\nc")))
        assert lines == ["a", "b", "", "c"]

    def test_read_lines_skip_blank(self) -> None:
        lines = list(read_lines(io.StringIO("a\n\n  \nb\n"), skip_blank=True))
        assert lines == ["a", "b"]

    def test_words(self) -> None:
        assert words("Time:      7  15   30") == ["Time:", "7", "15", "30"]

    def test_parse_int_error_names_field(self) -> None:
        with pytest.raises(ValueError, match="Unable to parse bid"):
            parse_int("x1", "bid")

    @pytest.mark.parametrize("token", ["1_0", "+5", "-3", " 7", "\u0663", ""])
    def test_parse_int_rejects_non_ascii_digit_forms(self, token: str) -> None:
        """Only plain ASCII digit runs are accepted."""
        with pytest.raises(ValueError, match="Unable to parse seed"):
            parse_int(token, "seed")

    def test_parse_int_leading_zeros(self) -> None:
        assert parse_int("007", "seed") == 7
