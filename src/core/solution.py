"""
Base class and harness for Advent of Code puzzle solutions.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Callable, Optional, TextIO
import time

from .utils import setup_logger, memory_usage, read_input


DEFAULT_INPUT_DIR = Path("puzzle-input")


@dataclass
class SolutionConfig:
    """Configuration for running a solution"""
    input_dir: Path = DEFAULT_INPUT_DIR
    verbose: bool = False
    log_file: Optional[Path] = None


@dataclass
class DayResult:
    """Answers for one day"""
    day: int
    part1: str
    part2: str
    part1_time: float = 0.0  # seconds
    part2_time: float = 0.0  # seconds
    memory_used: float = 0.0  # MB
    title: str = field(default="")

    def to_dict(self) -> dict:
        return asdict(self)

    def __repr__(self):
        return f"DayResult(day={self.day}, part1={self.part1!r}, part2={self.part2!r})"


class Solutions(ABC):
    """
    Abstract base class for a day's puzzle.

    Subclasses set ``day`` and ``title`` and implement ``part1`` and
    ``part2``. Each part receives its own freshly opened input stream and
    returns the answer as a string.
    """

    day: int = 0
    title: str = ""

    def __init__(self, config: Optional[SolutionConfig] = None):
        self.config = config or SolutionConfig()
        self.logger = setup_logger(
            self.__class__.__name__,
            self.config.log_file,
            "DEBUG" if self.config.verbose else "INFO"
        )

    @abstractmethod
    def part1(self, stream: TextIO) -> str:
        """Compute the part 1 answer."""
        pass

    @abstractmethod
    def part2(self, stream: TextIO) -> str:
        """Compute the part 2 answer."""
        pass

    def run(self) -> DayResult:
        """
        Run both parts against the day's input.

        The input is opened once per part, before that part runs, so a
        missing file is reported before any puzzle logic executes.

        Raises:
            FileNotFoundError: If the input file does not exist
            ValueError: If the input is malformed
        """
        self.logger.debug(f"Running day {self.day}: {self.title}")
        initial_memory = memory_usage()

        part1, part1_time = self._run_part(1, self.part1)
        part2, part2_time = self._run_part(2, self.part2)

        result = DayResult(
            day=self.day,
            part1=part1,
            part2=part2,
            part1_time=part1_time,
            part2_time=part2_time,
            memory_used=memory_usage() - initial_memory,
            title=self.title,
        )
        self.logger.debug(f"Memory used: {result.memory_used:.1f} MB")

        return result

    def _run_part(self, part: int, func: Callable[[TextIO], str]):
        """Open a fresh input stream and run one part on it"""
        with read_input(self.day, self.config.input_dir) as stream:
            start_time = time.perf_counter()
            answer = func(stream)
            elapsed = time.perf_counter() - start_time

        self.logger.debug(f"Part {part} took {elapsed:.3f} seconds")
        return str(answer), elapsed

    def __repr__(self):
        return f"{self.__class__.__name__}(day={self.day})"
