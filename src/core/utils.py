"""
Utility functions shared by the puzzle solutions.
"""

import logging
import os
import re
from pathlib import Path
from typing import Iterator, List, Optional, TextIO, Union


INPUT_FILE_TEMPLATE = "day{day}"
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
NUMBER_PATTERN = re.compile(r'\d+', re.ASCII)


def setup_logger(name: str, log_file: Optional[Path] = None, level: str = "INFO",
                 fmt: str = DEFAULT_LOG_FORMAT) -> logging.Logger:
    """
    Set up a logger with console and optional file output.

    Args:
        name: Logger name
        log_file: Optional log file path
        level: Logging level
        fmt: Log record format

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level.upper()))

    formatter = logging.Formatter(fmt, datefmt='%Y-%m-%d %H:%M:%S')
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(getattr(logging, level.upper()))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def memory_usage() -> float:
    """Get current memory usage in MB"""
    import psutil
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


def input_path(day: int, input_dir: Union[str, Path]) -> Path:
    """Path of the puzzle input file for a day"""
    return Path(input_dir) / INPUT_FILE_TEMPLATE.format(day=day)


def read_input(day: int, input_dir: Union[str, Path]) -> TextIO:
    """
    Open the puzzle input for a day.

    Every call returns a new stream; callers own it and must close it.

    Raises:
        FileNotFoundError: If the input file does not exist
    """
    filepath = input_path(day, input_dir)

    if not filepath.is_file():
        raise FileNotFoundError(f"Input file not found: {filepath}")

    return open(filepath, 'r')


def read_lines(stream: TextIO, skip_blank: bool = False) -> Iterator[str]:
    """Yield lines from a stream without their line terminators."""
    for line in stream:
        line = line.rstrip('\r\n')
        if skip_blank and not line.strip():
            continue
        yield line


def words(s: str) -> List[str]:
    """Split a string on runs of spaces"""
    return [w for w in s.split(' ') if w]


def parse_int(token: str, what: str) -> int:
    """Parse an unsigned ASCII integer token, naming the field in the error message."""
    if not NUMBER_PATTERN.fullmatch(token):
        raise ValueError(f"Unable to parse {what}: {token!r}")
    return int(token)
