# src/core/__init__.py
"""
Harness and shared utilities for the puzzle solutions.
"""

from .solution import Solutions, SolutionConfig, DayResult
from .utils import (
    setup_logger, memory_usage,
    input_path, read_input, read_lines,
    words, parse_int
)

__all__ = [
    # Harness
    'Solutions', 'SolutionConfig', 'DayResult',

    # Utilities
    'setup_logger', 'memory_usage',
    'input_path', 'read_input', 'read_lines',
    'words', 'parse_int'
]
