"""
Advent of Code 2023 puzzle solutions.
"""

__version__ = "0.1.0"
