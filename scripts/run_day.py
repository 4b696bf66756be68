#!/usr/bin/env python3
"""
Script to run the solution for a day.

Usage:
    python scripts/run_day.py 3
    python scripts/run_day.py 5 --input-dir my-inputs --verbose
    python scripts/run_day.py --all
"""

import click
import sys
from pathlib import Path

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

import config
from src.core.solution import SolutionConfig, DayResult
from src.core.utils import setup_logger
from src.solutions import get_solution, available_days


def print_result(result: DayResult, verbose: bool = False):
    click.echo(f"====== Day {result.day} ======")
    click.echo(f"Part 1: {result.part1}")
    click.echo(f"Part 2: {result.part2}")

    if verbose:
        click.echo(f"Time: {result.part1_time:.3f}s + {result.part2_time:.3f}s")
        click.echo(f"Memory: {result.memory_used:.1f} MB")


@click.command()
@click.argument('day', required=False, type=int)
@click.option('--all', 'run_all', is_flag=True,
              help='Run every registered day in order')
@click.option('--input-dir', '-i', type=click.Path(file_okay=False, path_type=Path),
              default=config.PUZZLE_INPUT_DIR, show_default=True,
              help='Directory holding the day1, day2, ... input files')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--log-file', type=click.Path(dir_okay=False, path_type=Path),
              help='Also write log records to this file')
def main(day, run_all, input_dir, verbose, log_file):
    """Solve both parts of an Advent of Code 2023 puzzle."""

    logger = setup_logger(
        "AdventOfCode",
        log_file,
        level="DEBUG" if verbose else config.LOG_LEVEL,
        fmt=config.LOG_FORMAT,
    )

    if run_all:
        days = available_days()
    elif day is not None:
        days = [day]
    else:
        click.echo("Error: Too few arguments. Please pass a day number or use --all")
        sys.exit(1)

    solution_config = SolutionConfig(input_dir=input_dir, verbose=verbose, log_file=log_file)

    for day_number in days:
        try:
            solution = get_solution(day_number, solution_config)
        except ValueError as e:
            click.echo(f"Error: {e}")
            sys.exit(1)

        try:
            result = solution.run()
        except FileNotFoundError as e:
            click.echo(f"Error: {e}")
            sys.exit(1)
        except ValueError as e:
            logger.debug("Malformed input", exc_info=True)
            click.echo(f"Error: Malformed input for day {day_number}: {e}")
            sys.exit(1)

        print_result(result, verbose)


if __name__ == '__main__':
    main()
