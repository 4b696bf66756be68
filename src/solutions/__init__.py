"""
Puzzle solutions, one per day.
"""

from typing import Dict, List, Optional, Type

from ..core.solution import Solutions, SolutionConfig
from .calibration import CalibrationSolution
from .cube_game import CubeGameSolution
from .gear_ratios import GearRatiosSolution
from .scratchcards import ScratchcardsSolution
from .almanac import AlmanacSolution
from .boat_race import BoatRaceSolution
from .camel_cards import CamelCardsSolution

__all__ = [
    'CalibrationSolution',
    'CubeGameSolution',
    'GearRatiosSolution',
    'ScratchcardsSolution',
    'AlmanacSolution',
    'BoatRaceSolution',
    'CamelCardsSolution',

    'SOLUTION_REGISTRY',
    'available_days',
    'get_solution',
]


# Fixed registry of days
SOLUTION_REGISTRY: Dict[int, Type[Solutions]] = {
    solution.day: solution
    for solution in (
        CalibrationSolution,
        CubeGameSolution,
        GearRatiosSolution,
        ScratchcardsSolution,
        AlmanacSolution,
        BoatRaceSolution,
        CamelCardsSolution,
    )
}


def available_days() -> List[int]:
    return sorted(SOLUTION_REGISTRY)


def get_solution(day: int, config: Optional[SolutionConfig] = None) -> Solutions:
    """
    Get the solution for a day.

    Args:
        day: Day number
        config: Optional run configuration

    Returns:
        A fresh solution instance

    Raises:
        ValueError: If no solution is registered for the day
    """
    solution_class = SOLUTION_REGISTRY.get(day)
    if not solution_class:
        raise ValueError(f"Day not found: {day}. Available: {available_days()}")

    return solution_class(config)
