from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent

# Puzzle input directory (day1, day2, ...)
PUZZLE_INPUT_DIR = PROJECT_ROOT / "puzzle-input"

# Logging configuration
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
