"""
Puzzle Module

Puzzle configuration and text-format parsing for the Rush Hour solver.

Usage:
    from src.puzzle import load_puzzle
    from src.rushhour import solve

    config = load_puzzle("puzzles/sample.txt")
    solution = solve(config, strategy="ucs")
"""

from .config import (
    MAX_VEHICLES,
    PuzzleConfig,
    PuzzleFormatError,
)

from .parser import (
    parse_puzzle,
    load_puzzle,
)

__all__ = [
    "MAX_VEHICLES",
    "PuzzleConfig",
    "PuzzleFormatError",
    "parse_puzzle",
    "load_puzzle",
]
