"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .ucs import UniformCostStrategy
from .greedy import GreedyStrategy
from .astar import AStarStrategy

__all__ = [
    "UniformCostStrategy",
    "GreedyStrategy",
    "AStarStrategy",
]
