"""
Strategy Factory Module - Registry of search strategies by CLI name.

Strategy modules register themselves with @register_strategy when
src.rushhour.strategies is imported. The CLI builds its --algorithm
choices, help listing and default from this registry.
"""

from typing import Any, Dict, List, Type

from .base import SolverStrategy


# Used when neither the command line nor config.json names a strategy
DEFAULT_STRATEGY = "astar"

_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a strategy to the registry under cls.name.

    Raises:
        ValueError: If another class already registered the same name
    """
    existing = _STRATEGIES.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(
            f"Strategy name {cls.name!r} already used by {existing.__name__}"
        )
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str) -> SolverStrategy:
    """
    Instantiate the strategy registered as `name`.

    Args:
        name: "ucs", "greedy" or "astar"

    Returns:
        Fresh strategy instance (strategies keep no state between runs)

    Raises:
        ValueError: If no strategy is registered under `name`
    """
    cls = _STRATEGIES.get(name)
    if cls is None:
        available = ", ".join(_STRATEGIES)
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return cls()


def get_strategy_names() -> List[str]:
    """Registered names in registration order (ucs, greedy, astar)."""
    return list(_STRATEGIES)


def get_strategy_info() -> List[Dict[str, Any]]:
    """
    Describe every registered strategy for help output.

    Returns:
        Dicts with 'name', 'description' and 'uses_heuristic' keys
    """
    return [
        {
            "name": name,
            "description": cls.description,
            "uses_heuristic": cls.uses_heuristic,
        }
        for name, cls in _STRATEGIES.items()
    ]


def get_default_strategy_name() -> str:
    """
    Strategy to run when none is configured.

    Returns:
        DEFAULT_STRATEGY if registered, else the first registered name
    """
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    return next(iter(_STRATEGIES), "")
