"""
Rush Hour Solver - Entry Point

Loads a puzzle file, runs the selected search strategy and prints the
moves with search statistics.

Example:
    python main.py puzzles/sample.txt
    python main.py puzzles/sample.txt --algorithm ucs
    python main.py puzzles/sample.txt -a greedy -H combined --gif out/solution.gif
"""

import sys
import json
import logging
import argparse
from typing import List, Optional

from src.puzzle import load_puzzle, PuzzleFormatError
from src.replay import replay, ReplayError
from src.render import save_frames, save_animation
from src.rushhour import (
    solve,
    get_default_strategy_name,
    get_heuristic_names,
    get_strategy_info,
    get_strategy_names,
)
from src.settings import load_settings, save_settings


logger = logging.getLogger(__name__)

# Exit codes
EXIT_SOLVED = 0
EXIT_UNSOLVED = 1
EXIT_BAD_INPUT = 2
EXIT_REPLAY_FAILED = 3


def configure_logging(debug: bool = False) -> None:
    """Log to both console and solver.log."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("solver.log", mode='w', encoding='utf-8')  # File output
        ]
    )


def strategy_help() -> str:
    """Strategy listing for the --help epilog, built from the registry."""
    lines = ["strategies:"]
    for info in get_strategy_info():
        suffix = " [uses --heuristic]" if info["uses_heuristic"] else ""
        lines.append(f"  {info['name']:<8} {info['description']}{suffix}")
    return "\n".join(lines)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Rush Hour Solver - UCS, Greedy Best-First and A* search",
        epilog=strategy_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "puzzle",
        help="Puzzle file (rows cols / vehicle count / grid with exit marker K)"
    )
    parser.add_argument(
        "--algorithm", "-a",
        choices=get_strategy_names(),
        default=None,
        help=f"Search strategy (default: from config.json, else {get_default_strategy_name()})"
    )
    parser.add_argument(
        "--heuristic", "-H",
        choices=get_heuristic_names(),
        default=None,
        help="Heuristic for greedy/astar (default: from config.json, else manhattan)"
    )
    parser.add_argument(
        "--steps", "-s",
        action="store_true",
        help="Print the board after every move"
    )
    parser.add_argument(
        "--frames",
        metavar="DIR",
        help="Save one PNG per solution step into DIR"
    )
    parser.add_argument(
        "--gif",
        metavar="PATH",
        help="Save the solution as an animated GIF"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON"
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Remember the chosen algorithm and heuristic in config.json"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    """
    Solve the puzzle named in `args` and report the result.

    Returns:
        Exit code
    """
    settings = load_settings()
    algorithm = args.algorithm or settings.get("algorithm") or get_default_strategy_name()
    heuristic = args.heuristic or settings.get("heuristic", "manhattan")

    if args.save_defaults:
        settings["algorithm"] = algorithm
        settings["heuristic"] = heuristic
        save_settings(settings)

    try:
        config = load_puzzle(args.puzzle)
    except (OSError, PuzzleFormatError) as e:
        logger.error(f"Cannot load puzzle: {e}")
        return EXIT_BAD_INPUT

    try:
        solution = solve(config, strategy=algorithm, heuristic=heuristic)
    except ValueError as e:
        logger.error(f"Cannot run search: {e}")
        return EXIT_BAD_INPUT

    if args.json:
        print(json.dumps(solution.to_dict(), indent=2))
    else:
        _print_solution(config, solution)

    if solution.solved and (args.steps or args.frames or args.gif):
        try:
            boards = replay(config, solution.moves)
        except ReplayError as e:
            logger.error(f"Replay failed: {e}")
            return EXIT_REPLAY_FAILED

        if args.steps and not args.json:
            for index, (move, board) in enumerate(zip(solution.moves, boards[1:]), start=1):
                print(f"\nStep {index}: {move}")
                print(board.render_text())
        if args.frames:
            save_frames(boards, args.frames, solution.moves)
        if args.gif:
            save_animation(boards, args.gif, solution.moves)

    return EXIT_SOLVED if solution.solved else EXIT_UNSOLVED


def _print_solution(config, solution) -> None:
    metrics = solution.metrics
    label = metrics.strategy_name
    if metrics.heuristic_name:
        label += f" ({metrics.heuristic_name})"

    print("Initial board:")
    print("\n".join(config.board))
    print()

    if solution.solved:
        print(f"Solved with {label} in {metrics.moves_count} moves:")
        for index, move in enumerate(solution.moves, start=1):
            print(f"  {index}. {move}")
    else:
        print(f"No solution found with {label}.")

    print(f"Nodes visited: {metrics.nodes_visited}")
    print(f"Execution time: {metrics.computation_time_ms:.2f} ms")


def main():
    """Initialize and run the Rush Hour solver."""
    args = parse_args()
    settings = load_settings()
    configure_logging(args.debug or settings.get("debug_enabled", False))
    sys.exit(run(args))


if __name__ == "__main__":
    main()
