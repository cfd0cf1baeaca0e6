import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from orbtangle import (
    PuzzleState,
    SettleReport,
    get_default_options,
    new_puzzle,
    print_puzzle,
    solve_greedy,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_swap(value: str) -> Optional[Tuple[int, int]]:
    parts = [part.strip() for part in value.split(",") if part.strip()]
    if len(parts) != 2:
        logger.warning("Swap %r needs exactly two orb ids, skipping", value)
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        logger.warning("Swap %r has a non-integer orb id, skipping", value)
        return None


def _report_move(state: PuzzleState, first: int, second: int, report: SettleReport) -> None:
    print(f"Move {state.moves}: swapped {first} and {second} -> {report.crossings} crossing(s)")
    if report.newly_solved:
        print("Solved!")


def _apply_move(state: PuzzleState, first: int, second: int) -> Optional[SettleReport]:
    state.select(first)
    event = state.select(second)
    if event.kind != "swapped":
        logger.warning("Swap %d,%d moved nothing (%s), skipping", first, second, event.kind)
        return None
    report = state.settle()
    _report_move(state, first, second, report)
    return report


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Generate and play an untangle puzzle")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=123,
        help="Random seed for generation, placement and shuffling (default: 123)",
    )
    parser.add_argument("--width", type=int, help="Canvas width")
    parser.add_argument("--height", type=int, help="Canvas height")
    parser.add_argument(
        "--swap",
        action="append",
        default=[],
        help="Swap two orbs, e.g. 3,7 (repeatable)",
    )
    parser.add_argument(
        "--solve-greedy",
        action="store_true",
        help="Play best-improving swaps after the given ones",
    )
    parser.add_argument(
        "--max-moves",
        type=int,
        default=50,
        help="Move limit for --solve-greedy (default: 50)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    options = get_default_options()
    options.random_seed = args.seed
    if args.width is not None:
        options.width = args.width
    if args.height is not None:
        options.height = args.height

    state = new_puzzle(options)
    print("Initial puzzle:")
    print(print_puzzle(state), end="")

    moves: List[Tuple[int, int]] = []
    for raw in args.swap:
        parsed = _parse_swap(raw)
        if parsed is not None:
            moves.append(parsed)

    for first, second in moves:
        try:
            _apply_move(state, first, second)
        except ValueError as exc:
            logger.error("Invalid move %d,%d: %s", first, second, exc)
            raise SystemExit(1)

    if args.solve_greedy:
        solve_greedy(
            state,
            args.max_moves,
            on_move=lambda pair, report: _report_move(state, pair[0], pair[1], report),
        )

    print("Final puzzle:")
    print(print_puzzle(state), end="")


if __name__ == "__main__":
    main(sys.argv[1:])
