"""Command-line interface for the Monopoly occupancy simulator.

Provides entry point for running simulations and printing the results.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Sequence

from monopoly_sim.cards import CHANCE_DECK, COMMUNITY_CHEST_DECK, deck_probabilities
from monopoly_sim.metrics import result_rows, sort_by_count, summarize, to_dict
from monopoly_sim.models import DEFAULT_TURNS, DEFAULT_WORKERS, SimulationConfig
from monopoly_sim.simulator import run_config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def positive_int(value: str) -> int:
    """argparse type for integers >= 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a number: {value}") from None
    if number < 1:
        raise argparse.ArgumentTypeError("Must be a positive number")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monopoly-sim",
        description="Estimate how often each Monopoly board cell is landed on",
    )

    parser.add_argument(
        "--turns",
        type=positive_int,
        default=DEFAULT_TURNS,
        help="Number of turns per worker",
    )
    parser.add_argument(
        "--workers",
        type=positive_int,
        default=DEFAULT_WORKERS,
        help="Number of workers (independent players)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--threads",
        type=positive_int,
        default=None,
        help="Thread pool size (default: one per worker, capped at 32)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print results as JSON instead of a table"
    )
    parser.add_argument(
        "--show-decks",
        action="store_true",
        help="Print the Chance and Community Chest probability tables and exit",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def format_table(rows: list[dict[str, str]]) -> str:
    """Render rows as a plain-text table with a header."""
    if not rows:
        return ""

    headers = list(rows[0].keys())
    widths = {h: max(len(h), *(len(row[h]) for row in rows)) for h in headers}

    def line(values: dict[str, str]) -> str:
        return "| " + " | ".join(values[h].rjust(widths[h]) for h in headers) + " |"

    separator = "|-" + "-+-".join("-" * widths[h] for h in headers) + "-|"
    lines = [line({h: h for h in headers}), separator]
    lines.extend(line(row) for row in rows)
    return "\n".join(lines)


def print_decks() -> None:
    for title, deck in (
        ("Chance", CHANCE_DECK),
        ("Community Chest", COMMUNITY_CHEST_DECK),
    ):
        print(f"{title}:")
        for card, probability in deck_probabilities(deck).items():
            print(f"  {str(card):<30} {probability:.4f}")
        print()


def main(argv: Sequence[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    if args.show_decks:
        print_decks()
        return

    config = SimulationConfig(
        turns_per_worker=args.turns,
        worker_count=args.workers,
        seed=args.seed,
        max_threads=args.threads,
    )

    # Lightweight progress logging every ~5% or on last
    step = max(1, config.worker_count // 20)

    def progress(completed: int, total: int) -> None:
        if completed % step == 0 or completed == total:
            logger.info("Progress: %d/%d workers", completed, total)

    histogram = run_config(config, progress_cb=progress)
    results = sort_by_count(summarize(histogram))

    if args.json:
        print(json.dumps(to_dict(results), indent=2))
    else:
        print(format_table(result_rows(results)))


if __name__ == "__main__":
    main()
