#!/usr/bin/env python3
"""Estimate equity for a hand and recommend staying or folding."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pokerbot.game.cards import parse_cards
from pokerbot.game.decision import (
    Decision, EquityEstimate, EstimateConfig, estimate,
    SIMULATION_TIME_LIMIT_MS, WIN_PROBABILITY_THRESHOLD,
)
from pokerbot.game.equity import KnownHand
from pokerbot.game.evaluator import evaluate_complete

STREET_NAMES = {0: "Pre-Flop", 3: "Flop", 4: "Turn", 5: "River"}

DECISION_STYLES = {
    Decision.STAY: "green",
    Decision.FOLD: "red",
    Decision.UNDECIDED: "yellow",
}


def main():
    parser = argparse.ArgumentParser(
        description="Estimate heads-up equity and recommend stay or fold"
    )
    parser.add_argument(
        "--hole",
        nargs="+",
        required=True,
        help="Your two hole cards (e.g., 'AS KH' or 'AsKh')",
    )
    parser.add_argument(
        "-b", "--board",
        nargs="*",
        default=[],
        help="Known community cards, 0, 3, 4 or 5 (e.g., '2C 7H QS')",
    )
    parser.add_argument(
        "-t", "--time-ms",
        type=int,
        default=SIMULATION_TIME_LIMIT_MS,
        help=f"Simulation time budget in ms (default: {SIMULATION_TIME_LIMIT_MS})",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=WIN_PROBABILITY_THRESHOLD,
        help=f"Win probability needed to stay (default: {WIN_PROBABILITY_THRESHOLD})",
    )
    parser.add_argument(
        "-w", "--workers",
        type=int,
        default=1,
        help="Worker processes (default: 1)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible runs",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args()
    console = Console()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )

    # Parse cards
    try:
        hole = parse_cards(" ".join(args.hole))
        board = parse_cards(" ".join(args.board))
        known = KnownHand(hole=tuple(hole), board=tuple(board))
        config = EstimateConfig(
            time_budget_ms=args.time_ms,
            win_probability_threshold=args.threshold,
            num_workers=args.workers,
            seed=args.seed,
        )
    except ValueError as e:  # includes InvalidCardSpec
        console.print(f"[red]Error: {e}[/]")
        return 1

    _display_known_hand(console, known)

    console.print()
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(f"Running simulations ({args.time_ms / 1000:.1f} seconds)...")
        result = estimate(known, config)

    _display_result(console, result)
    return 0


def _display_known_hand(console: Console, known: KnownHand) -> None:
    """Display the cards in play."""
    street = STREET_NAMES[len(known.board)]
    hole = " ".join(str(c) for c in known.hole)
    board = " ".join(str(c) for c in known.board) or "[dim]none yet[/]"

    console.print(f"[bold]Street:[/] {street}")
    console.print(f"[bold]Hole cards:[/] {hole}")
    console.print(f"[bold]Community cards:[/] {board}")

    if len(known.board) == 5:
        made = evaluate_complete(list(known.cards))
        console.print(f"[bold]Made hand:[/] {made.category.display_name}")


def _display_result(console: Console, result: EquityEstimate) -> None:
    """Display simulation statistics and the decision."""
    table = Table(title="Simulation Results", show_header=False)
    table.add_column("Stat", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Simulations run", f"{result.trials_run:,}")
    table.add_row("Wins", f"{result.wins:,}")
    table.add_row("Win probability", f"{result.win_probability * 100:.2f}%")

    console.print(table)

    style = DECISION_STYLES[result.decision]
    panel = Panel(
        f"[bold {style}]{result.decision.value}[/]",
        title="[bold]Decision[/]",
        border_style=style,
        expand=False,
    )
    console.print(panel)


if __name__ == "__main__":
    sys.exit(main())
