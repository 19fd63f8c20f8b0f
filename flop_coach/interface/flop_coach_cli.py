"""Interactive flop trainer for the terminal.

Shows how the hero's hand stands against every possible opponent
holding on the flop, recommends CALL or FOLD, and grades the user's
own choice.

Usage:
    python -m flop_coach.interface.flop_coach_cli
    python -m flop_coach.interface.flop_coach_cli --hole "Ah Ad" --flop "Kc 7h 2d"

Example session:
    ══════════════════════════════════════════
      FLOP COACH
    ══════════════════════════════════════════
      1. Analyze a flop
      2. Random drill
      ...
    > 1

    Your hand (e.g. Ah Ks): Ah Ad
    Flop (e.g. Kc 7h 2d): Kc 7h 2d

    ==================================================
      RECOMMENDATION: CALL
    ==================================================
      Hand:       Ah Ad
      Flop:       Kc 7h 2d
      You have:   One Pair

      Better than you:  36
      Worse than you:   1044
      Ties:             1
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from flop_coach.core.config import CoachConfig, configure_logging, load_coach_config
from flop_coach.core.equity_calculator import EquityCalculator, EquityResult
from flop_coach.interface.history import DecisionHistory, HistoryRow
from flop_coach.strategy.decision_rule import Verdict, grade_choice, parse_choice
from flop_coach.utils.card import Card, format_cards, parse_card_set, random_scenario
from flop_coach.utils.constants import FLOP_CARD_COUNT, HERO_CARD_COUNT
from flop_coach.utils.errors import InputError


# ---------------------------------------------------------------------------
# Prompt helpers
# ---------------------------------------------------------------------------


def _prompt(msg: str, default: str = "") -> str:
    """Print a prompt and read user input."""
    suffix = f" [{default}]" if default else ""
    try:
        val = input(f"  {msg}{suffix}: ").strip()
    except (EOFError, KeyboardInterrupt):
        print()
        return default
    return val if val else default


def _prompt_cards(msg: str, count: int) -> list[Card] | None:
    """Prompt until valid cards are entered; None on empty input."""
    while True:
        text = _prompt(msg)
        if not text:
            return None
        try:
            return parse_card_set(text, count)
        except InputError as e:
            print(f"    {e}")


# ---------------------------------------------------------------------------
# Output formatting
# ---------------------------------------------------------------------------


_DIVIDER = "\n" + "=" * 50


def _format_breakdown(result: EquityResult, bucket: str) -> list[str]:
    lines = []
    for entry in result.sorted_breakdown(bucket):
        samples = ", ".join(entry.samples)
        lines.append(f"    {entry.label:<16} {entry.count:>5}   e.g. {samples}")
    return lines


def format_report(result: EquityResult, verdict: Verdict | None = None) -> str:
    """Multi-line text report of an analysis (and optional verdict)."""
    lines = [
        _DIVIDER,
        f"  RECOMMENDATION: {result.recommendation.value.upper()}",
        "=" * 50,
        f"  Hand:       {format_cards(result.hero_cards)}",
        f"  Flop:       {format_cards(result.flop_cards)}",
        f"  You have:   {result.hero_category}",
        "",
        f"  Better than you:  {result.better}",
        f"  Worse than you:   {result.worse}",
        f"  Ties:             {result.tie}",
    ]
    if result.better_breakdown:
        lines += ["", "  -- Hands beating you --", *_format_breakdown(result, "better")]
    if result.worse_breakdown:
        lines += ["", "  -- Hands you beat --", *_format_breakdown(result, "worse")]
    if verdict is not None:
        mark = "[OK]" if verdict.correct else "[!]"
        lines += [
            "",
            f"  Your play:  {verdict.choice.value.upper()}",
            f"  Grade:      {mark} {'Correct' if verdict.correct else 'Wrong'}"
            f" (expected {verdict.expected.value.upper()})",
        ]
    lines.append("=" * 50)
    return "\n".join(lines)


def _analyze(
    hero: list[Card], flop: list[Card], config: CoachConfig, parallel: bool = False,
) -> EquityResult:
    if parallel:
        # parallel_workers of 1 means "not configured": use the default pool size
        workers = config.parallel_workers if config.parallel_workers > 1 else None
        return EquityCalculator.parallel_analyze(
            hero, flop, max_workers=workers, sample_limit=config.sample_limit,
        )
    return EquityCalculator.analyze(hero, flop, sample_limit=config.sample_limit)


# ---------------------------------------------------------------------------
# Menu modes
# ---------------------------------------------------------------------------


def _analyze_flop(config: CoachConfig) -> None:
    """Mode 1: analyze a user-entered flop."""
    print()
    hero = _prompt_cards("Your hand (e.g. Ah Ks)", HERO_CARD_COUNT)
    if hero is None:
        return
    flop = _prompt_cards("Flop (e.g. Kc 7h 2d)", FLOP_CARD_COUNT)
    if flop is None:
        return
    try:
        result = _analyze(hero, flop, config)
    except InputError as e:
        print(f"    {e}")
        return
    print(format_report(result))
    print()


def _random_drill(config: CoachConfig, history: DecisionHistory, rng: random.Random) -> None:
    """Mode 2: deal a random flop, ask for a choice, grade and record it.

    An empty answer (or end of input) goes back to the menu.
    """
    hero, flop = random_scenario(rng)
    print()
    print(f"  Hand: {format_cards(hero)}    Flop: {format_cards(flop)}")
    while True:
        answer = _prompt("Call or fold? (c/f)")
        if not answer:
            return
        try:
            choice = parse_choice(answer)
            break
        except ValueError as e:
            print(f"    {e}")

    result = _analyze(hero, flop, config)
    verdict = grade_choice(choice, result)
    history.record(HistoryRow.from_result(result, verdict))
    print(format_report(result, verdict))
    print()


def _show_history(history: DecisionHistory) -> None:
    """Mode 3: print the stored decisions."""
    rows = history.rows()
    if not rows:
        print("    No hands recorded yet.")
        return
    print()
    print(f"  {'Hole':<8} {'Flop':<11} {'You had':<16} {'B/W/T':<14} {'Rec':<5} {'You':<5}")
    print("  " + "-" * 64)
    for row in rows:
        bwt = f"{row.better}/{row.worse}/{row.tie}"
        mark = "" if row.correct else " !"
        print(
            f"  {row.hole:<8} {row.flop:<11} {row.hero_category:<16} {bwt:<14} "
            f"{row.recommendation:<5} {row.decision:<5}{mark}"
        )
    print(f"\n  {len(rows)} hands, {history.accuracy():.0%} correct")


def _export_history(history: DecisionHistory) -> None:
    """Mode 4: export the history to CSV."""
    path = _prompt("CSV file", "flop_trainer_history.csv")
    try:
        count = history.export_csv(Path(path))
    except OSError as e:
        print(f"    Export failed: {e}")
        return
    print(f"    Wrote {count} rows to {path}")


def _clear_history(history: DecisionHistory) -> None:
    """Mode 5: clear the history after confirmation."""
    if _prompt("Clear all saved hands? (y/n)", "n").lower().startswith("y"):
        history.clear()
        print("    History cleared.")


def run(config: CoachConfig | None = None) -> None:
    """Interactive main menu."""
    config = config or CoachConfig()
    history = DecisionHistory(config.history_path, limit=config.history_limit)
    rng = random.Random()

    print()
    print("=" * 50)
    print("  FLOP COACH")
    print("=" * 50)

    try:
        while True:
            print()
            print("  1. Analyze a flop")
            print("  2. Random drill")
            print("  3. Show history")
            print("  4. Export history to CSV")
            print("  5. Clear history")
            print("  6. Quit")
            choice = _prompt(">", "6")

            if choice == "1":
                _analyze_flop(config)
            elif choice == "2":
                _random_drill(config, history, rng)
            elif choice == "3":
                _show_history(history)
            elif choice == "4":
                _export_history(history)
            elif choice == "5":
                _clear_history(history)
            elif choice == "6":
                print("  Good luck at the tables!")
                break
    finally:
        history.close()


# ---------------------------------------------------------------------------
# One-shot command line
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flop-coach",
        description="Call or fold on the flop: compare your hand against every opponent holding.",
    )
    parser.add_argument("--hole", help='Your two cards, e.g. "Ah Ad"')
    parser.add_argument("--flop", help='The three flop cards, e.g. "Kc 7h 2d"')
    parser.add_argument(
        "--choice", help="Your decision (call/fold); graded and saved to history",
    )
    parser.add_argument(
        "--parallel", action="store_true",
        help="Split the enumeration across worker processes",
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="Path to the JSON config (default: ~/.flop_coach/config.json)",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Log analysis details (-v info, -vv debug)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point. Returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = load_coach_config(args.config)
    level = {0: config.log_level, 1: "INFO"}.get(args.verbose, "DEBUG")
    configure_logging(level)

    if args.hole is None and args.flop is None:
        run(config)
        return 0
    if args.hole is None or args.flop is None:
        parser.error("--hole and --flop must be given together")

    choice = None
    if args.choice:
        try:
            choice = parse_choice(args.choice)
        except ValueError as e:
            parser.error(str(e))

    try:
        hero = parse_card_set(args.hole, HERO_CARD_COUNT)
        flop = parse_card_set(args.flop, FLOP_CARD_COUNT)
        result = _analyze(hero, flop, config, parallel=args.parallel)
    except InputError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    verdict = None
    if choice is not None:
        verdict = grade_choice(choice, result)
        history = DecisionHistory(config.history_path, limit=config.history_limit)
        try:
            history.record(HistoryRow.from_result(result, verdict))
        finally:
            history.close()

    print(format_report(result, verdict))
    return 0


if __name__ == "__main__":
    sys.exit(main())
