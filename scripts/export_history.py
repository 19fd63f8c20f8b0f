#!/usr/bin/env python3
"""Export the flop coach decision history from SQLite to CSV.

CSV columns:
    time, hole, flop, heroCat, better, worse, tie,
    recommendation, decision, correct

    `correct` is written as "true" / "false". Rows are oldest first.

Example CSV:
    time,hole,flop,heroCat,better,worse,tie,recommendation,decision,correct
    2026-01-05T20:14:03,Ah Ad,Kc 7h 2d,One Pair,36,1044,1,Call,Call,true
    2026-01-05T20:15:40,7c 2d,Ah Kh Qh,High Card,990,80,11,Fold,Call,false

Usage:
    # Export everything in the default database (~/.flop_coach/history.db)
    python scripts/export_history.py history.csv

    # Export from a custom database path
    python scripts/export_history.py history.csv --db data/history.db

    # Only the 50 most recent decisions
    python scripts/export_history.py history.csv --limit 50

    # Print a summary instead of exporting
    python scripts/export_history.py --summary
"""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from pathlib import Path

# Add project root to path so we can import flop_coach
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from flop_coach.core.config import load_coach_config
from flop_coach.interface.history import DecisionHistory


def print_summary(history: DecisionHistory) -> None:
    """Print row count, accuracy, and a per-category tally."""
    rows = history.rows()
    if not rows:
        print("History is empty.")
        return

    print(f"Database: {history.path} ({len(rows)} decisions, {history.accuracy():.1%} correct)\n")
    print(f"{'Hero Category':<18} {'Hands':<8} {'Correct':<8}")
    print("-" * 36)
    totals = Counter(r.hero_category for r in rows)
    correct = Counter(r.hero_category for r in rows if r.correct)
    for category, count in totals.most_common():
        print(f"{category:<18} {count:<8} {correct[category]:<8}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Export the flop coach decision history to CSV.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "out", nargs="?", type=Path,
        help="CSV file to write",
    )
    parser.add_argument(
        "--db", type=Path, default=None,
        help="Path to the SQLite database (default: from config, ~/.flop_coach/history.db)",
    )
    parser.add_argument(
        "--limit", type=int, default=None,
        help="Only export the N most recent decisions",
    )
    parser.add_argument(
        "--summary", action="store_true",
        help="Print a summary of the stored decisions",
    )
    args = parser.parse_args(argv)

    if args.limit is not None and args.limit < 1:
        parser.error("--limit must be a positive integer")

    config = load_coach_config()
    history = DecisionHistory(
        db_path=args.db or config.history_path,
        limit=config.history_limit,
    )

    try:
        if args.summary:
            print_summary(history)
        elif args.out:
            count = history.export_csv(args.out, last=args.limit)
            print(f"Exported {count} decisions to {args.out}")
        else:
            parser.print_help()
    finally:
        history.close()


if __name__ == "__main__":
    main()
