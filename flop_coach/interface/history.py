"""Persistent history of the user's Call/Fold decisions.

Stores one row per graded decision in a SQLite database
(~/.flop_coach/history.db) with WAL mode. Only the most recent
`limit` rows are kept. Rows can be exported to CSV.

Schema:
    decision_history(id, time, hole, flop, hero_category, better, worse,
                     tie, recommendation, decision, correct)
"""

from __future__ import annotations

import csv
import logging
import sqlite3
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from flop_coach.core.config import DEFAULT_HISTORY_LIMIT, DEFAULT_HISTORY_PATH
from flop_coach.core.equity_calculator import EquityResult
from flop_coach.strategy.decision_rule import Verdict
from flop_coach.utils.card import format_cards

logger = logging.getLogger("flop_coach.history")

CSV_HEADERS = [
    "time", "hole", "flop", "heroCat", "better", "worse", "tie",
    "recommendation", "decision", "correct",
]

_CREATE_TABLE = """\
CREATE TABLE IF NOT EXISTS decision_history (
    id             INTEGER PRIMARY KEY AUTOINCREMENT,
    time           TEXT NOT NULL,
    hole           TEXT NOT NULL,
    flop           TEXT NOT NULL,
    hero_category  TEXT NOT NULL,
    better         INTEGER NOT NULL,
    worse          INTEGER NOT NULL,
    tie            INTEGER NOT NULL,
    recommendation TEXT NOT NULL,
    decision       TEXT NOT NULL,
    correct        INTEGER NOT NULL
);
"""

_INSERT_SQL = """\
INSERT INTO decision_history
    (time, hole, flop, hero_category, better, worse, tie,
     recommendation, decision, correct)
VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?);
"""

_TRIM_SQL = """\
DELETE FROM decision_history
WHERE id NOT IN (
    SELECT id FROM decision_history ORDER BY id DESC LIMIT ?
);
"""

_SELECT_SQL = """\
SELECT time, hole, flop, hero_category, better, worse, tie,
       recommendation, decision, correct
FROM decision_history
ORDER BY id;
"""


@dataclass(frozen=True)
class HistoryRow:
    """One graded decision."""

    time: str
    hole: str
    flop: str
    hero_category: str
    better: int
    worse: int
    tie: int
    recommendation: str
    decision: str
    correct: bool

    @classmethod
    def from_result(
        cls,
        result: EquityResult,
        verdict: Verdict,
        when: datetime | None = None,
    ) -> HistoryRow:
        return cls(
            time=(when or datetime.now()).isoformat(timespec="seconds"),
            hole=format_cards(result.hero_cards),
            flop=format_cards(result.flop_cards),
            hero_category=result.hero_category,
            better=result.better,
            worse=result.worse,
            tie=result.tie,
            recommendation=str(result.recommendation),
            decision=str(verdict.choice),
            correct=verdict.correct,
        )

    def to_csv_row(self) -> list[str]:
        return [
            self.time, self.hole, self.flop, self.hero_category,
            str(self.better), str(self.worse), str(self.tie),
            self.recommendation, self.decision, str(self.correct).lower(),
        ]


class DecisionHistory:
    """SQLite-backed decision log, trimmed to the most recent rows."""

    def __init__(
        self,
        db_path: Path | str | None = None,
        limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self._path = Path(db_path) if db_path else DEFAULT_HISTORY_PATH
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._limit = limit
        self._conn = sqlite3.connect(str(self._path))
        self._conn.execute("PRAGMA journal_mode=WAL;")
        self._conn.execute(_CREATE_TABLE)
        self._conn.commit()

    @property
    def path(self) -> Path:
        return self._path

    def record(self, row: HistoryRow) -> None:
        """Append a row and drop anything beyond the row limit."""
        self._conn.execute(_INSERT_SQL, (
            row.time, row.hole, row.flop, row.hero_category,
            row.better, row.worse, row.tie,
            row.recommendation, row.decision, int(row.correct),
        ))
        self._conn.execute(_TRIM_SQL, (self._limit,))
        self._conn.commit()
        logger.debug("Recorded %s / %s as %s", row.hole, row.flop, row.decision)

    def rows(self) -> list[HistoryRow]:
        """All stored rows, oldest first."""
        return [
            HistoryRow(
                time=r[0], hole=r[1], flop=r[2], hero_category=r[3],
                better=r[4], worse=r[5], tie=r[6],
                recommendation=r[7], decision=r[8], correct=bool(r[9]),
            )
            for r in self._conn.execute(_SELECT_SQL).fetchall()
        ]

    def row_count(self) -> int:
        return self._conn.execute("SELECT COUNT(*) FROM decision_history").fetchone()[0]

    def accuracy(self) -> float:
        """Fraction of recorded decisions graded correct (0.0 when empty)."""
        total, correct = self._conn.execute(
            "SELECT COUNT(*), COALESCE(SUM(correct), 0) FROM decision_history"
        ).fetchone()
        return correct / total if total else 0.0

    def clear(self) -> None:
        self._conn.execute("DELETE FROM decision_history")
        self._conn.commit()
        logger.info("Decision history cleared (%s)", self._path)

    def export_csv(self, csv_path: Path | str, last: int | None = None) -> int:
        """Write rows to a CSV file, oldest first.

        Args:
            csv_path: Destination file (overwritten).
            last: If set, only the most recent `last` rows are written.

        Returns:
            Number of rows written.
        """
        rows = self.rows()
        if last is not None:
            rows = rows[-last:] if last > 0 else []
        with open(csv_path, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADERS)
            for row in rows:
                writer.writerow(row.to_csv_row())
        logger.info("Exported %d history rows to %s", len(rows), csv_path)
        return len(rows)

    def close(self) -> None:
        if self._conn:
            self._conn.close()
            self._conn = None  # type: ignore[assignment]
