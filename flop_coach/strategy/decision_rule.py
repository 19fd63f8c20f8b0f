"""Call/Fold decision rule and grading of the user's choice.

Rule: if more opponent holdings are currently ahead of the hero than
behind, fold. Otherwise (including level counts) call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from flop_coach.utils.constants import Recommendation

if TYPE_CHECKING:
    from flop_coach.core.equity_calculator import EquityResult


@dataclass(frozen=True)
class Verdict:
    """Grade of a user's Call/Fold choice against the recommendation."""

    choice: Recommendation
    expected: Recommendation
    correct: bool


def decide(better: int, worse: int) -> Recommendation:
    """Return Fold if better > worse, else Call.

    Raises:
        ValueError: If either count is negative.
    """
    if better < 0 or worse < 0:
        raise ValueError(f"Counts must be non-negative, got better={better}, worse={worse}")
    return Recommendation.FOLD if better > worse else Recommendation.CALL


def parse_choice(s: str) -> Recommendation:
    """Parse 'call'/'fold' (any case, 'c'/'f' accepted)."""
    text = s.strip().lower()
    for rec in Recommendation:
        if text in (rec.value.lower(), rec.value[0].lower()):
            return rec
    raise ValueError(f"Unknown choice: '{s}' (expected call or fold)")


def grade_choice(choice: Recommendation, result: EquityResult) -> Verdict:
    """Grade the user's choice against the recommendation.

    Level better/worse counts recommend Call, so only Call grades as
    correct there.
    """
    return Verdict(
        choice=choice,
        expected=result.recommendation,
        correct=choice == result.recommendation,
    )
