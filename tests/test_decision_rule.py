"""Tests for the Call/Fold decision rule and choice grading."""

import pytest

from flop_coach.core.equity_calculator import EquityResult
from flop_coach.core.hand_evaluator import HandStrength
from flop_coach.strategy.decision_rule import decide, grade_choice, parse_choice
from flop_coach.utils.constants import HandCategory, Recommendation


def _result(better: int, worse: int, tie: int = 0) -> EquityResult:
    return EquityResult(
        hero_cards=(),
        flop_cards=(),
        hero_strength=HandStrength(HandCategory.ONE_PAIR, (14, 13, 7, 2)),
        better=better,
        worse=worse,
        tie=tie,
        recommendation=decide(better, worse),
    )


class TestDecide:
    def test_more_better_folds(self) -> None:
        assert decide(600, 480) == Recommendation.FOLD

    def test_more_worse_calls(self) -> None:
        assert decide(36, 1044) == Recommendation.CALL

    def test_level_counts_call(self) -> None:
        assert decide(540, 540) == Recommendation.CALL

    def test_zero_counts_call(self) -> None:
        assert decide(0, 0) == Recommendation.CALL

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            decide(-1, 3)


class TestParseChoice:
    @pytest.mark.parametrize("text,expected", [
        ("call", Recommendation.CALL),
        ("CALL", Recommendation.CALL),
        (" c ", Recommendation.CALL),
        ("Fold", Recommendation.FOLD),
        ("f", Recommendation.FOLD),
    ])
    def test_accepted(self, text: str, expected: Recommendation) -> None:
        assert parse_choice(text) == expected

    @pytest.mark.parametrize("text", ["", "raise", "x", "calls"])
    def test_rejected(self, text: str) -> None:
        with pytest.raises(ValueError, match="expected call or fold"):
            parse_choice(text)


class TestGradeChoice:
    def test_matching_choice_is_correct(self) -> None:
        verdict = grade_choice(Recommendation.FOLD, _result(700, 300))
        assert verdict.correct
        assert verdict.expected == Recommendation.FOLD

    def test_mismatch_is_wrong(self) -> None:
        verdict = grade_choice(Recommendation.FOLD, _result(36, 1044, 1))
        assert not verdict.correct
        assert verdict.choice == Recommendation.FOLD
        assert verdict.expected == Recommendation.CALL

    def test_call_correct_when_level(self) -> None:
        assert grade_choice(Recommendation.CALL, _result(500, 500)).correct

    def test_fold_wrong_when_level(self) -> None:
        assert not grade_choice(Recommendation.FOLD, _result(500, 500)).correct
