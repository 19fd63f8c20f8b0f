"""Tests for the flop equity enumerator."""

import logging

import pytest

from flop_coach.core.equity_calculator import (
    EquityCalculator,
    _chunk_bounds,
    analyze_text,
    validate_scenario,
)
from flop_coach.utils.card import Card
from flop_coach.utils.constants import HandCategory, Recommendation
from flop_coach.utils.errors import DuplicateCard, InputError, ParseError


def _cards(s: str) -> list[Card]:
    return [Card.from_str(c) for c in s.split()]


@pytest.fixture(scope="module")
def aces_on_king_high():
    return EquityCalculator.analyze(_cards("Ah Ad"), _cards("Kc 7h 2d"))


class TestOverpairScenario:
    def test_counts(self, aces_on_king_high) -> None:
        result = aces_on_king_high
        assert result.hero_category == "One Pair"
        assert result.better == 36
        assert result.tie == 1
        assert result.worse == 1044
        assert result.total == 1081

    def test_recommendation(self, aces_on_king_high) -> None:
        assert aces_on_king_high.recommendation == Recommendation.CALL

    def test_better_breakdown(self, aces_on_king_high) -> None:
        better = aces_on_king_high.better_breakdown
        assert set(better) == {HandCategory.TWO_PAIR, HandCategory.THREE_OF_A_KIND}
        assert better[HandCategory.THREE_OF_A_KIND].count == 9
        assert better[HandCategory.TWO_PAIR].count == 27
        assert sum(b.count for b in better.values()) == 36

    def test_samples_follow_deck_order(self, aces_on_king_high) -> None:
        better = aces_on_king_high.better_breakdown
        assert better[HandCategory.THREE_OF_A_KIND].samples == ("2s 2h", "2s 2c", "2h 2c")
        assert better[HandCategory.TWO_PAIR].samples == ("2s 7s", "2s 7d", "2s 7c")
        worse = aces_on_king_high.worse_breakdown
        assert worse[HandCategory.ONE_PAIR].samples[0] == "2s 3s"
        assert worse[HandCategory.HIGH_CARD].samples[0] == "3s 4s"

    def test_sorted_breakdown(self, aces_on_king_high) -> None:
        entries = aces_on_king_high.sorted_breakdown("better")
        assert [e.category for e in entries] == [
            HandCategory.TWO_PAIR, HandCategory.THREE_OF_A_KIND,
        ]
        with pytest.raises(ValueError):
            aces_on_king_high.sorted_breakdown("tie")

    def test_str(self, aces_on_king_high) -> None:
        text = str(aces_on_king_high)
        assert "Ah Ad on Kc 7h 2d" in text
        assert "better: 36" in text


class TestScenarios:
    def test_set_on_flop(self) -> None:
        result = EquityCalculator.analyze(_cards("Ah Ad"), _cards("Ac Kc 2d"))
        assert result.hero_strength.category == HandCategory.THREE_OF_A_KIND
        assert result.recommendation == Recommendation.CALL

    def test_nut_straight_flush(self) -> None:
        result = EquityCalculator.analyze(_cards("Kc Qc"), _cards("Jc Tc 9c"))
        assert result.hero_strength.category == HandCategory.STRAIGHT_FLUSH
        assert result.better == 0
        assert result.better_breakdown == {}
        assert result.recommendation == Recommendation.CALL

    def test_underpair_still_calls(self) -> None:
        result = EquityCalculator.analyze(_cards("2c 2d"), _cards("Ah Kh Qh"))
        assert result.hero_category == "One Pair"
        assert result.tie == 1
        assert result.better < result.worse
        assert result.recommendation == Recommendation.CALL

    def test_weak_high_card_folds(self) -> None:
        result = EquityCalculator.analyze(_cards("7c 2d"), _cards("Ah Kh Qh"))
        assert result.hero_category == "High Card"
        assert result.better > result.worse
        assert result.recommendation == Recommendation.FOLD

    def test_totals_always_1081(self) -> None:
        for hole, flop in [("7c 2d", "Ah Kh Qh"), ("Ts 9s", "8s 7d 2s"), ("Qd Qs", "Qh Qc 5d")]:
            result = EquityCalculator.analyze(_cards(hole), _cards(flop))
            assert result.total == 1081

    def test_breakdown_only_nonzero(self) -> None:
        result = EquityCalculator.analyze(_cards("Qd Qs"), _cards("Qh Qc 5d"))
        for bucket in (result.better_breakdown, result.worse_breakdown):
            assert all(entry.count > 0 for entry in bucket.values())

    def test_sample_limit(self) -> None:
        result = EquityCalculator.analyze(_cards("Ah Ad"), _cards("Kc 7h 2d"), sample_limit=1)
        for entry in result.worse_breakdown.values():
            assert len(entry.samples) == 1

    def test_zero_sample_limit(self) -> None:
        result = EquityCalculator.analyze(_cards("Ah Ad"), _cards("Kc 7h 2d"), sample_limit=0)
        assert result.worse == 1044
        assert all(entry.samples == () for entry in result.worse_breakdown.values())


class TestInputValidation:
    def test_overlap_rejected(self) -> None:
        with pytest.raises(DuplicateCard):
            EquityCalculator.analyze(_cards("Ah Ad"), _cards("Ah 7h 2d"))

    def test_wrong_hero_count(self) -> None:
        with pytest.raises(InputError):
            EquityCalculator.analyze(_cards("Ah"), _cards("Kc 7h 2d"))

    def test_wrong_flop_count(self) -> None:
        with pytest.raises(InputError):
            validate_scenario(_cards("Ah Ad"), _cards("Kc 7h 2d 3s"))

    def test_analyze_text(self) -> None:
        result = analyze_text("ah ad", "kc 7h 2d")
        assert result.better == 36

    def test_analyze_text_malformed(self) -> None:
        with pytest.raises(ParseError):
            analyze_text("Ah", "Kc 7h 2d")


class TestParallelAnalyze:
    def test_matches_sequential(self, aces_on_king_high) -> None:
        result = EquityCalculator.parallel_analyze(
            _cards("Ah Ad"), _cards("Kc 7h 2d"), max_workers=2,
        )
        assert result == aces_on_king_high

    def test_matches_sequential_many_categories(self) -> None:
        hero, flop = _cards("Ts 9s"), _cards("8s 7d 2s")
        sequential = EquityCalculator.analyze(hero, flop)
        parallel = EquityCalculator.parallel_analyze(hero, flop, max_workers=3)
        assert parallel == sequential

    def test_single_worker_falls_back(self) -> None:
        result = EquityCalculator.parallel_analyze(
            _cards("Ah Ad"), _cards("Kc 7h 2d"), max_workers=1,
        )
        assert result.better == 36

    def test_parallel_rejects_overlap(self) -> None:
        with pytest.raises(DuplicateCard):
            EquityCalculator.parallel_analyze(
                _cards("Ah Ad"), _cards("Ad 7h 2d"), max_workers=2,
            )

    @pytest.mark.parametrize("chunks", [1, 2, 3, 4])
    def test_chunk_bounds_cover_deck(self, chunks: int) -> None:
        bounds = _chunk_bounds(47, chunks)
        assert len(bounds) == chunks
        assert bounds[0][0] == 0
        assert bounds[-1][1] == 47
        for (_, stop), (start, _) in zip(bounds, bounds[1:]):
            assert stop == start


class TestStructuredLogging:
    def test_analyze_logs_info(self, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="flop_coach.equity"):
            EquityCalculator.analyze(_cards("Ah Ad"), _cards("Kc 7h 2d"))

        record = caplog.records[-1]
        assert record.levelname == "INFO"
        assert "ms" in record.message
        assert "better=36" in record.message
        assert "Call" in record.message
