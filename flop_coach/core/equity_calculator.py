"""Exhaustive flop equity enumerator.

Compares the hero's current hand against every two-card holding an
opponent could have from the 47 unseen cards (C(47, 2) = 1081 combos)
and reports how many are ahead, behind, or tied, broken down by the
opponent's hand category.

Includes a parallel variant (parallel_analyze) that splits the
enumeration across worker processes and merges the partial results
into exactly the same EquityResult as the sequential version.
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Mapping, Sequence
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field

import numpy as np

from flop_coach.core.hand_evaluator import HandEvaluator, HandStrength, compare_strength
from flop_coach.strategy.decision_rule import decide
from flop_coach.utils.card import Card, format_cards, parse_card_set, remaining_deck
from flop_coach.utils.constants import (
    DEFAULT_SAMPLE_LIMIT,
    FLOP_CARD_COUNT,
    HERO_CARD_COUNT,
    HandCategory,
    Rank,
    Recommendation,
    Suit,
)
from flop_coach.utils.errors import DuplicateCard, InputError

logger = logging.getLogger("flop_coach.equity")

# Defaults to CPU count minus 1, between 1 and 4 workers.
_MAX_WORKERS = max(1, min(4, (os.cpu_count() or 2) - 1))

_NUM_CATEGORIES = len(HandCategory)

# (better_counts, worse_counts, tie, better_samples, worse_samples)
_Partial = tuple[np.ndarray, np.ndarray, int, list[list[str]], list[list[str]]]


@dataclass(frozen=True)
class CategoryBreakdown:
    """Opponent holdings of one category within the better or worse bucket."""

    category: HandCategory
    count: int
    samples: tuple[str, ...] = ()

    @property
    def label(self) -> str:
        return self.category.label


@dataclass(frozen=True)
class EquityResult:
    """Result of one hero-vs-every-holding flop analysis."""

    hero_cards: tuple[Card, ...]
    flop_cards: tuple[Card, ...]
    hero_strength: HandStrength
    better: int  # Opponent combos currently beating the hero
    worse: int  # Opponent combos the hero currently beats
    tie: int
    better_breakdown: Mapping[HandCategory, CategoryBreakdown] = field(default_factory=dict)
    worse_breakdown: Mapping[HandCategory, CategoryBreakdown] = field(default_factory=dict)
    recommendation: Recommendation = Recommendation.CALL

    @property
    def hero_category(self) -> str:
        """Label of the hero's current hand category, e.g. 'One Pair'."""
        return self.hero_strength.label

    @property
    def total(self) -> int:
        return self.better + self.worse + self.tie

    def sorted_breakdown(self, bucket: str) -> list[CategoryBreakdown]:
        """Breakdown entries of 'better' or 'worse', most frequent first."""
        if bucket == "better":
            entries = self.better_breakdown.values()
        elif bucket == "worse":
            entries = self.worse_breakdown.values()
        else:
            raise ValueError(f"Unknown bucket: {bucket!r}")
        return sorted(entries, key=lambda b: -b.count)

    def __str__(self) -> str:
        return (
            f"{format_cards(self.hero_cards)} on {format_cards(self.flop_cards)}: "
            f"{self.hero_category} (better: {self.better}, worse: {self.worse}, "
            f"tie: {self.tie}) -> {self.recommendation}"
        )


def validate_scenario(hero_cards: Sequence[Card], flop_cards: Sequence[Card]) -> None:
    """Check hero/flop sizes and that all five cards are distinct.

    Raises:
        InputError: Wrong number of hero or flop cards.
        DuplicateCard: A card repeats within or across hero and flop.
    """
    if len(hero_cards) != HERO_CARD_COUNT:
        raise InputError(f"Need exactly {HERO_CARD_COUNT} hero cards, got {len(hero_cards)}")
    if len(flop_cards) != FLOP_CARD_COUNT:
        raise InputError(f"Need exactly {FLOP_CARD_COUNT} flop cards, got {len(flop_cards)}")
    seen: set[Card] = set()
    for card in [*hero_cards, *flop_cards]:
        if card in seen:
            raise DuplicateCard(f"Card {card} appears more than once")
        seen.add(card)


def _enumerate_range(
    hero_strength: HandStrength,
    flop: list[Card],
    deck: Sequence[Card],
    start: int,
    stop: int,
    sample_limit: int,
) -> _Partial:
    """Classify every pair (i, j) with start <= i < stop and i < j."""
    better_counts = np.zeros(_NUM_CATEGORIES, dtype=np.int64)
    worse_counts = np.zeros(_NUM_CATEGORIES, dtype=np.int64)
    better_samples: list[list[str]] = [[] for _ in range(_NUM_CATEGORIES)]
    worse_samples: list[list[str]] = [[] for _ in range(_NUM_CATEGORIES)]
    tie = 0

    for i in range(start, stop):
        for j in range(i + 1, len(deck)):
            opp = [deck[i], deck[j]]
            opp_strength = HandEvaluator.evaluate(opp + flop)
            cmp = compare_strength(opp_strength, hero_strength)
            if cmp == 0:
                tie += 1
                continue
            if cmp > 0:
                counts, samples = better_counts, better_samples
            else:
                counts, samples = worse_counts, worse_samples
            cat = int(opp_strength.category)
            counts[cat] += 1
            if len(samples[cat]) < sample_limit:
                samples[cat].append(format_cards(opp))

    return better_counts, worse_counts, tie, better_samples, worse_samples


def _enumerate_chunk(
    hero_cards: list[tuple[str, str]],
    flop_cards: list[tuple[str, str]],
    start: int,
    stop: int,
    sample_limit: int,
) -> _Partial:
    """Worker function for parallel enumeration.

    All arguments are serializable tuples (not Card objects) to work
    with ProcessPoolExecutor pickling.
    """
    hero = [Card(rank=Rank(r), suit=Suit(s)) for r, s in hero_cards]
    flop = [Card(rank=Rank(r), suit=Suit(s)) for r, s in flop_cards]
    deck = remaining_deck(hero + flop)
    hero_strength = HandEvaluator.evaluate(hero + flop)
    return _enumerate_range(hero_strength, flop, deck, start, stop, sample_limit)


def _breakdown(
    counts: np.ndarray, samples: list[list[str]]
) -> dict[HandCategory, CategoryBreakdown]:
    return {
        cat: CategoryBreakdown(cat, int(counts[cat]), tuple(samples[cat]))
        for cat in HandCategory
        if counts[cat] > 0
    }


def _merge(partials: list[_Partial], sample_limit: int) -> _Partial:
    """Merge chunk results in enumeration order."""
    better_counts = np.zeros(_NUM_CATEGORIES, dtype=np.int64)
    worse_counts = np.zeros(_NUM_CATEGORIES, dtype=np.int64)
    better_samples: list[list[str]] = [[] for _ in range(_NUM_CATEGORIES)]
    worse_samples: list[list[str]] = [[] for _ in range(_NUM_CATEGORIES)]
    tie = 0
    for b_counts, w_counts, t, b_samples, w_samples in partials:
        better_counts += b_counts
        worse_counts += w_counts
        tie += t
        for cat in range(_NUM_CATEGORIES):
            better_samples[cat].extend(b_samples[cat])
            del better_samples[cat][sample_limit:]
            worse_samples[cat].extend(w_samples[cat])
            del worse_samples[cat][sample_limit:]
    return better_counts, worse_counts, tie, better_samples, worse_samples


def _build_result(
    hero_cards: Sequence[Card],
    flop_cards: Sequence[Card],
    hero_strength: HandStrength,
    partial: _Partial,
    elapsed_ms: float,
) -> EquityResult:
    better_counts, worse_counts, tie, better_samples, worse_samples = partial
    better = int(better_counts.sum())
    worse = int(worse_counts.sum())
    result = EquityResult(
        hero_cards=tuple(hero_cards),
        flop_cards=tuple(flop_cards),
        hero_strength=hero_strength,
        better=better,
        worse=worse,
        tie=tie,
        better_breakdown=_breakdown(better_counts, better_samples),
        worse_breakdown=_breakdown(worse_counts, worse_samples),
        recommendation=decide(better, worse),
    )
    logger.info(
        "%s on %s: %s → %s (better=%d, worse=%d, tie=%d, %.1fms)",
        format_cards(hero_cards),
        format_cards(flop_cards),
        result.hero_category,
        result.recommendation,
        better,
        worse,
        tie,
        elapsed_ms,
    )
    return result


class EquityCalculator:
    """Exhaustive hero-vs-any-two-cards flop enumerator."""

    @staticmethod
    def analyze(
        hero_cards: Sequence[Card],
        flop_cards: Sequence[Card],
        sample_limit: int = DEFAULT_SAMPLE_LIMIT,
    ) -> EquityResult:
        """Compare the hero's hand against every possible opponent holding.

        Args:
            hero_cards: Hero's 2 hole cards.
            flop_cards: The 3 flop cards, disjoint from hero_cards.
            sample_limit: Example holdings kept per breakdown category.

        Returns:
            EquityResult with counts, breakdowns and the recommendation.

        Raises:
            InputError: If the cards are the wrong count, repeat, or overlap.
        """
        t_start = time.perf_counter()
        validate_scenario(hero_cards, flop_cards)

        flop = list(flop_cards)
        deck = remaining_deck([*hero_cards, *flop])
        hero_strength = HandEvaluator.evaluate([*hero_cards, *flop])
        logger.debug(
            "Hero %s, enumerating %d unseen cards", hero_strength, len(deck),
        )

        partial = _enumerate_range(
            hero_strength, flop, deck, 0, len(deck), sample_limit,
        )
        elapsed_ms = (time.perf_counter() - t_start) * 1000
        return _build_result(hero_cards, flop_cards, hero_strength, partial, elapsed_ms)

    @staticmethod
    def parallel_analyze(
        hero_cards: Sequence[Card],
        flop_cards: Sequence[Card],
        max_workers: int | None = None,
        sample_limit: int = DEFAULT_SAMPLE_LIMIT,
    ) -> EquityResult:
        """Same as analyze(), with the enumeration split across processes.

        The first-card index range is cut into contiguous chunks of
        roughly equal pair counts; chunks are merged in order so counts
        and samples match analyze() exactly.

        Args:
            hero_cards: Hero's 2 hole cards.
            flop_cards: The 3 flop cards, disjoint from hero_cards.
            max_workers: Max worker processes (defaults to _MAX_WORKERS).
            sample_limit: Example holdings kept per breakdown category.
        """
        workers = max_workers or _MAX_WORKERS
        if workers <= 1:
            return EquityCalculator.analyze(hero_cards, flop_cards, sample_limit)

        t_start = time.perf_counter()
        validate_scenario(hero_cards, flop_cards)

        deck = remaining_deck([*hero_cards, *flop_cards])
        hero_strength = HandEvaluator.evaluate([*hero_cards, *flop_cards])
        bounds = _chunk_bounds(len(deck), workers)
        logger.debug("Parallel enumeration: %d workers, chunks %s", workers, bounds)

        # Serialize to tuples for pickling
        hero_t = [(c.rank.value, c.suit.value) for c in hero_cards]
        flop_t = [(c.rank.value, c.suit.value) for c in flop_cards]

        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(
                    _enumerate_chunk, hero_t, flop_t, start, stop, sample_limit,
                )
                for start, stop in bounds
            ]
            partials = [f.result() for f in futures]

        elapsed_ms = (time.perf_counter() - t_start) * 1000
        return _build_result(
            hero_cards, flop_cards, hero_strength,
            _merge(partials, sample_limit), elapsed_ms,
        )


def _chunk_bounds(n: int, chunks: int) -> list[tuple[int, int]]:
    """Split first indices 0..n-1 into contiguous ranges of similar pair counts.

    Index i pairs with n - 1 - i later cards, so early chunks are narrower.
    """
    total = n * (n - 1) // 2
    target = total / chunks
    bounds: list[tuple[int, int]] = []
    start = 0
    acc = 0
    for i in range(n):
        acc += n - 1 - i
        if acc >= target * (len(bounds) + 1) and len(bounds) < chunks - 1:
            bounds.append((start, i + 1))
            start = i + 1
    bounds.append((start, n))
    return bounds


def analyze_text(
    hole_text: str,
    flop_text: str,
    sample_limit: int = DEFAULT_SAMPLE_LIMIT,
) -> EquityResult:
    """Parse 'Ah Ad' / 'Kc 7h 2d' style text and run analyze()."""
    hero = parse_card_set(hole_text, HERO_CARD_COUNT)
    flop = parse_card_set(flop_text, FLOP_CARD_COUNT)
    return EquityCalculator.analyze(hero, flop, sample_limit)
