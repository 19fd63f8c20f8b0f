"""Texas Hold'em hand evaluation engine.

HandEvaluator.evaluate scans 5-7 cards for the strongest pattern directly
(suit groups, rank counts, straight runs) instead of trying every 5-card
subset. HandEvaluator.evaluate_exhaustive is the subset-by-subset reference
the scan must always agree with.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from itertools import combinations, zip_longest

from flop_coach.utils.card import Card
from flop_coach.utils.constants import HandCategory, Suit
from flop_coach.utils.errors import DuplicateCard, InvalidHandSize

_MIN_CARDS = 5
_MAX_CARDS = 7


def compare_strength(a: HandStrength, b: HandStrength) -> int:
    """Compare two strengths lexicographically; shorter tuples pad with 0.

    Returns a negative number if a is weaker, 0 if equal, positive if stronger.
    """
    for x, y in zip_longest(a.as_tuple(), b.as_tuple(), fillvalue=0):
        if x != y:
            return x - y
    return 0


@dataclass(frozen=True, eq=False)
class HandStrength:
    """Comparable strength of a poker hand: category, then tie-break ranks."""

    category: HandCategory
    tiebreaks: tuple[int, ...]

    @property
    def label(self) -> str:
        return self.category.label

    def as_tuple(self) -> tuple[int, ...]:
        return (int(self.category), *self.tiebreaks)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HandStrength):
            return NotImplemented
        return compare_strength(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, HandStrength):
            return NotImplemented
        return compare_strength(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, HandStrength):
            return NotImplemented
        return compare_strength(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, HandStrength):
            return NotImplemented
        return compare_strength(self, other) >= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandStrength):
            return NotImplemented
        return compare_strength(self, other) == 0

    def __hash__(self) -> int:
        # Trailing zeros compare equal to missing entries
        values = list(self.as_tuple())
        while values and values[-1] == 0:
            values.pop()
        return hash(tuple(values))

    def __str__(self) -> str:
        return f"{self.label} {list(self.tiebreaks)}"


def _straight_high(values: set[int]) -> int:
    """Return the high card of the best 5-card run, or 0 if there is none.

    Ace also plays low for the A-2-3-4-5 wheel.
    """
    ranks = sorted(values)
    if 14 in values:
        ranks.insert(0, 1)
    run = 1
    best = 0
    for prev, cur in zip(ranks, ranks[1:]):
        if cur == prev + 1:
            run += 1
            if run >= 5:
                best = cur
        else:
            run = 1
    return best


def _top(values: list[int], n: int) -> tuple[int, ...]:
    return tuple(sorted(values, reverse=True)[:n])


class HandEvaluator:
    """Evaluates poker hands and determines the best 5-card combination."""

    @staticmethod
    def evaluate(cards: list[Card]) -> HandStrength:
        """Evaluate the best 5-card hand from 5 to 7 cards.

        Args:
            cards: 5 to 7 distinct cards (hole cards + community cards).

        Returns:
            HandStrength of the best hand.

        Raises:
            InvalidHandSize: If fewer than 5 or more than 7 cards are given.
            DuplicateCard: If the same card is given twice.
        """
        HandEvaluator._check_cards(cards)

        by_suit: dict[Suit, list[int]] = {}
        for c in cards:
            by_suit.setdefault(c.suit, []).append(c.value)
        flush_values = next((v for v in by_suit.values() if len(v) >= 5), None)

        if flush_values is not None:
            high = _straight_high(set(flush_values))
            if high:
                return HandStrength(HandCategory.STRAIGHT_FLUSH, (high,))

        # Grouped by count descending, then rank descending
        groups = sorted(
            Counter(c.value for c in cards).items(),
            key=lambda item: (item[1], item[0]),
            reverse=True,
        )
        values = [c.value for c in cards]
        quads = [r for r, n in groups if n == 4]
        trips = [r for r, n in groups if n == 3]
        pairs = [r for r, n in groups if n == 2]

        if quads:
            q = quads[0]
            return HandStrength(
                HandCategory.FOUR_OF_A_KIND,
                (q, *_top([v for v in values if v != q], 1)),
            )

        if len(trips) >= 2 or (trips and pairs):
            pair = trips[1] if len(trips) >= 2 else pairs[0]
            return HandStrength(HandCategory.FULL_HOUSE, (trips[0], pair))

        if flush_values is not None:
            return HandStrength(HandCategory.FLUSH, _top(flush_values, 5))

        high = _straight_high(set(values))
        if high:
            return HandStrength(HandCategory.STRAIGHT, (high,))

        if trips:
            t = trips[0]
            return HandStrength(
                HandCategory.THREE_OF_A_KIND,
                (t, *_top([v for v in values if v != t], 2)),
            )

        if len(pairs) >= 2:
            hi, lo = pairs[0], pairs[1]
            return HandStrength(
                HandCategory.TWO_PAIR,
                (hi, lo, *_top([v for v in values if v not in (hi, lo)], 1)),
            )

        if pairs:
            p = pairs[0]
            return HandStrength(
                HandCategory.ONE_PAIR,
                (p, *_top([v for v in values if v != p], 3)),
            )

        return HandStrength(HandCategory.HIGH_CARD, _top(values, 5))

    @staticmethod
    def evaluate_exhaustive(cards: list[Card]) -> HandStrength:
        """Reference evaluation: score every 5-card subset and keep the best."""
        HandEvaluator._check_cards(cards)
        return max(
            HandEvaluator._evaluate_five(list(combo))
            for combo in combinations(cards, 5)
        )

    @staticmethod
    def _check_cards(cards: list[Card]) -> None:
        if not _MIN_CARDS <= len(cards) <= _MAX_CARDS:
            raise InvalidHandSize(
                f"Need {_MIN_CARDS} to {_MAX_CARDS} cards, got {len(cards)}"
            )
        if len(set(cards)) != len(cards):
            raise DuplicateCard(f"Duplicate cards in hand: {cards}")

    @staticmethod
    def _evaluate_five(cards: list[Card]) -> HandStrength:
        """Evaluate exactly 5 cards."""
        values = sorted((c.value for c in cards), reverse=True)
        is_flush = len({c.suit for c in cards}) == 1
        straight_high = _straight_high(set(values))
        rank_counts = Counter(values)
        counts = sorted(rank_counts.values(), reverse=True)
        # Ranks ordered by group size, then rank
        ordered = [
            r for r, _ in sorted(
                rank_counts.items(), key=lambda item: (item[1], item[0]), reverse=True
            )
        ]

        if is_flush and straight_high:
            return HandStrength(HandCategory.STRAIGHT_FLUSH, (straight_high,))

        if counts == [4, 1]:
            return HandStrength(HandCategory.FOUR_OF_A_KIND, tuple(ordered))

        if counts == [3, 2]:
            return HandStrength(HandCategory.FULL_HOUSE, tuple(ordered))

        if is_flush:
            return HandStrength(HandCategory.FLUSH, tuple(values))

        if straight_high:
            return HandStrength(HandCategory.STRAIGHT, (straight_high,))

        if counts == [3, 1, 1]:
            return HandStrength(HandCategory.THREE_OF_A_KIND, tuple(ordered))

        if counts == [2, 2, 1]:
            return HandStrength(HandCategory.TWO_PAIR, tuple(ordered))

        if counts == [2, 1, 1, 1]:
            return HandStrength(HandCategory.ONE_PAIR, tuple(ordered))

        return HandStrength(HandCategory.HIGH_CARD, tuple(values))
