"""Card and Deck classes for the flop coach."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

from flop_coach.utils.constants import (
    FLOP_CARD_COUNT,
    HERO_CARD_COUNT,
    RANK_VALUES,
    Rank,
    Suit,
)
from flop_coach.utils.errors import DuplicateCard, ParseError


@dataclass(frozen=True)
class Card:
    """Represents a single playing card."""

    rank: Rank
    suit: Suit

    @classmethod
    def from_str(cls, s: str) -> Card:
        """Create a Card from a 2-character string like 'Ah' or 'td'.

        Rank and suit characters are case-insensitive; surrounding
        whitespace is ignored.

        Raises:
            ParseError: If the string is not exactly 2 characters or
                        contains invalid rank/suit characters.
        """
        text = s.strip()
        if len(text) != 2:
            raise ParseError(f"Card string must be 2 characters, got '{s}'")
        try:
            rank = Rank(text[0].upper())
        except ValueError:
            raise ParseError(f"Invalid rank character: '{text[0]}'") from None
        try:
            suit = Suit(text[1].lower())
        except ValueError:
            raise ParseError(f"Invalid suit character: '{text[1]}'") from None
        return cls(rank=rank, suit=suit)

    @property
    def value(self) -> int:
        """Numeric value of the card's rank (2-14)."""
        return RANK_VALUES[self.rank]

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card('{self}')"


def parse_card(text: str) -> Card:
    """Parse a single card token such as 'Ah'."""
    return Card.from_str(text)


def format_card(card: Card) -> str:
    """Canonical text form: upper-case rank char + lower-case suit char."""
    return str(card)


def format_cards(cards: Iterable[Card]) -> str:
    """Space-separated canonical text, e.g. 'Ah Kd'."""
    return " ".join(format_card(c) for c in cards)


def parse_card_set(text: str, expected_count: int) -> list[Card]:
    """Parse whitespace-separated cards, e.g. 'Kc 7h 2d'.

    Raises:
        ParseError: Wrong token count or a malformed token.
        DuplicateCard: The same card appears twice.
    """
    tokens = text.split()
    if len(tokens) != expected_count:
        raise ParseError(
            f"Expected {expected_count} cards, got {len(tokens)} in '{text.strip()}'"
        )
    cards: list[Card] = []
    for token in tokens:
        card = parse_card(token)
        if card in cards:
            raise DuplicateCard(f"Card {card} appears more than once")
        cards.append(card)
    return cards


def build_full_deck() -> tuple[Card, ...]:
    """All 52 cards, rank ascending, suits s/h/d/c within each rank."""
    return tuple(Card(rank=rank, suit=suit) for rank in Rank for suit in Suit)


_FULL_DECK = build_full_deck()


def remove_known(deck: Iterable[Card], known_cards: Iterable[Card]) -> tuple[Card, ...]:
    """Return deck without the known cards, preserving deck order.

    Known cards that are not in the deck are ignored.
    """
    known = set(known_cards)
    return tuple(c for c in deck if c not in known)


def remaining_deck(known_cards: Iterable[Card]) -> tuple[Card, ...]:
    """The undealt cards in full-deck order."""
    return remove_known(_FULL_DECK, known_cards)


class Deck:
    """Shuffled 52-card deck used to deal random training scenarios."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Reset and shuffle the deck."""
        self._cards = list(_FULL_DECK)
        self.shuffle()

    def shuffle(self) -> None:
        """Shuffle the remaining cards in the deck."""
        self._rng.shuffle(self._cards)

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the top of the deck.

        Raises:
            ValueError: If not enough cards remain.
        """
        if n > len(self._cards):
            raise ValueError(
                f"Cannot deal {n} cards, only {len(self._cards)} remaining"
            )
        dealt = self._cards[:n]
        self._cards = self._cards[n:]
        return dealt

    @property
    def remaining(self) -> int:
        """Number of cards remaining in the deck."""
        return len(self._cards)


def random_scenario(rng: random.Random | None = None) -> tuple[list[Card], list[Card]]:
    """Deal a random (hero cards, flop) pair of distinct cards."""
    deck = Deck(rng)
    return deck.deal(HERO_CARD_COUNT), deck.deal(FLOP_CARD_COUNT)
