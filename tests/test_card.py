"""Tests for card parsing, formatting, and the deck."""

import random

import pytest

from flop_coach.utils.card import (
    Card,
    Deck,
    build_full_deck,
    format_cards,
    parse_card,
    parse_card_set,
    random_scenario,
    remaining_deck,
    remove_known,
)
from flop_coach.utils.constants import Rank, Suit
from flop_coach.utils.errors import DuplicateCard, InputError, ParseError


class TestCardParsing:
    def test_from_str(self) -> None:
        card = Card.from_str("Ah")
        assert card.rank == Rank.ACE
        assert card.suit == Suit.HEARTS
        assert card.value == 14

    def test_case_insensitive(self) -> None:
        assert parse_card("td") == Card(Rank.TEN, Suit.DIAMONDS)
        assert parse_card("KS") == Card(Rank.KING, Suit.SPADES)

    def test_whitespace_ignored(self) -> None:
        assert parse_card("  7c ") == Card(Rank.SEVEN, Suit.CLUBS)

    def test_canonical_text(self) -> None:
        assert str(parse_card("qh")) == "Qh"
        assert repr(parse_card("2s")) == "Card('2s')"

    def test_every_card_round_trips(self) -> None:
        for card in build_full_deck():
            assert parse_card(str(card)) == card

    @pytest.mark.parametrize("text", ["", "A", "Ahh", "1h", "Ax", "10h"])
    def test_malformed_raises(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse_card(text)

    def test_parse_error_is_input_error(self) -> None:
        with pytest.raises(InputError):
            parse_card("Zz")


class TestCardSet:
    def test_parse_flop(self) -> None:
        flop = parse_card_set("Kc 7h 2d", 3)
        assert format_cards(flop) == "Kc 7h 2d"

    def test_extra_spaces(self) -> None:
        assert len(parse_card_set("  Ah   Ad ", 2)) == 2

    def test_wrong_count(self) -> None:
        with pytest.raises(ParseError, match="Expected 2 cards"):
            parse_card_set("Ah Ad Kc", 2)

    def test_duplicate(self) -> None:
        with pytest.raises(DuplicateCard):
            parse_card_set("Ah ah", 2)


class TestDeckOrder:
    def test_full_deck_size_and_order(self) -> None:
        deck = build_full_deck()
        assert len(deck) == 52
        assert len(set(deck)) == 52
        assert format_cards(deck[:5]) == "2s 2h 2d 2c 3s"
        assert str(deck[-1]) == "Ac"

    def test_remaining_deck(self) -> None:
        known = parse_card_set("Ah Ad Kc 7h 2d", 5)
        deck = remaining_deck(known)
        assert len(deck) == 47
        assert not set(known) & set(deck)
        assert format_cards(deck[:3]) == "2s 2h 2c"

    def test_remove_known_ignores_absent_cards(self) -> None:
        deck = remaining_deck(parse_card_set("Ah Ad", 2))
        assert remove_known(deck, parse_card_set("Ah", 1)) == deck


class TestDeck:
    def test_deal_reduces_remaining(self) -> None:
        deck = Deck(random.Random(1))
        cards = deck.deal(5)
        assert len(cards) == 5
        assert deck.remaining == 47

    def test_deal_too_many(self) -> None:
        deck = Deck(random.Random(1))
        deck.deal(50)
        with pytest.raises(ValueError, match="only 2 remaining"):
            deck.deal(3)

    def test_reset(self) -> None:
        deck = Deck(random.Random(1))
        deck.deal(10)
        deck.reset()
        assert deck.remaining == 52

    def test_random_scenario_distinct(self) -> None:
        rng = random.Random(42)
        for _ in range(20):
            hero, flop = random_scenario(rng)
            assert len(hero) == 2
            assert len(flop) == 3
            assert len(set(hero + flop)) == 5

    def test_random_scenario_seeded(self) -> None:
        assert random_scenario(random.Random(7)) == random_scenario(random.Random(7))
