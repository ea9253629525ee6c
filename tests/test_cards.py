"""Tests for card and deck representation."""

import numpy as np
import pytest

from pokerbot.exceptions import DeckExhausted, InvalidCardSpec
from pokerbot.game.cards import (
    Card, Deck, Rank, Suit, DECK_SIZE, full_deck, parse_cards
)


class TestCard:
    def test_from_string(self):
        card = Card.from_string("As")
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_from_string_ten(self):
        card = Card.from_string("Th")
        assert card.rank == Rank.TEN
        assert card.suit == Suit.HEARTS

    def test_from_string_numeric_ten(self):
        assert Card.from_string("10H") == Card(Rank.TEN, Suit.HEARTS)

    def test_from_string_uppercase_suit(self):
        card = Card.from_string("KD")
        assert card.rank == Rank.KING
        assert card.suit == Suit.DIAMONDS

    def test_str(self):
        card = Card(Rank.ACE, Suit.SPADES)
        assert str(card) == "As"

    def test_from_string_invalid_rank(self):
        with pytest.raises(InvalidCardSpec):
            Card.from_string("Xs")

    def test_from_string_invalid_suit(self):
        with pytest.raises(InvalidCardSpec):
            Card.from_string("Ax")

    def test_invalid_card_is_value_error(self):
        with pytest.raises(ValueError):
            Card.from_string("A")

    def test_equality(self):
        card1 = Card.from_string("As")
        card2 = Card(14, 3)
        assert card1 == card2
        assert hash(card1) == hash(card2)

    def test_to_int_range(self):
        indices = {card.to_int() for card in full_deck()}
        assert indices == set(range(DECK_SIZE))

    def test_from_int_inverts_to_int(self):
        for card in full_deck():
            assert Card.from_int(card.to_int()) == card

    def test_to_int_layout(self):
        assert Card(Rank.TWO, Suit.CLUBS).to_int() == 0
        assert Card(Rank.ACE, Suit.SPADES).to_int() == 51

    def test_from_int_out_of_range(self):
        with pytest.raises(ValueError):
            Card.from_int(52)

    def test_to_treys(self):
        card = Card.from_string("As")
        treys_card = card.to_treys()
        assert isinstance(treys_card, int)


class TestParseCards:
    def test_separated(self):
        assert parse_cards("2C 7H QS") == [
            Card(Rank.TWO, Suit.CLUBS),
            Card(Rank.SEVEN, Suit.HEARTS),
            Card(Rank.QUEEN, Suit.SPADES),
        ]

    def test_packed(self):
        assert parse_cards("AsKh") == parse_cards("As Kh")

    def test_commas_and_ten(self):
        assert parse_cards("10h,Jh") == [
            Card(Rank.TEN, Suit.HEARTS),
            Card(Rank.JACK, Suit.HEARTS),
        ]

    def test_empty(self):
        assert parse_cards("") == []

    def test_odd_length_run(self):
        with pytest.raises(InvalidCardSpec):
            parse_cards("AsK")


class TestDeck:
    def test_full_deck(self):
        deck = Deck()
        assert len(deck) == 52
        assert len(set(deck.cards)) == 52

    def test_reset(self):
        deck = Deck()
        deck.deal(20)
        assert len(deck) == 32

        deck.reset()
        assert len(deck) == 52
        assert set(deck.cards) == set(full_deck())

    def test_remove(self):
        deck = Deck()
        card = Card.from_string("As")
        deck.remove(card)
        assert len(deck) == 51
        assert card not in deck

    def test_remove_absent_is_noop(self):
        deck = Deck()
        card = Card.from_string("As")
        deck.remove(card)
        deck.remove(card)
        assert len(deck) == 51

    def test_without(self):
        known = parse_cards("As Ah Kd")
        deck = Deck.without(known)
        assert len(deck) == 49
        assert not any(card in deck for card in known)

    def test_draw_last_card(self):
        deck = Deck()
        last = Card.from_string("7c")
        deck.cards = [last]

        assert deck.draw() == last
        assert len(deck) == 0

    def test_draw_empty(self):
        deck = Deck()
        deck.cards = []
        with pytest.raises(DeckExhausted):
            deck.draw()

    def test_deal(self):
        deck = Deck()
        cards = deck.deal(5)
        assert len(cards) == 5
        assert len(deck) == 47
        assert not any(card in deck for card in cards)

    def test_deal_too_many(self):
        deck = Deck()
        with pytest.raises(DeckExhausted):
            deck.deal(53)

    def test_shuffle_keeps_cards(self, rng):
        deck = Deck(rng)
        deck.shuffle()
        assert len(deck) == 52
        assert set(deck.cards) == set(full_deck())

    def test_shuffle(self):
        deck1 = Deck()
        deck2 = Deck(np.random.default_rng(7))
        deck2.shuffle()

        # Could theoretically fail but the probability is astronomically low
        same_order = all(
            c1 == c2 for c1, c2 in zip(deck1.cards[:10], deck2.cards[:10])
        )
        assert not same_order

    def test_seeded_shuffle_reproducible(self):
        deck1 = Deck(np.random.default_rng(42))
        deck2 = Deck(np.random.default_rng(42))
        deck1.shuffle()
        deck2.shuffle()
        assert deck1.cards == deck2.cards
