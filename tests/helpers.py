"""Shared builders and hypothesis strategies for the test suite."""

from random import Random

from hypothesis import strategies as st

from core.cards import Card, Rank, Suit
from core.hand import Hand
from core.shoe import Shoe, ShoeConfig, create_shoe


def make_hand(*codes: str) -> Hand:
    """Build a hand from card strings like 'AS', '10H'."""
    hand = Hand()
    for code in codes:
        hand = hand.add_card(Card.from_string(code))
    return hand


def make_cards(*codes: str) -> list[Card]:
    """Build a list of cards from card strings."""
    return [Card.from_string(code) for code in codes]


def stacked_shoe(*codes: str, num_decks: int = 1) -> Shoe:
    """A shoe whose top cards are ``codes`` in order, the rest shuffled below."""
    shoe = create_shoe(ShoeConfig(num_decks=num_decks), Random(0))
    rest = list(shoe.undealt)
    top = []
    for wanted in make_cards(*codes):
        match = next(c for c in rest if c.rank == wanted.rank and c.suit == wanted.suit)
        rest.remove(match)
        top.append(match)
    return Shoe(
        undealt=tuple(top + rest),
        dealt=(),
        config=shoe.config,
        cut_card_position=shoe.cut_card_position,
    )


@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw, min_cards=0, max_cards=6):
    """Generate a random hand."""
    cards = draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
    hand = Hand()
    for card in cards:
        hand = hand.add_card(card)
    return hand
