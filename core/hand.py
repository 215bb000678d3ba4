"""Hand evaluation for blackjack."""

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Iterable, Iterator

from core.cards import Card, Rank

BLACKJACK = 21
DEFAULT_STAND_ON = 17


@dataclass(frozen=True)
class HandValue:
    """Totals and status of a hand. Derived from the cards, never stored."""

    hard: int = 0
    soft: int = 0
    best: int = 0
    is_soft: bool = False
    is_blackjack: bool = False
    is_bust: bool = False


@dataclass(frozen=True)
class Hand:
    """
    A blackjack hand.

    Hands are values: ``add_card`` returns a new hand and leaves this one as
    it was.
    """

    cards: tuple[Card, ...] = ()
    bet: Decimal | None = None
    is_doubled_down: bool = False
    is_split: bool = False
    is_standing: bool = False

    def add_card(self, card: Card) -> "Hand":
        """Return a new hand with ``card`` appended."""
        return replace(self, cards=self.cards + (card,))

    @property
    def value(self) -> HandValue:
        """Evaluate the hand."""
        return evaluate_hand(self.cards)

    @property
    def num_cards(self) -> int:
        """Return the number of cards in the hand."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        return f"{cards_str} ({format_hand_value(self.value)})"


def evaluate_hand(cards: Iterable[Card]) -> HandValue:
    """
    Calculate the value of a blackjack hand.

    Aces start at 1. At most one ace can be promoted to 11, since two aces
    at 11 already make 22, so the soft total is the hard total plus 10 when
    that does not bust.
    """
    cards = tuple(cards)
    if not cards:
        return HandValue()

    hard = 0
    aces = 0
    for card in cards:
        hard += card.value
        if card.is_ace:
            aces += 1

    soft = hard
    soft_raw = False
    if aces > 0 and hard + 10 <= BLACKJACK:
        soft = hard + 10
        soft_raw = True

    best = soft if soft <= BLACKJACK else hard
    is_bust = best > BLACKJACK

    return HandValue(
        hard=hard,
        soft=soft,
        best=best,
        is_soft=soft_raw and not is_bust,
        is_blackjack=len(cards) == 2 and best == BLACKJACK,
        is_bust=is_bust,
    )


def format_hand_value(value: HandValue) -> str:
    """
    Format a hand value for display.

    Returns "Blackjack!", "Bust (<hard>)", "<hard>/<soft>" for a soft hand,
    or the best total.
    """
    if value.is_blackjack:
        return "Blackjack!"
    if value.is_bust:
        return f"Bust ({value.hard})"
    if value.is_soft and value.soft != value.hard:
        return f"{value.hard}/{value.soft}"
    return str(value.best)


def should_stop_dealing(value: HandValue, stand_on: int = DEFAULT_STAND_ON) -> bool:
    """Check if a hand has busted or reached the stand-on total."""
    return value.is_bust or value.best >= stand_on


def create_hand(bet: Decimal | None = None) -> Hand:
    """Create an empty hand."""
    return Hand(bet=bet)


def add_card_to_hand(hand: Hand, card: Card) -> Hand:
    """Return a new hand with ``card`` appended."""
    return hand.add_card(card)


def can_split(hand: Hand) -> bool:
    """Check if the hand is exactly two cards of the same rank."""
    if len(hand.cards) != 2:
        return False
    return hand.cards[0].rank == hand.cards[1].rank


def can_double_down(hand: Hand) -> bool:
    """Check if the hand can double down (first two cards only)."""
    return len(hand.cards) == 2 and not hand.is_doubled_down


def dealer_shows_ace(up_card: Card) -> bool:
    """Check if the dealer's up card is an Ace (insurance is offered)."""
    return up_card.rank == Rank.ACE
