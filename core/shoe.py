"""Multi-deck shoe: shuffling, dealing, and penetration tracking.

A :class:`Shoe` is an immutable value. Dealing and reshuffling return a new
shoe and leave the one passed in untouched, so a caller may keep any earlier
shoe around (for replays or tests) and it will still read the same.
"""

from dataclasses import dataclass, field
from random import Random
from typing import Iterator, NamedTuple, Sequence, TypeVar

from core.cards import Card, create_deck
from core.errors import InvalidConfigurationError

T = TypeVar("T")

CARDS_PER_DECK = 52
VALID_DECK_COUNTS = (1, 2, 3, 4, 6, 8)


@dataclass(frozen=True)
class ShoeConfig:
    """Shoe configuration, validated on construction."""

    num_decks: int = 6
    penetration: float = 0.75

    def __post_init__(self) -> None:
        if self.num_decks not in VALID_DECK_COUNTS:
            raise InvalidConfigurationError(
                f"Deck count must be one of {VALID_DECK_COUNTS}, got {self.num_decks}"
            )
        if not 0.0 < self.penetration <= 1.0:
            raise InvalidConfigurationError(
                f"Penetration must be in (0, 1], got {self.penetration}"
            )

    @property
    def total_cards(self) -> int:
        """Return the number of cards in a full shoe."""
        return self.num_decks * CARDS_PER_DECK

    @property
    def cut_card_position(self) -> int:
        """Return how many cards may be dealt before a reshuffle is due."""
        return int(self.total_cards * self.penetration)


DEFAULT_SHOE_CONFIG = ShoeConfig()


@dataclass(frozen=True)
class Shoe:
    """A multi-deck shoe for blackjack."""

    undealt: tuple[Card, ...]
    dealt: tuple[Card, ...] = ()
    config: ShoeConfig = field(default=DEFAULT_SHOE_CONFIG)
    cut_card_position: int = 0

    @property
    def num_decks(self) -> int:
        """Return the number of decks in the shoe."""
        return self.config.num_decks

    @property
    def penetration(self) -> float:
        """Return the configured penetration."""
        return self.config.penetration

    @property
    def total_cards(self) -> int:
        """Return the total number of cards in a full shoe."""
        return self.config.total_cards

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards not yet dealt."""
        return len(self.undealt)

    @property
    def cards_dealt(self) -> int:
        """Return the number of cards dealt."""
        return len(self.dealt)

    @property
    def decks_remaining(self) -> float:
        """Return the number of decks remaining (may be fractional)."""
        return len(self.undealt) / CARDS_PER_DECK

    @property
    def needs_shuffle(self) -> bool:
        """
        Check if the cut card has been reached.

        Advisory only: dealing continues past the cut card until the shoe
        is exhausted.
        """
        return self.cards_dealt >= self.cut_card_position

    @property
    def is_exhausted(self) -> bool:
        """Check if there are no cards left to deal."""
        return not self.undealt

    def __len__(self) -> int:
        return len(self.undealt)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.undealt)


class DealResult(NamedTuple):
    """A dealt card together with the shoe it left behind."""

    card: Card
    shoe: Shoe


def fisher_yates_shuffle(items: Sequence[T], rng: Random | None = None) -> list[T]:
    """
    Return a shuffled copy of ``items``.

    Walks from the last index down to 1, swapping each position with a
    uniformly chosen index in ``[0, i]``.
    """
    rng = rng or Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def create_shoe(config: ShoeConfig | None = None, rng: Random | None = None) -> Shoe:
    """
    Build and shuffle a fresh shoe.

    Args:
        config: Deck count and penetration (6 decks, 75% by default)
        rng: Random number generator for shuffling

    Returns:
        A shuffled shoe with nothing dealt
    """
    config = config or DEFAULT_SHOE_CONFIG
    cards: list[Card] = []
    for deck_index in range(config.num_decks):
        cards.extend(create_deck(deck_index))

    return Shoe(
        undealt=tuple(fisher_yates_shuffle(cards, rng)),
        dealt=(),
        config=config,
        cut_card_position=config.cut_card_position,
    )


def deal_card(shoe: Shoe) -> DealResult | None:
    """
    Deal the top card of the shoe face up.

    Returns:
        The dealt card and the updated shoe, or None if the shoe is exhausted
    """
    if shoe.is_exhausted:
        return None

    card = shoe.undealt[0].turned(face_up=True)
    updated = Shoe(
        undealt=shoe.undealt[1:],
        dealt=shoe.dealt + (card,),
        config=shoe.config,
        cut_card_position=shoe.cut_card_position,
    )
    return DealResult(card, updated)


def get_decks_remaining(shoe: Shoe) -> float:
    """Return decks remaining, the true-count divisor."""
    return shoe.decks_remaining


def reshuffle_shoe(shoe: Shoe, rng: Random | None = None) -> Shoe:
    """Gather every card back into the shoe, face down, and shuffle."""
    all_cards = [card.turned(face_up=False) for card in shoe.undealt + shoe.dealt]

    return Shoe(
        undealt=tuple(fisher_yates_shuffle(all_cards, rng)),
        dealt=(),
        config=shoe.config,
        cut_card_position=shoe.config.cut_card_position,
    )
