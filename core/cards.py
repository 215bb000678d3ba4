"""Card, Rank, and Suit - immutable card representations."""

from dataclasses import dataclass, field, replace
from enum import Enum


class Suit(Enum):
    """Card suits."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    def __str__(self) -> str:
        symbols = {
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks, in deck order."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    def __str__(self) -> str:
        return self.value

    @property
    def base_value(self) -> int:
        """Return the blackjack base value (Ace = 1, face cards = 10)."""
        if self == Rank.ACE:
            return 1
        if self.value.isdigit():
            return int(self.value)
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def is_ten_value(self) -> bool:
        """Check if this rank has a value of 10."""
        return self.base_value == 10


_RANK_ALIASES = {rank.value: rank for rank in Rank}
_RANK_ALIASES["T"] = Rank.TEN

_SUIT_ALIASES = {
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
}


@dataclass(frozen=True, slots=True)
class Card:
    """
    Immutable playing card.

    ``id`` identifies one physical card within a shoe and is what a renderer
    keys on. ``face_up`` is excluded from equality, so a dealt (face-up) copy
    still equals the card it was made from.
    """

    rank: Rank
    suit: Suit
    id: str = ""
    face_up: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if not self.id:
            object.__setattr__(self, "id", f"{self.suit.value}-{self.rank.value}")

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name}, id={self.id!r})"

    @property
    def value(self) -> int:
        """Return the blackjack base value."""
        return self.rank.base_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def is_ten_value(self) -> bool:
        """Check if this card has a value of 10."""
        return self.rank.is_ten_value

    def turned(self, face_up: bool = True) -> "Card":
        """Return a copy of this card with the given orientation."""
        if self.face_up == face_up:
            return self
        return replace(self, face_up=face_up)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh', '10D'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_ALIASES:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_ALIASES:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_ALIASES[rank_str], _SUIT_ALIASES[suit_str])


def create_deck(deck_index: int = 0) -> list[Card]:
    """
    Create one ordered 52-card deck, face down.

    Card ids carry the deck index so they stay unique across a multi-deck shoe.
    """
    return [
        Card(rank, suit, id=f"{deck_index}-{suit.value}-{rank.value}")
        for suit in Suit
        for rank in Rank
    ]
