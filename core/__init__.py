"""Core count-trainer engine - 100% UI-agnostic."""

from core.cards import Card, Rank, Suit, create_deck
from core.errors import InvalidConfigurationError
from core.hand import (
    Hand,
    HandValue,
    add_card_to_hand,
    can_double_down,
    can_split,
    create_hand,
    dealer_shows_ace,
    evaluate_hand,
    format_hand_value,
    should_stop_dealing,
)
from core.shoe import (
    DealResult,
    Shoe,
    ShoeConfig,
    create_shoe,
    deal_card,
    get_decks_remaining,
    reshuffle_shoe,
)

__all__ = [
    "Card",
    "DealResult",
    "Hand",
    "HandValue",
    "InvalidConfigurationError",
    "Rank",
    "Shoe",
    "ShoeConfig",
    "Suit",
    "add_card_to_hand",
    "can_double_down",
    "can_split",
    "create_deck",
    "create_hand",
    "create_shoe",
    "deal_card",
    "dealer_shows_ace",
    "evaluate_hand",
    "format_hand_value",
    "get_decks_remaining",
    "reshuffle_shoe",
    "should_stop_dealing",
]
