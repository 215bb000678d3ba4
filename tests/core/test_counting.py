"""Tests for card counting systems."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from core.cards import Card, Rank, Suit, create_deck
from core.counting import (
    COUNTING_SYSTEMS,
    CountingSystem,
    CountOverlay,
    Difficulty,
    HiLoSystem,
    available_systems,
    calculate_running_count,
    calculate_true_count,
    get_count_overlay,
    get_counting_system,
)
from helpers import card_strategy, make_cards

ALL_SYSTEMS = ["hilo", "zen", "omega2", "wong_halves"]


class TestHiLo:
    """Tests for Hi-Lo counting system."""

    def test_full_deck_sums_to_zero(self, hilo):
        """Verify Hi-Lo is balanced (full deck = 0)."""
        assert hilo.full_deck_sum == 0
        assert hilo.is_balanced

    def test_metadata(self, hilo):
        """Test Hi-Lo is the free beginner system."""
        assert hilo.id == "hi-lo"
        assert hilo.name == "Hi-Lo"
        assert not hilo.is_premium
        assert hilo.difficulty == Difficulty.BEGINNER
        assert hilo.description

    @pytest.mark.parametrize("rank", [Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.SIX])
    def test_low_cards_positive(self, hilo, rank):
        """Test low cards (2-6) are +1."""
        assert hilo.get_count_value(rank) == 1

    @pytest.mark.parametrize("rank", [Rank.SEVEN, Rank.EIGHT, Rank.NINE])
    def test_neutral_cards_zero(self, hilo, rank):
        """Test neutral cards (7-9) are 0."""
        assert hilo.get_count_value(rank) == 0

    @pytest.mark.parametrize(
        "rank", [Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE]
    )
    def test_high_cards_negative(self, hilo, rank):
        """Test high cards (10-A) are -1."""
        assert hilo.get_count_value(rank) == -1

    def test_count_value_of_card(self, hilo):
        """Test counting a card uses its rank."""
        assert hilo.count_value(Card(Rank.FIVE, Suit.CLUBS)) == 1


class TestZen:
    """Tests for the Zen Count."""

    def test_balanced(self, zen):
        """Verify Zen is balanced."""
        assert zen.full_deck_sum == 0
        assert zen.is_balanced

    def test_tags_ace(self, zen):
        """Test the ace is -1 and tens are -2."""
        assert zen.get_count_value(Rank.ACE) == -1
        assert zen.get_count_value(Rank.KING) == -2
        assert zen.get_count_value(Rank.FIVE) == 2


class TestOmega2:
    """Tests for Omega II counting system."""

    def test_full_deck_sums_to_zero(self, omega2):
        """Verify Omega II is balanced (full deck = 0)."""
        assert omega2.full_deck_sum == 0

    def test_multi_level_values(self, omega2):
        """Test multi-level tag values."""
        for rank in (Rank.FOUR, Rank.FIVE, Rank.SIX):
            assert omega2.get_count_value(rank) == 2
        for rank in (Rank.TWO, Rank.THREE, Rank.SEVEN):
            assert omega2.get_count_value(rank) == 1
        for rank in (Rank.EIGHT, Rank.ACE):
            assert omega2.get_count_value(rank) == 0
        assert omega2.get_count_value(Rank.NINE) == -1
        for rank in (Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING):
            assert omega2.get_count_value(rank) == -2


class TestWongHalves:
    """Tests for Wong Halves counting system."""

    def test_full_deck_sums_to_zero(self, wong_halves):
        """Verify Wong Halves is balanced (full deck = 0)."""
        assert wong_halves.full_deck_sum == 0

    def test_doubled_values(self, wong_halves):
        """Test the whole-number doubled tags."""
        assert wong_halves.get_count_value(Rank.TWO) == 1
        assert wong_halves.get_count_value(Rank.FIVE) == 3
        assert wong_halves.get_count_value(Rank.NINE) == -1
        assert wong_halves.get_count_value(Rank.ACE) == -2


class TestCountingSystemCommon:
    """Common tests for all counting systems."""

    @pytest.mark.parametrize("system_fixture", ALL_SYSTEMS)
    def test_count_full_deck(self, system_fixture, request):
        """Test counting a full deck gives the full-deck sum."""
        system = request.getfixturevalue(system_fixture)
        assert calculate_running_count(create_deck(), system) == system.full_deck_sum

    @pytest.mark.parametrize("system_fixture", ALL_SYSTEMS)
    def test_every_rank_tagged(self, system_fixture, request):
        """Test each system tags all thirteen ranks with integers."""
        system = request.getfixturevalue(system_fixture)
        assert set(system.tag_values) == set(Rank)
        assert all(isinstance(value, int) for value in system.tag_values.values())

    def test_cannot_instantiate_base(self):
        """Test the abstract base needs its tags filled in."""
        with pytest.raises(TypeError):
            CountingSystem()

    def test_new_system_needs_only_tags(self):
        """Test a new strategy plugs into the count math unchanged."""

        class AcesOnly(CountingSystem):
            id = "aces-only"
            name = "Aces Only"
            tag_values = {rank: (1 if rank == Rank.ACE else 0) for rank in Rank}

        system = AcesOnly()
        cards = make_cards("AS", "AH", "KC")
        assert calculate_running_count(cards, system) == 2
        assert not system.is_balanced


class TestRunningCount:
    """Tests for calculate_running_count."""

    def test_two_seven_king(self, hilo):
        """Test (+1) + (0) + (-1) = 0."""
        assert calculate_running_count(make_cards("2S", "7H", "KC"), hilo) == 0

    def test_empty(self, hilo):
        """Test no cards means a zero count."""
        assert calculate_running_count([], hilo) == 0

    def test_low_cards(self, hilo):
        """Test a run of low cards."""
        assert calculate_running_count(make_cards("2S", "3H", "4C", "5D"), hilo) == 4

    @given(st.lists(card_strategy(), max_size=20), st.randoms())
    def test_order_does_not_matter(self, cards, random):
        """Test the count is the same for any ordering of the cards."""
        shuffled = list(cards)
        random.shuffle(shuffled)
        system = HiLoSystem()
        assert calculate_running_count(cards, system) == calculate_running_count(
            shuffled, system
        )


class TestTrueCount:
    """Tests for calculate_true_count."""

    def test_divides_by_decks(self):
        """Test true count = running count / decks remaining."""
        assert calculate_true_count(4, 2.0) == 2.0
        assert calculate_true_count(4, 4) == 1.0

    def test_rounds_to_one_decimal(self):
        """Test results are rounded to tenths."""
        assert calculate_true_count(1, 3) == 0.3
        assert calculate_true_count(5, 1.5) == 3.3
        assert calculate_true_count(-2, 3) == -0.7

    def test_halves_round_up(self):
        """Test halves round toward positive infinity."""
        assert calculate_true_count(1, 4) == 0.3
        assert calculate_true_count(-1, 4) == -0.2

    def test_zero_decks_falls_back(self):
        """Test no decks remaining returns the running count."""
        assert calculate_true_count(3, 0) == 3

    def test_negative_decks_falls_back(self):
        """Test negative decks remaining returns the running count."""
        assert calculate_true_count(-5, -1) == -5


class TestCountOverlay:
    """Tests for get_count_overlay."""

    def test_signs(self):
        """Test strict sign classification."""
        assert get_count_overlay(0) == CountOverlay.NEUTRAL
        assert get_count_overlay(-1) == CountOverlay.NEGATIVE
        assert get_count_overlay(1) == CountOverlay.POSITIVE

    def test_fractional(self):
        """Test fractional values classify by sign."""
        assert get_count_overlay(0.1) == CountOverlay.POSITIVE
        assert get_count_overlay(-0.1) == CountOverlay.NEGATIVE

    def test_values(self):
        """Test overlay string values used by renderers."""
        assert CountOverlay.POSITIVE.value == "positive"
        assert CountOverlay.NEGATIVE.value == "negative"
        assert CountOverlay.NEUTRAL.value == "neutral"


class TestRegistry:
    """Tests for the counting system registry."""

    def test_hilo_first(self):
        """Test Hi-Lo is the first (default) system."""
        assert next(iter(COUNTING_SYSTEMS)) == "hi-lo"

    def test_lookup(self):
        """Test systems are found by id."""
        assert isinstance(get_counting_system("hi-lo"), HiLoSystem)
        assert get_counting_system("omega-ii").name == "Omega II"

    def test_unknown_raises(self):
        """Test unknown ids raise KeyError."""
        with pytest.raises(KeyError, match="Unknown counting system"):
            get_counting_system("red-seven")

    def test_ids_match_keys(self):
        """Test each system is registered under its own id."""
        for system_id, system in COUNTING_SYSTEMS.items():
            assert system.id == system_id

    def test_free_systems(self):
        """Test leaving out premium systems."""
        free = available_systems(include_premium=False)
        assert [system.id for system in free] == ["hi-lo"]
        assert len(available_systems()) == len(COUNTING_SYSTEMS)
