"""
Tests for session lifecycle transitions.

Tests cover:
- Unlocking decks by access code (shuffle, fresh levels, visible window)
- Invalid codes leave state untouched
- Reset, navigation, deck selection and studying a forgotten card
"""

from collections import Counter
import random

import pytest

from core import deck_catalog
from core.study import (
    INVALID_CODE_MESSAGE,
    InvalidAccessCode,
    PAGES,
    SessionState,
    SwipeDirection,
    apply_swipe,
    navigate,
    reset,
    select_deck,
    shuffle_cards,
    study_card,
    unlock,
)
from tests.conftest import make_card, make_state


PINYIN_FRONTS = {"ang", "ing", "en", "ai", "ao"}


class TestUnlock:

    def test_pinyin_practice_loads_five_fresh_cards(self, rng):
        state = unlock(SessionState(), "PinyinPractice", rng=rng)

        assert state.page == "flashcards"
        assert len(state.deck) == 5
        assert {c.front for c in state.deck} == PINYIN_FRONTS
        assert all(c.level == 0 for c in state.deck)
        assert all(c.status == "new" for c in state.deck)
        assert len({c.key for c in state.deck}) == 5

    def test_visible_window_is_first_three_of_shuffled_deck(self, rng):
        state = unlock(SessionState(), "PinyinPractice", rng=rng)

        assert len(state.visible_cards) == 3
        assert state.visible_cards == state.deck[:3]
        assert {c.front for c in state.visible_cards} <= PINYIN_FRONTS

    def test_records_deck_metadata(self):
        state = unlock(SessionState(), "LearnChinesewithHelen1295")
        definition = deck_catalog.get_deck("LearnChinesewithHelen1295")

        assert state.deck_code == "LearnChinesewithHelen1295"
        assert state.deck_title == "Chinese Vocabulary"
        assert state.theme == definition.theme
        assert len(state.deck) == 30

    def test_surrounding_whitespace_ignored(self):
        state = unlock(SessionState(), "  PinyinPractice \n")
        assert state.deck_code == "PinyinPractice"

    def test_codes_are_case_sensitive(self):
        with pytest.raises(InvalidAccessCode):
            unlock(SessionState(), "pinyinpractice")

    def test_same_seed_same_order(self):
        first = unlock(SessionState(), "LearnChinesewithHelen1295", rng=random.Random(7))
        second = unlock(SessionState(), "LearnChinesewithHelen1295", rng=random.Random(7))
        assert [c.front for c in first.deck] == [c.front for c in second.deck]

    def test_unlock_clears_previous_progress(self, rng):
        state = unlock(SessionState(), "PinyinPractice", rng=rng)
        state = apply_swipe(state, SwipeDirection.LEFT)
        state = apply_swipe(state, SwipeDirection.RIGHT)

        state = unlock(state, "PinyinPractice", rng=rng)
        assert len(state.remembered) == 0
        assert len(state.forgotten) == 0
        assert all(c.level == 0 for c in state.deck)


class TestInvalidCode:

    def test_raises_invalid_code(self):
        with pytest.raises(InvalidAccessCode) as excinfo:
            unlock(SessionState(), "NotACode")
        assert str(excinfo.value) == INVALID_CODE_MESSAGE
        assert excinfo.value.code == "NotACode"

    def test_existing_session_untouched(self, rng):
        state = unlock(SessionState(), "PinyinPractice", rng=rng)
        state = apply_swipe(state, SwipeDirection.LEFT)
        deck_before = state.deck
        forgotten_before = state.forgotten

        with pytest.raises(InvalidAccessCode):
            unlock(state, "wrong")

        assert state.deck is deck_before
        assert state.forgotten is forgotten_before
        assert state.page == "flashcards"

    def test_is_value_error(self):
        assert issubclass(InvalidAccessCode, ValueError)


class TestShuffle:

    def test_shuffle_is_permutation(self, cards, rng):
        shuffled = shuffle_cards(cards, rng)
        assert len(shuffled) == len(cards)
        assert Counter(c.key for c in shuffled) == Counter(c.key for c in cards)

    def test_shuffle_leaves_input_untouched(self, cards, rng):
        original = list(cards)
        shuffle_cards(cards, rng)
        assert cards == original

    def test_shuffle_empty(self):
        assert shuffle_cards([]) == ()


class TestReset:

    def test_reset_returns_landing_state(self, rng):
        state = unlock(SessionState(), "PinyinPractice", rng=rng)
        state = apply_swipe(state, SwipeDirection.RIGHT)
        state = reset(state)

        assert state == SessionState()
        assert state.page == "landing"
        assert state.deck == ()
        assert len(state.remembered) == 0
        assert not state.is_started


class TestCompletion:

    def test_not_complete_before_unlock(self):
        assert not SessionState().is_complete

    def test_complete_when_deck_empties(self):
        state = make_state(make_card("a", level=1))
        state = apply_swipe(state, SwipeDirection.RIGHT)
        assert state.is_complete
        assert state.visible_cards == ()


class TestStudyCard:

    def test_moves_card_to_head_by_key(self):
        a, b, c = make_card("a"), make_card("b"), make_card("c")
        state = study_card(make_state(a, b, c), c)
        assert [card.front for card in state.deck] == ["c", "a", "b"]
        assert state.page == "flashcards"

    def test_forgotten_card_comes_back_to_front(self):
        state = make_state(*(make_card(f"c{i}") for i in range(8)))
        state = apply_swipe(state, SwipeDirection.LEFT)
        state = navigate(state, "forgotten")

        forgotten = state.forgotten.get("c0")
        state = study_card(state, forgotten)

        assert state.deck[0].front == "c0"
        assert len(state.deck) == 8
        assert [c.front for c in state.deck].count("c0") == 1

    def test_card_not_in_deck_is_added(self):
        state = study_card(make_state(make_card("a")), make_card("gone"))
        assert [c.front for c in state.deck] == ["gone", "a"]


class TestNavigation:

    def test_navigate(self):
        state = navigate(SessionState(), "all_decks")
        assert state.page == "all_decks"

    def test_unknown_page(self):
        with pytest.raises(ValueError):
            navigate(SessionState(), "settings")

    def test_select_deck(self):
        state = select_deck(SessionState(page="all_decks"), "PinyinPractice")
        assert state.page == "deck_detail"
        assert state.selected_deck_code == "PinyinPractice"

    def test_select_unknown_deck(self):
        with pytest.raises(InvalidAccessCode):
            select_deck(SessionState(), "missing")


def test_every_page_name_is_navigable():
    assert PAGES == ("landing", "flashcards", "remembered", "forgotten", "all_decks", "deck_detail")
    for page in PAGES:
        assert navigate(SessionState(), page).page == page
