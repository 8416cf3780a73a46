"""
Deck gallery and deck detail pages.
"""

from __future__ import annotations

import streamlit as st

from app.pages.collection import render_card_grid
from app.session_controller import handle_navigate, handle_select_deck
from app.ui import render_small_card
from core import deck_catalog
from core.study import Card, SessionState


def render_all_decks_page(state: SessionState) -> None:
    """
    Render every catalog deck with its sample card.
    """
    del state  # the gallery does not depend on the session

    col1, col2 = st.columns([1, 5])
    with col1:
        if st.button("⬅️", key="back_all_decks", help="Back to Study", use_container_width=True):
            handle_navigate("flashcards")
            st.rerun()
    with col2:
        st.subheader("All Decks")

    decks = deck_catalog.list_decks()
    columns = st.columns(max(1, min(len(decks), 3)))
    for index, (code, deck) in enumerate(decks):
        with columns[index % len(columns)]:
            st.markdown(f"**{deck.title}**")
            sample = deck_catalog.sample_card(deck)
            if sample is not None:
                render_small_card(Card.from_definition(sample), deck.theme)
            if st.button("Open", key=f"open_{code}", use_container_width=True):
                handle_select_deck(code)
                st.rerun()


def render_deck_detail_page(state: SessionState) -> None:
    """
    Render every card of the selected catalog deck.
    """
    deck = deck_catalog.get_deck(state.selected_deck_code)
    if deck is None:
        handle_navigate("all_decks")
        st.rerun()
        return

    col1, col2 = st.columns([1, 5])
    with col1:
        if st.button("⬅️", key="back_deck_detail", help="Back to All Decks", use_container_width=True):
            handle_navigate("all_decks")
            st.rerun()
    with col2:
        st.subheader(deck.title)

    if not deck.cards:
        st.info("This deck is empty.")
        return

    cards = [Card.from_definition(card) for card in deck.cards]
    render_card_grid(cards, deck.theme)
