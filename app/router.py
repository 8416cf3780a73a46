"""
Simple page router for the study session.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.pages.collection import render_forgotten_page, render_remembered_page
from app.pages.decks import render_all_decks_page, render_deck_detail_page
from app.pages.flashcards import render_flashcards_page
from app.pages.landing import render_landing_page
from core.study import SessionState


@dataclass(frozen=True)
class AppPage:
    title: str
    render: Callable[[SessionState], None]


PAGES: dict[str, AppPage] = {
    "landing": AppPage(title="Learn Any Language with Flashcards", render=render_landing_page),
    "flashcards": AppPage(title="Study", render=render_flashcards_page),
    "remembered": AppPage(title="Remembered Cards", render=render_remembered_page),
    "forgotten": AppPage(title="Forgotten Cards", render=render_forgotten_page),
    "all_decks": AppPage(title="All Decks", render=render_all_decks_page),
    "deck_detail": AppPage(title="Deck", render=render_deck_detail_page),
}


def get_page(page: str) -> AppPage:
    return PAGES.get(page, PAGES["landing"])
