"""
Deck Progression Engine

Pure state transition applied when the user swipes the head card:

- LEFT (forgotten): level drops by one (floored at MIN_LEVEL) and the card
  goes back FORGOTTEN_REINSERT_DEPTH slots deep, or to the end of a short deck.
- RIGHT (remembered): level rises by one; the card rejoins the end of the
  deck until it reaches GRADUATION_LEVEL, then leaves the session.

This module holds ONLY the progression policy.
Session lifecycle (unlock, reset, navigation) lives in core.study.session.
"""

from __future__ import annotations

from dataclasses import replace
import logging
from typing import Sequence, TYPE_CHECKING

from core.study.cards import Card
from core.study.constants import (
    FORGOTTEN_REINSERT_DEPTH,
    GRADUATION_LEVEL,
    MIN_LEVEL,
    VISIBLE_WINDOW,
    SwipeDirection,
)

if TYPE_CHECKING:
    from core.study.session import SessionState


logger = logging.getLogger(__name__)


def visible_window(deck: Sequence[Card]) -> tuple[Card, ...]:
    """First VISIBLE_WINDOW cards, front to back."""
    return tuple(deck[:VISIBLE_WINDOW])


def reinsert_index(rest_length: int) -> int:
    """
    Position a forgotten card re-enters the remaining deck at.

    Clamps to the end of the deck when fewer than FORGOTTEN_REINSERT_DEPTH
    cards remain.
    """
    return min(FORGOTTEN_REINSERT_DEPTH, rest_length)


def apply_swipe(state: "SessionState", direction: SwipeDirection | str) -> "SessionState":
    """
    Judge the head card and return the next session state.

    Args:
        state: Current session state
        direction: SwipeDirection.LEFT (forgotten) or SwipeDirection.RIGHT (remembered)

    Returns:
        New SessionState; the input state is returned unchanged for an empty deck
    """
    direction = SwipeDirection(direction)
    if not state.deck:
        return state

    swiped = state.deck[0]
    rest = list(state.deck[1:])

    remembered = state.remembered.without(swiped.front)
    forgotten = state.forgotten.without(swiped.front)

    if direction is SwipeDirection.LEFT:
        swiped = swiped.with_level(max(MIN_LEVEL, swiped.level - 1))
        forgotten = forgotten.appended(swiped)
        rest.insert(reinsert_index(len(rest)), swiped)
    else:
        swiped = swiped.with_level(swiped.level + 1)
        remembered = remembered.appended(swiped)
        if swiped.level < GRADUATION_LEVEL:
            rest.append(swiped)
        else:
            logger.debug("Card graduated: %r (level %d)", swiped.front, swiped.level)

    logger.debug(
        "Swipe %s on %r -> level %d, %d cards pending",
        direction.value, swiped.front, swiped.level, len(rest)
    )

    return replace(
        state,
        deck=tuple(rest),
        remembered=remembered,
        forgotten=forgotten,
    )
