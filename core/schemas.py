"""
Pydantic models for the static deck catalog.

These models validate the built-in deck definitions that access codes
unlock.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


DEFAULT_CARD_COLOR = "#f0f2f6"


class CardDefinition(BaseModel):
    """A flashcard as authored in the catalog."""
    front: str = Field(..., description="Primary form, then phonetic aid on the next line")
    back: str = Field("", description="Primary translation, then secondary translation")
    emoji: str = Field("", description="Decorative glyph")


class DeckTheme(BaseModel):
    """Card colours for an unlocked deck."""
    card_color: str = DEFAULT_CARD_COLOR
    card_back_color: Optional[str] = None

    @property
    def back_color(self) -> str:
        return self.card_back_color or self.card_color


class DeckDefinition(BaseModel):
    """A deck an access code unlocks."""
    title: str
    cards: list[CardDefinition] = Field(default_factory=list)
    theme: DeckTheme = Field(default_factory=DeckTheme)

    @field_validator("cards")
    @classmethod
    def _fronts_are_unique(cls, cards: list[CardDefinition]) -> list[CardDefinition]:
        fronts = [card.front for card in cards]
        duplicates = sorted({front for front in fronts if fronts.count(front) > 1})
        if duplicates:
            raise ValueError(f"Duplicate card fronts in deck: {duplicates}")
        return cards
