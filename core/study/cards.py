"""
Card value type and text helpers.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional
import uuid

from core.study.constants import NEW_STATUS


def _new_key() -> str:
    return uuid.uuid4().hex


def split_card_text(text: Optional[str]) -> tuple[str, str]:
    """
    Split multi-line card text into (primary, secondary).

    Segments are stripped; missing segments come back as empty strings.
    """
    parts = [segment.strip() for segment in (text or "").split("\n")]
    primary = parts[0] if len(parts) > 0 else ""
    secondary = parts[1] if len(parts) > 1 else ""
    return primary, secondary


@dataclass(frozen=True)
class Card:
    """
    A single prompt/answer pair in a study session.

    `front` is the business key for remembered/forgotten membership.
    `key` identifies this instance in UI lists and survives level updates.
    """
    front: str
    back: str
    emoji: str = ""
    status: str = NEW_STATUS
    level: int = 0
    key: str = field(default_factory=_new_key)

    @classmethod
    def from_definition(cls, definition) -> "Card":
        """Materialize a fresh level-0 card from a catalog definition."""
        return cls(
            front=definition.front,
            back=definition.back,
            emoji=definition.emoji or "",
        )

    def with_level(self, level: int) -> "Card":
        return replace(self, level=level)

    def front_parts(self) -> tuple[str, str]:
        """(primary form, phonetic aid)"""
        return split_card_text(self.front)

    def back_parts(self) -> tuple[str, str, str]:
        """(primary translation, secondary translation, note)"""
        primary, secondary = split_card_text(self.back)
        extra = [segment.strip() for segment in (self.back or "").split("\n")[2:]]
        note = " ".join(segment for segment in extra if segment)
        return primary, secondary, note
