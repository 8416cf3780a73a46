"""
Static deck catalog.

Maps access codes to the decks they unlock. Definitions are validated
with the pydantic models in core.schemas at import time.
"""

from __future__ import annotations

from typing import Optional

from core.schemas import CardDefinition, DeckDefinition, DeckTheme


# ---- Vocabulary ----

CHINESE_VOCABULARY = [
    {"front": "爸爸\nbà ba", "back": "dad\nพ่อ", "emoji": "👨‍👧‍👦"},
    {"front": "别\nbié", "back": "don't\nอย่า", "emoji": "🚫"},
    {"front": "朋友\npéng yǒu", "back": "friend\nเพื่อน", "emoji": "👫"},
    {"front": "怕\npà", "back": "to fear\nกลัว", "emoji": "😨"},
    {"front": "妈妈\nmā ma", "back": "mom\nแม่", "emoji": "👩‍👧‍👦"},
    {"front": "买\nmǎi", "back": "to buy\nซื้อ", "emoji": "🛒"},
    {"front": "饭\nfàn", "back": "meal\nข้าว", "emoji": "🍽️"},
    {"front": "富\nfù", "back": "rich\nรวย", "emoji": "💰"},
    {"front": "奶奶\nnǎi nai", "back": "grandmother\nยาย", "emoji": "👵"},
    {"front": "你\nnǐ", "back": "you\nคุณ", "emoji": "👤"},
    {"front": "老\nlǎo", "back": "old\nแก่", "emoji": "🧓"},
    {"front": "来\nlái", "back": "to come\nมา", "emoji": "➡️"},
    {"front": "大\ndà", "back": "big\nใหญ่", "emoji": "📏"},
    {"front": "得\ndé", "back": "to get\nได้รับ", "emoji": "🏆"},
    {"front": "跳\ntiào", "back": "to jump\nกระโดด", "emoji": "🤸"},
    {"front": "调\ntiáo", "back": "to adjust\nปรับ", "emoji": "⚙️"},
    {"front": "猪\nzhū", "back": "pig\nหมู", "emoji": "🐷"},
    {"front": "住\nzhù", "back": "to live\nอาศัย", "emoji": "🏠"},
    {"front": "吃\nchī", "back": "to eat\nกิน", "emoji": "🍽️"},
    {"front": "出\nchū", "back": "to go out\nออกไป", "emoji": "🚪"},
    {"front": "高\ngāo", "back": "high\nสูง", "emoji": "📏"},
    {"front": "个\ngè", "back": "measure word\nลักษณนาม", "emoji": "📊"},
    {"front": "裤\nkù", "back": "trousers\nกางเกง", "emoji": "👖"},
    {"front": "可以\nkě yǐ", "back": "can\nสามารถ", "emoji": "✅"},
    {"front": "虎\nhǔ", "back": "tiger\nเสือ", "emoji": "🐅"},
    {"front": "好\nhǎo", "back": "good\nดี", "emoji": "👍"},
    {"front": "家\njiā", "back": "home\nบ้าน", "emoji": "🏡"},
    {"front": "就\njiù", "back": "then\nแล้ว", "emoji": "⏭️"},
    {"front": "小\nxiǎo", "back": "small\nเล็ก", "emoji": "🐭"},
    {"front": "喜欢\nxǐ huān", "back": "to like\nชอบ", "emoji": "❤️"},
]

PINYIN_CARDS = [
    {"front": "ang", "back": "ang\nFinal compound: 'ahng' sound\nเสียงสระผสม: 'อาง'", "emoji": "🗣️"},
    {"front": "ing", "back": "ing\nFinal compound: 'eeng' sound\nเสียงสระผสม: 'อิง'", "emoji": "🗣️"},
    {"front": "en", "back": "en\nFinal compound: 'uhn' sound\nเสียงสระผสม: 'เอิน'", "emoji": "🗣️"},
    {"front": "ai", "back": "ai\nFinal compound: 'eye' sound\nเสียงสระผสม: 'ไอ'", "emoji": "🗣️"},
    {"front": "ao", "back": "ao\nFinal compound: 'aow' sound\nเสียงสระผสม: 'เอา'", "emoji": "🗣️"},
]


# ---- Access Codes ----

ACCESS_CODES: dict[str, DeckDefinition] = {
    "LearnChinesewithHelen1295": DeckDefinition(
        title="Chinese Vocabulary",
        cards=[CardDefinition(**card) for card in CHINESE_VOCABULARY],
        theme=DeckTheme(card_color="#E0F7FA", card_back_color="#CFEEF5"),  # Light blue
    ),
    "PinyinPractice": DeckDefinition(
        title="Pinyin Practice",
        cards=[CardDefinition(**card) for card in PINYIN_CARDS],
        theme=DeckTheme(card_color="#E8F5E9", card_back_color="#DFF0E0"),  # Light green
    ),
}


def normalize_code(code: Optional[str]) -> str:
    """Access codes are case-sensitive; only surrounding whitespace is ignored."""
    return (code or "").strip()


def get_deck(code: Optional[str]) -> Optional[DeckDefinition]:
    """
    Look up the deck an access code unlocks.

    Returns:
        DeckDefinition, or None for an unknown code
    """
    return ACCESS_CODES.get(normalize_code(code))


def list_decks() -> list[tuple[str, DeckDefinition]]:
    """All (code, deck) pairs in catalog order."""
    return list(ACCESS_CODES.items())


def sample_card(deck: DeckDefinition) -> Optional[CardDefinition]:
    """First card of a deck, shown in the deck gallery."""
    return deck.cards[0] if deck.cards else None
