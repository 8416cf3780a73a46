"""
Language detection for card text.

Classifies a text segment so the dispatcher can pick a voice:
- HANZI: Chinese characters (primary script)
- PINYIN: romanized Chinese (phonetic aid)
- THAI: Thai script (secondary translation)
- LATIN: anything else, spoken as English
"""

from __future__ import annotations

from enum import Enum
import re


class TextKind(str, Enum):
    HANZI = "hanzi"
    PINYIN = "pinyin"
    THAI = "thai"
    LATIN = "latin"


LANGUAGE_TAGS = {
    TextKind.HANZI: "zh-CN",
    TextKind.PINYIN: "zh-CN",
    TextKind.THAI: "th-TH",
    TextKind.LATIN: "en-US",
}

THAI_PATTERN = re.compile(r"[\u0E00-\u0E7F]")
HANZI_PATTERN = re.compile(r"[\u4E00-\u9FFF\u3400-\u4DBF\uF900-\uFAFF]")
TONE_MARK_PATTERN = re.compile(r"[āáǎàēéěèīíǐìōóǒòūúǔùǖǘǚǜ]", re.IGNORECASE)

# Syllables and finals commonly drilled without tone marks
PINYIN_SYLLABLES = frozenset({
    "ba", "pa", "ma", "fa", "da", "ta", "na", "la", "ga", "ka", "ha",
    "ji", "qi", "xi", "zhi", "chi", "shi", "ri", "zi", "ci", "si",
    "ya", "wa", "yuan", "ying", "yang", "yong", "you", "yan", "yin",
    "ai", "ei", "ao", "ou", "an", "en", "ang", "eng", "ong",
    "ia", "ie", "iao", "iou", "ian", "in", "iang", "ing", "iong",
    "ua", "uo", "uai", "ui", "uan", "un", "uang", "ueng", "ue",
})


# Every standard Mandarin syllable, without tones, grouped by initial
_SYLLABLES_BY_INITIAL = {
    "": "a o e ai ei ao ou an en ang eng er",
    "y": "yi ya ye yao you yan yin yang ying yong yu yue yuan yun",
    "w": "wu wa wo wai wei wan wen wang weng",
    "b": "ba bo bai bei bao ban ben bang beng bi bie biao bian bin bing bu",
    "p": "pa po pai pei pao pou pan pen pang peng pi pie piao pian pin ping pu",
    "m": "ma mo me mai mei mao mou man men mang meng mi mie miao miu mian min ming mu",
    "f": "fa fo fei fou fan fen fang feng fu",
    "d": "da de dai dei dao dou dan den dang deng dong di die diao diu dian ding du duo dui duan dun",
    "t": "ta te tai tao tou tan tang teng tong ti tie tiao tian ting tu tuo tui tuan tun",
    "n": "na ne nai nei nao nou nan nen nang neng nong ni nie niao niu nian nin niang ning nu nuo nuan nü nüe",
    "l": "la le lai lei lao lou lan lang leng long li lia lie liao liu lian lin liang ling lu luo luan lun lü lüe",
    "g": "ga ge gai gei gao gou gan gen gang geng gong gu gua guo guai gui guan gun guang",
    "k": "ka ke kai kei kao kou kan ken kang keng kong ku kua kuo kuai kui kuan kun kuang",
    "h": "ha he hai hei hao hou han hen hang heng hong hu hua huo huai hui huan hun huang",
    "j": "ji jia jie jiao jiu jian jin jiang jing jiong ju jue juan jun",
    "q": "qi qia qie qiao qiu qian qin qiang qing qiong qu que quan qun",
    "x": "xi xia xie xiao xiu xian xin xiang xing xiong xu xue xuan xun",
    "zh": "zha zhe zhi zhai zhei zhao zhou zhan zhen zhang zheng zhong zhu zhua zhuo zhuai zhui zhuan zhun zhuang",
    "ch": "cha che chi chai chao chou chan chen chang cheng chong chu chua chuo chuai chui chuan chun chuang",
    "sh": "sha she shi shai shei shao shou shan shen shang sheng shu shua shuo shuai shui shuan shun shuang",
    "r": "re ri rao rou ran ren rang reng rong ru rua ruo rui ruan run",
    "z": "za ze zi zai zei zao zou zan zen zang zeng zong zu zuo zui zuan zun",
    "c": "ca ce ci cai cao cou can cen cang ceng cong cu cuo cui cuan cun",
    "s": "sa se si sai sao sou san sen sang seng song su suo sui suan sun",
}

MANDARIN_SYLLABLES = frozenset(
    syllable
    for group in _SYLLABLES_BY_INITIAL.values()
    for syllable in group.split()
)
_LONGEST_SYLLABLE = max(len(syllable) for syllable in MANDARIN_SYLLABLES)

_TONE_TO_BASE = str.maketrans(
    "āáǎàēéěèīíǐìōóǒòūúǔùǖǘǚǜĀÁǍÀĒÉĚÈĪÍǏÌŌÓǑÒŪÚǓÙ",
    "aaaaeeeeiiiioooouuuuüüüüaaaaeeeeiiiioooouuuu",
)


def strip_tones(text: str) -> str:
    return text.translate(_TONE_TO_BASE).lower()


def is_syllable_run(token: str) -> bool:
    """
    True when `token` (toneless, lowercase) splits into Mandarin syllables,
    e.g. "pengyou" -> peng + you.
    """
    reachable = [True] + [False] * len(token)
    for end in range(1, len(token) + 1):
        for start in range(max(0, end - _LONGEST_SYLLABLE), end):
            if reachable[start] and token[start:end] in MANDARIN_SYLLABLES:
                reachable[end] = True
                break
    return reachable[len(token)]


def is_pinyin(text: str) -> bool:
    """
    True for tone-marked text whose every token is a run of Mandarin
    syllables, or for untoned text made only of drilled syllables.
    """
    tokens = text.split()
    if not tokens:
        return False
    if TONE_MARK_PATTERN.search(text):
        return all(
            is_syllable_run(part)
            for token in tokens
            for part in strip_tones(token).split("'")
        )
    return all(token.lower() in PINYIN_SYLLABLES for token in tokens)


def classify_text(text: str) -> TextKind:
    if not text or not text.strip():
        return TextKind.LATIN
    if THAI_PATTERN.search(text):
        return TextKind.THAI
    if HANZI_PATTERN.search(text):
        return TextKind.HANZI
    if is_pinyin(text):
        return TextKind.PINYIN
    return TextKind.LATIN


def detect_language(text: str) -> str:
    """BCP-47 language tag for a text segment."""
    return LANGUAGE_TAGS[classify_text(text)]
