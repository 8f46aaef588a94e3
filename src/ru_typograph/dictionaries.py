"""
Static lookup tables used by the rule engine.
"""

from __future__ import annotations

NBSP = "\u00a0"
THIN_SPACE = "\u2009"
EM_DASH = "\u2014"
EN_DASH = "\u2013"
ELLIPSIS = "\u2026"

# Compounds and adverbs whose hyphen must survive dash unification as a unit.
HYPHENATED_WORDS: tuple[str, ...] = (
    "из-за",
    "из-под",
    "по-русски",
    "по-моему",
    "по-твоему",
    "по-нашему",
    "по-вашему",
    "кое-что",
    "кое-как",
    "кое-где",
    "кое-кто",
    "кто-нибудь",
    "что-нибудь",
    "где-нибудь",
    "когда-нибудь",
    "как-нибудь",
    "когда-либо",
    "кто-либо",
    "что-либо",
    "кто-то",
    "что-то",
    "где-то",
    "когда-то",
    "как-то",
    "все-таки",
    "по-своему",
    "по-старому",
    "по-новому",
    "по-английски",
    "по-французски",
    "по-немецки",
    "по-итальянски",
    "по-испански",
    "по-китайски",
    "по-японски",
    "по-украински",
    "по-белорусски",
    "по-польски",
    "по-чешски",
    "по-гречески",
    "по-турецки",
    "по-арабски",
    "по-еврейски",
    "по-латински",
    "по-современному",
    "по-старинному",
    "по-детски",
    "по-взрослому",
    "по-товарищески",
    "по-приятельски",
    "по-родственному",
    "по-отечески",
    "по-матерински",
    "по-братски",
    "по-сестрински",
    "по-деловому",
    "по-дружески",
    "по-особенному",
    "по-особому",
)

# Dotted abbreviations, longest first so "и т.-д." wins over "т.-д.".
ABBREVIATIONS: tuple[str, ...] = (
    "и т.-д.",
    "т.-е.",
    "т.-д.",
    "т.-п.",
    "т.-к.",
    "т.-н.",
    "т.-о.",
)

# One- and two-letter prepositions and conjunctions that must not
# be left dangling at the end of a line.
SHORT_WORDS: frozenset[str] = frozenset(
    {
        "а",
        "в",
        "и",
        "к",
        "о",
        "с",
        "у",
        "не",
        "на",
        "от",
        "до",
        "за",
        "из",
        "по",
        "со",
        "во",
        "об",
        "ко",
        "ни",
        "но",
    }
)

# Units bound to the preceding number when only units (not every word) are bound.
UNITS: frozenset[str] = frozenset(
    {
        "мг",
        "г",
        "кг",
        "т",
        "мм",
        "см",
        "дм",
        "м",
        "км",
        "мл",
        "л",
        "руб",
        "коп",
        "долл",
        "евро",
        "шт",
        "сек",
        "мин",
        "ч",
    }
)

# Marks that take no space before them and one space after.
PUNCTUATION_MARKS = ",.;:!?"
