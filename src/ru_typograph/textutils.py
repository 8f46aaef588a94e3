from __future__ import annotations

import re

# fmt: off
TRANSLIT_TABLE = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ё": "e",
    "ж": "zh", "з": "z", "и": "i", "й": "y", "к": "k", "л": "l", "м": "m",
    "н": "n", "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
    "ф": "f", "х": "kh", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "shch",
    "ъ": "", "ы": "y", "ь": "", "э": "e", "ю": "yu", "я": "ya",
}
# fmt: on

UNSAFE_FILENAME_RE = re.compile(r"[^A-Za-z0-9_-]")
TRAILING_SEPARATORS_RE = re.compile(r"[_-]+$")


def transliterate(value: str) -> str:
    """Transliterate Cyrillic letters to Latin, preserving capitalization."""
    chars: list[str] = []
    for ch in value:
        latin = TRANSLIT_TABLE.get(ch.lower())
        if latin is None:
            chars.append(ch)
        elif ch.isupper():
            chars.append(latin.capitalize())
        else:
            chars.append(latin)
    return "".join(chars)


def safe_filename(stem: str) -> str:
    """Turn a document name into an ASCII file name stem."""
    latin = transliterate(stem).replace(" ", "_")
    cleaned = UNSAFE_FILENAME_RE.sub("_", latin)
    return TRAILING_SEPARATORS_RE.sub("", cleaned) or "document"
