from __future__ import annotations

import re
from typing import Pattern

# Markers live in the Unicode private use area so they can never collide with
# letters, digits, whitespace or punctuation matched by the rewrite rules.
MARKER_OPEN = "\ue000"
MARKER_CLOSE = "\ue001"
_SLOT_BASE = 0xE100
_SLOT_RADIX = 0x100

MARKER_RE = re.compile("\ue000[\ue100-\ue1ff]+\ue001")
_RESERVED_RE = re.compile("[\ue000-\ue1ff]")


class MarkerCollisionError(ValueError):
    """Raised when input text already contains the reserved marker alphabet."""


def contains_marker_alphabet(text: str) -> bool:
    """Return True if any reserved marker character occurs in text."""
    return _RESERVED_RE.search(text) is not None


def _encode_slot(index: int) -> str:
    digits: list[str] = []
    while True:
        index, remainder = divmod(index, _SLOT_RADIX)
        digits.append(chr(_SLOT_BASE + remainder))
        if index == 0:
            break
    return MARKER_OPEN + "".join(reversed(digits)) + MARKER_CLOSE


class TokenVault:
    """
    Reversible substitution of substrings with opaque markers.

    A vault lives for one pipeline invocation. Identical originals share a
    marker, and restore() undoes protections newest-first so a marker whose
    original text itself contains older markers is fully unwound.
    """

    def __init__(self) -> None:
        self._originals: list[str] = []
        self._slots: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._originals)

    @staticmethod
    def check(text: str) -> None:
        """Reject text that would make restoration ambiguous."""
        if contains_marker_alphabet(text):
            raise MarkerCollisionError(
                "Input contains reserved private-use characters U+E000..U+E1FF."
            )

    def protect(self, original: str) -> str:
        """Return the marker standing for original, allocating one if needed."""
        marker = self._slots.get(original)
        if marker is None:
            marker = _encode_slot(len(self._originals))
            self._originals.append(original)
            self._slots[original] = marker
        return marker

    def protect_pattern(self, text: str, pattern: Pattern[str]) -> str:
        """Replace every match of pattern with its marker."""
        return pattern.sub(lambda match: self.protect(match.group(0)), text)

    def restore(self, text: str) -> str:
        """Replace all markers with their original substrings."""
        for index in range(len(self._originals) - 1, -1, -1):
            text = text.replace(_encode_slot(index), self._originals[index])
        return text
