"""
Rewrite rules for the prose and poetry pipelines.

Prose steps run in the order of PROSE_STEPS; later steps rely on the hyphens
and abbreviations protected by earlier ones, so the order is part of the
contract. Every step is a pure function of its input text and a RuleContext
created for one pipeline call.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable

from .dictionaries import (
    ABBREVIATIONS,
    ELLIPSIS,
    EM_DASH,
    EN_DASH,
    HYPHENATED_WORDS,
    NBSP,
    PUNCTUATION_MARKS,
    SHORT_WORDS,
    THIN_SPACE,
    UNITS,
)
from .protection import MARKER_RE, TokenVault

LETTER = r"[^\W\d_]"
HSPACE = r"[^\S\n]"
DASHES = rf"(?:--?|{EN_DASH}|{EM_DASH})"
PUNCT = f"[{re.escape(PUNCTUATION_MARKS)}]"

MULTI_SPACE_RE = re.compile(r"[ \t\v\f\r]{2,}")
NUMBER_SIGN_RE = re.compile(r"№\s*(\d+)")
LETTER_HYPHEN_RE = re.compile(rf"(?<={LETTER})-(?={LETTER})")
RANGE_RE = re.compile(rf"(?<!\d)(\d{{1,4}}){HSPACE}*-{HSPACE}*(\d{{1,4}})(?!\d)")
RANGE_CLEANUP_RE = re.compile(rf"(\d){HSPACE}*{EN_DASH}{HSPACE}*(\d)")
SPACED_DASH_RE = re.compile(rf"(?<=\S){HSPACE}+{DASHES}{HSPACE}+")
LEADING_DASH_RE = re.compile(rf"\A{HSPACE}+{DASHES}{HSPACE}+")
LOOSE_HYPHEN_RE = re.compile(
    rf"({LETTER})(?:{HSPACE}+-|-{HSPACE}+)(?={LETTER})"
)
ELLIPSIS_RE = re.compile(r"\.{3,}")
SPACE_BEFORE_PUNCT_RE = re.compile(rf"{HSPACE}+({PUNCT})")
MISSING_SPACE_RE = re.compile(rf"({PUNCT})(?=[А-Яа-яЁёA-Za-z])")
OPEN_PAREN_RE = re.compile(rf"\({HSPACE}+")
CLOSE_PAREN_RE = re.compile(rf"{HSPACE}+\)")
NUMBER_WORD_RE = re.compile(rf"(\d)[ \t]+(?={LETTER})")
INITIALS_RE = re.compile(
    r"(?<!\w)([А-ЯЁ]\.)(?:[ \t]+([А-ЯЁ]\.))?[ \t]+([А-ЯЁ][а-яё]+)"
)
PERCENT_RE = re.compile(rf"(\d){HSPACE}*%")
DIALOGUE_RE = re.compile(rf"^{HSPACE}*(?:--?|{EN_DASH})(?!\d){HSPACE}*", re.MULTILINE)
TRAILING_BLANK_LINES_RE = re.compile(r"\n\s*\Z")
DOUBLE_HYPHEN_RE = re.compile(r"--")


def _word_pattern(word: str) -> str:
    # Any "е" may be written as "ё"; the hyphen may already be protected.
    hyphen = rf"(?:-|{MARKER_RE.pattern})"
    parts = []
    for part in word.split("-"):
        parts.append("".join("[её]" if ch in "её" else re.escape(ch) for ch in part))
    return hyphen.join(parts)


def _alternation(words: list[str]) -> str:
    return "|".join(sorted(words, key=len, reverse=True))


HYPHENATED_WORDS_RE = re.compile(
    rf"(?<!{LETTER})(?:{_alternation([_word_pattern(w) for w in HYPHENATED_WORDS])})"
    rf"(?!{LETTER})",
    re.IGNORECASE,
)
ABBREVIATIONS_RE = re.compile(
    r"(?<!\w)(?:"
    + "|".join(re.escape(abbr).replace(r"\ ", r"\s+") for abbr in ABBREVIATIONS)
    + ")",
    re.IGNORECASE,
)
SHORT_WORD_RE = re.compile(
    rf"(?<![\w-])({_alternation(list(SHORT_WORDS))})[ \t]+(?=[\w«\"(])",
    re.IGNORECASE,
)
UNIT_RE = re.compile(
    rf"(\d)[ \t]+(?=(?:{_alternation([re.escape(u) for u in UNITS])})(?!\w))",
    re.IGNORECASE,
)


@dataclass(slots=True)
class RuleContext:
    """Per-call state shared by the prose steps."""

    vault: TokenVault = field(default_factory=TokenVault)
    is_first_run: bool = False
    is_last_run: bool = True
    bind_all_numbers: bool = True
    strip_trailing_blank_lines: bool = True


Step = Callable[[str, RuleContext], str]


def collapse_whitespace(text: str, ctx: RuleContext) -> str:
    return MULTI_SPACE_RE.sub(" ", text)


def trim_edges(text: str, ctx: RuleContext) -> str:
    """Strip leading whitespace, but only from the first run of a paragraph."""
    if ctx.is_first_run:
        return text.lstrip()
    return text


def number_sign(text: str, ctx: RuleContext) -> str:
    return NUMBER_SIGN_RE.sub(rf"№{NBSP}\1", text)


def protect_hyphens(text: str, ctx: RuleContext) -> str:
    """Hide word-internal hyphens and known compounds from the dash rules."""
    text = ctx.vault.protect_pattern(text, LETTER_HYPHEN_RE)
    return ctx.vault.protect_pattern(text, HYPHENATED_WORDS_RE)


def protect_abbreviations(text: str, ctx: RuleContext) -> str:
    return ctx.vault.protect_pattern(text, ABBREVIATIONS_RE)


def number_ranges(text: str, ctx: RuleContext) -> str:
    """1966-1977 and 1966 - 1977 both become 1966–1977."""
    text = RANGE_RE.sub(rf"\1{EN_DASH}\2", text)
    return RANGE_CLEANUP_RE.sub(rf"\1{EN_DASH}\2", text)


def unify_dashes(text: str, ctx: RuleContext) -> str:
    """
    Turn a spaced hyphen, en dash or double hyphen into an em dash glued to
    the preceding word with a non-breaking space.

    A dash at the very start of a continuation run belongs to the sentence
    started by an earlier run, so it is treated as an inline dash rather than
    a dialogue dash. A hyphen between letters spaced on one side only is
    also a dash.
    """
    replacement = f"{NBSP}{EM_DASH} "
    if not ctx.is_first_run:
        text = LEADING_DASH_RE.sub(replacement, text)
    text = SPACED_DASH_RE.sub(replacement, text)
    return LOOSE_HYPHEN_RE.sub(rf"\1{replacement}", text)


def restore_tokens(text: str, ctx: RuleContext) -> str:
    return ctx.vault.restore(text)


def ellipsis(text: str, ctx: RuleContext) -> str:
    return ELLIPSIS_RE.sub(ELLIPSIS, text)


def punctuation_spacing(text: str, ctx: RuleContext) -> str:
    text = SPACE_BEFORE_PUNCT_RE.sub(r"\1", text)
    return MISSING_SPACE_RE.sub(r"\1 ", text)


def tighten_parentheses(text: str, ctx: RuleContext) -> str:
    text = OPEN_PAREN_RE.sub("(", text)
    return CLOSE_PAREN_RE.sub(")", text)


def bind_short_words(text: str, ctx: RuleContext) -> str:
    """Keep one- and two-letter prepositions on the line of the next word."""
    return SHORT_WORD_RE.sub(rf"\1{NBSP}", text)


def bind_numbers(text: str, ctx: RuleContext) -> str:
    """Glue numbers to the following word (or unit) and initials to surnames."""
    if ctx.bind_all_numbers:
        text = NUMBER_WORD_RE.sub(rf"\1{NBSP}", text)
    else:
        text = UNIT_RE.sub(rf"\1{NBSP}", text)
    return INITIALS_RE.sub(
        lambda match: NBSP.join(part for part in match.groups() if part), text
    )


def percent(text: str, ctx: RuleContext) -> str:
    return PERCENT_RE.sub(rf"\1{THIN_SPACE}%", text)


def dialogue_dash(text: str, ctx: RuleContext) -> str:
    return DIALOGUE_RE.sub(f"{EM_DASH} ", text)


def strip_trailing_blank_lines(text: str, ctx: RuleContext) -> str:
    """Drop blank lines at the end of the text, but only in the last run."""
    if not (ctx.strip_trailing_blank_lines and ctx.is_last_run):
        return text
    return TRAILING_BLANK_LINES_RE.sub("", text)


PROSE_STEPS: tuple[tuple[str, Step], ...] = (
    ("collapse_whitespace", collapse_whitespace),
    ("trim_edges", trim_edges),
    ("number_sign", number_sign),
    ("protect_hyphens", protect_hyphens),
    ("protect_abbreviations", protect_abbreviations),
    ("number_ranges", number_ranges),
    ("unify_dashes", unify_dashes),
    ("restore_tokens", restore_tokens),
    ("ellipsis", ellipsis),
    ("punctuation_spacing", punctuation_spacing),
    ("tighten_parentheses", tighten_parentheses),
    ("collapse_whitespace_again", collapse_whitespace),
    ("bind_short_words", bind_short_words),
    ("bind_numbers", bind_numbers),
    ("percent", percent),
    ("dialogue_dash", dialogue_dash),
    ("strip_trailing_blank_lines", strip_trailing_blank_lines),
)


def poetry_double_hyphen(text: str) -> str:
    return DOUBLE_HYPHEN_RE.sub(EM_DASH, text)


def poetry_ellipsis(text: str) -> str:
    return ELLIPSIS_RE.sub(ELLIPSIS, text)


def poetry_punctuation(text: str) -> str:
    text = SPACE_BEFORE_PUNCT_RE.sub(r"\1", text)
    return MISSING_SPACE_RE.sub(r"\1 ", text)


# Only punctuation-level fixes: verse spacing and tabbing is left alone.
POETRY_RULES: tuple[tuple[str, Callable[[str], str]], ...] = (
    ("double_hyphen", poetry_double_hyphen),
    ("ellipsis", poetry_ellipsis),
    ("punctuation", poetry_punctuation),
)
