import pytest

from ru_typograph.config import TypographConfig
from ru_typograph.models import Document
from ru_typograph.pipeline import (
    process,
    process_document,
    process_poetry,
    process_prose,
)
from ru_typograph.protection import MarkerCollisionError, contains_marker_alphabet
from ru_typograph.samples import EXAMPLE_POEM, EXAMPLE_TEXT
from tests.utils import SECOND_STANZA

NBSP = "\u00a0"


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("1966-1977", "1966–1977"),
        ("1966 - 1977", "1966–1977"),
        ("Подождите...", "Подождите…"),
        ("Подождите....", "Подождите…"),
        ("Москва- столица", f"Москва{NBSP}— столица"),
        ("в магазин", f"в{NBSP}магазин"),
        ("15%", "15\u2009%"),
        ("- Привет!", "— Привет!"),
        ("Москва - столица", f"Москва{NBSP}— столица"),
        ("Дом № 5", f"Дом №{NBSP}5"),
        ("скобках( вот так )", "скобках(вот так)"),
        ("Вес: 10 кг", f"Вес: 10{NBSP}кг"),
    ],
)
def test_process_prose_examples(source: str, expected: str):
    """Single-line inputs are prose and get every matching rule."""
    assert process(source) == expected


def test_hyphenated_words_survive():
    """Compound words keep their hyphen while spaced hyphens become dashes."""
    result = process("кто-нибудь сказал - по-русски")
    assert result == f"кто-нибудь сказал{NBSP}— по-русски"


def test_abbreviations_survive():
    result = process("столы и т.-д. и т.-п.")
    assert "т.-д." in result
    assert "т.-п." in result
    assert "—" not in result


def test_no_markers_leak():
    """Output never contains the reserved marker alphabet."""
    samples = [
        EXAMPLE_TEXT,
        "Из-за угла кое-как вышел кто-то",
        "и т.-д., т.-е. всё-таки",
        "из-под - стола -- 1999-2000",
    ]
    for sample in samples:
        assert not contains_marker_alphabet(process(sample))
        assert not contains_marker_alphabet(process_prose(sample))


def test_idempotent_on_typeset_text():
    """Running the pipeline on its own output changes nothing."""
    once = process("Москва - столица, а 1966-1977 - годы. В доме 15% жильцов...")
    assert process(once) == once


def test_first_run_trims_leading_whitespace():
    assert process("   Текст", is_first_run=True) == "Текст"
    assert process("   Текст") == " Текст"


def test_indented_dash_depends_on_run_position():
    """A leading dash is dialogue in a first run and inline in a continuation."""
    assert process("  - Привет!", is_first_run=True) == "— Привет!"
    assert process("  - Привет!") == f"{NBSP}— Привет!"
    assert process("Текст\n  - Привет!") == "Текст\n— Привет!"


def test_empty_input():
    assert process(None) == ""
    assert process("") == ""
    assert process_poetry(None) == ""


def test_reserved_characters_are_rejected():
    with pytest.raises(MarkerCollisionError):
        process("текст \ue000 с маркером")


def test_poem_keeps_indentation():
    """Verse keeps its leading spaces and only punctuation changes."""
    result = process(EXAMPLE_POEM)
    lines = result.split("\n")
    assert all(line.startswith(" " * 8) for line in lines)
    assert lines[1] == "        В тумане моря голубом…"
    assert NBSP not in result


def test_process_poetry_rules():
    result = process_poetry(SECOND_STANZA + "\n\n    Строка ,и ещё")
    lines = result.split("\n")
    assert lines[0] == "    Играют волны — ветер свищет,"
    assert lines[1] == "    И мачта гнется и скрыпит…"
    assert lines[4] == ""
    assert lines[5] == "    Строка, и ещё"


def test_forced_mode_overrides_classifier():
    prose = TypographConfig(mode="prose")
    poetry = TypographConfig(mode="poetry")
    assert process("a  b", config=poetry) == "a  b"
    assert process("a  b", config=prose) == "a b"
    assert f"в{NBSP}тумане" in process(EXAMPLE_POEM, config=prose).lower()


def test_bind_all_numbers_option():
    assert process("Купил 5 яблок") == f"Купил 5{NBSP}яблок"
    units_only = TypographConfig(bind_all_numbers=False)
    assert process("Купил 5 яблок", config=units_only) == "Купил 5 яблок"
    assert process("Купил 5 кг", config=units_only) == f"Купил 5{NBSP}кг"


def test_trailing_blank_lines_option():
    assert process("Текст\n\n") == "Текст"
    keep = TypographConfig(strip_trailing_blank_lines=False)
    assert process("Текст\n\n", config=keep) == "Текст\n\n"


def test_process_document_reports_stats():
    """process_document returns the rewritten document and its counts."""
    doc = Document(doc_id="doc", text="Дефисы  --  вместо тире...")
    processed, stats = process_document(doc)
    assert processed.doc_id == "doc"
    assert processed.text == f"Дефисы{NBSP}— вместо тире…"
    assert doc.text == "Дефисы  --  вместо тире..."
    assert stats.original_length == len(doc.text)
    assert stats.processed_length == len(processed.text)
    assert stats.multi_space_count == 2
    assert stats.double_hyphen_count == 1
    assert stats.triple_dot_count == 1
    assert stats.is_poetry is False
