from ru_typograph.rules import (
    HYPHENATED_WORDS_RE,
    PROSE_STEPS,
    RuleContext,
    bind_numbers,
    bind_short_words,
    collapse_whitespace,
    dialogue_dash,
    number_ranges,
    number_sign,
    percent,
    poetry_double_hyphen,
    protect_abbreviations,
    protect_hyphens,
    punctuation_spacing,
    restore_tokens,
    strip_trailing_blank_lines,
    tighten_parentheses,
    trim_edges,
    unify_dashes,
)

NBSP = "\u00a0"


def test_prose_steps_keep_protection_around_dash_rules():
    """Hyphens are hidden before dash rewriting and restored right after."""
    names = [name for name, _ in PROSE_STEPS]
    assert len(names) == 17
    assert names[0] == "collapse_whitespace"
    assert names[-1] == "strip_trailing_blank_lines"
    assert (
        names.index("protect_hyphens")
        < names.index("protect_abbreviations")
        < names.index("number_ranges")
        < names.index("unify_dashes")
        < names.index("restore_tokens")
    )


def test_collapse_whitespace_keeps_newlines():
    ctx = RuleContext()
    assert collapse_whitespace("a  \t b\n\nc", ctx) == "a b\n\nc"


def test_trim_edges_only_on_first_run():
    assert trim_edges("  текст", RuleContext(is_first_run=True)) == "текст"
    assert trim_edges("  текст", RuleContext()) == "  текст"


def test_number_sign_gets_nbsp():
    ctx = RuleContext()
    assert number_sign("№5", ctx) == f"№{NBSP}5"
    assert number_sign("№ 12", ctx) == f"№{NBSP}12"


def test_hyphenated_words_are_hidden_and_restored():
    """Protected compounds contain no hyphen until restoration."""
    ctx = RuleContext()
    protected = protect_hyphens("Из-за угла кто-нибудь вышел", ctx)
    assert "-" not in protected
    assert restore_tokens(protected, ctx) == "Из-за угла кто-нибудь вышел"


def test_hyphenated_dictionary_accepts_yo():
    assert HYPHENATED_WORDS_RE.fullmatch("всё-таки")
    assert HYPHENATED_WORDS_RE.fullmatch("Все-таки")
    assert HYPHENATED_WORDS_RE.search("невсе-таки") is None


def test_abbreviations_are_protected():
    ctx = RuleContext()
    protected = protect_abbreviations("столы, стулья и т.-д.", ctx)
    assert "т.-д." not in protected
    assert len(ctx.vault) == 1
    assert restore_tokens(protected, ctx) == "столы, стулья и т.-д."


def test_number_ranges_use_en_dash():
    ctx = RuleContext()
    assert number_ranges("1966-1977", ctx) == "1966–1977"
    assert number_ranges("1966 - 1977", ctx) == "1966–1977"
    assert number_ranges("1966 – 1977", ctx) == "1966–1977"
    assert number_ranges("12345-6", ctx) == "12345-6"


def test_unify_dashes_variants():
    """Spaced hyphens, en dashes and double hyphens all become em dashes."""
    ctx = RuleContext(is_first_run=True)
    expected = f"Москва{NBSP}— столица"
    assert unify_dashes("Москва - столица", ctx) == expected
    assert unify_dashes("Москва -- столица", ctx) == expected
    assert unify_dashes("Москва – столица", ctx) == expected
    assert unify_dashes(expected, ctx) == expected


def test_unify_dashes_hyphen_spaced_on_one_side():
    ctx = RuleContext()
    expected = f"Москва{NBSP}— столица"
    assert unify_dashes("Москва- столица", ctx) == expected
    assert unify_dashes("Москва -столица", ctx) == expected
    assert unify_dashes("Москва-столица", ctx) == "Москва-столица"


def test_unify_dashes_leading_dash_depends_on_run_position():
    """A dash opening a continuation run is an inline dash."""
    assert unify_dashes(" - да", RuleContext()) == f"{NBSP}— да"
    assert unify_dashes(" - да", RuleContext(is_first_run=True)) == " - да"


def test_punctuation_spacing():
    ctx = RuleContext()
    assert punctuation_spacing("Привет ,мир", ctx) == "Привет, мир"
    assert punctuation_spacing("Да !Нет .", ctx) == "Да! Нет."
    assert punctuation_spacing("3.14", ctx) == "3.14"


def test_tighten_parentheses():
    assert tighten_parentheses("скобках( вот так )", RuleContext()) == "скобках(вот так)"


def test_bind_short_words():
    ctx = RuleContext()
    assert bind_short_words("в магазин", ctx) == f"в{NBSP}магазин"
    assert bind_short_words("и в дом", ctx) == f"и{NBSP}в{NBSP}дом"
    assert bind_short_words("К врачу", ctx) == f"К{NBSP}врачу"
    assert bind_short_words("из-за угла", ctx) == "из-за угла"
    assert bind_short_words("Он сказал и", ctx) == "Он сказал и"


def test_bind_numbers_all_words_or_units_only():
    everything = RuleContext()
    units_only = RuleContext(bind_all_numbers=False)
    assert bind_numbers("10 кг", everything) == f"10{NBSP}кг"
    assert bind_numbers("5 яблок", everything) == f"5{NBSP}яблок"
    assert bind_numbers("10 кг", units_only) == f"10{NBSP}кг"
    assert bind_numbers("5 яблок", units_only) == "5 яблок"
    assert bind_numbers("5 тонн", units_only) == "5 тонн"


def test_bind_numbers_joins_initials():
    ctx = RuleContext()
    assert bind_numbers("А. С. Пушкин", ctx) == f"А.{NBSP}С.{NBSP}Пушкин"
    assert bind_numbers("писал И. Иванов", ctx) == f"писал И.{NBSP}Иванов"


def test_percent_uses_thin_space():
    ctx = RuleContext()
    assert percent("15%", ctx) == "15\u2009%"
    assert percent("15 %", ctx) == "15\u2009%"


def test_dialogue_dash():
    ctx = RuleContext()
    assert dialogue_dash("- Привет!", ctx) == "— Привет!"
    assert dialogue_dash("Текст\n - Да", ctx) == "Текст\n— Да"
    assert dialogue_dash("-- Нет", ctx) == "— Нет"
    assert dialogue_dash("-5 градусов", ctx) == "-5 градусов"


def test_strip_trailing_blank_lines():
    assert strip_trailing_blank_lines("abc\n\n  \n", RuleContext()) == "abc"
    keep = RuleContext(strip_trailing_blank_lines=False)
    assert strip_trailing_blank_lines("abc\n\n", keep) == "abc\n\n"
    inner_run = RuleContext(is_last_run=False)
    assert strip_trailing_blank_lines("abc\n", inner_run) == "abc\n"


def test_poetry_double_hyphen_keeps_spacing():
    assert poetry_double_hyphen("волны -- ветер") == "волны — ветер"
