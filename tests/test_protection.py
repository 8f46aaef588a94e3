import pytest

from ru_typograph.protection import (
    MARKER_RE,
    MarkerCollisionError,
    TokenVault,
    contains_marker_alphabet,
)


def test_protect_and_restore_round_trip():
    vault = TokenVault()
    marker = vault.protect("т.-е.")
    text = f"Это, {marker} пример"
    assert MARKER_RE.fullmatch(marker)
    assert "т.-е." not in text
    assert vault.restore(text) == "Это, т.-е. пример"


def test_identical_originals_share_a_marker():
    vault = TokenVault()
    assert vault.protect("-") == vault.protect("-")
    assert vault.protect("-") != vault.protect("т.-д.")
    assert len(vault) == 2


def test_nested_markers_are_fully_restored():
    """A marker whose original contains an older marker unwinds completely."""
    vault = TokenVault()
    hyphen = vault.protect("-")
    word = vault.protect(f"по{hyphen}русски")
    restored = vault.restore(f"Говорю {word}.")
    assert restored == "Говорю по-русски."
    assert not contains_marker_alphabet(restored)


def test_many_slots_stay_distinct():
    vault = TokenVault()
    markers = [vault.protect(str(index)) for index in range(600)]
    assert len(set(markers)) == 600
    assert vault.restore("".join(markers)) == "".join(str(i) for i in range(600))


def test_check_rejects_reserved_characters():
    TokenVault.check("обычный текст")
    with pytest.raises(MarkerCollisionError):
        TokenVault.check("текст \ue000 с маркером")
