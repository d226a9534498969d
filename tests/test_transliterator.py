"""
Unit tests for traditional script → Latin transliteration.
"""

import re

import pytest

from hudam.transliterator import (
    NORMALIZATION_RULES,
    NORMALIZED_TABLE,
    STRICT_TABLE,
    apply_he_rewrites,
    to_latin,
    transliterate_pair,
)


class TestToLatinBasics:
    """Test table lookup and edge inputs."""

    def test_none_passes_through(self) -> None:
        """None is returned unchanged in both modes."""
        assert to_latin(None) is None
        assert to_latin(None, normalize=False) is None

    def test_empty_string(self) -> None:
        """Empty input gives empty output."""
        assert to_latin("", True) == ""
        assert to_latin("", False) == ""

    def test_simple_word(self) -> None:
        """Letters map one to one."""
        assert to_latin("ᠮᠣᠩᠭᠣᠯ") == "monggol"
        assert to_latin("ᠮᠣᠨᠭᠣᠯ") == "mongol"

    def test_digraph_output(self) -> None:
        """ᠩ produces two Latin letters."""
        assert to_latin("ᠩ") == "ng"

    def test_unknown_characters_pass_through(self) -> None:
        """Characters outside the table are copied verbatim."""
        assert to_latin("тамир") == "тамир"
        assert to_latin("x-1!") == "x-1!"
        assert to_latin("ᠮᠣᠨ-ᠮᠣᠨ") == "mon-mon"

    def test_digits(self) -> None:
        """Mongolian digits become ASCII digits."""
        assert to_latin("\u1810\u1811\u1819") == "019"
        assert to_latin("\u1815", normalize=False) == "5"

    def test_deterministic(self) -> None:
        """Same input, same output."""
        text = "ᠲᠠᠮᠢᠷ ᠭᠡᠷ"
        assert to_latin(text) == to_latin(text)
        assert to_latin(text, False) == to_latin(text, False)


class TestNormalizedVersusStrict:
    """Test the differences between the two renderings."""

    def test_u_collapses_to_o(self) -> None:
        """ᠤ is o when normalized, u when strict."""
        assert to_latin("ᠤᠰᠤ") == "oso"
        assert to_latin("ᠤᠰᠤ", normalize=False) == "usu"

    def test_ue_collapses_to_oe(self) -> None:
        """ᠦ is ö when normalized, ü when strict."""
        assert to_latin("ᠬᠦᠮᠦᠨ", normalize=False) == "qümün"
        assert to_latin("ᠬᠦᠮᠦᠨ") == "qömön"

    def test_t_collapses_to_d(self) -> None:
        """ᠲ is d when normalized, t when strict."""
        assert to_latin("ᠲᠠᠮᠢᠷ") == "damir"
        assert to_latin("ᠲᠠᠮᠢᠷ", normalize=False) == "tamir"

    def test_free_variation_selectors(self) -> None:
        """Selectors are dropped when normalized and kept when strict."""
        for selector in ("\u180a", "\u180b", "\u180c", "\u180d"):
            text = "ᠠ" + selector + "ᠨ"
            assert to_latin(text) == "an"
            assert to_latin(text, normalize=False) == "a" + selector + "n"

    def test_vowel_separator(self) -> None:
        """The vowel separator is dropped or becomes a space."""
        assert to_latin("ᠠ\u180eᠠ") == "aa"
        assert to_latin("ᠠ\u180eᠠ", normalize=False) == "a a"

    def test_strict_keeps_ge(self) -> None:
        """No ge/qe rewriting in strict mode."""
        assert to_latin("ᠭᠡᠷ", normalize=False) == "ger"
        assert to_latin("ᠬᠡᠯᠡ", normalize=False) == "qele"

    def test_tables_are_read_only(self) -> None:
        """The tables cannot be modified."""
        with pytest.raises(TypeError):
            NORMALIZED_TABLE["ᠠ"] = "x"
        with pytest.raises(TypeError):
            STRICT_TABLE["ᠠ"] = "x"

    def test_transliterate_pair(self) -> None:
        """Both renderings at once."""
        assert transliterate_pair("ᠲᠤᠮᠤᠷ") == ("domor", "tumur")
        assert transliterate_pair(None) == (None, None)


class TestHeRewrites:
    """Test the ge/qe → he post-pass."""

    def test_initial_ge(self) -> None:
        """ge at the start of the string."""
        assert to_latin("ᠭᠡᠷ") == "her"

    def test_initial_qe(self) -> None:
        """qe at the start of the string."""
        assert to_latin("ᠬᠡᠯᠡ") == "hele"

    def test_after_space(self) -> None:
        """ge/qe at the start of a later word."""
        assert to_latin("ᠰᠠᠢᠨ ᠭᠡᠷ") == "sain her"
        assert to_latin("ᠰᠠᠢᠨ ᠬᠡᠯᠡ") == "sain hele"

    def test_mid_word(self) -> None:
        """ge/qe after a letter."""
        assert to_latin("ᠦᠭᠡ") == "öhe"
        assert to_latin("ᠪᠠᠬᠡ") == "bahe"

    def test_back_to_back_syllables(self) -> None:
        """Consecutive syllables are all rewritten."""
        assert apply_he_rewrites("agege") == "ahehe"
        assert apply_he_rewrites("gegen") == "hehen"

    def test_case_insensitive(self) -> None:
        """Upper-case input is matched too."""
        assert apply_he_rewrites("GEr") == "her"
        assert apply_he_rewrites("a QE") == "a he"

    def test_other_syllables_untouched(self) -> None:
        """ga, gi, qa are left alone."""
        assert apply_he_rewrites("gal qar gi") == "gal qar gi"

    def test_no_ge_left_after_letter_space_or_start(self) -> None:
        """The post-pass leaves no ge/qe at word start or mid-word."""
        leftover = re.compile(r"(^|[\sa-zöüčšž])(ge|qe)", re.IGNORECASE)
        samples = ["ᠭᠡᠭᠡᠨ", "ᠠᠭᠡᠭᠡ", "ᠬᠡᠬᠡ ᠭᠡᠭᠡ", "ᠮᠣᠩᠭᠣᠯ ᠦᠭᠡ", "ᠪᠢᠴᠢᠭᠡ"]
        for sample in samples:
            assert not leftover.search(to_latin(sample)), sample


def test_normalization_rules_listed() -> None:
    """The rules shown to users cover vowels, consonants and he."""
    names = [name for name, _ in NORMALIZATION_RULES]
    assert "Vowels" in names
    assert "Consonants" in names
    assert any("ᠬᠡ" in name for name in names)
