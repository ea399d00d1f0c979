"""
Unit tests for text normalization.
"""

import re

import pytest

from word_filter.normalizer import (
    SUBSTITUTIONS,
    apply_substitutions,
    normalize,
    strip_accents,
)


class TestStripAccents:
    """Tests for diacritic removal."""

    def test_accented_vowels(self):
        assert strip_accents("àéîõü") == "aeiou"

    def test_cedilla_and_tilde(self):
        assert strip_accents("façade señor") == "facade senor"

    def test_plain_ascii_unchanged(self):
        assert strip_accents("hello world") == "hello world"


class TestApplySubstitutions:
    """Tests for leetspeak/symbol substitution."""

    def test_every_table_entry(self):
        for symbol, letter in SUBSTITUTIONS:
            assert apply_substitutions(symbol) == letter

    def test_all_occurrences_replaced(self):
        assert apply_substitutions("$$$") == "sss"

    def test_leetspeak_word(self):
        assert apply_substitutions("5h1t") == "shit"
        assert apply_substitutions("@$$") == "ass"
        assert apply_substitutions("b!7ch") == "bitch"

    def test_inverted_exclamation(self):
        assert apply_substitutions("¡") == "i"

    def test_unlisted_digit_untouched(self):
        assert apply_substitutions("2") == "2"


class TestNormalize:
    """Tests for the full normalization pipeline."""

    def test_lowercase(self):
        assert normalize("HELLO") == "hello"
        assert normalize("HeLLo") == "hello"

    def test_accents(self):
        assert normalize("Fück") == "fuck"

    def test_substitutions(self):
        assert normalize("B4D") == "bhd"
        assert normalize("sh1t") == "shit"
        assert normalize("@$$") == "ass"

    def test_punctuation_removed(self):
        assert normalize("hello, world.") == "hello world"
        assert normalize("'quoted'") == "quoted"

    def test_exclamation_becomes_i(self):
        # Substitution runs before punctuation is stripped
        assert normalize("hey!") == "heyi"

    def test_unlisted_digit_dropped(self):
        assert normalize("ba2d") == "bad"

    def test_multiple_spaces_collapsed(self):
        assert normalize("you    are   bad") == "you are bad"

    def test_tabs_and_newlines_become_spaces(self):
        assert normalize("you\tare\nbad") == "you are bad"

    def test_removed_symbol_leaves_single_space(self):
        assert normalize("a # b") == "a b"

    def test_emoji_removed(self):
        assert normalize("nice 👍") == "nice "

    def test_non_latin_removed(self):
        assert normalize("привет") == ""

    def test_empty(self):
        assert normalize("") == ""

    @pytest.mark.parametrize("text", [
        "Hello World",
        "  leading and trailing  ",
        "Sh1t!! @ss $tuff",
        "a # b ## c",
        "tab\t\tseparated\n\nlines",
        "Déjà vu ¡oh!",
        "123 456 789",
        "",
    ])
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once

    @pytest.mark.parametrize("text", [
        "Hello,   World!!",
        "a # b ## c",
        "tab\t\tseparated\n\nlines",
        "mixed 2 digits 2 here",
        "Ünïcödé & émoji 🎉🎉",
    ])
    def test_only_lowercase_letters_and_single_spaces(self, text):
        result = normalize(text)
        assert re.fullmatch(r'[a-z ]*', result)
        assert "  " not in result
