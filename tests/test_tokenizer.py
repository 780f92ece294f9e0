"""Unit tests for the tokenizer.

WHY: Every casing decision flows through tokenization. A boundary in the
wrong place changes which words are learned; a lost character corrupts
the output text.

HOW: Tests cover word/separator classification, the apostrophe and
hyphen boundary rules, Unicode letters and digits, the empty-input edge
case, and exact reconstruction for a variety of inputs.
"""

import pytest

from truecaser.core.tokenizer import detokenize, iter_tokens, tokenize, words
from truecaser.core.tokens import Separator, Word


class TestBasicSplitting:
    """Words and separators alternate as maximal runs."""

    def test_simple_sentence(self):
        assert tokenize("Hello, world!") == [
            Word("Hello"),
            Separator(", "),
            Word("world"),
            Separator("!"),
        ]

    def test_leading_and_trailing_separators(self):
        assert tokenize("  (the cat)  ") == [
            Separator("  ("),
            Word("the"),
            Separator(" "),
            Word("cat"),
            Separator(")  "),
        ]

    def test_empty_input_yields_no_tokens(self):
        assert tokenize("") == []

    def test_whitespace_only_is_one_separator(self):
        assert tokenize(" \t ") == [Separator(" \t ")]

    def test_no_token_is_empty(self):
        for token in tokenize("a, b;; c -- d..."):
            assert token.text

    def test_iter_tokens_is_lazy_and_equivalent(self):
        sentence = "One two, three."
        iterator = iter_tokens(sentence)
        assert not isinstance(iterator, list)
        assert list(iterator) == tokenize(sentence)


class TestWordBoundaries:
    """Apostrophes continue words only between word characters."""

    def test_contraction_is_one_word(self):
        assert tokenize("don't") == [Word("don't")]

    def test_typographic_apostrophe_is_one_word(self):
        assert tokenize("don’t") == [Word("don’t")]

    def test_multiple_inner_apostrophes(self):
        assert tokenize("rock'n'roll") == [Word("rock'n'roll")]

    def test_leading_apostrophe_is_separator(self):
        assert tokenize("'tis") == [Separator("'"), Word("tis")]

    def test_trailing_apostrophe_is_separator(self):
        assert tokenize("dogs'") == [Word("dogs"), Separator("'")]

    def test_double_apostrophe_splits(self):
        assert tokenize("don''t") == [Word("don"), Separator("''"), Word("t")]

    def test_hyphen_is_separator(self):
        assert tokenize("Jean-Luc") == [Word("Jean"), Separator("-"), Word("Luc")]

    def test_underscore_is_separator(self):
        assert tokenize("snake_case") == [Word("snake"), Separator("_"), Word("case")]

    def test_digits_are_word_characters(self):
        assert tokenize("route 66a") == [Word("route"), Separator(" "), Word("66a")]

    def test_unicode_letters(self):
        assert words(tokenize("Straße in Ελλάδα")) == [Word("Straße"), Word("in"), Word("Ελλάδα")]


class TestWordKey:
    """Word.key is the lowercase fold used for lookups."""

    def test_key_is_lowercase(self):
        assert Word("NASA").key == "nasa"
        assert Word("iPhone").key == "iphone"


class TestReconstruction:
    """Concatenating token texts reproduces the input exactly."""

    @pytest.mark.parametrize("sentence", [
        "",
        "The cat sat.",
        "  leading and trailing  ",
        "Tabs\tand\nnewlines\r\n",
        "Punctuation!!! ... ?? (parens) [brackets] {braces}",
        "Emoji 🚀 and symbols © ™ — done",
        "Mixed-case McDonald's iPhone NASA",
        "'quoted' \"double\" ‘curly’ “quotes”",
        "numbers 3.14 and 1,000,000",
        "日本語のテキスト",
    ])
    def test_round_trip(self, sentence):
        assert detokenize(tokenize(sentence)) == sentence
