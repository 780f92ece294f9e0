"""Sentence tokenization and reconstruction.

WHY: Truecasing must change nothing but letter case. The tokenizer
splits a sentence into words and the runs between them so the decoder
can re-case words and glue everything back together byte-for-byte.

HOW: A single regular expression finds word runs. Every gap between two
word matches (and before the first / after the last) becomes a
Separator. Reconstruction is plain concatenation.

RULES:
- Word characters are Unicode letters and digits (``[^\\W_]``)
- An apostrophe (' or ’) between two word-character runs continues the
  word: "don't" and "rock'n'roll" are single words
- Leading/trailing apostrophes, hyphens, underscores and everything else
  are separators: "Jean-Luc" → Word, Separator("-"), Word
- Empty input yields an empty list; no token is ever empty
- Pure function of its input, safe to call from any thread
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, List

from truecaser.core.tokens import Separator, Token, Word

# Runs of letters/digits, joined by single inner apostrophes.
_WORD_RE = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")


def iter_tokens(sentence: str) -> Iterator[Token]:
    """Lazily yield the tokens of a sentence in order."""
    position = 0
    for match in _WORD_RE.finditer(sentence):
        start, end = match.span()
        if start > position:
            yield Separator(sentence[position:start])
        yield Word(match.group())
        position = end
    if position < len(sentence):
        yield Separator(sentence[position:])


def tokenize(sentence: str) -> List[Token]:
    """Split a sentence into an ordered list of Word and Separator tokens.

    Args:
        sentence: Any string, including the empty string.

    Returns:
        Tokens whose texts concatenate back to ``sentence``.
    """
    return list(iter_tokens(sentence))


def words(tokens: Iterable[Token]) -> List[Word]:
    """Return only the Word tokens, in order."""
    return [t for t in tokens if isinstance(t, Word)]


def detokenize(tokens: Iterable[Token]) -> str:
    """Reassemble a sentence from its tokens."""
    return "".join(t.text for t in tokens)
