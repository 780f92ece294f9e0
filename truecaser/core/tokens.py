"""Token dataclasses produced by the tokenizer.

WHY: The trainer and the decoder both walk a sentence as an ordered
sequence of words and separators. A small typed representation keeps
the two in agreement about what a "word" is and makes reconstruction
trivial.

HOW: Two frozen dataclasses share one field:
  Word      — a run of word characters whose casing may be changed
  Separator — whitespace, punctuation or any other non-word run

RULES:
- Token text is never empty
- Concatenating every token's text in order reproduces the sentence
- Only Word text may be re-cased; Separator text is passed through
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Word:
    """A word token.

    RULES:
    - text: the surface form exactly as it appeared in the input
    - key: lowercase fold of text, used for every model lookup
    """

    text: str

    @property
    def key(self) -> str:
        return self.text.lower()


@dataclass(frozen=True)
class Separator:
    """A non-word run (whitespace, punctuation, symbols)."""

    text: str


Token = Union[Word, Separator]
