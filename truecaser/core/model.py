"""The frozen truecasing model and its decoder.

WHY: Training produces far more information than decoding needs. The
Model keeps only one decision per known word so the persisted artifact
stays small and each token is decided with a single dictionary lookup.

HOW: ``best_casing`` maps a lowercased word to its learned casing-form.
truecase() tokenizes a sentence, replaces each word with its learned
form (or applies the unknown-word policy), capitalizes the first letter
of the sentence-initial word when the chosen form starts lowercase, and
concatenates everything back together.

RULES:
- A Model is never mutated after construction; best_casing is read-only
- Separators are passed through untouched; only Word casing changes
- Unknown words: UnknownWordPolicy.PRESERVE (default) keeps the input
  casing, UnknownWordPolicy.LOWERCASE folds it to lowercase
- Sentence-initial word: only a leading lowercase letter is uppercased,
  the rest of the chosen form is kept ("NATO" stays "NATO")
- truecase() keeps no state between calls and is safe to run concurrently
- Equality compares best_casing only
"""

from __future__ import annotations

import enum
import logging
from types import MappingProxyType
from typing import BinaryIO, Iterator, List, Mapping, Optional, Sequence

from truecaser.core.serialization import decode_model, encode_model
from truecaser.core.tokenizer import detokenize, iter_tokens
from truecaser.core.tokens import Word

logger = logging.getLogger(__name__)


class UnknownWordPolicy(str, enum.Enum):
    """What to do with a word the model has never seen.

    Inherits from str so values round-trip through config, CLI flags and JSON.
    """

    PRESERVE = "preserve"
    LOWERCASE = "lowercase"


DEFAULT_UNKNOWN_WORD_POLICY = UnknownWordPolicy.PRESERVE


def _capitalize_initial(form: str) -> str:
    first = form[:1]
    if first.islower():
        upper = first.upper()
        # "ß" -> "SS" would change the word length
        if len(upper) == 1:
            return upper + form[1:]
    return form


class Model:
    """Immutable mapping from lowercased words to their learned casing."""

    def __init__(self, best_casing: Mapping[str, str]) -> None:
        self._best_casing = MappingProxyType(dict(best_casing))

    @property
    def best_casing(self) -> Mapping[str, str]:
        """Read-only view of lowercased word → chosen casing-form."""
        return self._best_casing

    def casing_for(self, word: str) -> Optional[str]:
        """The learned form for ``word`` (any casing), or None if unknown."""
        return self._best_casing.get(word.lower())

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._best_casing

    def __len__(self) -> int:
        return len(self._best_casing)

    def __iter__(self) -> Iterator[str]:
        return iter(self._best_casing)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return dict(self._best_casing) == dict(other._best_casing)

    def __repr__(self) -> str:
        return "Model(words={})".format(len(self._best_casing))

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def _decide(self, text: str, initial: bool, unknown_words: UnknownWordPolicy) -> str:
        key = text.lower()
        form = self._best_casing.get(key)
        if form is None:
            form = key if unknown_words is UnknownWordPolicy.LOWERCASE else text
        if initial:
            form = _capitalize_initial(form)
        return form

    def truecase(
        self,
        sentence: str,
        unknown_words: UnknownWordPolicy = DEFAULT_UNKNOWN_WORD_POLICY,
    ) -> str:
        """Restore the casing of one sentence.

        Args:
            sentence: Input text, in any casing.
            unknown_words: Fallback for words absent from the model.

        Returns:
            The sentence with every word re-cased and all separators unchanged.
        """
        unknown_words = UnknownWordPolicy(unknown_words)
        pieces = []
        initial = True
        for token in iter_tokens(sentence):
            if isinstance(token, Word):
                pieces.append(Word(self._decide(token.text, initial, unknown_words)))
                initial = False
            else:
                pieces.append(token)
        return detokenize(pieces)

    def truecase_tokens(
        self,
        words: Sequence[str],
        unknown_words: UnknownWordPolicy = DEFAULT_UNKNOWN_WORD_POLICY,
    ) -> List[str]:
        """Re-case pre-tokenized words; the first element is sentence-initial."""
        unknown_words = UnknownWordPolicy(unknown_words)
        return [
            self._decide(word, i == 0, unknown_words)
            for i, word in enumerate(words)
        ]

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_bytes(self) -> bytes:
        """Serialize the model (see truecaser.core.serialization)."""
        return encode_model(self._best_casing)

    @classmethod
    def from_bytes(cls, data: bytes) -> Model:
        """Rebuild a model from bytes produced by to_bytes().

        Raises:
            SerializationError: The data is malformed or incompatible.
        """
        return cls(decode_model(data))

    def save(self, stream: BinaryIO) -> None:
        """Write the serialized model to a binary stream."""
        data = self.to_bytes()
        stream.write(data)
        logger.info("Saved model with %d words (%d bytes)", len(self), len(data))

    @classmethod
    def load(cls, stream: BinaryIO) -> Model:
        """Read a serialized model from a binary stream."""
        model = cls.from_bytes(stream.read())
        logger.info("Loaded model with %d words", len(model))
        return model
