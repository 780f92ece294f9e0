"""Model training: sentences in, frozen casing model out.

WHY: The trainer owns the only mutable state in the system. Keeping it
in an explicit, caller-owned object (rather than a module-level
singleton) lets callers train several models side by side, shard a
corpus across processes, and hand the result off exactly once.

HOW: add_sentence() tokenizes a sentence and records every word's
surface form in CasingStatistics, flagging the first word as
sentence-initial. into_model() reduces the statistics to one casing
decision per word and returns an immutable Model.

RULES:
- The first Word token of a sentence is sentence-initial; all others are not
- Sentences without any Word token do not count as sentences
- into_model() consumes the trainer; any later call raises TrainerConsumedError
- The chosen casing depends only on counts, never on training order
- Best-casing policy (see choose_casing):
  1. Forms only ever seen sentence-initially are not candidates when the
     word has non-initial evidence
  2. Sentence-initial occurrences of the first-letter-capitalized form are
     not credited; highest score wins, ties go to the all-lowercase form,
     then to the lexicographically smallest form
  3. Words seen only sentence-initially keep their top form, folding the
     first letter when only the first letter was uppercase
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from truecaser.core.errors import TrainerConsumedError
from truecaser.core.model import Model
from truecaser.core.statistics import CasingStatistics
from truecaser.core.tokenizer import iter_tokens
from truecaser.core.tokens import Word

logger = logging.getLogger(__name__)


def positional_form(key: str) -> str:
    """The form a lowercase word takes when capitalized for sentence position."""
    return key[:1].upper() + key[1:]


def _rank(form: str, score: int, key: str) -> Tuple[int, bool, str]:
    # min() over this tuple: highest score, then the lowercase form, then lexicographic
    return (-score, form != key, form)


def choose_casing(
    key: str,
    initial: Mapping[str, int],
    noninitial: Mapping[str, int],
) -> Optional[str]:
    """Pick the single most representative casing-form for one word.

    WHY: This is where "capitalized because it starts a sentence" is
    separated from "capitalized because it is a name or acronym", using
    word-level counts only.

    HOW: With non-initial evidence, only non-initial forms compete, and
    their sentence-initial occurrences count too unless the form is just
    the positionally capitalized word. Without it, the most frequent
    sentence-initial form is used, lowercasing its first letter when that
    is the only capital in it.

    Args:
        key: The lowercased word.
        initial: Sentence-initial form counts.
        noninitial: Non-initial form counts.

    Returns:
        The chosen form, or None when there is no evidence at all.
    """
    capitalized = positional_form(key)

    if noninitial:
        def score(form: str) -> int:
            # a caseless first letter means no positional capital was applied
            positional = form == capitalized and capitalized != key
            credited = 0 if positional else initial.get(form, 0)
            return noninitial[form] + credited

        return min(noninitial, key=lambda form: _rank(form, score(form), key))

    if initial:
        best = min(initial, key=lambda form: _rank(form, initial[form], key))
        if best == capitalized:
            return key
        return best

    return None


class ModelTrainer:
    """Accumulates casing statistics and converts them into a Model.

    Typical use::

        trainer = ModelTrainer()
        trainer.add_sentences(lines)
        model = trainer.into_model()
    """

    def __init__(self, statistics: Optional[CasingStatistics] = None) -> None:
        self._statistics: Optional[CasingStatistics] = (
            statistics if statistics is not None else CasingStatistics()
        )

    @classmethod
    def from_statistics(cls, statistics: CasingStatistics) -> ModelTrainer:
        """Wrap statistics built elsewhere, e.g. merged shards."""
        return cls(statistics)

    @property
    def statistics(self) -> CasingStatistics:
        """The live statistics (raises once the trainer is consumed)."""
        if self._statistics is None:
            raise TrainerConsumedError("ModelTrainer was already converted into a model")
        return self._statistics

    def add_sentence(self, sentence: str) -> None:
        """Record the casing of every word in one sentence."""
        stats = self.statistics
        first = True
        for token in iter_tokens(sentence):
            if isinstance(token, Word):
                stats.record(token.text, sentence_initial=first)
                if first:
                    stats.count_sentence()
                    first = False

    def add_sentences(self, sentences: Iterable[str]) -> int:
        """Feed every sentence of an iterable; returns how many were read."""
        count = 0
        for sentence in sentences:
            self.add_sentence(sentence)
            count += 1
        return count

    def add_sentences_from_file(self, path: Union[str, Path]) -> int:
        """Train on a sentence-per-line text file.

        Raises:
            CorpusReadError: The file could not be opened or decoded.
        """
        from truecaser.corpus import iter_sentences

        count = self.add_sentences(iter_sentences(path))
        logger.debug("Read %d sentences from %s", count, path)
        return count

    def into_model(self) -> Model:
        """Reduce the statistics to a Model and consume the trainer."""
        stats = self.statistics
        self._statistics = None

        best_casing: Dict[str, str] = {}
        for key in stats.words():
            form = choose_casing(key, stats.initial_forms(key), stats.noninitial_forms(key))
            if form is not None:
                best_casing[key] = form

        logger.info(
            "Built model with %d words from %d sentences",
            len(best_casing), stats.sentence_count,
        )
        return Model(best_casing)
