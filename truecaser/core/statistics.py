"""Mutable casing statistics accumulated during training.

WHY: Choosing a word's casing needs more than "which form was seen
most": a capital letter at the start of a sentence says nothing about
the word itself. The statistics therefore keep sentence-initial and
non-initial observations apart so the trainer can discount positional
capitalization.

HOW: Two nested mappings, lowercased word → Counter of surface forms,
one for sentence-initial occurrences and one for all other occurrences.
Every aggregate the trainer or a caller needs (total casing counts,
per-position totals) is derived from these two tables.

RULES:
- Keys are always the lowercase fold of every surface form recorded under them
- Counts only ever increase; per-word views are read-only proxies
- Merging is element-wise count addition: commutative and associative,
  with empty statistics as the identity
- Not thread-safe: one writer at a time, shard and merge for parallelism
"""

from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import Dict, Iterable, Mapping


class CasingStatistics:
    """Per-word casing-form counts, split by sentence position."""

    def __init__(self) -> None:
        self._initial: Dict[str, Counter] = {}
        self._noninitial: Dict[str, Counter] = {}
        self._sentences = 0

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def record(self, form: str, sentence_initial: bool, count: int = 1) -> None:
        """Record ``count`` observations of a surface form.

        Args:
            form: The word exactly as it appeared.
            sentence_initial: True for the first word of a sentence.
            count: Number of observations to add (must be positive).
        """
        if count <= 0:
            raise ValueError("count must be positive, got {}".format(count))
        table = self._initial if sentence_initial else self._noninitial
        key = form.lower()
        forms = table.get(key)
        if forms is None:
            forms = table[key] = Counter()
        forms[form] += count

    def count_sentence(self) -> None:
        """Note that one more non-empty sentence was observed."""
        self._sentences += 1

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    def initial_forms(self, key: str) -> Mapping[str, int]:
        """Sentence-initial surface forms of ``key`` with their counts."""
        return MappingProxyType(self._initial.get(key, {}))

    def noninitial_forms(self, key: str) -> Mapping[str, int]:
        """Non-initial surface forms of ``key`` with their counts."""
        return MappingProxyType(self._noninitial.get(key, {}))

    def words(self) -> list:
        """All lowercased words with any evidence, sorted."""
        return sorted(set(self._initial) | set(self._noninitial))

    @property
    def casing_counts(self) -> Dict[str, Dict[str, int]]:
        """Lowercased word → surface form → total count over both positions."""
        result: Dict[str, Dict[str, int]] = {}
        for key in self.words():
            result[key] = dict(self._initial.get(key, Counter()) + self._noninitial.get(key, Counter()))
        return result

    @property
    def sentence_initial_counts(self) -> Dict[str, int]:
        return {key: sum(forms.values()) for key, forms in self._initial.items()}

    @property
    def sentence_noninitial_counts(self) -> Dict[str, int]:
        return {key: sum(forms.values()) for key, forms in self._noninitial.items()}

    @property
    def vocabulary_size(self) -> int:
        return len(set(self._initial) | set(self._noninitial))

    @property
    def sentence_count(self) -> int:
        return self._sentences

    # ------------------------------------------------------------------
    # Merging
    # ------------------------------------------------------------------

    def update(self, other: CasingStatistics) -> None:
        """Add every count from ``other`` into this object in place."""
        for mine, theirs in ((self._initial, other._initial),
                             (self._noninitial, other._noninitial)):
            for key, forms in theirs.items():
                mine.setdefault(key, Counter()).update(forms)
        self._sentences += other._sentences

    def merge(self, other: CasingStatistics) -> CasingStatistics:
        """Return new statistics holding the element-wise sum of both."""
        result = CasingStatistics()
        result.update(self)
        result.update(other)
        return result

    def __add__(self, other: object) -> CasingStatistics:
        if not isinstance(other, CasingStatistics):
            return NotImplemented
        return self.merge(other)

    @classmethod
    def merged(cls, shards: Iterable[CasingStatistics]) -> CasingStatistics:
        """Fold any number of shards into one object (empty input → empty stats)."""
        result = cls()
        for shard in shards:
            result.update(shard)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CasingStatistics):
            return NotImplemented
        return (
            self._initial == other._initial
            and self._noninitial == other._noninitial
            and self._sentences == other._sentences
        )

    def __repr__(self) -> str:
        return "CasingStatistics(words={}, sentences={})".format(
            self.vocabulary_size, self._sentences
        )
