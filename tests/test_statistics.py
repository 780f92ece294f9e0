"""Unit tests for CasingStatistics.

WHY: The statistics are the only mutable state in training. Counts that
leak between positions, or merges that depend on order, would make the
learned model depend on how the corpus happened to be split.

HOW: Tests record observations directly, then check the derived views
and the merge laws (commutativity, associativity, identity).
"""

import pytest

from truecaser.core.statistics import CasingStatistics


def _stats(*observations):
    """Build statistics from (form, sentence_initial) pairs."""
    stats = CasingStatistics()
    for form, initial in observations:
        stats.record(form, sentence_initial=initial)
    return stats


class TestRecording:
    """record() files each surface form under its lowercase key."""

    def test_forms_grouped_by_lowercase_key(self):
        stats = _stats(("NASA", False), ("nasa", False), ("NASA", False))
        assert stats.noninitial_forms("nasa") == {"NASA": 2, "nasa": 1}

    def test_positions_kept_apart(self):
        stats = _stats(("The", True), ("the", False))
        assert stats.initial_forms("the") == {"The": 1}
        assert stats.noninitial_forms("the") == {"the": 1}

    def test_unknown_key_has_empty_views(self):
        stats = CasingStatistics()
        assert stats.initial_forms("missing") == {}
        assert stats.noninitial_forms("missing") == {}

    def test_count_argument(self):
        stats = CasingStatistics()
        stats.record("Paris", sentence_initial=False, count=5)
        assert stats.noninitial_forms("paris") == {"Paris": 5}

    def test_non_positive_count_rejected(self):
        stats = CasingStatistics()
        with pytest.raises(ValueError):
            stats.record("x", sentence_initial=False, count=0)


class TestDerivedViews:
    """Aggregate views are consistent with the recorded observations."""

    def test_casing_counts_sum_both_positions(self):
        stats = _stats(("The", True), ("the", False), ("the", False), ("THE", False))
        assert stats.casing_counts == {"the": {"The": 1, "the": 2, "THE": 1}}

    def test_position_totals_add_up(self):
        stats = _stats(("The", True), ("the", False), ("the", False), ("cat", False))
        total = sum(stats.casing_counts["the"].values())
        assert stats.sentence_initial_counts["the"] + stats.sentence_noninitial_counts["the"] == total
        assert "cat" not in stats.sentence_initial_counts

    def test_vocabulary_and_words(self):
        stats = _stats(("The", True), ("cat", False), ("CAT", False))
        assert stats.vocabulary_size == 2
        assert stats.words() == ["cat", "the"]

    def test_sentence_count(self):
        stats = CasingStatistics()
        stats.count_sentence()
        stats.count_sentence()
        assert stats.sentence_count == 2


class TestMerge:
    """Merging is element-wise addition."""

    def test_merge_adds_counts(self):
        a = _stats(("NASA", False), ("The", True))
        b = _stats(("NASA", False), ("nasa", False))
        merged = a.merge(b)
        assert merged.noninitial_forms("nasa") == {"NASA": 2, "nasa": 1}
        assert merged.initial_forms("the") == {"The": 1}

    def test_merge_does_not_mutate_inputs(self):
        a = _stats(("NASA", False))
        b = _stats(("NASA", False))
        a.merge(b)
        assert a.noninitial_forms("nasa") == {"NASA": 1}
        assert b.noninitial_forms("nasa") == {"NASA": 1}

    def test_commutative(self):
        a = _stats(("NASA", False), ("The", True))
        b = _stats(("nasa", True), ("cat", False))
        assert a + b == b + a

    def test_associative(self):
        a = _stats(("A", True))
        b = _stats(("a", False))
        c = _stats(("A", False))
        assert (a + b) + c == a + (b + c)

    def test_empty_is_identity(self):
        a = _stats(("NASA", False))
        a.count_sentence()
        assert a + CasingStatistics() == a

    def test_merged_folds_shards(self):
        shards = [_stats(("x", False)), _stats(("X", False)), _stats(("x", True))]
        merged = CasingStatistics.merged(shards)
        assert merged.casing_counts == {"x": {"x": 2, "X": 1}}

    def test_merged_of_nothing_is_empty(self):
        assert CasingStatistics.merged([]) == CasingStatistics()

    def test_update_in_place(self):
        a = _stats(("x", False))
        a.update(_stats(("x", False)))
        assert a.noninitial_forms("x") == {"x": 2}

    def test_add_rejects_other_types(self):
        with pytest.raises(TypeError):
            _stats(("x", False)) + 1


class TestReadOnlyViews:
    """Views handed to callers cannot change the recorded counts."""

    def test_initial_forms_not_writable(self):
        stats = _stats(("The", True))
        with pytest.raises(TypeError):
            stats.initial_forms("the")["The"] = 0
        assert stats.initial_forms("the") == {"The": 1}

    def test_noninitial_forms_not_writable(self):
        stats = _stats(("NASA", False))
        with pytest.raises(TypeError):
            stats.noninitial_forms("nasa")["NASA"] -= 1
        assert stats.noninitial_forms("nasa") == {"NASA": 1}

    def test_missing_key_view_not_writable(self):
        stats = CasingStatistics()
        with pytest.raises(TypeError):
            stats.initial_forms("ghost")["Ghost"] = 1
        assert stats.words() == []
