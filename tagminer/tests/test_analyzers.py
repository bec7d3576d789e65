import asyncio

import pytest

from tagminer.analyzers.base import TagReport
from tagminer.analyzers.frequency import (
    count_occurrences,
    occurrence_key,
    rank,
    rank_tags,
    restrict_to_vocabulary,
)
from tagminer.analyzers.vocabulary import load_vocabulary, parse_vocabulary
from tagminer.errors import MissingResourceError


class TestVocabulary:
    def test_parse_lines_in_order(self):
        assert parse_vocabulary("tag1\ntag2\ntag3") == ["tag1", "tag2", "tag3"]

    def test_surrounding_whitespace_is_trimmed(self):
        assert parse_vocabulary("\n  tag1\ntag2\n\n") == ["tag1", "tag2"]

    def test_crlf_lines(self):
        assert parse_vocabulary("tag1\r\ntag2\r\n") == ["tag1", "tag2"]

    def test_duplicates_and_inner_blank_lines_are_kept(self):
        assert parse_vocabulary("a\n\nb\na") == ["a", "", "b", "a"]

    def test_byte_order_mark_is_dropped(self):
        assert parse_vocabulary("\ufefftag1\ntag2") == ["tag1", "tag2"]

    @pytest.mark.timeout(5)
    def test_load_vocabulary_from_file(self, tmp_path):
        path = tmp_path / "tags.txt"
        path.write_text("tag3\ntag1\ntag2\n")
        assert asyncio.run(load_vocabulary(path)) == ["tag3", "tag1", "tag2"]

    def test_load_vocabulary_missing_file(self, tmp_path):
        with pytest.raises(MissingResourceError):
            asyncio.run(load_vocabulary(tmp_path / "not.txt"))


class TestFrequencyCounter:
    def test_counts_every_observed_tag(self):
        occurrences = count_occurrences(["tag1", "tag1", "tag4", "tag5", "tag2"])
        assert occurrences == {"tag1": 2, "tag4": 1, "tag5": 1, "tag2": 1}

    def test_non_string_values_keep_their_identity(self):
        occurrences = count_occurrences(["1", 1, 1.0, True, ["a"], {"k": 1}])
        assert occurrences["1"] == 1
        assert occurrences[occurrence_key(1)] == 1
        assert occurrences[occurrence_key(1.0)] == 1
        assert occurrences[occurrence_key(True)] == 1
        assert occurrences[occurrence_key(["a"])] == 1
        assert len(occurrences) == 6

    def test_restrict_defaults_unseen_labels_to_zero(self):
        occurrences = count_occurrences(["tag1", "tag4"])
        restricted = restrict_to_vocabulary(occurrences, ["tag1", "tag2"])
        assert restricted == {"tag1": 1, "tag2": 0}

    def test_restrict_one_entry_per_distinct_label(self):
        restricted = restrict_to_vocabulary(count_occurrences(["a"]), ["a", "b", "a"])
        assert list(restricted) == ["a", "b"]
        assert restricted["a"] == 1


class TestRanker:
    def test_sorts_by_count_descending(self):
        ranked = rank({"foo": 10, "bar": 200, "bibier": 0, "tom": 1, "mom": 100})
        assert ranked[0] == ("bar", 200)
        assert ranked[-1] == ("bibier", 0)
        assert [count for _, count in ranked] == [200, 100, 10, 1, 0]

    def test_later_vocabulary_label_wins_ties(self):
        assert rank_tags(["a", "b"], ["a", "b"]) == [("b", 1), ("a", 1)]

    def test_tie_break_is_not_stable_descending(self):
        ranked = rank({"x": 0, "a": 2, "b": 1, "c": 2, "y": 0})
        assert ranked == [("c", 2), ("a", 2), ("b", 1), ("y", 0), ("x", 0)]

    def test_end_to_end_example(self):
        ranked = rank_tags(["tag1", "tag1", "tag4", "tag5", "tag2"], ["tag1", "tag2", "tag3"])
        assert ranked == [("tag1", 2), ("tag2", 1), ("tag3", 0)]

    def test_unlisted_tags_are_excluded(self):
        ranked = rank_tags(["tag4", "tag5"], ["tag1"])
        assert ranked == [("tag1", 0)]

    @pytest.mark.parametrize(
        "vocabulary",
        [[], ["a"], ["a", "b", "c"], ["a", "a", "b"], ["z", "y", "x", "y"]],
    )
    def test_one_entry_per_distinct_vocabulary_label(self, vocabulary):
        ranked = rank_tags(["a", "y", "q", "a"], vocabulary)
        assert len(ranked) == len(set(vocabulary))
        assert {label for label, _ in ranked} == set(vocabulary)


class TestTagReport:
    def test_total_observed(self):
        report = TagReport(ranked=[], occurrences=count_occurrences(["a", "a", "b"]))
        assert report.total_observed == 3
