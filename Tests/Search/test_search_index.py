"""
Tests for the substring search index.
"""

import pytest

from emoji_picker.Search.search_index import SearchIndex, filter_emojis


@pytest.fixture
def index(sample_dataset):
    return SearchIndex(sample_dataset)


class TestSearchIndex:

    def test_scenario_rocket(self):
        dataset = {"😀": ["grin", "happy"], "🚀": ["rocket", "launch"]}
        assert filter_emojis(dataset, "rocket") == ["🚀"]

    def test_empty_query_returns_everything_in_dataset_order(self, index, sample_dataset):
        assert index.filter("") == list(sample_dataset)

    def test_empty_query_is_stable_across_calls(self, index):
        assert index.filter("") == index.filter("")

    def test_empty_query_result_is_a_copy(self, index):
        result = index.filter("")
        result.clear()
        assert len(index.filter("")) == len(index)

    def test_substring_not_prefix(self, index):
        # "ocke" is inside "rocket" but not a prefix of any keyword
        assert index.filter("ocke") == ["🚀"]

    @pytest.mark.parametrize("query", ["KITTEN", "kitten", "KiTtEn", "itte"])
    def test_case_insensitive(self, index, query):
        assert index.filter(query) == ["🐱"]

    def test_upper_case_keyword_matches_lower_query(self, index):
        assert index.filter("lit") == ["🔥"]

    def test_multiple_matches_keep_dataset_order(self, index):
        assert index.filter("pet") == ["🐱", "🐶"]

    def test_emoji_listed_once_when_several_keywords_match(self, index):
        # "face" appears in two of 😀's keywords
        result = index.filter("face")
        assert result.count("😀") == 1
        assert result == ["😀", "🐱", "🐶"]

    def test_hot_matches_keyword_substrings(self, index):
        assert index.filter("hot") == ["🔥", "☕"]

    def test_no_match(self, index):
        assert index.filter("zzzz") == []

    def test_no_fuzzy_matching(self, index):
        assert index.filter("rckt") == []

    def test_whitespace_is_literal(self, index):
        assert index.filter(" ") == []

    def test_emoji_without_keywords_only_matches_empty_query(self):
        index = SearchIndex({"🫥": [], "🚀": ["rocket"]})
        assert index.filter("") == ["🫥", "🚀"]
        assert index.filter("r") == ["🚀"]

    def test_len_contains_and_keywords(self, index, sample_dataset):
        assert len(index) == len(sample_dataset)
        assert "🚀" in index
        assert "🛸" not in index
        assert index.keywords_for("🚀") == ["rocket", "space", "launch", "ship"]
        assert index.keywords_for("🛸") == []

    def test_index_is_isolated_from_source_mutation(self, sample_dataset):
        index = SearchIndex(sample_dataset)
        sample_dataset["🚀"].append("zzz")
        sample_dataset["🛸"] = ["ufo"]
        assert index.filter("zzz") == []
        assert "🛸" not in index
