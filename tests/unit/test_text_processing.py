"""Unit tests for shared text utilities."""

import re

import pytest

from lantern.utils.text_processing import (
    compile_term_pattern,
    count_words,
    find_spans,
    sort_longest_first,
    truncate_display,
)


class TestTermPatterns:

    @pytest.mark.unit
    def test_sort_longest_first(self):
        assert sort_longest_first(["api", "rest", "api gateway", "api"]) == ["api gateway", "api", "rest"]

    @pytest.mark.unit
    def test_no_terms_gives_no_pattern(self):
        assert compile_term_pattern([]) is None
        assert compile_term_pattern([""]) is None

    @pytest.mark.unit
    def test_longest_alternative_wins(self):
        pattern = compile_term_pattern(["api", "api gateway"])
        assert pattern.search("Built an API Gateway").group(0) == "API Gateway"

    @pytest.mark.unit
    def test_punctuated_terms_delimited_like_words(self):
        pattern = compile_term_pattern(["ci/cd"])

        assert find_spans(pattern, "Owned CI/CD.") == [(6, 11)]
        assert find_spans(pattern, "xci/cd") == []


class TestFindSpans:

    @pytest.mark.unit
    def test_none_pattern(self):
        assert find_spans(None, "text") == []

    @pytest.mark.unit
    def test_empty_text(self):
        assert find_spans(re.compile(r"\d+"), "") == []

    @pytest.mark.unit
    def test_empty_matches_skipped(self):
        assert find_spans(re.compile(r"\d*"), "a1b") == [(1, 2)]


class TestDisplayHelpers:

    @pytest.mark.unit
    def test_truncate_display(self):
        assert truncate_display("short", 10) == "short"
        assert truncate_display("this is a very long string", 10) == "this is..."

    @pytest.mark.unit
    def test_count_words(self):
        assert count_words("  led the   migration ") == 3
        assert count_words("") == 0
