"""Unit tests for highlight category builders."""

import pytest

from lantern.contexts.highlighting.categories import (
    ACTION_VERB_TITLE,
    METRIC_TITLE,
    action_verb_category,
    build_categories,
    emphasis_category,
    emphasis_words_for_section,
    metric_category,
    select_emphasis_words,
    technique_category,
    term_category,
)
from lantern.contexts.highlighting.highlight_data_structures import (
    DecorationKind,
    HighlightDictionaries,
)


def matched(category, text):
    return [text[start:end] for start, end in category.matcher(text)]


class TestTechniqueCategory:
    """Dictionary phrase lookup, longest key first."""

    @pytest.mark.unit
    def test_longest_key_wins(self):
        category = technique_category(
            {"event": "short", "event sourcing": "long", "event sourcing pipeline": "longest"}
        )
        assert matched(category, "Built an event sourcing pipeline") == ["event sourcing pipeline"]

    @pytest.mark.unit
    def test_case_insensitive_with_tooltip(self):
        category = technique_category({"circuit breaker": "Prevent cascade failures"})
        text = "Added a Circuit Breaker"

        assert matched(category, text) == ["Circuit Breaker"]
        decoration = category.decorate("Circuit Breaker")
        assert decoration.kind is DecorationKind.TECHNIQUE
        assert decoration.text == "Circuit Breaker"
        assert decoration.metadata == {"tooltip": "Prevent cascade failures"}

    @pytest.mark.unit
    def test_hyphenated_keys(self):
        category = technique_category({"blue-green deployment": "d", "pub-sub": "p"})
        assert matched(category, "Used pub-sub and a blue-green deployment.") == [
            "pub-sub",
            "blue-green deployment",
        ]

    @pytest.mark.unit
    def test_keys_do_not_match_inside_words(self):
        category = technique_category({"sharding": "s"})
        assert matched(category, "Planned resharding carefully") == []

    @pytest.mark.unit
    def test_uppercase_dictionary_keys_are_normalized(self):
        category = technique_category({"CQRS": "Separate read and write models"})

        assert matched(category, "Adopted cqrs") == ["cqrs"]
        assert category.decorate("cqrs").metadata["tooltip"] == "Separate read and write models"

    @pytest.mark.unit
    def test_regex_characters_are_literal(self):
        category = technique_category({"c++": "language", "a.b": "dotted"})

        assert matched(category, "Wrote c++ code") == ["c++"]
        assert matched(category, "axb") == []

    @pytest.mark.unit
    def test_empty_dictionary_matches_nothing(self):
        assert matched(technique_category({}), "anything at all") == []


class TestTermCategory:

    @pytest.mark.unit
    def test_word_boundaries(self):
        category = term_category({"api": "Application Programming Interface", "rest": "style"})

        assert matched(category, "The API is RESTful") == ["API"]
        assert matched(category, "Uses rest, not rapid") == ["rest"]

    @pytest.mark.unit
    def test_multi_token_and_slash_terms(self):
        category = term_category({"github actions": "CI", "ci/cd": "pipeline", "ci": "short"})

        assert matched(category, "Moved CI/CD to GitHub Actions") == ["CI/CD", "GitHub Actions"]

    @pytest.mark.unit
    def test_tooltip_and_kind(self):
        decoration = term_category({"kafka": "Distributed streaming platform"}).decorate("Kafka")

        assert decoration.kind is DecorationKind.TERM
        assert decoration.metadata == {"tooltip": "Distributed streaming platform"}


class TestVerbAndEmphasis:

    @pytest.mark.unit
    def test_action_verbs(self):
        category = action_verb_category(["led", "built"])

        assert matched(category, "LED the team, then rebuilt and built") == ["LED", "built"]
        decoration = category.decorate("LED")
        assert decoration.kind is DecorationKind.ACTION_VERB
        assert decoration.metadata == {"title": ACTION_VERB_TITLE}

    @pytest.mark.unit
    def test_emphasis_excludes_verbs_and_single_characters(self):
        category = emphasis_category(["I", "led", "impact"], ["led"])

        assert matched(category, "I led for impact") == ["impact"]

    @pytest.mark.unit
    def test_emphasis_words_are_escaped(self):
        category = emphasis_category(["(urgent)", "a|b"], [])

        assert matched(category, "this is a or b") == []

    @pytest.mark.unit
    def test_select_emphasis_words(self):
        assert select_emphasis_words([" impact ", "Led", "x", "impact", "saved"], ["led"]) == [
            "impact",
            "saved",
        ]

    @pytest.mark.unit
    def test_metric_decoration(self):
        decoration = metric_category().decorate("40%")

        assert decoration.kind is DecorationKind.METRIC
        assert decoration.metadata == {"title": METRIC_TITLE}


class TestEmphasisWordsForSection:

    @pytest.mark.unit
    def test_case_insensitive_lookup(self):
        dictionaries = HighlightDictionaries(delivery_cues={"result": {"emphasis": ["impact"]}})

        assert emphasis_words_for_section("RESULT", dictionaries) == ["impact"]

    @pytest.mark.unit
    @pytest.mark.parametrize("section_key", [None, "", "unknown"])
    def test_missing_section(self, section_key):
        dictionaries = HighlightDictionaries.from_defaults()
        assert emphasis_words_for_section(section_key, dictionaries) == []

    @pytest.mark.unit
    def test_cue_without_emphasis(self):
        dictionaries = HighlightDictionaries(delivery_cues={"task": {}})
        assert emphasis_words_for_section("task", dictionaries) == []


class TestBuildCategories:

    @pytest.mark.unit
    def test_fixed_order(self):
        names = [category.name for category in build_categories()]
        assert names == ["metrics", "techniques", "terms", "action_verbs", "emphasis"]

    @pytest.mark.unit
    def test_priorities_ascend(self):
        priorities = [category.priority for category in build_categories()]
        assert priorities == sorted(priorities)
        assert len(set(priorities)) == len(priorities)

    @pytest.mark.unit
    def test_show_emphasis_false(self):
        names = [category.name for category in build_categories(show_emphasis=False)]
        assert names == ["metrics", "terms"]

    @pytest.mark.unit
    def test_explicit_emphasis_words_override_section(self):
        categories = build_categories(section_key="result", emphasis_words=["quietly"])
        emphasis = categories[-1]

        assert matched(emphasis, "quietly saved the impact") == ["quietly"]

    @pytest.mark.unit
    def test_section_emphasis_words(self):
        emphasis = build_categories(section_key="result")[-1]
        assert matched(emphasis, "The impact was large") == ["impact"]

    @pytest.mark.unit
    def test_defaults_are_not_shared(self):
        dictionaries = HighlightDictionaries.from_defaults()
        dictionaries.action_verbs.append("juggled")

        assert "juggled" not in HighlightDictionaries.from_defaults().action_verbs
