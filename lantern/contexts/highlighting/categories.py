"""
Highlight Categories

Builds the five priority-ranked pattern categories applied by the highlight
pipeline, in fixed order:

1. Metrics - quantified results ("40%", "$1.5M", "20 hours")
2. Techniques - design patterns and methodologies ("circuit breaker")
3. Terms - glossary of technical terms ("kubernetes", "ci/cd")
4. Action verbs - ownership verbs ("led", "migrated")
5. Emphasis - per-section delivery cues, minus anything already a verb

Every matcher is a closure over a compiled, immutable pattern and returns a
new list per call, so no match position survives between calls.
"""

from typing import Dict, Iterable, List, Optional

from lantern.contexts.highlighting.highlight_data_structures import (
    Decoration,
    DecorationKind,
    HighlightDictionaries,
    Matcher,
    PatternCategory,
)
from lantern.contexts.highlighting.highlight_patterns import MetricPatterns, WordPatterns
from lantern.utils.text_processing import compile_term_pattern, find_spans

# Lower runs first
METRIC_PRIORITY = 0
TECHNIQUE_PRIORITY = 1
TERM_PRIORITY = 2
ACTION_VERB_PRIORITY = 3
EMPHASIS_PRIORITY = 4

METRIC_TITLE = "Key metric"
ACTION_VERB_TITLE = "Action verb - shows ownership"
EMPHASIS_TITLE = "Emphasize"


def pattern_matcher(pattern) -> Matcher:
    """
    Wrap a compiled pattern (or None) as a stateless matcher.

    Example:
        >>> match = pattern_matcher(MetricPatterns.ANY)
        >>> match("Cut costs 40% and saved 20 hours")
        [(10, 13), (24, 32)]
    """

    def match(run: str):
        return find_spans(pattern, run)

    return match


def metric_matcher(run: str):
    """Find metric ranges in a run."""
    return find_spans(MetricPatterns.ANY, run)


# =============================================================================
# CATEGORY BUILDERS
# =============================================================================


def metric_category() -> PatternCategory:
    return PatternCategory(
        name="metrics",
        priority=METRIC_PRIORITY,
        matcher=metric_matcher,
        decorate=lambda text: Decoration(DecorationKind.METRIC, text, {"title": METRIC_TITLE}),
    )


def _lookup_category(
    name: str,
    priority: int,
    kind: DecorationKind,
    entries: Dict[str, str],
) -> PatternCategory:
    """Dictionary category: longest key first, tooltip from the matched key's entry."""
    lookup = {key.lower(): value for key, value in entries.items()}
    pattern = compile_term_pattern(lookup)

    def decorate(text: str) -> Decoration:
        tooltip = lookup.get(text.lower())
        metadata = {"tooltip": tooltip} if tooltip else {}
        return Decoration(kind, text, metadata)

    return PatternCategory(name=name, priority=priority, matcher=pattern_matcher(pattern), decorate=decorate)


def technique_category(design_patterns: Dict[str, str]) -> PatternCategory:
    return _lookup_category("techniques", TECHNIQUE_PRIORITY, DecorationKind.TECHNIQUE, design_patterns)


def term_category(technical_terms: Dict[str, str]) -> PatternCategory:
    return _lookup_category("terms", TERM_PRIORITY, DecorationKind.TERM, technical_terms)


def action_verb_category(action_verbs: Iterable[str]) -> PatternCategory:
    pattern = compile_term_pattern(verb.lower() for verb in action_verbs)
    return PatternCategory(
        name="action_verbs",
        priority=ACTION_VERB_PRIORITY,
        matcher=pattern_matcher(pattern),
        decorate=lambda text: Decoration(DecorationKind.ACTION_VERB, text, {"title": ACTION_VERB_TITLE}),
    )


def emphasis_category(emphasis_words: Iterable[str], action_verbs: Iterable[str]) -> PatternCategory:
    pattern = compile_term_pattern(select_emphasis_words(emphasis_words, action_verbs))
    return PatternCategory(
        name="emphasis",
        priority=EMPHASIS_PRIORITY,
        matcher=pattern_matcher(pattern),
        decorate=lambda text: Decoration(DecorationKind.EMPHASIS, text, {"title": EMPHASIS_TITLE}),
    )


# =============================================================================
# EMPHASIS WORD SELECTION
# =============================================================================


def select_emphasis_words(emphasis_words: Iterable[str], action_verbs: Iterable[str]) -> List[str]:
    """
    Drop emphasis words that are too short or already decorated as action verbs.

    Example:
        >>> select_emphasis_words(["I", "Led", "impact"], ["led", "built"])
        ['impact']
    """
    verbs = {verb.lower() for verb in action_verbs}
    selected = []
    for word in emphasis_words:
        word = word.strip()
        if len(word) < WordPatterns.MIN_EMPHASIS_LENGTH or word.lower() in verbs:
            continue
        if word not in selected:
            selected.append(word)
    return selected


def emphasis_words_for_section(
    section_key: Optional[str], dictionaries: HighlightDictionaries
) -> List[str]:
    """
    Look up the delivery-cue emphasis words for a section (case-insensitive).

    Returns an empty list for a missing/unknown section key.
    """
    if not section_key:
        return []
    wanted = section_key.lower()
    for key, cue in dictionaries.delivery_cues.items():
        if key.lower() == wanted:
            return list((cue or {}).get("emphasis") or [])
    return []


def build_categories(
    dictionaries: Optional[HighlightDictionaries] = None,
    show_emphasis: bool = True,
    section_key: Optional[str] = None,
    emphasis_words: Optional[Iterable[str]] = None,
) -> List[PatternCategory]:
    """
    Build the highlight categories in priority order.

    Args:
        dictionaries: Dictionary configuration (built-in defaults if None)
        show_emphasis: When False, only metrics and glossary terms are built;
            techniques, action verbs and emphasis words are display toggles
        section_key: Section being rendered; selects delivery-cue emphasis words
        emphasis_words: Explicit emphasis words (overrides the section lookup)

    Returns:
        Categories ordered metrics, techniques, terms, action verbs, emphasis
    """
    if dictionaries is None:
        dictionaries = HighlightDictionaries.from_defaults()

    categories = [metric_category()]

    if show_emphasis:
        categories.append(technique_category(dictionaries.design_patterns))

    categories.append(term_category(dictionaries.technical_terms))

    if show_emphasis:
        categories.append(action_verb_category(dictionaries.action_verbs))

        if emphasis_words is None:
            emphasis_words = emphasis_words_for_section(section_key, dictionaries)
        categories.append(emphasis_category(emphasis_words, dictionaries.action_verbs))

    return categories
