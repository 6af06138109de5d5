"""
Highlighting Context

Responsibilities:
- Matches quantified metrics, techniques, glossary terms, action verbs and emphasis words
- Decorates narrative text in strict category priority without double-highlighting
- Extracts short metric lists for story summaries
- Loads swappable highlight dictionaries

Owns: Pattern categories and the decoration fold
Never: Styles output (colors, tooltips chrome, click handlers belong to the renderer)
"""

from lantern.contexts.highlighting.categories import (
    build_categories,
    emphasis_words_for_section,
    metric_category,
    select_emphasis_words,
)
from lantern.contexts.highlighting.config_resolver import load_highlight_dictionaries
from lantern.contexts.highlighting.exceptions import (
    InvalidDictionaryConfigError,
    MatcherContractError,
)
from lantern.contexts.highlighting.highlight_data_structures import (
    Atom,
    Decoration,
    DecorationKind,
    HighlightDictionaries,
    PatternCategory,
)
from lantern.contexts.highlighting.metric_extractor import MetricExtractor, extract_metrics
from lantern.contexts.highlighting.pipeline import HighlightPipeline, decorate, render_emphasis

__all__ = [
    "Atom",
    "Decoration",
    "DecorationKind",
    "HighlightDictionaries",
    "HighlightPipeline",
    "InvalidDictionaryConfigError",
    "MatcherContractError",
    "MetricExtractor",
    "PatternCategory",
    "build_categories",
    "decorate",
    "emphasis_words_for_section",
    "extract_metrics",
    "load_highlight_dictionaries",
    "metric_category",
    "render_emphasis",
    "select_emphasis_words",
]
