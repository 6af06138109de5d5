"""
Shared utilities for LANTERN.

Common functionality used across contexts:
- Text processing (term patterns, span finding, display truncation)
- Logger configuration
"""

from lantern.utils.text_processing import (
    compile_term_pattern,
    count_words,
    find_spans,
    sort_longest_first,
    truncate_display,
)

__all__ = [
    "compile_term_pattern",
    "count_words",
    "find_spans",
    "sort_longest_first",
    "truncate_display",
]
