"""
Text processing utilities shared by the annotation and highlighting contexts.
"""

import re
from typing import Iterable, List, Optional, Tuple


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def sort_longest_first(terms: Iterable[str]) -> List[str]:
    """
    Order terms so that no shorter term can shadow a longer one in a regex alternation.

    Ties are broken alphabetically so the resulting pattern is deterministic.

    Example:
        >>> sort_longest_first(["api", "api gateway", "rest"])
        ['api gateway', 'api', 'rest']
    """
    return sorted(set(terms), key=lambda term: (-len(term), term))


def compile_term_pattern(terms: Iterable[str]) -> Optional[re.Pattern]:
    """
    Compile a case-insensitive alternation of literal terms, longest first.

    Each term must stand alone: it may not be preceded or followed by a word
    character. Lookarounds are used instead of \\b so that keys beginning or
    ending in punctuation (e.g. "ci/cd", "pub-sub") are delimited the same way
    as plain words.

    Args:
        terms: Literal terms (matched verbatim after escaping)

    Returns:
        Compiled pattern, or None when there are no non-empty terms

    Example:
        >>> pattern = compile_term_pattern(["api", "api gateway"])
        >>> pattern.search("Built an API Gateway").group(0)
        'API Gateway'
    """
    ordered = [term for term in sort_longest_first(terms) if term]
    if not ordered:
        return None

    alternation = "|".join(re.escape(term) for term in ordered)
    return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)", re.IGNORECASE)


def find_spans(pattern: Optional[re.Pattern], text: str) -> List[Tuple[int, int]]:
    """
    Return the non-overlapping, non-empty match ranges of pattern in text.

    A fresh list is built on every call; nothing about a previous search is
    retained, so results never depend on call history.

    Example:
        >>> find_spans(re.compile(r"\\d+%"), "40% then 60%")
        [(0, 3), (9, 12)]
    """
    if pattern is None or not text:
        return []
    return [match.span() for match in pattern.finditer(text) if match.end() > match.start()]


def count_words(text: str) -> int:
    """
    Count whitespace-delimited words.

    Example:
        >>> count_words("  led the   migration ")
        3
        >>> count_words("   ")
        0
    """
    return len(text.split())
