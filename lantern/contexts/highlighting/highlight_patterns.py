"""
Highlight Pattern Constants

Regex patterns used by the highlighting categories.

Pattern classes follow a fixed convention:
- Dataclasses with frozen=True for immutability
- Class-level compiled patterns
- Patterns are only used through finditer()/search()/fullmatch(), which keep no
  position between calls, so one compiled pattern can serve every caller
"""

import re
from dataclasses import dataclass

# =============================================================================
# METRIC PATTERNS
# =============================================================================

# Closed set of unit words that turn a bare number into a metric
METRIC_UNIT_WORDS = (
    "hours?",
    "days?",
    "weeks?",
    "months?",
    "minutes?",
    "seconds?",
    "ms",
    "users?",
    "customers?",
    "engineers?",
    "teams?",
    "requests?",
    "quer(?:y|ies)",
    "calls?",
    "transactions?",
)

_GROUPED_NUMBER = r"\d+(?:,\d{3})*(?:\.\d+)?"
_UNIT_ALTERNATION = "|".join(METRIC_UNIT_WORDS)

# A number may not start in the middle of another number ("1,000%" is never "000%")
_NUMBER_START = r"(?<![\d,.])"

# 40%, 1,000%, 2.5x, 10X (a multiplier may not run into a word, e.g. "5xl")
_RATIO = rf"{_NUMBER_START}{_GROUPED_NUMBER}(?:%|x(?![a-z]))"
# $1.5M, $1,200K, $300
_CURRENCY = r"\$\d+(?:,\d{3})*(?:\.\d+)?[KMB]?"
# 20 hours, 1,000,000 users, 200ms
_UNIT_COUNT = rf"{_NUMBER_START}{_GROUPED_NUMBER}\s*(?:{_UNIT_ALTERNATION})\b"


@dataclass(frozen=True)
class MetricPatterns:
    """
    Regex patterns for quantified achievements in narrative prose.

    Supports:
    - Percentages and multipliers (e.g., "40%", "99.9%", "10x")
    - Currency amounts (e.g., "$500", "$1,200K", "$1.5M")
    - Counts with a unit word (e.g., "20 hours", "1,000,000 users", "200ms")
    """

    RATIO: re.Pattern = re.compile(_RATIO, re.IGNORECASE)
    CURRENCY: re.Pattern = re.compile(_CURRENCY, re.IGNORECASE)
    UNIT_COUNT: re.Pattern = re.compile(_UNIT_COUNT, re.IGNORECASE)

    # All of the above in one alternation, scanned left to right
    ANY: re.Pattern = re.compile(f"{_RATIO}|{_CURRENCY}|{_UNIT_COUNT}", re.IGNORECASE)


# =============================================================================
# WORD PATTERNS
# =============================================================================


@dataclass(frozen=True)
class WordPatterns:
    """Limits for word-level checks on emphasis candidates."""

    # Emphasis words need at least two characters to be worth stressing
    MIN_EMPHASIS_LENGTH: int = 2


def is_metric(text: str) -> bool:
    """
    Check whether text is exactly one metric token.

    Example:
        >>> is_metric("40%")
        True
        >>> is_metric("about 40%")
        False
    """
    return MetricPatterns.ANY.fullmatch(text) is not None
