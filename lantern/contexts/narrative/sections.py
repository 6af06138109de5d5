"""
Narrative section helpers.

Small, pure helpers the rendering layer uses next to the engines: mapping a
framework's section keys onto STAR, turning a confidence score into a status
or rating label, and estimating how long a narrative takes to say aloud.
"""

import math
from dataclasses import dataclass

from lantern.utils.text_processing import count_words

# Framework section keys (STAR, CAR, SOAR, ...) folded onto STAR
STAR_KEY_BY_SECTION = {
    "situation": "situation",
    "context": "situation",
    "challenge": "situation",
    "problem": "situation",
    "task": "task",
    "objective": "task",
    "obstacles": "task",
    "hindrances": "task",
    "action": "action",
    "actions": "action",
    "result": "result",
    "results": "result",
    "outcome": "result",
    "learning": "result",
    "evaluation": "result",
}
DEFAULT_STAR_KEY = "result"

DEFAULT_WORDS_PER_MINUTE = 150


@dataclass(frozen=True)
class ConfidenceThresholds:
    """Confidence cut-offs for story status and section ratings."""

    COMPLETE: float = 0.75
    IN_PROGRESS: float = 0.4

    STRONG: float = 0.75
    FAIR: float = 0.5
    WEAK: float = 0.3


def map_section_to_star_key(section_key: str) -> str:
    """
    Map any framework section key onto situation/task/action/result.

    Unknown or empty keys map to "result".

    Example:
        >>> map_section_to_star_key("Obstacles")
        'task'
        >>> map_section_to_star_key("unknown")
        'result'
    """
    return STAR_KEY_BY_SECTION.get((section_key or "").lower(), DEFAULT_STAR_KEY)


def get_story_status(confidence: float) -> str:
    """
    Story status from overall confidence.

    Example:
        >>> get_story_status(0.75), get_story_status(0.4), get_story_status(0.39)
        ('complete', 'in-progress', 'draft')
    """
    if confidence >= ConfidenceThresholds.COMPLETE:
        return "complete"
    if confidence >= ConfidenceThresholds.IN_PROGRESS:
        return "in-progress"
    return "draft"


def get_rating_label(confidence: float) -> str:
    """
    Section rating label from section confidence.

    Example:
        >>> [get_rating_label(c) for c in (0.9, 0.5, 0.3, 0.1)]
        ['Strong', 'Fair', 'Weak', 'Missing']
    """
    if confidence >= ConfidenceThresholds.STRONG:
        return "Strong"
    if confidence >= ConfidenceThresholds.FAIR:
        return "Fair"
    if confidence >= ConfidenceThresholds.WEAK:
        return "Weak"
    return "Missing"


def estimate_speaking_time(text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> int:
    """
    Estimate speaking time in whole seconds, rounded up.

    Args:
        text: Narrative text
        words_per_minute: Speaking rate

    Returns:
        Seconds; 0 for blank text

    Example:
        >>> estimate_speaking_time("hello")
        1
        >>> estimate_speaking_time(" ".join(["word"] * 150))
        60
    """
    words = count_words(text)
    return math.ceil(words * 60 / words_per_minute)


def format_time(seconds: int) -> str:
    """
    Format seconds as m:ss.

    Example:
        >>> format_time(65)
        '1:05'
        >>> format_time(0)
        '0:00'
    """
    seconds = max(0, int(seconds))
    return f"{seconds // 60}:{seconds % 60:02d}"
