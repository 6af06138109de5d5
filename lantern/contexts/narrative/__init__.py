"""
Narrative Context

Responsibilities:
- Maps framework section keys (STAR, CAR, SOAR, ...) onto STAR
- Converts confidence scores into story status and section rating labels
- Estimates speaking time for practice mode

Owns: Section-level presentation logic that is not styling
Never: Stores narratives or decides colors
"""

from lantern.contexts.narrative.sections import (
    ConfidenceThresholds,
    estimate_speaking_time,
    format_time,
    get_rating_label,
    get_story_status,
    map_section_to_star_key,
)

__all__ = [
    "ConfidenceThresholds",
    "estimate_speaking_time",
    "format_time",
    "get_rating_label",
    "get_story_status",
    "map_section_to_star_key",
]
