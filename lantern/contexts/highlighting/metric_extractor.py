"""
Metric extraction for story summaries.

Runs only the metrics matcher over a whole text and returns the matched
strings, for callers that want a short list ("40%", "$1.5M") instead of a
decorated render.
"""

from dataclasses import dataclass
from typing import List

from lantern.contexts.highlighting.categories import metric_matcher

DEFAULT_MAX_METRICS = 6


def extract_metrics(text: str, max_count: int = DEFAULT_MAX_METRICS) -> List[str]:
    """
    Extract distinct metric strings in order of first appearance.

    De-duplication is by exact string ("40%" and "40 %" are different).

    Args:
        text: Narrative text
        max_count: Maximum number of metrics to return

    Returns:
        Up to max_count metric strings; an empty list when there are none

    Example:
        >>> extract_metrics("40% faster, then another 40% for 10,000 users")
        ['40%', '10,000 users']
    """
    if max_count <= 0:
        return []

    metrics: List[str] = []
    for start, end in metric_matcher(text):
        metric = text[start:end]
        if metric not in metrics:
            metrics.append(metric)
            if len(metrics) == max_count:
                break
    return metrics


@dataclass
class MetricExtractor:
    """Metric extractor with a fixed cap."""

    max_count: int = DEFAULT_MAX_METRICS

    def extract(self, text: str) -> List[str]:
        return extract_metrics(text, self.max_count)
