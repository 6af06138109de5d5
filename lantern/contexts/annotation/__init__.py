"""
Annotation Context

Responsibilities:
- Mirrors persisted annotations (offset-addressed spans and asides)
- Re-validates annotations against the live text on every call
- Splits section text into plain and annotated segments

Owns: Segmentation and staleness rules
Never: Persists, creates remotely, or mutates annotations in the store
"""

from lantern.contexts.annotation.annotation_data_structure import (
    ASIDE_OFFSET,
    Annotation,
    AnnotationColor,
    AnnotationStyle,
    Segment,
)
from lantern.contexts.annotation.exceptions import InvalidAnnotationError
from lantern.contexts.annotation.segmenter import (
    AnnotationPartition,
    AnnotationSegmenter,
    annotated_spans,
    annotations_for_section,
    collect_asides,
    partition_annotations,
    split_by_annotations,
)

__all__ = [
    "ASIDE_OFFSET",
    "Annotation",
    "AnnotationColor",
    "AnnotationPartition",
    "AnnotationSegmenter",
    "AnnotationStyle",
    "InvalidAnnotationError",
    "Segment",
    "annotated_spans",
    "annotations_for_section",
    "collect_asides",
    "partition_annotations",
    "split_by_annotations",
]
