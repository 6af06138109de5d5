"""
Annotation Segmenter

Splits a section's text into an ordered, gap-free list of segments, each plain
or bound to one surviving annotation. Annotations are offset-addressed against
the text as it was when they were created, so every call re-validates them
against the live text (snapshot + validate-on-read) and silently drops those
that no longer line up.

Resolution rules:
1. Asides (start offset -1) never affect layout
2. Stale annotations (out of bounds, or captured text no longer at the span) are dropped
3. Survivors are ordered by start offset; equal starts keep their input order
4. First-claimed-wins: an annotation starting inside an already claimed span is skipped

Concatenating the text of the returned segments always reproduces the input.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from lantern.contexts.annotation.annotation_data_structure import Annotation, Segment
from lantern.contexts.annotation.logger import _log_debug


@dataclass
class AnnotationPartition:
    """
    How a set of annotations resolves against one text.

    Attributes:
        applied: Annotations that bind a segment, in text order
        stale: Non-aside annotations that no longer match the text
        overlapping: Valid annotations skipped because an earlier one claimed their start
        asides: Annotations without a span, in input order
    """

    applied: List[Annotation] = field(default_factory=list)
    stale: List[Annotation] = field(default_factory=list)
    overlapping: List[Annotation] = field(default_factory=list)
    asides: List[Annotation] = field(default_factory=list)


def partition_annotations(text: str, annotations: Iterable[Annotation]) -> AnnotationPartition:
    """
    Classify annotations against text using the segmentation rules.

    Args:
        text: Current text of the section
        annotations: Annotations for that section, in any order

    Returns:
        AnnotationPartition; applied annotations are in text order and never overlap
    """
    partition = AnnotationPartition()
    candidates = []

    for annotation in annotations:
        if annotation.is_aside:
            partition.asides.append(annotation)
        elif annotation.is_valid_for(text):
            candidates.append(annotation)
        else:
            partition.stale.append(annotation)

    # sorted() is stable: equal start offsets keep input order, so the earlier one wins
    candidates = sorted(candidates, key=lambda annotation: annotation.start_offset)

    cursor = 0
    for annotation in candidates:
        if annotation.start_offset < cursor:
            partition.overlapping.append(annotation)
            continue
        partition.applied.append(annotation)
        cursor = annotation.end_offset

    return partition


def split_by_annotations(text: str, annotations: Iterable[Annotation]) -> List[Segment]:
    """
    Split text into plain and annotated segments.

    Never raises for stale, aside, out-of-bounds or overlapping annotations;
    they are filtered out. Pure function of its arguments.

    Args:
        text: Current text of the section
        annotations: Annotations for that section, in any order

    Returns:
        Segments in text order; joining their text reproduces `text` exactly.
        With nothing to apply, a single plain segment equal to `text` (even "").

    Example:
        >>> text = "Hello world"
        >>> first = Annotation("a", "situation", 0, 8, "Hello wo")
        >>> second = Annotation("b", "situation", 5, 11, " world")
        >>> [s.text for s in split_by_annotations(text, [second, first])]
        ['Hello wo', 'rld']
    """
    partition = partition_annotations(text, annotations)

    if partition.stale or partition.overlapping:
        _log_debug(
            f"Dropped {len(partition.stale)} stale and {len(partition.overlapping)} overlapping annotations"
        )

    segments: List[Segment] = []
    cursor = 0

    for annotation in partition.applied:
        if cursor < annotation.start_offset:
            segments.append(Segment(text[cursor : annotation.start_offset]))
        segments.append(Segment(text[annotation.start_offset : annotation.end_offset], annotation))
        cursor = annotation.end_offset

    if cursor < len(text):
        segments.append(Segment(text[cursor:]))

    if not segments:
        segments.append(Segment(text))

    return segments


def annotations_for_section(annotations: Iterable[Annotation], section_key: str) -> List[Annotation]:
    """Select the annotations belonging to one section, preserving order."""
    return [annotation for annotation in annotations if annotation.section_key == section_key]


def collect_asides(annotations: Iterable[Annotation]) -> List[Annotation]:
    """Select aside annotations (margin notes keyed by id), preserving order."""
    return [annotation for annotation in annotations if annotation.is_aside]


def annotated_spans(segments: Iterable[Segment]) -> List[Tuple[int, int, Annotation]]:
    """
    Recover (start, end, annotation) character ranges from a segment list.

    Useful for a rendering layer that needs absolute offsets back, e.g. to
    map a click on a segment to its span in the section text.
    """
    spans = []
    cursor = 0
    for segment in segments:
        end = cursor + len(segment.text)
        if segment.annotation is not None:
            spans.append((cursor, end, segment.annotation))
        cursor = end
    return spans


@dataclass
class AnnotationSegmenter:
    """
    Stateless segmenter object for callers that inject a segmenter.

    Holds no per-call state; split() is safe to call concurrently and repeatedly.
    """

    def split(self, text: str, annotations: Iterable[Annotation]) -> List[Segment]:
        return split_by_annotations(text, annotations)

    def partition(self, text: str, annotations: Iterable[Annotation]) -> AnnotationPartition:
        return partition_annotations(text, annotations)
