"""
Integration tests for rendering a story section end to end.

Loads stored annotation payloads and dictionary files from fixtures, then runs
the segmenter and the highlight pipeline over the same section text.
"""

from pathlib import Path

import pytest
from omegaconf import OmegaConf

from lantern.contexts.annotation import Annotation, partition_annotations, split_by_annotations
from lantern.contexts.annotation.segmenter import annotations_for_section
from lantern.contexts.highlighting import HighlightPipeline, extract_metrics
from lantern.contexts.highlighting.highlight_data_structures import DecorationKind
from lantern.contexts.narrative import estimate_speaking_time, map_section_to_star_key

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"
PROJECT_ROOT = Path(__file__).parent.parent.parent


def load_fixture_annotations():
    raw = OmegaConf.to_container(OmegaConf.load(FIXTURES_DIR / "annotations.yaml"), resolve=True)
    return [Annotation.from_dict(item) for item in raw["annotations"]]


@pytest.fixture
def situation_text():
    return (FIXTURES_DIR / "situation.txt").read_text(encoding="utf-8")


@pytest.mark.integration
def test_stored_annotations_segment_situation(situation_text):
    """Stale, overlapping and aside annotations are skipped; the rest bind in order."""
    annotations = annotations_for_section(load_fixture_annotations(), "situation")

    segments = split_by_annotations(situation_text, annotations)

    assert "".join(segment.text for segment in segments) == situation_text
    assert [(segment.text, segment.annotation.id if segment.annotation else None) for segment in segments] == [
        ("Our ", None),
        ("checkout service", "ann-1"),
        (" was ", None),
        ("timing out", "ann-2"),
        (situation_text[35:123], None),
        ("payments API", "ann-7"),
        (".", None),
    ]


@pytest.mark.integration
def test_stored_annotations_partition(situation_text):
    annotations = annotations_for_section(load_fixture_annotations(), "situation")

    partition = partition_annotations(situation_text, annotations)

    assert [a.id for a in partition.applied] == ["ann-1", "ann-2", "ann-7"]
    assert [a.id for a in partition.stale] == ["ann-3"]
    assert [a.id for a in partition.overlapping] == ["ann-4"]
    assert [a.id for a in partition.asides] == ["ann-5"]
    assert partition.asides[0].note == "Open with the business cost"


@pytest.mark.integration
def test_annotations_from_other_section_still_bind_when_unfiltered(situation_text):
    segments = split_by_annotations(situation_text, load_fixture_annotations())

    bound = [segment.annotation.id for segment in segments if segment.is_annotated]
    assert bound == ["ann-1", "ann-2", "ann-6", "ann-7"]


@pytest.mark.integration
def test_highlight_same_section(situation_text):
    pipeline = HighlightPipeline.from_dictionaries(section_key=map_section_to_star_key("context"))

    atoms = pipeline.decorate(situation_text)

    assert "".join(atom.text for atom in atoms) == situation_text
    assert [(atom.text, atom.kind) for atom in atoms if atom.is_decorated] == [
        ("$40K", DecorationKind.METRIC),
        ("circuit breaker", DecorationKind.TECHNIQUE),
        ("API", DecorationKind.TERM),
    ]


@pytest.mark.integration
def test_pipeline_from_shipped_config():
    pipeline = HighlightPipeline.from_config(
        PROJECT_ROOT / "configs" / "highlight_dictionaries.yaml", section_key="result"
    )

    atoms = pipeline.decorate("Mentored two engineers and shipped a dark launch with OpenTelemetry")

    assert [(atom.text, atom.kind) for atom in atoms if atom.is_decorated] == [
        ("Mentored", DecorationKind.ACTION_VERB),
        ("shipped", DecorationKind.ACTION_VERB),
        ("dark launch", DecorationKind.TECHNIQUE),
        ("OpenTelemetry", DecorationKind.TERM),
    ]


@pytest.mark.integration
def test_pipeline_from_replacing_config():
    pipeline = HighlightPipeline.from_config(FIXTURES_DIR / "dictionaries_replace.yaml")

    atoms = pipeline.decorate("Led the API rewrite with a circuit breaker and shipped it")

    assert [(atom.text, atom.kind) for atom in atoms if atom.is_decorated] == [
        ("API", DecorationKind.TERM),
        ("shipped", DecorationKind.ACTION_VERB),
    ]


@pytest.mark.integration
def test_story_summary():
    text = (FIXTURES_DIR / "result.txt").read_text(encoding="utf-8")

    assert extract_metrics(text) == ["40%", "$1.2M", "3,000 customers"]
    assert extract_metrics(text, max_count=1) == ["40%"]
    assert estimate_speaking_time(text) == 9
