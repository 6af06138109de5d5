#!/usr/bin/env python3
"""
Annotation Segmentation CLI

Splits a section's text around its stored annotations and prints the
resulting segments, then the aside (margin) notes. Stale and overlapping
annotations are reported and skipped, never treated as errors.

Annotations file: YAML or JSON, either a list of annotation payloads or a
mapping with an "annotations" list. Payload keys may be camelCase (as sent by
the annotation store) or snake_case.

Usage:
    python scripts/segment_annotations.py situation.txt annotations.yaml --section situation
"""

import os
from pathlib import Path
from typing import Optional

import typer
import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from typing_extensions import Annotated

from lantern.contexts.annotation.annotation_data_structure import Annotation
from lantern.contexts.annotation.exceptions import InvalidAnnotationError
from lantern.contexts.annotation.logger import log_partition_summary, setup_annotation_logger
from lantern.contexts.annotation.segmenter import (
    annotations_for_section,
    partition_annotations,
    split_by_annotations,
)
from lantern.utils.text_processing import truncate_display
from lantern.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LANTERN_LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Split section text around stored annotations",
    add_completion=False,
)


def load_annotations(path: Path) -> list:
    """
    Load annotation payloads from a YAML/JSON file.

    Raises:
        InvalidAnnotationError: File is not valid UTF-8 YAML/JSON, or does not
            hold a list of annotation mappings
    """
    try:
        raw = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    except (yaml.YAMLError, UnicodeDecodeError, OmegaConfBaseException) as e:
        raise InvalidAnnotationError(f"{path} is not a readable YAML/JSON file: {e}") from e
    if isinstance(raw, dict):
        raw = raw.get("annotations")
    if not isinstance(raw, list):
        raise InvalidAnnotationError(f"{path} must contain a list of annotations")
    return [Annotation.from_dict(item) for item in raw]


@app.command()
def main(
    text_file: Annotated[
        Path,
        typer.Argument(help="UTF-8 text of the section", exists=True, dir_okay=False),
    ],
    annotations_file: Annotated[
        Path,
        typer.Argument(help="Annotations YAML/JSON", exists=True, dir_okay=False),
    ],
    section: Annotated[
        Optional[str],
        typer.Option("--section", "-s", help="Only use annotations for this section key"),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Log directory (defaults to LANTERN_LOGS_PATH/annotate_<timestamp>)"),
    ] = None,
):
    """Segment section text and print segments and asides."""
    if log_dir is None:
        log_dir = LOGS_PATH / f"annotate_{now()}"
    setup_annotation_logger(log_dir, section_key=section)

    try:
        text = text_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"ERROR: Cannot read {text_file}: {e}", err=True)
        raise typer.Exit(1)

    try:
        annotations = load_annotations(annotations_file)
    except (InvalidAnnotationError, OSError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    if section:
        annotations = annotations_for_section(annotations, section)

    partition = partition_annotations(text, annotations)
    log_partition_summary(section or "(all)", partition)

    typer.echo("=== Segments ===")
    for segment in split_by_annotations(text, annotations):
        if segment.annotation is None:
            typer.echo(f"  {segment.text!r}")
        else:
            annotation = segment.annotation
            typer.echo(f"  [{annotation.style.value}:{annotation.id}] {segment.text!r}")
            if annotation.note:
                typer.echo(f"      note: {truncate_display(annotation.note, 80)}")

    if partition.asides:
        typer.echo(f"\n=== Asides ({len(partition.asides)}) ===")
        for aside in partition.asides:
            typer.echo(f"  [{aside.id}] {truncate_display(aside.note or '', 80)}")

    skipped = partition.stale + partition.overlapping
    if skipped:
        typer.echo(f"\n=== Skipped ({len(skipped)}) ===")
        for annotation in partition.stale:
            typer.echo(f"  stale: {annotation.id}")
        for annotation in partition.overlapping:
            typer.echo(f"  overlapping: {annotation.id}")


if __name__ == "__main__":
    app()
