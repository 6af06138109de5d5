#!/usr/bin/env python3
"""
Narrative Highlight CLI

Decorates narrative text with metrics, techniques, glossary terms, action verbs
and delivery-cue emphasis words, and prints one atom per line.

Usage:
    # Highlight inline text
    python scripts/highlight_text.py "Led the migration, cutting latency 40%"

    # Highlight a file as the "result" section, without emphasis categories
    python scripts/highlight_text.py story.txt --file --section result --no-emphasis

    # Only list the metrics
    python scripts/highlight_text.py story.txt --file --metrics-only --max-metrics 3

    # Use a custom dictionary file
    python scripts/highlight_text.py story.txt --file --dictionaries configs/highlight_dictionaries.yaml
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from lantern.contexts.highlighting.config_resolver import load_highlight_dictionaries
from lantern.contexts.highlighting.exceptions import InvalidDictionaryConfigError
from lantern.contexts.highlighting.logger import (
    _log_info,
    log_atom_summary,
    setup_highlighting_logger,
)
from lantern.contexts.highlighting.metric_extractor import DEFAULT_MAX_METRICS, extract_metrics
from lantern.contexts.highlighting.pipeline import render_emphasis
from lantern.utils.text_processing import truncate_display
from lantern.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LANTERN_LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Decorate narrative text with semantic highlights",
    add_completion=False,
)


def format_atom(atom) -> str:
    """Render an atom as '[kind] text' (plain atoms are printed as-is)."""
    if not atom.is_decorated:
        return atom.text
    line = f"[{atom.kind.value}] {atom.text}"
    tooltip = atom.decoration.metadata.get("tooltip")
    if tooltip:
        line += f"  ({tooltip})"
    return line


@app.command()
def main(
    source: Annotated[
        str,
        typer.Argument(help="Text to highlight, or a path when --file is given"),
    ],
    file: Annotated[
        bool,
        typer.Option("--file", "-f", help="Treat SOURCE as a path to a UTF-8 text file"),
    ] = False,
    section: Annotated[
        Optional[str],
        typer.Option("--section", "-s", help="Section key selecting delivery-cue emphasis words"),
    ] = None,
    no_emphasis: Annotated[
        bool,
        typer.Option("--no-emphasis", help="Only highlight metrics and glossary terms"),
    ] = False,
    dictionaries: Annotated[
        Optional[Path],
        typer.Option("--dictionaries", "-d", help="Highlight dictionary YAML", dir_okay=False),
    ] = None,
    metrics_only: Annotated[
        bool,
        typer.Option("--metrics-only", help="Print extracted metrics instead of atoms"),
    ] = False,
    max_metrics: Annotated[
        int,
        typer.Option("--max-metrics", help="Maximum metrics to list with --metrics-only"),
    ] = DEFAULT_MAX_METRICS,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Log directory (defaults to LANTERN_LOGS_PATH/highlight_<timestamp>)"),
    ] = None,
):
    """Highlight narrative text and print the decorated atoms."""
    if log_dir is None:
        log_dir = LOGS_PATH / f"highlight_{now()}"
    setup_highlighting_logger(log_dir, dictionaries_source=str(dictionaries) if dictionaries else "defaults")

    if file:
        path = Path(source)
        if not path.is_file():
            typer.echo(f"ERROR: File not found: {path}", err=True)
            raise typer.Exit(1)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            typer.echo(f"ERROR: Cannot read {path}: {e}", err=True)
            raise typer.Exit(1)
    else:
        text = source

    _log_info(f"Highlighting {len(text)} characters: {truncate_display(text, 60)!r}")

    if metrics_only:
        for metric in extract_metrics(text, max_metrics):
            typer.echo(metric)
        return

    try:
        loaded = load_highlight_dictionaries(dictionaries)
    except (InvalidDictionaryConfigError, OSError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    atoms = render_emphasis(text, show_emphasis=not no_emphasis, section_key=section, dictionaries=loaded)
    log_atom_summary(atoms)

    for atom in atoms:
        typer.echo(format_atom(atom))


if __name__ == "__main__":
    app()
