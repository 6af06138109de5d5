"""
Highlight Pipeline

Decorates narrative prose with priority-ranked, non-overlapping highlights.

The pipeline is a fold over categories. It starts from one plain atom holding
the whole text; each category, in priority order, is applied to the plain
atoms only and replaces each of them in place with plain / decorated / plain
... runs. Text claimed by a higher-priority category is never re-scanned, so
nothing is decorated twice, and joining the atom texts always gives back the
input.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from lantern.contexts.highlighting.categories import build_categories
from lantern.contexts.highlighting.config_resolver import load_highlight_dictionaries
from lantern.contexts.highlighting.exceptions import MatcherContractError
from lantern.contexts.highlighting.highlight_data_structures import (
    Atom,
    HighlightDictionaries,
    PatternCategory,
)
from lantern.contexts.highlighting.logger import _log_debug


def decorate(text: str, categories: Iterable[PatternCategory]) -> List[Atom]:
    """
    Split text into plain and decorated atoms.

    Categories are applied in ascending priority (stable for equal priorities).

    Args:
        text: Plain narrative text
        categories: Pattern categories

    Returns:
        Atoms in text order with no zero-length plain runs. Empty text gives [];
        text with no matches gives [Atom(text)].

    Raises:
        MatcherContractError: A matcher returned invalid ranges
        Exception: Anything a matcher or decorate callable raises propagates

    Example:
        >>> from lantern.contexts.highlighting.categories import metric_category
        >>> [a.text for a in decorate("Reduced errors by 40%", [metric_category()])]
        ['Reduced errors by ', '40%']
    """
    atoms = [Atom(text)]

    for category in sorted(categories, key=lambda category: category.priority):
        atoms = _apply_category(atoms, category)

    return [atom for atom in atoms if atom.is_decorated or atom.text]


def _apply_category(atoms: List[Atom], category: PatternCategory) -> List[Atom]:
    result: List[Atom] = []
    decorated = 0

    for atom in atoms:
        if atom.is_decorated or not atom.text:
            result.append(atom)
            continue

        run = atom.text
        spans = list(category.matcher(run))
        _check_spans(category, run, spans)

        cursor = 0
        for start, end in spans:
            if cursor < start:
                result.append(Atom(run[cursor:start]))
            matched = run[start:end]
            result.append(Atom(matched, category.decorate(matched)))
            cursor = end
            decorated += 1
        if cursor < len(run):
            result.append(Atom(run[cursor:]))

    if decorated:
        _log_debug(f"{category.name}: decorated {decorated} runs")

    return result


def _check_spans(category: PatternCategory, run: str, spans: Sequence) -> None:
    """Validate that a matcher honoured its contract for one run."""
    cursor = 0
    for span in spans:
        try:
            start, end = span
        except (TypeError, ValueError):
            raise MatcherContractError(
                "Matcher returned a range that is not a (start, end) pair",
                category_name=category.name,
                run_text=run,
                ranges=list(spans),
            ) from None
        if not (cursor <= start < end <= len(run)):
            raise MatcherContractError(
                f"Matcher returned an empty, out-of-bounds, unordered or overlapping range ({start}, {end})",
                category_name=category.name,
                run_text=run,
                ranges=list(spans),
            )
        cursor = end


@dataclass
class HighlightPipeline:
    """
    Highlight pipeline bound to a fixed set of categories.

    The categories are treated as immutable configuration; decorate() keeps no
    state between calls and is safe to call concurrently.

    Attributes:
        categories: Pattern categories (any order; sorted by priority when applied)
    """

    categories: List[PatternCategory] = field(default_factory=build_categories)

    def decorate(self, text: str) -> List[Atom]:
        return decorate(text, self.categories)

    @classmethod
    def from_dictionaries(
        cls,
        dictionaries: Optional[HighlightDictionaries] = None,
        show_emphasis: bool = True,
        section_key: Optional[str] = None,
        emphasis_words: Optional[Iterable[str]] = None,
    ) -> "HighlightPipeline":
        """Build a pipeline with the standard five categories."""
        return cls(
            categories=build_categories(
                dictionaries,
                show_emphasis=show_emphasis,
                section_key=section_key,
                emphasis_words=emphasis_words,
            )
        )

    @classmethod
    def from_config(
        cls,
        config_path: Optional[Path] = None,
        show_emphasis: bool = True,
        section_key: Optional[str] = None,
    ) -> "HighlightPipeline":
        """
        Build a pipeline from a dictionary file.

        Args:
            config_path: Dictionary YAML (defaults to LANTERN_DICTIONARIES_PATH,
                then to the built-in dictionaries)
        """
        return cls.from_dictionaries(
            load_highlight_dictionaries(config_path),
            show_emphasis=show_emphasis,
            section_key=section_key,
        )


def render_emphasis(
    text: str,
    show_emphasis: bool = True,
    section_key: Optional[str] = None,
    dictionaries: Optional[HighlightDictionaries] = None,
) -> List[Atom]:
    """
    Decorate one narrative section with the standard categories.

    Args:
        text: Section text
        show_emphasis: Whether to show techniques, action verbs and emphasis words
        section_key: Section key selecting delivery-cue emphasis words
        dictionaries: Dictionary configuration (built-in defaults if None)

    Example:
        >>> atoms = render_emphasis("Led the migration, cutting latency 40%")
        >>> [(a.text, a.kind.value) for a in atoms if a.is_decorated]
        [('Led', 'action_verb'), ('latency', 'term'), ('40%', 'metric')]
    """
    categories = build_categories(dictionaries, show_emphasis=show_emphasis, section_key=section_key)
    return decorate(text, categories)
