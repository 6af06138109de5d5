"""
Highlighting Data Structures

Defines the decoration descriptors, atoms and pattern categories used by the
highlight pipeline. Descriptors are presentation-agnostic: a rendering layer
maps DecorationKind and metadata onto its own styling and tooltips.
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from lantern.contexts.highlighting.defaults import (
    ACTION_VERBS,
    DELIVERY_CUES,
    DESIGN_PATTERNS,
    TECHNICAL_TERMS,
)

Span = Tuple[int, int]
Matcher = Callable[[str], List[Span]]


class DecorationKind(Enum):
    """Semantic kind of a decorated run, one per category."""

    METRIC = "metric"
    TECHNIQUE = "technique"
    TERM = "term"
    ACTION_VERB = "action_verb"
    EMPHASIS = "emphasis"


@dataclass(frozen=True)
class Decoration:
    """
    Presentation-agnostic description of one decorated run.

    Attributes:
        kind: Category kind
        text: The matched text, as it appears in the input
        metadata: Optional extras such as {"title": ...} or {"tooltip": ...}
    """

    kind: DecorationKind
    text: str
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Atom:
    """
    Contiguous run of the input text: plain, or wrapping exactly one match.

    Attributes:
        text: The run
        decoration: Decoration for a matched run, None for plain text
    """

    text: str
    decoration: Optional[Decoration] = None

    @property
    def is_decorated(self) -> bool:
        return self.decoration is not None

    @property
    def kind(self) -> Optional[DecorationKind]:
        return self.decoration.kind if self.decoration else None


@dataclass(frozen=True)
class PatternCategory:
    """
    One priority-ranked matching and decoration rule.

    Attributes:
        name: Identifier used in logs and errors (e.g., "metrics")
        priority: Evaluation order; lower runs first and claims text first
        matcher: Maps a plain run to sorted, non-overlapping (start, end) ranges
        decorate: Builds the Decoration for one matched substring
    """

    name: str
    priority: int
    matcher: Matcher
    decorate: Callable[[str], Decoration]


@dataclass
class HighlightDictionaries:
    """
    Dictionary configuration consumed by the highlighting categories.

    Attributes:
        design_patterns: Technique phrase -> description
        technical_terms: Glossary term -> definition
        action_verbs: Ownership verbs
        delivery_cues: Section key -> {"emphasis": [words]}
    """

    design_patterns: Dict[str, str] = field(default_factory=dict)
    technical_terms: Dict[str, str] = field(default_factory=dict)
    action_verbs: List[str] = field(default_factory=list)
    delivery_cues: Dict[str, Dict[str, List[str]]] = field(default_factory=dict)

    @classmethod
    def from_defaults(cls) -> "HighlightDictionaries":
        """Build dictionaries from the built-in defaults (deep-copied)."""
        return cls(
            design_patterns=dict(DESIGN_PATTERNS),
            technical_terms=dict(TECHNICAL_TERMS),
            action_verbs=list(ACTION_VERBS),
            delivery_cues=copy.deepcopy(DELIVERY_CUES),
        )
