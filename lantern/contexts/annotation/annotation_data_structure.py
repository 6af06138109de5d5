"""
Annotation data structures for the Annotation context.

Annotations are persisted and owned by an external store; this module only
mirrors their shape so the segmenter can consume them read-only. Segments are
derived on every call and never persisted.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from lantern.contexts.annotation.exceptions import InvalidAnnotationError

# Sentinel offset marking an annotation with no bound span
ASIDE_OFFSET = -1


class AnnotationStyle(Enum):
    """Presentation style of an annotation. Only ASIDE changes segmentation."""

    HIGHLIGHT = "highlight"
    UNDERLINE = "underline"
    BOX = "box"
    CIRCLE = "circle"
    STRIKE_THROUGH = "strike-through"
    BRACKET = "bracket"
    ASIDE = "aside"


class AnnotationColor(Enum):
    """Optional color swatch attached to an annotation."""

    AMBER = "amber"
    ROSE = "rose"
    BLUE = "blue"
    EMERALD = "emerald"
    VIOLET = "violet"
    ORANGE = "orange"
    CYAN = "cyan"


# Store payloads use camelCase; map them onto dataclass fields
_CAMEL_TO_SNAKE = {
    "sectionKey": "section_key",
    "startOffset": "start_offset",
    "endOffset": "end_offset",
    "annotatedText": "annotated_text",
    "storyId": "story_id",
    "derivationId": "derivation_id",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}
_SNAKE_TO_CAMEL = {snake: camel for camel, snake in _CAMEL_TO_SNAKE.items()}

_REQUIRED_FIELDS = ("id", "section_key", "start_offset", "end_offset", "style")


@dataclass(frozen=True)
class Annotation:
    """
    A note bound to a half-open character span [start_offset, end_offset) of a
    section's text, or detached from any span (an aside).

    Attributes:
        id: Opaque stable identifier
        section_key: Text block the annotation belongs to (e.g. "situation")
        start_offset: Span start, or -1 for an aside
        end_offset: Span end (exclusive), or -1 for an aside
        annotated_text: Exact substring captured at creation time
        style: Presentation style
        note: Optional free-form note
        color: Optional color swatch
        story_id, derivation_id: Owning story / derivation, if known
        created_at, updated_at: ISO 8601 timestamps from the store
    """

    id: str
    section_key: str
    start_offset: int
    end_offset: int
    annotated_text: str
    style: AnnotationStyle = AnnotationStyle.HIGHLIGHT
    note: Optional[str] = None
    color: Optional[AnnotationColor] = None
    story_id: Optional[str] = None
    derivation_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def is_aside(self) -> bool:
        """An annotation is an aside iff its start offset is the -1 sentinel."""
        return self.start_offset == ASIDE_OFFSET

    def is_valid_for(self, text: str) -> bool:
        """
        Check that this annotation still points at the text it captured.

        A non-aside annotation is valid when its offsets are in bounds and
        non-empty and the live substring equals annotated_text. Anything else
        (including an aside) is not applicable to the text layout.
        """
        if self.is_aside:
            return False
        if not 0 <= self.start_offset < self.end_offset <= len(text):
            return False
        return text[self.start_offset : self.end_offset] == self.annotated_text

    @property
    def span(self) -> tuple:
        return (self.start_offset, self.end_offset)

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Annotation":
        """
        Build an Annotation from a store payload.

        Accepts camelCase keys as sent by the annotation store (sectionKey,
        startOffset, ...) as well as snake_case keys. Unknown keys are ignored.

        Raises:
            InvalidAnnotationError: Missing required field, non-integer offset,
                or unknown style/color
        """
        if not isinstance(data, dict):
            raise InvalidAnnotationError("Annotation payload must be a mapping", payload=data)

        fields = {_CAMEL_TO_SNAKE.get(key, key): value for key, value in data.items()}

        for name in _REQUIRED_FIELDS:
            if fields.get(name) is None:
                raise InvalidAnnotationError("Missing required field", field_name=name, payload=data)

        for name in ("start_offset", "end_offset"):
            value = fields[name]
            # bool is an int subclass but never a meaningful offset
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidAnnotationError(
                    "Offsets must be integers", field_name=name, payload=data
                )

        style = _coerce_enum(AnnotationStyle, fields["style"], "style", data)
        color = fields.get("color")
        if color is not None:
            color = _coerce_enum(AnnotationColor, color, "color", data)

        return cls(
            id=str(fields["id"]),
            section_key=str(fields["section_key"]),
            start_offset=fields["start_offset"],
            end_offset=fields["end_offset"],
            annotated_text=fields.get("annotated_text") or "",
            style=style,
            note=fields.get("note"),
            color=color,
            story_id=fields.get("story_id"),
            derivation_id=fields.get("derivation_id"),
            created_at=fields.get("created_at"),
            updated_at=fields.get("updated_at"),
        )

    @classmethod
    def create_from_selection(
        cls,
        id: str,
        text: str,
        start_offset: int,
        end_offset: int,
        section_key: str,
        style: AnnotationStyle = AnnotationStyle.HIGHLIGHT,
        note: Optional[str] = None,
        color: Optional[AnnotationColor] = None,
    ) -> "Annotation":
        """
        Create an annotation for a selection, capturing the selected substring.

        The captured substring is what later staleness checks compare against.

        Raises:
            InvalidAnnotationError: Empty or out-of-range selection, or an aside style
        """
        if style is AnnotationStyle.ASIDE:
            raise InvalidAnnotationError("Use create_aside() for annotations without a span")
        if not 0 <= start_offset < end_offset <= len(text):
            raise InvalidAnnotationError(
                f"Selection [{start_offset}, {end_offset}) is empty or outside text of length {len(text)}"
            )

        return cls(
            id=id,
            section_key=section_key,
            start_offset=start_offset,
            end_offset=end_offset,
            annotated_text=text[start_offset:end_offset],
            style=style,
            note=note,
            color=color,
        )

    @classmethod
    def create_aside(
        cls,
        id: str,
        section_key: str,
        note: Optional[str] = None,
        color: Optional[AnnotationColor] = None,
    ) -> "Annotation":
        """Create a margin note that is not bound to any span of text."""
        return cls(
            id=id,
            section_key=section_key,
            start_offset=ASIDE_OFFSET,
            end_offset=ASIDE_OFFSET,
            annotated_text="",
            style=AnnotationStyle.ASIDE,
            note=note,
            color=color,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the store's camelCase payload shape."""
        data = {
            "id": self.id,
            "sectionKey": self.section_key,
            "startOffset": self.start_offset,
            "endOffset": self.end_offset,
            "annotatedText": self.annotated_text,
            "style": self.style.value,
            "color": self.color.value if self.color else None,
            "note": self.note,
        }
        for name in ("story_id", "derivation_id", "created_at", "updated_at"):
            value = getattr(self, name)
            if value is not None:
                data[_SNAKE_TO_CAMEL[name]] = value
        return data


def _coerce_enum(enum_cls, value, field_name: str, payload: Dict[str, Any]):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = [member.value for member in enum_cls]
        raise InvalidAnnotationError(
            f"Unknown {field_name} '{value}'. Allowed: {allowed}",
            field_name=field_name,
            payload=payload,
        ) from None


@dataclass(frozen=True)
class Segment:
    """
    Contiguous slice of a section's text, optionally bound to one annotation.

    Attributes:
        text: The slice (empty only when the whole input text is empty)
        annotation: The annotation this slice renders, if any
    """

    text: str
    annotation: Optional[Annotation] = None

    @property
    def is_annotated(self) -> bool:
        return self.annotation is not None
