"""Custom exceptions for the annotation context."""

from typing import Any, Optional

from lantern.utils.text_processing import truncate_display


class InvalidAnnotationError(ValueError):
    """
    Exception raised when an annotation payload cannot be turned into an Annotation.

    Raised only at the store boundary (Annotation.from_dict and the creation
    helpers). Segmentation itself never raises: stale or malformed spans are
    filtered out there instead.

    Attributes:
        message: Error description
        field_name: Name of the offending field, if known
        payload: The raw payload that failed to convert
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        payload: Optional[Any] = None,
    ):
        self.message = message
        self.field_name = field_name
        self.payload = payload

        parts = [message]

        if field_name:
            parts.append(f"Field: {field_name}")

        if payload is not None:
            parts.append(f"Payload: {truncate_display(repr(payload), 200)}")

        super().__init__("\n".join(parts))
