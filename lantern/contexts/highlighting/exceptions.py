"""Custom exceptions for the highlighting context."""

from pathlib import Path
from typing import Optional

from lantern.utils.text_processing import truncate_display


class MatcherContractError(ValueError):
    """
    Exception raised when a category matcher returns unusable ranges.

    Matchers must return sorted, non-overlapping, non-empty (start, end) ranges
    inside the run they were given. Anything else is a bug in the category
    configuration and is propagated rather than hidden.

    Attributes:
        message: Error description
        category_name: Name of the offending category
        run_text: The plain run the matcher was applied to
        ranges: The ranges it returned
    """

    def __init__(
        self,
        message: str,
        category_name: Optional[str] = None,
        run_text: Optional[str] = None,
        ranges: Optional[list] = None,
    ):
        self.message = message
        self.category_name = category_name
        self.run_text = run_text
        self.ranges = ranges

        parts = [message]

        if category_name:
            parts.append(f"Category: {category_name}")

        if ranges is not None:
            parts.append(f"Ranges: {truncate_display(repr(ranges), 200)}")

        if run_text is not None:
            parts.append(f"\nRun text:\n{truncate_display(run_text, 200)}")

        super().__init__("\n".join(parts))


class InvalidDictionaryConfigError(ValueError):
    """
    Exception raised when a highlight dictionary file has the wrong structure.

    Attributes:
        message: Error description
        key: Top-level key that failed validation
        config_path: Path of the dictionary file
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        config_path: Optional[Path] = None,
    ):
        self.message = message
        self.key = key
        self.config_path = config_path

        parts = [message]

        if key:
            parts.append(f"Key: {key}")

        if config_path:
            parts.append(f"File: {config_path}")

        super().__init__("\n".join(parts))
