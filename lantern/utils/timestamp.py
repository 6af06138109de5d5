"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Current local time as a compact, sortable token for log directory names.

    Example:
        now()
        # "20260117_184540"
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
