"""
Annotation context logger.

Provides logging interface for the annotation context with automatic [annotate] prefix.
All annotation modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from lantern.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[annotate]"


def setup_annotation_logger(log_dir: Path, section_key: str = None) -> Path:
    """
    Setup logger for the annotation context.

    Args:
        log_dir: Directory for this session
        section_key: Section being segmented, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="annotate",
        log_dir=log_dir,
        extra_provenance={"Section": section_key or "(all)"},
    )


def _log_info(message: str) -> None:
    """Log info message with [annotate] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [annotate] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [annotate] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [annotate] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_partition_summary(section_key: str, partition) -> None:
    """
    Log how a section's annotations were applied.

    Args:
        section_key: Section identifier
        partition: AnnotationPartition from partition_annotations()
    """
    _log_info(
        f"{section_key}: {len(partition.applied)} applied, {len(partition.stale)} stale, "
        f"{len(partition.overlapping)} overlapping, {len(partition.asides)} asides"
    )
    for annotation in partition.stale:
        _log_warning(f"  Stale annotation {annotation.id} at [{annotation.start_offset}, {annotation.end_offset})")
    for annotation in partition.overlapping:
        _log_debug(f"  Overlapping annotation {annotation.id} skipped")
