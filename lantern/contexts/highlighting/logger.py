"""
Highlighting context logger.

Provides logging interface for the highlighting context with automatic [highlight] prefix.
All highlighting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from lantern.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[highlight]"


def setup_highlighting_logger(log_dir: Path, dictionaries_source: str = "defaults") -> Path:
    """
    Setup logger for the highlighting context.

    Args:
        log_dir: Directory for this session
        dictionaries_source: Where the dictionaries came from, for provenance

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="highlight",
        log_dir=log_dir,
        extra_provenance={"Dictionaries": dictionaries_source},
    )


def _log_info(message: str) -> None:
    """Log info message with [highlight] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [highlight] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [highlight] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [highlight] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [highlight] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_atom_summary(atoms) -> None:
    """Log how many atoms of each kind a decoration produced."""
    counts = {}
    for atom in atoms:
        if atom.is_decorated:
            counts[atom.kind.value] = counts.get(atom.kind.value, 0) + 1
    summary = ", ".join(f"{kind}={count}" for kind, count in counts.items()) or "no highlights"
    _log_success(f"Decorated {len(atoms)} atoms ({summary})")
