"""
Session logging for LANTERN scripts.

Each script run gets its own log directory holding a DEBUG-level
`<context>.log`; INFO and above are mirrored to stderr so that stdout carries
only the script's results. The first lines of every log record where the run
came from and which LANTERN configuration it saw.

Context-specific wrappers with prefixes live in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

import lantern

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

# Environment settings worth recording in every session header
PROVENANCE_ENV_VARS = ("LANTERN_DICTIONARIES_PATH", "LANTERN_LOGS_PATH")


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    level_colors: dict = None,
) -> Path:
    """
    Route loguru output for one session and write its provenance header.

    Removes any previously configured sinks, so calling this again (e.g. once
    per CLI invocation in a test run) never duplicates output.

    Args:
        context_name: Context identifier, also the log file stem ("annotate", "highlight")
        log_dir: Directory for this session (created if missing)
        extra_provenance: Context-specific key/values for the header
        level_colors: Console color overrides, e.g. {"INFO": "<cyan>"}

    Returns:
        Path to the session log file

    Example:
        log_file = setup_logger(
            "highlight",
            Path("outs/logs/highlight_20260101_120000"),
            extra_provenance={"Dictionaries": "defaults"},
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(context_name, log_file, extra_provenance)

    return log_file


def log_provenance(context_name: str, log_file: Path, extra_context: dict = None) -> None:
    """
    Write the session header: LANTERN version and context, invocation, and
    the LANTERN environment settings in effect.

    Unset environment settings are logged as "(unset)" so a reader can tell
    built-in defaults were used.
    """
    logger.info("=" * 80)
    logger.info(f"LANTERN {lantern.__version__} [{context_name}]")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")
    logger.info(f"Log file: {log_file}")

    for name in PROVENANCE_ENV_VARS:
        logger.info(f"{name}: {os.getenv(name) or '(unset)'}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
