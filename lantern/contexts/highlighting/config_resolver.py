"""
Highlight Dictionary Resolution

Loads the dictionaries used by the highlighting categories from a YAML file.
Swapping dictionaries needs no engine change: point LANTERN_DICTIONARIES_PATH
(or an explicit config_path) at another file.

File layout (every key optional):

    merge: true            # overlay on built-in defaults (false = replace them)
    design_patterns:
      strangler fig: Gradually replace legacy system
    technical_terms:
      ci/cd: Continuous Integration/Deployment
    action_verbs: [led, built, shipped]
    delivery_cues:
      result:
        emphasis: [impact, saved]

Examples:
    >>> dictionaries = load_highlight_dictionaries(Path("configs/highlight_dictionaries.yaml"))
    >>> dictionaries = load_highlight_dictionaries()  # env path, else defaults
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from lantern.contexts.highlighting.exceptions import InvalidDictionaryConfigError
from lantern.contexts.highlighting.highlight_data_structures import HighlightDictionaries
from lantern.contexts.highlighting.logger import _log_debug

load_dotenv()
_env_path = os.getenv("LANTERN_DICTIONARIES_PATH")
DICTIONARIES_PATH = Path(_env_path) if _env_path else None

KNOWN_KEYS = {"merge", "design_patterns", "technical_terms", "action_verbs", "delivery_cues"}


def load_highlight_dictionaries(config_path: Path = None) -> HighlightDictionaries:
    """
    Load highlight dictionaries from YAML, falling back to built-in defaults.

    Args:
        config_path: Dictionary file (defaults to LANTERN_DICTIONARIES_PATH;
            built-in defaults when neither is set)

    Returns:
        HighlightDictionaries with all dictionary keys lowercased

    Raises:
        InvalidDictionaryConfigError: File is not valid UTF-8 YAML, or its structure is wrong
        FileNotFoundError: config_path does not exist
    """
    if config_path is None:
        config_path = DICTIONARIES_PATH

    if config_path is None:
        return HighlightDictionaries.from_defaults()

    config_path = Path(config_path)
    try:
        raw = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    except (yaml.YAMLError, UnicodeDecodeError, OmegaConfBaseException) as e:
        raise InvalidDictionaryConfigError(f"Not a readable YAML file: {e}", config_path=config_path) from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise InvalidDictionaryConfigError(
            "Dictionary file must contain a mapping at the top level", config_path=config_path
        )

    unknown = set(raw) - KNOWN_KEYS
    if unknown:
        raise InvalidDictionaryConfigError(
            f"Unknown keys {sorted(unknown)}. Allowed: {sorted(KNOWN_KEYS)}",
            config_path=config_path,
        )

    merge = raw.get("merge", True)
    if not isinstance(merge, bool):
        raise InvalidDictionaryConfigError("'merge' must be true or false", key="merge", config_path=config_path)

    base = HighlightDictionaries.from_defaults() if merge else HighlightDictionaries()

    if "design_patterns" in raw:
        entries = _parse_definitions(raw["design_patterns"], "design_patterns", config_path)
        base.design_patterns = {**base.design_patterns, **entries}

    if "technical_terms" in raw:
        entries = _parse_definitions(raw["technical_terms"], "technical_terms", config_path)
        base.technical_terms = {**base.technical_terms, **entries}

    if "action_verbs" in raw:
        verbs = _parse_words(raw["action_verbs"], "action_verbs", config_path)
        base.action_verbs = _merge_words(base.action_verbs, verbs)

    if "delivery_cues" in raw:
        cues = _parse_delivery_cues(raw["delivery_cues"], config_path)
        base.delivery_cues = {**base.delivery_cues, **cues}

    _log_debug(
        f"Loaded dictionaries from {config_path} (merge={merge}): "
        f"{len(base.design_patterns)} techniques, {len(base.technical_terms)} terms, "
        f"{len(base.action_verbs)} verbs, {len(base.delivery_cues)} sections with cues"
    )

    return base


def _parse_definitions(value: Any, key: str, config_path: Path) -> Dict[str, str]:
    """Validate a phrase -> description mapping and lowercase its keys."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidDictionaryConfigError(
            "Expected a mapping of phrase to description", key=key, config_path=config_path
        )
    entries = {}
    for phrase, description in value.items():
        phrase = str(phrase).strip().lower()
        if not phrase:
            raise InvalidDictionaryConfigError("Empty phrase", key=key, config_path=config_path)
        entries[phrase] = "" if description is None else str(description)
    return entries


def _parse_words(value: Any, key: str, config_path: Path) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(word, str) for word in value):
        raise InvalidDictionaryConfigError("Expected a list of words", key=key, config_path=config_path)
    return [word.strip() for word in value if word.strip()]


def _merge_words(existing: List[str], additions: List[str]) -> List[str]:
    merged = list(existing)
    seen = {word.lower() for word in existing}
    for word in additions:
        if word.lower() not in seen:
            merged.append(word)
            seen.add(word.lower())
    return merged


def _parse_delivery_cues(value: Any, config_path: Path) -> Dict[str, Dict[str, List[str]]]:
    """Validate section -> {emphasis: [words]}; a bare list is shorthand for emphasis."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidDictionaryConfigError(
            "Expected a mapping of section key to cues", key="delivery_cues", config_path=config_path
        )

    cues = {}
    for section_key, cue in value.items():
        location = f"delivery_cues.{section_key}"
        if isinstance(cue, list):
            cue = {"emphasis": cue}
        if not isinstance(cue, dict):
            raise InvalidDictionaryConfigError(
                "Expected a mapping with an 'emphasis' list", key=location, config_path=config_path
            )
        cues[str(section_key).lower()] = {
            "emphasis": _parse_words(cue.get("emphasis"), location, config_path)
        }
    return cues
