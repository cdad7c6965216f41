"""Reader for the intent registry (active_intents.yaml).

The registry lives in the sidecar directory; a copy at the workspace root
is read when the sidecar copy is missing or broken. Read failures never
raise: governance degrades to "no intents".
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from intent_hooks.config.paths import (
    get_active_intents_path,
    get_legacy_active_intents_path,
)
from intent_hooks.models.intent import ActiveIntentsFile, IntentSpec

logger = logging.getLogger(__name__)


def _read_registry(path: Path) -> list[IntentSpec] | None:
    """Parse one registry file. Returns None when the file is unusable."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.debug(f"Could not load intents from {path}: {e}")
        return None

    if data is None:
        return []
    if not isinstance(data, dict):
        logger.debug(f"Ignoring {path}: top level is not a mapping")
        return None

    try:
        registry = ActiveIntentsFile.model_validate(data)
    except ValidationError as e:
        logger.debug(f"Ignoring {path}: {e}")
        return None

    return _parse_entries(registry.entries(), path)


def _parse_entries(entries: list[Any], path: Path) -> list[IntentSpec]:
    intents: list[IntentSpec] = []
    for entry in entries:
        if not isinstance(entry, dict) or not isinstance(entry.get("id"), str):
            continue
        try:
            intents.append(IntentSpec.model_validate(entry))
        except ValidationError as e:
            logger.debug(f"Skipping malformed intent {entry.get('id')!r} in {path}: {e}")
    return intents


def load_active_intents(workspace_root: Path) -> list[IntentSpec]:
    """Load the intents declared for a workspace.

    Args:
        workspace_root: Workspace root directory.

    Returns:
        Intents in file order (duplicates kept); empty when neither the
        sidecar nor the legacy registry can be read.
    """
    for path in (
        get_active_intents_path(workspace_root),
        get_legacy_active_intents_path(workspace_root),
    ):
        intents = _read_registry(path)
        if intents is not None:
            return intents
    return []


def get_valid_intent_ids(workspace_root: Path) -> list[str]:
    """Ids usable with select_active_intent (empty ids excluded)."""
    return [intent.id for intent in load_active_intents(workspace_root) if intent.id]


def find_intent(workspace_root: Path, intent_id: str) -> IntentSpec | None:
    """Return the first intent with ``intent_id``, or None."""
    for intent in load_active_intents(workspace_root):
        if intent.id == intent_id:
            return intent
    return None
